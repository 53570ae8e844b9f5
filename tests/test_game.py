import random

import pytest

from zubswat.creature import Sprite
from zubswat.game import (
    THEMES,
    ClickResult,
    Difficulty,
    Game,
    Preset,
    Sound,
    preset_for,
)
from zubswat.vector2 import Vector2


def make_game(difficulty=0, play_sounds=True, sounds=None, cursor_frames=("c0", "c1", "c2")):
    recorded = sounds if sounds is not None else []
    return Game(
        difficulty,
        800,
        600,
        show_vectors=False,
        play_sounds=play_sounds,
        play=lambda sound, volume: recorded.append((sound, volume)),
        rng=random.Random(0),
        sprite_frames=("a", "b", "c", "d"),
        ambulance_frames=("amb",),
        sprite_size=(10, 10),
        ambulance_size=(20, 20),
        cursor_frames=cursor_frames,
    )


def test_presets_follow_difficulty_table():
    assert preset_for(Difficulty.EASY) == Preset(20, 3, 30, 60, 0.01, 50, 8)
    assert preset_for(Difficulty.HARD) == Preset(40, 10, 230, 400, 0.01, 90, 8)
    assert preset_for(Difficulty.NIGHTMARE) is None


@pytest.mark.parametrize(
    "index, expected",
    [(0, Difficulty.EASY), (1, Difficulty.MEDIUM), (2, Difficulty.HARD), (3, Difficulty.NIGHTMARE), (7, Difficulty.NIGHTMARE), (-1, Difficulty.NIGHTMARE)],
)
def test_difficulty_from_index(index, expected):
    assert Difficulty.from_index(index) is expected


def test_sound_music_flags():
    sounds = []
    game = make_game(sounds=sounds)
    assert game.theme.is_music
    assert game.next_theme().is_music
    assert Sound.MAIN_MENU.is_music
    game.click(game.creature.position)
    assert sounds[-1] == (Sound.HIT, 0.5)
    assert not sounds[-1][0].is_music


def test_creature_starts_in_centre_with_preset_health():
    game = make_game(difficulty=1)
    assert game.creature.position == Vector2(400, 300)
    assert game.creature.health == 6
    assert game.going


def test_theme_played_on_start():
    sounds = []
    game = make_game(sounds=sounds)
    assert sounds == [(game.theme, 0.2)]
    assert game.theme in THEMES


def test_no_sounds_when_disabled():
    sounds = []
    game = make_game(play_sounds=False, sounds=sounds)
    game.click(Vector2(0, 0))
    game.click(game.creature.position)
    assert sounds == []
    assert game.next_theme() is None


def test_click_far_away_is_a_miss():
    sounds = []
    game = make_game(sounds=sounds)
    assert game.click(Vector2(10, 10)) is ClickResult.MISS
    assert sounds[-1] == (Sound.MISS, 0.2)
    assert game.creature.health == 3


def test_click_on_creature_hits():
    sounds = []
    game = make_game(sounds=sounds)
    assert game.click(game.creature.position) is ClickResult.HIT
    assert sounds[-1] == (Sound.HIT, 0.5)
    assert game.creature.health == 2
    assert not game.creature.dying


def test_last_hit_kills_and_further_hits_do_nothing():
    sounds = []
    game = make_game(sounds=sounds)
    position = game.creature.position
    results = [game.click(position) for _ in range(3)]
    assert results == [ClickResult.HIT, ClickResult.HIT, ClickResult.KILL]
    assert sounds[-3:] == [(Sound.HIT, 0.5), (Sound.SCREAM, 0.5), (Sound.AMBULANCE, 0.5)]
    assert game.creature.dying
    assert game.creature.health == 0
    assert game.click(position) is ClickResult.NO_EFFECT
    assert game.creature.health == 0


def test_cursor_animation_runs_once_through_frames():
    game = make_game()
    assert not game.cursor_animating
    game.click(Vector2(0, 0))
    assert game.cursor_animating
    frames = [game.advance_cursor() for _ in range(4)]
    assert frames == ["c0", "c1", "c2", "c0"]
    assert not game.cursor_animating
    assert game.current_cursor == "c0"


def test_empty_cursor_frames_rejected():
    with pytest.raises(ValueError):
        make_game(cursor_frames=())


def test_creature_flees_nearby_cursor():
    game = make_game()
    start = game.creature.position
    game.update(start + Vector2(5, 0))
    assert game.creature.position.x < start.x
    assert game.creature.position.y == start.y


def test_creature_rests_when_cursor_is_far():
    game = make_game()
    start = game.creature.position
    game.update(Vector2(0, 0))
    assert game.creature.position == start


def test_draw_commands_show_creature_frame():
    game = make_game()
    commands = game.draw_commands(Vector2(0, 0))
    assert len(commands) == 1
    assert commands[0].sprite is Sprite.CREATURE
    assert commands[0].frame in ("a", "b", "c", "d")


def test_game_finishes_after_ambulance_leaves():
    game = make_game()
    for _ in range(3):
        game.click(game.creature.position)
    for _ in range(10000):
        game.draw_commands(Vector2(0, 0))
        if game.finished:
            break
    assert game.finished
    assert not game.going
    assert game.theme is None
    assert game.draw_commands(Vector2(0, 0)) == []
    assert game.next_theme() is None


def test_resize_keeps_relative_position():
    game = make_game()
    game.resize(400, 300)
    assert game.creature.position == Vector2(200, 150)
    assert (game.width, game.height) == (400, 300)


def test_nightmare_mode_has_no_creature():
    game = make_game(difficulty=3)
    assert game.nightmare
    assert game.creature is None
    assert not game.going
    assert game.click(Vector2(1, 1)) is ClickResult.NO_EFFECT
    game.update(Vector2(1, 1))
    assert game.draw_commands(Vector2(1, 1)) == []
    assert game.cursor_animating


def test_next_theme_plays_new_theme():
    sounds = []
    game = make_game(sounds=sounds)
    theme = game.next_theme()
    assert theme in THEMES
    assert sounds[-1] == (theme, 0.2)
    assert game.theme is theme