import pygame
import pytest

from zubswat.app import Assets, draw_scene, main
from zubswat.creature import DrawCommand, Sprite
from zubswat.game import Sound

RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
BLACK = (0, 0, 0)


def solid(size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    return surface


def rgb(colour):
    return tuple(colour)[:3]


def make_assets(creature=None):
    return Assets(
        creature=creature or [solid((2, 2), RED)],
        ambulance=[solid((2, 2), GREEN)],
        cursor=[solid((2, 2), RED)],
    )


def canvas():
    surface = pygame.Surface((20, 20))
    surface.fill(BLACK)
    return surface


def test_draw_scene_blits_creature_at_corner():
    surface = canvas()
    draw_scene(surface, [DrawCommand(Sprite.CREATURE, 0, 5, 5)], make_assets())
    assert rgb(surface.get_at((5, 5))) == RED
    assert rgb(surface.get_at((6, 6))) == RED
    assert rgb(surface.get_at((4, 4))) == BLACK
    assert rgb(surface.get_at((7, 7))) == BLACK


def test_draw_scene_uses_ambulance_sheet():
    surface = canvas()
    draw_scene(surface, [DrawCommand(Sprite.AMBULANCE, 0, 0, 0)], make_assets())
    assert rgb(surface.get_at((0, 0))) == GREEN


def test_draw_scene_mirrors_image():
    strip = pygame.Surface((2, 1))
    strip.set_at((0, 0), RED)
    strip.set_at((1, 0), BLUE)
    surface = canvas()
    draw_scene(surface, [DrawCommand(Sprite.CREATURE, 0, 0, 0, mirrored=True)], make_assets([strip]))
    assert rgb(surface.get_at((0, 0))) == BLUE
    assert rgb(surface.get_at((1, 0))) == RED


def test_draw_scene_rotates_fallen_creature():
    strip = pygame.Surface((2, 1))
    strip.set_at((0, 0), RED)
    strip.set_at((1, 0), BLUE)
    surface = canvas()
    draw_scene(surface, [DrawCommand(Sprite.CREATURE, 0, 0, 0, rotation=270)], make_assets([strip]))
    assert rgb(surface.get_at((0, 0))) == BLUE
    assert rgb(surface.get_at((0, 1))) == RED
    assert rgb(surface.get_at((1, 0))) == BLACK


def write_image(path, size, colour):
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(solid(size, colour), str(path))


def test_assets_load_sorted_and_scaled(tmp_path):
    colours = [(10, 0, 0), (0, 20, 0), (0, 0, 30), (40, 40, 0)]
    for index, colour in enumerate(colours):
        write_image(tmp_path / "creature" / f"{index}.png", (4, 6), colour)
    write_image(tmp_path / "ambulance" / "0.png", (8, 4), GREEN)
    write_image(tmp_path / "cursor" / "0.png", (20, 100), RED)
    (tmp_path / "sounds").mkdir()
    (tmp_path / "sounds" / "hit.wav").write_bytes(b"")

    assets = Assets.load(tmp_path)

    assert [rgb(image.get_at((0, 0))) for image in assets.creature] == colours
    assert assets.sprite_size == (4, 6)
    assert assets.ambulance_size == (8, 4)
    assert assets.cursor[0].get_height() == 50
    assert assets.sounds == {Sound.HIT: tmp_path / "sounds" / "hit.wav"}


def test_assets_load_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        Assets.load(tmp_path)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0