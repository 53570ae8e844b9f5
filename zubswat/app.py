"""The pygame front end: asset loading, drawing and the event loop."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from zubswat.creature import Creature, DrawCommand, Sprite
from zubswat.game import (
    CURSOR_HEIGHT,
    CURSOR_HOTSPOT,
    CURSOR_INTERVAL_MS,
    UPDATE_INTERVAL_MS,
    Difficulty,
    Game,
    Sound,
)
from zubswat.menu import Menu
from zubswat.vector2 import Vector2

_UPDATE_EVENT = pygame.USEREVENT + 1
_CURSOR_EVENT = pygame.USEREVENT + 2
_THEME_END_EVENT = pygame.USEREVENT + 3

_MENU_SIZE = (420, 300)
_GAME_SIZE = (800, 600)
_BACKGROUND = (240, 240, 240)
_TEXT = (20, 20, 20)
_VECTOR_MULTIPLIER = 1000


def _image_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        raise FileNotFoundError(f"missing asset directory: {directory}")
    files = sorted(path for path in directory.iterdir() if path.is_file())
    if not files:
        raise FileNotFoundError(f"no images in {directory}")
    return files


def _scale_to_height(image: pygame.Surface, height: int) -> pygame.Surface:
    width = max(1, round(image.get_width() * height / image.get_height()))
    if image.get_bitsize() in (24, 32):
        return pygame.transform.smoothscale(image, (width, height))
    return pygame.transform.scale(image, (width, height))


@dataclass
class Assets:
    """Images and sound files the game needs."""

    creature: list[pygame.Surface]
    ambulance: list[pygame.Surface]
    cursor: list[pygame.Surface]
    sounds: dict[Sound, Path] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: str | Path) -> Assets:
        """Load assets from creature/, ambulance/, cursor/ and sounds/ below directory."""
        root = Path(directory)
        creature = [pygame.image.load(str(p)) for p in _image_files(root / "creature")]
        ambulance = [pygame.image.load(str(p)) for p in _image_files(root / "ambulance")]
        cursor = [
            _scale_to_height(pygame.image.load(str(p)), CURSOR_HEIGHT)
            for p in _image_files(root / "cursor")
        ]
        sounds = {
            sound: root / "sounds" / sound.value
            for sound in Sound
            if (root / "sounds" / sound.value).is_file()
        }
        return cls(creature, ambulance, cursor, sounds)

    @property
    def sprite_size(self) -> tuple[int, int]:
        return self.creature[0].get_size()

    @property
    def ambulance_size(self) -> tuple[int, int]:
        return self.ambulance[0].get_size()


def draw_scene(
    surface: pygame.Surface, commands: Iterable[DrawCommand], assets: Assets
) -> None:
    """Blit every draw command onto the surface."""
    for command in commands:
        sheet = assets.creature if command.sprite is Sprite.CREATURE else assets.ambulance
        image = sheet[command.frame]
        if command.mirrored:
            image = pygame.transform.flip(image, True, False)
        if command.rotation:
            image = pygame.transform.rotate(image, -command.rotation)
        surface.blit(image, (round(command.x), round(command.y)))


def _draw_vectors(surface: pygame.Surface, creature: Creature) -> None:
    vectors = creature.vectors()
    origin = creature.position
    coloured = (
        (vectors.force, (255, 0, 0)),
        (vectors.drag, (128, 0, 0)),
        (vectors.border_force, (255, 255, 0)),
        (vectors.resulting_force, (0, 255, 255)),
        (vectors.acceleration, (0, 0, 255)),
        (vectors.speed, (0, 255, 0)),
    )
    for vector, colour in coloured:
        end = origin + vector * _VECTOR_MULTIPLIER
        if all(math.isfinite(value) for value in (end.x, end.y)):
            pygame.draw.line(surface, colour, (origin.x, origin.y), (end.x, end.y))


class _Audio:
    def __init__(self, paths: dict[Sound, Path]) -> None:
        self._paths = paths
        self._effects: dict[Sound, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
        except pygame.error:
            self.enabled = False
        else:
            self.enabled = True
            pygame.mixer.music.set_endevent(_THEME_END_EVENT)

    def play(self, sound: Sound, volume: float) -> None:
        path = self._paths.get(sound)
        if not self.enabled or path is None:
            return
        if sound.is_music:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.set_volume(volume)
            pygame.mixer.music.play(loops=-1 if sound is Sound.MAIN_MENU else 0)
            return
        effect = self._effects.get(sound)
        if effect is None:
            effect = self._effects[sound] = pygame.mixer.Sound(str(path))
        effect.set_volume(volume)
        effect.play()

    def stop_theme(self) -> None:
        if self.enabled:
            pygame.mixer.music.stop()

    def theme_busy(self) -> bool:
        return self.enabled and pygame.mixer.music.get_busy()


def _set_cursor(image: pygame.Surface) -> None:
    width, height = image.get_size()
    hotspot = (min(CURSOR_HOTSPOT[0], width - 1), min(CURSOR_HOTSPOT[1], height - 1))
    pygame.mouse.set_cursor(pygame.cursors.Cursor(hotspot, image))


def _draw_menu(surface: pygame.Surface, font: pygame.font.Font, menu: Menu) -> None:
    def onoff(flag: bool) -> str:
        return "on" if flag else "off"

    lines: Sequence[str] = (
        f"Difficulty: {Difficulty.from_index(menu.difficulty).name.title()}  [D]",
        f"Show vectors: {onoff(menu.show_vectors)}  [V]",
        f"Sounds: {onoff(menu.play_sounds)}  [S]",
        f"Fullscreen: {onoff(menu.use_fullscreen)}  [F]",
        "Start  [Enter]",
        "Exit  [Esc]",
    )
    surface.fill(_BACKGROUND)
    for row, line in enumerate(lines):
        surface.blit(font.render(line, True, _TEXT), (30, 30 + row * 40))


def _start(menu: Menu, assets: Assets, rng: random.Random) -> tuple[pygame.Surface, Game]:
    if menu.use_fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode(_GAME_SIZE, pygame.RESIZABLE)
    pygame.display.set_caption("Game")
    width, height = screen.get_size()
    game = menu.start_game(
        width,
        height,
        rng=rng,
        sprite_frames=range(len(assets.creature)),
        ambulance_frames=range(len(assets.ambulance)),
        sprite_size=assets.sprite_size,
        ambulance_size=assets.ambulance_size,
        cursor_frames=range(len(assets.cursor)),
    )
    _set_cursor(assets.cursor[game.current_cursor])
    pygame.time.set_timer(_UPDATE_EVENT, UPDATE_INTERVAL_MS)
    return screen, game


def _run(assets: Assets, rng: random.Random) -> None:
    audio = _Audio(assets.sounds)
    pygame.display.set_icon(assets.creature[0])
    screen = pygame.display.set_mode(_MENU_SIZE)
    pygame.display.set_caption("Main menu")
    menu = Menu(audio.play, audio.stop_theme)
    font = pygame.font.Font(None, 30)
    clock = pygame.time.Clock()
    game: Game | None = None

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if game is None:
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_d:
                    menu.select_difficulty((menu.difficulty + 1) % len(Difficulty))
                elif event.key == pygame.K_v:
                    menu.toggle_vectors()
                elif event.key == pygame.K_s:
                    menu.toggle_sounds()
                elif event.key == pygame.K_f:
                    menu.toggle_fullscreen()
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    screen, game = _start(menu, assets, rng)
                elif event.key == pygame.K_ESCAPE:
                    return
                continue

            cursor = Vector2(*pygame.mouse.get_pos())
            if event.type == _UPDATE_EVENT:
                game.update(cursor)
                screen.fill(_BACKGROUND)
                creature = game.creature
                if game.show_vectors and creature is not None and not creature.dying:
                    _draw_vectors(screen, creature)
                draw_scene(screen, game.draw_commands(cursor), assets)
                pygame.display.flip()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                was_animating = game.cursor_animating
                game.click(Vector2(*event.pos))
                if game.cursor_animating and not was_animating:
                    pygame.time.set_timer(_CURSOR_EVENT, CURSOR_INTERVAL_MS)
            elif event.type == _CURSOR_EVENT:
                _set_cursor(assets.cursor[game.advance_cursor()])
                if not game.cursor_animating:
                    pygame.time.set_timer(_CURSOR_EVENT, 0)
            elif event.type == pygame.VIDEORESIZE:
                game.resize(event.w, event.h)
            elif event.type == _THEME_END_EVENT:
                if not audio.theme_busy():
                    game.next_theme()

            if game.finished:
                pygame.time.set_timer(_UPDATE_EVENT, 0)
                pygame.time.set_timer(_CURSOR_EVENT, 0)
                audio.stop_theme()
                pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_ARROW)
                game = None
                screen = pygame.display.set_mode(_MENU_SIZE)
                pygame.display.set_caption("Main menu")
                menu.finish_game()

        if game is None:
            _draw_menu(screen, font, menu)
            pygame.display.flip()
        clock.tick(120)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game."""
    parser = argparse.ArgumentParser(
        prog="zubswat", description="Swat the creature before it runs away."
    )
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding the game assets"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for theme selection")
    args = parser.parse_args(argv)
    pygame.init()
    try:
        assets = Assets.load(args.assets)
        _run(assets, random.Random(args.seed))
    finally:
        pygame.quit()
    return 0