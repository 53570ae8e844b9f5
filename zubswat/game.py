"""A single round: the creature, the clicks that hit it and the music."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass

from zubswat.creature import Creature, DrawCommand
from zubswat.vector2 import Vector2

UPDATE_INTERVAL_MS = 10
CURSOR_INTERVAL_MS = 12
TIME_DELTA_MS = 25
HIT_RADIUS = 25
THEME_VOLUME = 0.2
HIT_VOLUME = 0.5
MISS_VOLUME = 0.2
CURSOR_HEIGHT = 50
CURSOR_HOTSPOT = (46, 7)


class Difficulty(enum.IntEnum):
    """Difficulty levels, in the order the menu offers them."""

    EASY = 0
    MEDIUM = 1
    HARD = 2
    NIGHTMARE = 3

    @classmethod
    def from_index(cls, index: int) -> Difficulty:
        """Map a menu index to a level; anything past the known ones is nightmare."""
        try:
            return cls(index)
        except ValueError:
            return cls.NIGHTMARE


class Sound(enum.Enum):
    """Sound resources, named by their file."""

    HIT = "hit.wav"
    MISS = "miss.wav"
    SCREAM = "scream.wav"
    AMBULANCE = "ambulance.wav"
    MENU_CLICK = "menusound3.wav"
    MAIN_MENU = "mainmenu.wav"
    THEME_0 = "mainTheme0.wav"
    THEME_1 = "mainTheme1.wav"
    THEME_2 = "mainTheme2.wav"

    @property
    def is_music(self) -> bool:
        """Whether the sound is a background track rather than an effect."""
        return self is Sound.MAIN_MENU or self in THEMES


THEMES = (Sound.THEME_0, Sound.THEME_1, Sound.THEME_2)

PlayCallback = Callable[[Sound, float], None]


class ClickResult(enum.Enum):
    """What a mouse click did."""

    MISS = "miss"
    HIT = "hit"
    KILL = "kill"
    NO_EFFECT = "no effect"


@dataclass(frozen=True)
class Preset:
    """Creature parameters for one difficulty level."""

    mass: float
    health: int
    force_multiplier: float
    border_force_multiplier: float
    drag_factor: float
    max_speed: float
    ambulance_speed: float


_PRESETS = {
    Difficulty.EASY: Preset(20, 3, 30, 60, 0.01, 50, 8),
    Difficulty.MEDIUM: Preset(25, 6, 70, 120, 0.01, 50, 8),
    Difficulty.HARD: Preset(40, 10, 230, 400, 0.01, 90, 8),
}


def preset_for(difficulty: int) -> Preset | None:
    """The creature preset for a difficulty, or None in nightmare mode."""
    return _PRESETS.get(Difficulty.from_index(difficulty))


class Game:
    """State of one game: the creature, cursor animation and theme music."""

    def __init__(
        self,
        difficulty: int,
        width: int,
        height: int,
        show_vectors: bool = False,
        play_sounds: bool = True,
        play: PlayCallback | None = None,
        rng: random.Random | None = None,
        sprite_frames: Sequence[Hashable] = (0, 1, 2, 3),
        ambulance_frames: Sequence[Hashable] = (0,),
        sprite_size: tuple[int, int] = (0, 0),
        ambulance_size: tuple[int, int] = (0, 0),
        cursor_frames: Sequence[Hashable] = (0,),
    ) -> None:
        self.cursor_frames = tuple(cursor_frames)
        if not self.cursor_frames:
            raise ValueError("at least one cursor frame is required")
        self.difficulty = Difficulty.from_index(difficulty)
        self.width = width
        self.height = height
        self.show_vectors = show_vectors
        self.play_sounds = play_sounds
        self._play = play
        self._rng = rng if rng is not None else random.Random()
        self._cursor_step = 0
        self.cursor_animating = False
        self.finished = False
        self.theme: Sound | None = None

        preset = preset_for(self.difficulty)
        self.creature: Creature | None
        if preset is None:
            self.creature = None
            self.going = False
        else:
            self.creature = Creature(
                Vector2(width // 2, height // 2),
                preset.mass,
                preset.health,
                preset.force_multiplier,
                preset.border_force_multiplier,
                preset.drag_factor,
                preset.max_speed,
                width,
                height,
                preset.ambulance_speed,
                sprite_frames,
                ambulance_frames,
                sprite_size,
                ambulance_size,
            )
            self.going = True

        if play_sounds:
            self._start_theme()

    @property
    def nightmare(self) -> bool:
        return self.difficulty is Difficulty.NIGHTMARE

    @property
    def current_cursor(self) -> Hashable:
        """The cursor frame that is shown now."""
        return self.cursor_frames[self._cursor_step % len(self.cursor_frames)]

    def _emit(self, sound: Sound, volume: float) -> None:
        if self.play_sounds and self._play is not None:
            self._play(sound, volume)

    def _start_theme(self) -> None:
        self.theme = THEMES[self._rng.randrange(len(THEMES))]
        self._emit(self.theme, THEME_VOLUME)

    def _finish(self) -> None:
        self.going = False
        self.finished = True
        self.theme = None

    def update(self, cursor: Vector2) -> None:
        """Run one physics step with the cursor at the given position."""
        if self.going and self.creature is not None:
            self.creature.physics_process(cursor, TIME_DELTA_MS)

    def draw_commands(self, cursor: Vector2) -> list[DrawCommand]:
        """Advance the animation and return what to draw.

        When the ambulance has carried the creature away the game finishes.
        """
        if not self.going or self.creature is None:
            return []
        commands = self.creature.animate(cursor)
        if self.creature.dead:
            self._finish()
        return commands

    def click(self, cursor: Vector2) -> ClickResult:
        """Handle a mouse press at the cursor position."""
        self.cursor_animating = True
        creature = self.creature
        if creature is None:
            return ClickResult.NO_EFFECT
        if (cursor - creature.position).length() >= HIT_RADIUS:
            self._emit(Sound.MISS, MISS_VOLUME)
            return ClickResult.MISS
        self._emit(Sound.HIT, HIT_VOLUME)
        if creature.dying:
            return ClickResult.NO_EFFECT
        health = creature.health - 1
        if health <= 0:
            self._emit(Sound.SCREAM, HIT_VOLUME)
            self._emit(Sound.AMBULANCE, HIT_VOLUME)
            creature.take_hit(True)
            result = ClickResult.KILL
        else:
            creature.take_hit()
            result = ClickResult.HIT
        creature.health = max(health, 0)
        return result

    def resize(self, width: int, height: int) -> None:
        """Change the size of the playing field."""
        self.width = width
        self.height = height
        if self.going and self.creature is not None:
            self.creature.change_limits(width, height)

    def advance_cursor(self) -> Hashable:
        """Step the click animation of the cursor and return the frame to show.

        After the last frame the animation stops and the first frame returns.
        """
        if self._cursor_step >= len(self.cursor_frames):
            self.cursor_animating = False
            self._cursor_step = 0
            return self.cursor_frames[0]
        frame = self.cursor_frames[self._cursor_step]
        self._cursor_step += 1
        return frame

    def next_theme(self) -> Sound | None:
        """Start another randomly chosen theme once the current one ended."""
        if not self.play_sounds or self.finished:
            return None
        self._start_theme()
        return self.theme