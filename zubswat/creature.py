"""The fleeing creature: its physics, hit points and animation."""

from __future__ import annotations

import enum
import math
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from zubswat.vector2 import Vector2

_FRAME_REPEAT = 3
_IDLE_FRAME = 9
_FALLEN_FRAME = 3
_FALLEN_ROTATION = 270
_AMBULANCE_START = Vector2(-140, -140)


class Sprite(enum.Enum):
    """Which sprite sheet a draw command refers to."""

    CREATURE = "creature"
    AMBULANCE = "ambulance"


@dataclass(frozen=True)
class DrawCommand:
    """One image to draw, with its top-left corner."""

    sprite: Sprite
    frame: Hashable
    x: float
    y: float
    mirrored: bool = False
    rotation: int = 0


@dataclass(frozen=True)
class ForceVectors:
    """The forces and motion vectors of the last physics step."""

    force: Vector2
    drag: Vector2
    border_force: Vector2
    resulting_force: Vector2
    acceleration: Vector2
    speed: Vector2


def _direction(vector: Vector2, length: float) -> Vector2:
    if vector.length() == 0:
        return Vector2()
    return vector.normalized(length)


def _inverse(multiplier: float, distance: float) -> float:
    return multiplier / distance if distance else math.inf


class Creature:
    """A creature that runs from the cursor inside a rectangular field."""

    def __init__(
        self,
        start: Vector2,
        mass: float,
        health: int,
        force_multiplier: float,
        border_force_multiplier: float,
        drag_factor: float,
        max_speed: float,
        x_limit: float,
        y_limit: float,
        ambulance_speed: float,
        sprite_frames: Sequence[Hashable],
        ambulance_frames: Sequence[Hashable],
        sprite_size: tuple[int, int],
        ambulance_size: tuple[int, int],
    ) -> None:
        frames = [frame for frame in sprite_frames for _ in range(_FRAME_REPEAT)]
        if len(frames) <= _IDLE_FRAME:
            raise ValueError("at least four creature frames are required")
        if not ambulance_frames:
            raise ValueError("at least one ambulance frame is required")
        self._sprite_frames = tuple(frames)
        self._ambulance_frames = tuple(ambulance_frames)
        self._sprite_half = (sprite_size[0] // 2, sprite_size[1] // 2)
        self._ambulance_half = (ambulance_size[0] // 2, ambulance_size[1] // 2)

        self.position = start
        self.ambulance_position = _AMBULANCE_START
        self.mass = mass
        self.health = health
        self.force_multiplier = force_multiplier
        self.border_force_multiplier = border_force_multiplier
        self.drag_factor = drag_factor
        self.max_speed = max_speed
        self.ambulance_speed = ambulance_speed
        self.dying = False
        self.picked_up = False
        self.dead = False

        self._force = Vector2()
        self._drag = Vector2()
        self._border_force = Vector2()
        self._resulting_force = Vector2()
        self._acceleration = Vector2()
        self._speed = Vector2()
        self._frame = 0

        self.x_limit = x_limit
        self.y_limit = y_limit
        self._update_radii()

    def _update_radii(self) -> None:
        self.engage_radius = min(self.x_limit, self.y_limit) / 4
        self.border_radius = self.engage_radius / 2

    def _compute_border_force(self) -> Vector2:
        pos = self.position
        coefficient = self.y_limit / self.x_limit
        mult = self.border_force_multiplier
        if pos.x * coefficient > pos.y:
            right = self.x_limit - pos.x
            if right * coefficient < pos.y:
                if right < self.border_radius:
                    return Vector2(-_inverse(mult, right), 0)
            elif pos.y < self.border_radius:
                return Vector2(0, _inverse(mult, pos.y))
        else:
            bottom = self.y_limit - pos.y
            if bottom > pos.x * coefficient:
                if pos.x < self.border_radius:
                    return Vector2(_inverse(mult, pos.x), 0)
            elif bottom < self.border_radius:
                return Vector2(0, -_inverse(mult, bottom))
        return Vector2()

    def physics_process(self, cursor: Vector2, time_delta_ms: float) -> None:
        """Advance the simulation by one step, fleeing from the cursor."""
        if self.dying:
            return
        self._border_force = self._compute_border_force()
        drag_strength = self.drag_factor * self.mass

        away = self.position - cursor
        distance = away.length()
        if 0 < distance < self.engage_radius:
            self._force = away.normalized(self.force_multiplier / distance)
            self._drag = -_direction(self._force + self._border_force, drag_strength)
            if self._drag.length() > self._force.length():
                self._drag = self._drag.normalized(self._force.length())
        else:
            self._force = Vector2()
            self._drag = -_direction(self._speed + self._border_force, drag_strength)

        if (
            self._speed.length() < 0.01
            and self._force.length() == 0
            and self._border_force.length() == 0
        ):
            self._resulting_force = Vector2()
            self._acceleration = Vector2()
            self._speed = Vector2()
            self._drag = Vector2()
        else:
            self._resulting_force = self._force + self._drag + self._border_force
            self._acceleration = self._resulting_force / self.mass
            self._speed = self._speed + self._acceleration * time_delta_ms / 100
            if self._speed.length() > self.max_speed:
                self._speed = self._speed.normalized(self.max_speed)
            self.position = self.position + self._speed * time_delta_ms

        pos = self.position
        if pos.x < 0:
            self.position = pos + Vector2(self.x_limit, 0)
        elif pos.x > self.x_limit:
            self.position = pos - Vector2(self.x_limit, 0)
        elif pos.y < 0:
            self.position = pos + Vector2(0, self.y_limit)
        elif pos.y > self.y_limit:
            self.position = pos - Vector2(0, self.y_limit)
        else:
            return
        self._speed = Vector2()

    def _creature_corner(self) -> tuple[float, float]:
        return (
            self.position.x - self._sprite_half[0],
            self.position.y - self._sprite_half[1],
        )

    def _ambulance_command(self) -> DrawCommand:
        command = DrawCommand(
            Sprite.AMBULANCE,
            self._ambulance_frames[self._frame],
            self.ambulance_position.x - self._ambulance_half[0],
            self.ambulance_position.y - self._ambulance_half[1],
        )
        self._frame = (self._frame + 1) % len(self._ambulance_frames)
        return command

    def animate(self, cursor: Vector2) -> list[DrawCommand]:
        """Advance the animation one frame and return what to draw.

        Once the ambulance has left the field the creature is marked dead
        and nothing more is drawn.
        """
        if self.dead:
            return []
        x, y = self._creature_corner()
        if not self.dying:
            index = _IDLE_FRAME if self._speed.length() == 0 else self._frame
            command = DrawCommand(
                Sprite.CREATURE,
                self._sprite_frames[index],
                x,
                y,
                mirrored=not cursor.x > self.position.x,
            )
            self._frame = (self._frame + 1) % len(self._sprite_frames)
            return [command]

        ambulance = self.ambulance_position
        if not self.picked_up and (
            ambulance.x > self.position.x or ambulance.y > self.position.y
        ):
            self.picked_up = True

        commands: list[DrawCommand] = []
        if not self.picked_up:
            commands.append(
                DrawCommand(
                    Sprite.CREATURE,
                    self._sprite_frames[_FALLEN_FRAME],
                    x,
                    y,
                    rotation=_FALLEN_ROTATION,
                )
            )
            commands.append(self._ambulance_command())
            heading = self.position
        else:
            commands.append(self._ambulance_command())
            heading = Vector2(self.x_limit, self.y_limit)
        if heading.length() == 0:
            heading = Vector2(self.x_limit, self.y_limit)
        self.ambulance_position = self.ambulance_position + heading.normalized(
            self.ambulance_speed
        )

        if (
            self.ambulance_position.x > self.x_limit + self._ambulance_half[0]
            or self.ambulance_position.y > self.y_limit + self._ambulance_half[1]
        ):
            self.dead = True
        return commands

    def take_hit(self, fatal: bool = False) -> None:
        """Register a hit; a fatal one starts the dying sequence."""
        if not self.dying and fatal:
            self._frame = 0
            self.dying = True

    def change_limits(self, width: float, height: float) -> None:
        """Resize the field, keeping the creature at the same relative spot."""
        self.position = Vector2(
            self.position.x / self.x_limit * width,
            self.position.y / self.y_limit * height,
        )
        self.x_limit = width
        self.y_limit = height
        self._update_radii()

    def vectors(self) -> ForceVectors:
        """The vectors computed by the last physics step."""
        return ForceVectors(
            force=self._force,
            drag=self._drag,
            border_force=self._border_force,
            resulting_force=self._resulting_force,
            acceleration=self._acceleration,
            speed=self._speed,
        )