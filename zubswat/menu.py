"""Main menu state: the options chosen before a game starts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from zubswat.game import Game, PlayCallback, Sound

MENU_THEME_VOLUME = 0.1
MENU_CLICK_VOLUME = 0.5


class Menu:
    """The main menu: game options, menu music and the running game."""

    def __init__(
        self,
        play: PlayCallback | None = None,
        stop_theme: Callable[[], None] | None = None,
    ) -> None:
        self._play = play
        self._stop_theme = stop_theme
        self.difficulty = 0
        self.show_vectors = False
        self.play_sounds = True
        self.use_fullscreen = False
        self.visible = True
        self.game: Game | None = None
        if self.play_sounds:
            self._emit(Sound.MAIN_MENU, MENU_THEME_VOLUME)

    def _emit(self, sound: Sound, volume: float) -> None:
        if self._play is not None:
            self._play(sound, volume)

    def _click(self) -> None:
        if self.play_sounds:
            self._emit(Sound.MENU_CLICK, MENU_CLICK_VOLUME)

    def _stop(self) -> None:
        if self._stop_theme is not None:
            self._stop_theme()

    def select_difficulty(self, index: int) -> None:
        self.difficulty = index
        self._click()

    def toggle_vectors(self) -> None:
        self.show_vectors = not self.show_vectors
        self._click()

    def toggle_sounds(self) -> None:
        self.play_sounds = not self.play_sounds
        if self.play_sounds:
            self._emit(Sound.MAIN_MENU, MENU_THEME_VOLUME)
        else:
            self._stop()

    def toggle_fullscreen(self) -> None:
        self.use_fullscreen = not self.use_fullscreen
        self._click()

    def start_game(self, width: int, height: int, **kwargs: Any) -> Game:
        """Start a new game with the chosen options and hide the menu."""
        if self.play_sounds:
            self._emit(Sound.MENU_CLICK, MENU_CLICK_VOLUME)
            self._stop()
        self.game = Game(
            self.difficulty,
            width,
            height,
            show_vectors=self.show_vectors,
            play_sounds=self.play_sounds,
            play=self._play,
            **kwargs,
        )
        self.visible = False
        return self.game

    def finish_game(self) -> None:
        """Show the menu again after a game has ended."""
        self.visible = True
        if self.play_sounds:
            self._emit(Sound.MAIN_MENU, MENU_THEME_VOLUME)