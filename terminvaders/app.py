"""The game loop: menu, play, sound effects and the terminal front end."""

from __future__ import annotations

import argparse
import os
import queue
import sys
import threading
import time
from collections.abc import Iterable, Iterator
from datetime import timedelta
from pathlib import Path
from typing import Protocol, TextIO

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import blessed  # noqa: E402
import pygame  # noqa: E402

from terminvaders.frame import Frame, new_frame  # noqa: E402
from terminvaders.invaders import Invaders  # noqa: E402
from terminvaders.level import Level  # noqa: E402
from terminvaders.menu import Menu  # noqa: E402
from terminvaders.player import Player  # noqa: E402
from terminvaders.render import render  # noqa: E402
from terminvaders.score import Score  # noqa: E402

SOUND_NAMES = ("explode", "lose", "move", "pew", "startup", "win")
DEFAULT_AUDIO_DIR = Path("audio/original")

_UP = {"KEY_UP"}
_DOWN = {"KEY_DOWN"}
_LEFT = {"KEY_LEFT"}
_RIGHT = {"KEY_RIGHT"}
_SELECT = {" ", "KEY_ENTER", "\n", "\r"}
_QUIT = {"KEY_ESCAPE", "q"}


class _Player(Protocol):
    def play(self, name: str) -> bool: ...


def _init_mixer() -> bool:
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    return True


class Sounds:
    """Named sound effects loaded from WAV files in one directory."""

    def __init__(
        self,
        directory: Path | str = DEFAULT_AUDIO_DIR,
        names: Iterable[str] = SOUND_NAMES,
        enabled: bool = True,
    ) -> None:
        self._clips: dict[str, pygame.mixer.Sound] = {}
        self.enabled = enabled and _init_mixer()
        if not self.enabled:
            return
        for name in names:
            path = Path(directory) / f"{name}.wav"
            if not path.is_file():
                continue
            try:
                self._clips[name] = pygame.mixer.Sound(str(path))
            except pygame.error:
                continue

    def play(self, name: str) -> bool:
        """Start playing the named sound; return whether one was played."""
        clip = self._clips.get(name)
        if clip is None:
            return False
        clip.play()
        return True

    def wait(self) -> None:
        """Block until every sound has finished playing."""
        if not self.enabled:
            return
        while pygame.mixer.get_busy():
            time.sleep(0.01)


class Game:
    """The state of one session: menu, player, army, score and level."""

    def __init__(self, sounds: _Player | None = None) -> None:
        self.sounds = sounds if sounds is not None else Sounds(enabled=False)
        self.player = Player()
        self.invaders = Invaders()
        self.score = Score()
        self.menu = Menu()
        self.level = Level()
        self.in_menu = True
        self.running = True

    def reset(self) -> None:
        """Return to the menu with a fresh player and army."""
        self.in_menu = True
        self.player = Player()
        self.invaders = Invaders()

    def handle_menu_key(self, key: str) -> None:
        """React to a key pressed while the menu is shown."""
        if key in _UP:
            self.menu.change_option(True)
        elif key in _DOWN:
            self.menu.change_option(False)
        elif key in _SELECT:
            if self.menu.selection == 0:
                self.in_menu = False
            else:
                self.running = False

    def handle_game_key(self, key: str) -> None:
        """React to a key pressed during play."""
        if key in _LEFT:
            self.player.move_left()
        elif key in _RIGHT:
            self.player.move_right()
        elif key in _SELECT:
            if self.player.shoot():
                self.sounds.play("pew")
        elif key in _QUIT:
            self.sounds.play("lose")
            self.reset()

    def step(self, delta: timedelta) -> Frame:
        """Advance the game by ``delta`` and return the frame to show."""
        frame = new_frame()
        if self.in_menu:
            self.menu.draw(frame)
            return frame

        self.player.update(delta)
        if self.invaders.update(delta):
            self.sounds.play("move")
        hits = self.player.detect_hits(self.invaders)
        if hits > 0:
            self.sounds.play("explode")
            self.score.add_points(hits)

        for drawable in (self.player, self.invaders, self.score, self.level):
            drawable.draw(frame)

        if self.invaders.all_killed():
            if self.level.increment_level():
                self.sounds.play("win")
                self.running = False
            else:
                self.invaders = Invaders()
        elif self.invaders.reached_bottom():
            self.sounds.play("lose")
            self.reset()
        return frame


def _render_screen(
    term: blessed.Terminal, stream: TextIO, frames: queue.Queue[Frame | None]
) -> None:
    last_frame = new_frame()
    render(term, stream, last_frame, last_frame, True)
    while (frame := frames.get()) is not None:
        render(term, stream, last_frame, frame, False)
        last_frame = frame


def _pending_keys(term: blessed.Terminal) -> Iterator[str]:
    while keystroke := term.inkey(timeout=0):
        yield keystroke.name or str(keystroke)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="terminvaders", description="A terminal arcade game with sound."
    )
    parser.add_argument(
        "--audio-dir",
        type=Path,
        default=DEFAULT_AUDIO_DIR,
        help="directory holding the WAV sound effects",
    )
    parser.add_argument("--mute", action="store_true", help="play no sound")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the game in the current terminal."""
    args = _parse_args(argv)
    sounds = Sounds(args.audio_dir, enabled=not args.mute)
    sounds.play("startup")

    term = blessed.Terminal()
    stream = sys.stdout
    frames: queue.Queue[Frame | None] = queue.Queue()
    game = Game(sounds)

    with term.fullscreen(), term.hidden_cursor(), term.raw():
        renderer = threading.Thread(
            target=_render_screen, args=(term, stream, frames), daemon=True
        )
        renderer.start()
        try:
            last = time.monotonic()
            while game.running:
                now = time.monotonic()
                delta = timedelta(seconds=now - last)
                last = now

                handle = game.handle_menu_key if game.in_menu else game.handle_game_key
                for key in _pending_keys(term):
                    handle(key)
                    if not game.running:
                        break
                if not game.running:
                    break

                frames.put(game.step(delta))
                time.sleep(0.001)
        finally:
            frames.put(None)
            renderer.join()
    sounds.wait()
    return 0


if __name__ == "__main__":
    sys.exit(main())