"""The current level and its on-screen label."""

from __future__ import annotations

from terminvaders.frame import Drawable, Frame

MAX_LEVEL = 3
_LABEL_COLUMN = 20


class Level(Drawable):
    """Tracks progress through the levels."""

    def __init__(self) -> None:
        self.level = 1

    def increment_level(self) -> bool:
        """Move to the next level; return True once the last level is reached."""
        if self.level <= MAX_LEVEL:
            self.level += 1
        return self.level == MAX_LEVEL

    def draw(self, frame: Frame) -> None:
        for offset, char in enumerate(f"LEVEL: {self.level:02d}"):
            frame[_LABEL_COLUMN + offset][0] = char