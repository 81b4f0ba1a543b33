"""The character grid that every game object draws onto."""

from __future__ import annotations

from abc import ABC, abstractmethod

NUM_ROWS = 20
NUM_COLS = 40

Frame = list[list[str]]
"""A grid indexed as ``frame[x][y]``: NUM_COLS columns of NUM_ROWS cells."""


def new_frame() -> Frame:
    """Return a blank frame filled with spaces."""
    return [[" "] * NUM_ROWS for _ in range(NUM_COLS)]


class Drawable(ABC):
    """Something that can paint itself onto a frame."""

    @abstractmethod
    def draw(self, frame: Frame) -> None:
        """Paint this object onto ``frame``."""