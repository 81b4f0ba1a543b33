"""The player's score and its on-screen label."""

from __future__ import annotations

from terminvaders.frame import Drawable, Frame


class Score(Drawable):
    """Accumulates points."""

    def __init__(self) -> None:
        self.count = 0

    def add_points(self, amount: int) -> None:
        """Add ``amount`` points to the score."""
        self.count += amount

    def draw(self, frame: Frame) -> None:
        for column, char in enumerate(f"SCORE: {self.count:04d}"):
            frame[column][0] = char