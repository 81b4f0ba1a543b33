"""The start menu."""

from __future__ import annotations

from terminvaders.frame import Drawable, Frame


class Menu(Drawable):
    """A vertical list of options with a movable selection."""

    def __init__(self) -> None:
        self.options = ["New game", "Exit"]
        self.selection = 0

    def change_option(self, upwards: bool) -> None:
        """Move the selection up or down, stopping at either end."""
        if upwards and self.selection > 0:
            self.selection -= 1
        elif not upwards and self.selection < len(self.options) - 1:
            self.selection += 1

    def draw(self, frame: Frame) -> None:
        frame[0][self.selection] = ">"
        for row, option in enumerate(self.options):
            for offset, char in enumerate(option, start=1):
                frame[offset][row] = char