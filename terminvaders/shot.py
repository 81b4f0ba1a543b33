"""A projectile fired by the player."""

from __future__ import annotations

from datetime import timedelta

from terminvaders.frame import Drawable, Frame
from terminvaders.timer import Timer

_MOVE_MILLIS = 50
_EXPLODE_MILLIS = 250


class Shot(Drawable):
    """A shot that climbs one row per tick until it explodes or leaves the top."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.exploding = False
        self.timer = Timer.from_millis(_MOVE_MILLIS)

    def update(self, delta: timedelta) -> None:
        """Advance the shot's clock and move it up when it is due."""
        self.timer.update(delta)
        if self.timer.ready and not self.exploding:
            if self.y > 0:
                self.y -= 1
            self.timer.reset()

    def explode(self) -> None:
        """Stop the shot and show an explosion for a short while."""
        self.exploding = True
        self.timer = Timer.from_millis(_EXPLODE_MILLIS)

    def dead(self) -> bool:
        """Whether the shot has finished exploding or reached the top row."""
        return (self.exploding and self.timer.ready) or self.y == 0

    def draw(self, frame: Frame) -> None:
        frame[self.x][self.y] = "*" if self.exploding else "|"