"""The marching army of invaders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from terminvaders.frame import NUM_COLS, NUM_ROWS, Drawable, Frame
from terminvaders.timer import Timer

_START_MILLIS = 2000
_SPEEDUP_MILLIS = 250
_MIN_MILLIS = 250


@dataclass
class Invader:
    """A single invader and the points it is worth."""

    x: int
    y: int
    points: int = 1


class Invaders(Drawable):
    """A grid of invaders that sweeps sideways and drops a row at each edge."""

    def __init__(self) -> None:
        self.army: list[Invader] = [
            Invader(x, y)
            for x in range(NUM_COLS)
            for y in range(NUM_ROWS)
            if 1 < x < NUM_COLS - 2 and 0 < y < 9 and x % 2 == 0 and y % 2 == 0
        ]
        self.total_count = len(self.army)
        self.move_timer = Timer.from_millis(_START_MILLIS)
        self.direction = 1

    def update(self, delta: timedelta) -> bool:
        """Advance the army's clock; return True if the army moved."""
        self.move_timer.update(delta)
        if not self.move_timer.ready:
            return False
        self.move_timer.reset()

        downwards = False
        if self.direction == -1:
            if min((inv.x for inv in self.army), default=0) == 0:
                self.direction = 1
                downwards = True
        elif max((inv.x for inv in self.army), default=0) == NUM_COLS - 1:
            self.direction = -1
            downwards = True

        if downwards:
            current = self.move_timer.duration // timedelta(milliseconds=1)
            self.move_timer = Timer.from_millis(
                max(current - _SPEEDUP_MILLIS, _MIN_MILLIS)
            )
            for invader in self.army:
                invader.y += 1
        else:
            for invader in self.army:
                invader.x += self.direction
        return True

    def all_killed(self) -> bool:
        """Whether no invaders remain."""
        return not self.army

    def reached_bottom(self) -> bool:
        """Whether any invader has reached the bottom row."""
        return max((inv.y for inv in self.army), default=0) >= NUM_ROWS - 1

    def kill_invader_at(self, x: int, y: int) -> int:
        """Remove the invader at (x, y) and return its points, or 0 if none."""
        for index, invader in enumerate(self.army):
            if invader.x == x and invader.y == y:
                del self.army[index]
                return invader.points
        return 0

    def draw(self, frame: Frame) -> None:
        glyph = "x" if self.move_timer.fraction_left > 0.5 else "+"
        for invader in self.army:
            frame[invader.x][invader.y] = glyph