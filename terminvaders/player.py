"""The player's cannon."""

from __future__ import annotations

from datetime import timedelta

from terminvaders.frame import NUM_COLS, NUM_ROWS, Drawable, Frame
from terminvaders.invaders import Invaders
from terminvaders.shot import Shot

_MAX_SHOTS = 2


class Player(Drawable):
    """The cannon at the bottom row and the shots it has in flight."""

    def __init__(self) -> None:
        self.x = NUM_COLS // 2
        self.y = NUM_ROWS - 1
        self.shots: list[Shot] = []

    def move_left(self) -> None:
        if self.x > 0:
            self.x -= 1

    def move_right(self) -> None:
        if self.x < NUM_COLS - 1:
            self.x += 1

    def shoot(self) -> bool:
        """Fire a shot if fewer than two are in flight; return whether one was fired."""
        if len(self.shots) >= _MAX_SHOTS:
            return False
        self.shots.append(Shot(self.x, self.y - 1))
        return True

    def update(self, delta: timedelta) -> None:
        """Advance all shots and drop the finished ones."""
        for shot in self.shots:
            shot.update(delta)
        self.shots = [shot for shot in self.shots if not shot.dead()]

    def detect_hits(self, invaders: Invaders) -> int:
        """Kill invaders struck by live shots; return the points earned."""
        earned = 0
        for shot in self.shots:
            if shot.exploding:
                continue
            points = invaders.kill_invader_at(shot.x, shot.y)
            if points > 0:
                earned += points
                shot.explode()
        return earned

    def draw(self, frame: Frame) -> None:
        frame[self.x][self.y] = "A"
        for shot in self.shots:
            shot.draw(frame)