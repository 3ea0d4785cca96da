"""A cloaked enemy that walks towards a nearby target."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import replace
from typing import Optional

from .hitbox import Hitbox
from .player import Direction
from .sprite import Animation, Point, Sprite

HITBOX_SIZE = 16
CHASE_DISTANCE = 80
STOP_DISTANCE = 24
MOVE_SPEED = 0.8
WALK_ANIMATION_WAIT = 8


class Cloak:
    """An enemy that chases a target within range and stops when adjacent."""

    def __init__(self, x: float, y: float, sheet: str = "cloak") -> None:
        self.sheet = sheet
        self.sprite = Sprite(x, y, sheet)
        self.hitbox = Hitbox(x, y, HITBOX_SIZE, HITBOX_SIZE)
        self.direction = Direction.DOWN
        self.chasing_player = False
        self.animation: Optional[Animation] = None

    def update(self, target: Point, obstacles: Sequence[Hitbox]) -> None:
        """Advance the cloak by one frame."""
        dx = target.x - self.sprite.x
        dy = target.y - self.sprite.y
        distance = math.hypot(dx, dy)
        self.chasing_player = distance < CHASE_DISTANCE

        if not self.chasing_player or distance < STOP_DISTANCE:
            self._stand_still()
            return

        dx = dx / distance * MOVE_SPEED
        dy = dy / distance * MOVE_SPEED
        moved = replace(self.hitbox, x=self.sprite.x + dx, y=self.sprite.y + dy)

        if moved.collides_any(obstacles):
            self._stand_still()
            return

        self.sprite.move_to(moved.x, moved.y)
        self.hitbox = moved

        if abs(dx) > abs(dy):
            new_direction = Direction.RIGHT if dx > 0 else Direction.LEFT
        else:
            new_direction = Direction.DOWN if dy > 0 else Direction.UP

        if new_direction != self.direction or self.animation is None:
            self.animation = Animation(
                self.sprite, WALK_ANIMATION_WAIT, self.sheet, new_direction.walk_frames
            )
            self.direction = new_direction
        self.animation.update()

    def _stand_still(self) -> None:
        self.animation = None
        self.sprite.sheet = self.sheet
        self.sprite.show_frame(self.direction.idle_frame)