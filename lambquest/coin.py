"""An animated coin that reappears at random free spots."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import replace

from .hitbox import Hitbox
from .sprite import Sprite, Animation

HITBOX_SIZE = 16
ANIMATION_WAIT = 10
SPIN_FRAMES = tuple(range(8))
SPAWN_X_RANGE = (-110, 110)
SPAWN_Y_RANGE = (-80, 80)


class Coin:
    """A spinning coin to be collected."""

    def __init__(self, x: float, y: float, sheet: str = "coin_animated") -> None:
        self.sprite = Sprite(x, y, sheet)
        self.hitbox = Hitbox(x, y, HITBOX_SIZE, HITBOX_SIZE)
        self.animation = Animation(self.sprite, ANIMATION_WAIT, sheet, SPIN_FRAMES)

    def update_animation(self) -> None:
        self.animation.update()

    def respawn(self, rng: random.Random, obstacles: Sequence[Hitbox]) -> None:
        """Move the coin to a random spot that overlaps none of the obstacles."""
        while True:
            new_x = rng.randrange(*SPAWN_X_RANGE)
            new_y = rng.randrange(*SPAWN_Y_RANGE)
            candidate = replace(self.hitbox, x=new_x, y=new_y)
            if not candidate.collides_any(obstacles):
                self.sprite.move_to(new_x, new_y)
                self.hitbox = candidate
                return