"""The player character: walking, attacking and scoring."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import replace
from typing import Optional

from .hitbox import Hitbox
from .keypad import Key, KeyState
from .sprite import Animation, Sprite

HITBOX_SIZE = 16
ATTACK_DURATION = 20
WALK_ANIMATION_WAIT = 6


class Direction(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    @property
    def idle_frame(self) -> int:
        """First frame of this direction's row in a walking sheet."""
        return _IDLE_FRAMES[self]

    @property
    def attack_frame(self) -> int:
        return _ATTACK_FRAMES[self]

    @property
    def walk_frames(self) -> tuple[int, ...]:
        start = self.idle_frame
        return tuple(range(start, start + 4))


_IDLE_FRAMES = {Direction.LEFT: 8, Direction.RIGHT: 12, Direction.UP: 4, Direction.DOWN: 0}
_ATTACK_FRAMES = {Direction.UP: 1, Direction.DOWN: 0, Direction.LEFT: 2, Direction.RIGHT: 3}


class Player:
    """The lamb controlled by the keypad."""

    def __init__(
        self, x: float, y: float, idle_sheet: str = "lamb", attack_sheet: str = "lambattk"
    ) -> None:
        self.idle_sheet = idle_sheet
        self.attack_sheet = attack_sheet
        self.sprite = Sprite(x, y, idle_sheet)
        self.hitbox = Hitbox(x, y, HITBOX_SIZE, HITBOX_SIZE)
        self.attack_hitbox = Hitbox(x, y, HITBOX_SIZE, HITBOX_SIZE)
        self.direction = Direction.DOWN
        self.score = 0
        self.is_attacking = False
        self.attack_timer = 0
        self.animation: Optional[Animation] = None

    def update(self, keys: KeyState, obstacles: Sequence[Hitbox]) -> None:
        """Advance the player by one frame."""
        if self.is_attacking:
            self._update_attack_hitbox()
            if self.attack_timer > 0:
                self.attack_timer -= 1
            else:
                self.is_attacking = False
                self._show(self.idle_sheet, self.direction.idle_frame)
            return

        if keys.pressed(Key.A):
            self._attack()
            return

        left, right = keys.held(Key.LEFT), keys.held(Key.RIGHT)
        up, down = keys.held(Key.UP), keys.held(Key.DOWN)
        if (left and right) or (up and down):
            left = right = up = down = False

        new_direction = self.direction
        if up:
            new_direction = Direction.UP
        if down:
            new_direction = Direction.DOWN
        if left:
            new_direction = Direction.LEFT
        if right:
            new_direction = Direction.RIGHT

        dx = int(right) - int(left)
        dy = int(down) - int(up)

        if dx == 0 and dy == 0:
            self._stand_still()
            return

        new_x, new_y = self.sprite.x + dx, self.sprite.y + dy
        if replace(self.hitbox, x=new_x, y=new_y).collides_any(obstacles):
            self._stand_still()
            return

        self.sprite.move_to(new_x, new_y)
        self.hitbox = replace(self.hitbox, x=new_x, y=new_y)

        if new_direction != self.direction or self.animation is None:
            self.animation = Animation(
                self.sprite, WALK_ANIMATION_WAIT, self.idle_sheet, new_direction.walk_frames
            )
            self.direction = new_direction
        self.animation.update()

    def increase_score(self) -> None:
        self.score += 1

    def _stand_still(self) -> None:
        self.animation = None
        self._show(self.idle_sheet, self.direction.idle_frame)

    def _show(self, sheet: str, frame: int) -> None:
        self.sprite.sheet = sheet
        self.sprite.show_frame(frame)

    def _attack(self) -> None:
        self.is_attacking = True
        self.attack_timer = ATTACK_DURATION
        self._update_attack_hitbox()
        self._show(self.attack_sheet, self.direction.attack_frame)

    def _update_attack_hitbox(self) -> None:
        ax, ay = self.sprite.x, self.sprite.y
        if self.direction is Direction.LEFT:
            ax -= HITBOX_SIZE
        elif self.direction is Direction.RIGHT:
            ax += HITBOX_SIZE
        elif self.direction is Direction.UP:
            ay -= HITBOX_SIZE
        else:
            ay += HITBOX_SIZE
        self.attack_hitbox = Hitbox(ax, ay, HITBOX_SIZE, HITBOX_SIZE)