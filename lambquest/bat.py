"""A bat that drifts towards its target and dashes when close."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import replace
from typing import Optional

from .hitbox import Hitbox
from .sprite import Animation, Point, Sprite

HITBOX_SIZE = 16
DASH_SPEED = 2.0
FLY_SPEED = 0.5
DASH_TRIGGER_DISTANCE = 50
PRE_DASH_DURATION = 30
DASH_DURATION = 40
PAUSE_DURATION = 300
DASH_COOLDOWN = 60
FLY_ANIMATION_WAIT = 10
DASH_ANIMATION_WAIT = 5
FLAP_FRAMES = (0, 1, 2, 3)
IDLE_FRAME = 0


class Bat:
    """An enemy that flies after a target, winds up, dashes and then rests."""

    def __init__(self, x: float, y: float, sheet: str = "bat") -> None:
        self.sheet = sheet
        self.sprite = Sprite(x, y, sheet)
        self.hitbox = Hitbox(x, y, HITBOX_SIZE, HITBOX_SIZE)
        self.is_dashing = False
        self.is_preparing_dash = False
        self.dash_timer = 0
        self.pause_timer = 0
        self.dash_cooldown = 0
        self.pre_dash_timer = 0
        self.dash_direction = Point(0, 0)
        self.dash_speed = DASH_SPEED
        self.fly_speed = FLY_SPEED
        self.animation: Optional[Animation] = None
        self.previous_position = self.sprite.position

    def update(self, target: Point, obstacles: Sequence[Hitbox]) -> None:
        """Advance the bat by one frame."""
        if self.pause_timer > 0:
            self.pause_timer -= 1
            self._ensure_animation(FLY_ANIMATION_WAIT)
            self.animation.update()
            return

        if self.is_preparing_dash:
            self.pre_dash_timer -= 1
            if self.pre_dash_timer <= 0:
                self.is_preparing_dash = False
                self.is_dashing = True
                self.dash_timer = DASH_DURATION
            self._stop_animation()
            return

        dx = target.x - self.sprite.x
        dy = target.y - self.sprite.y
        distance = math.hypot(dx, dy)

        if self.is_dashing:
            if self.dash_timer > 0:
                self.dash_timer -= 1
                self._move(
                    self.dash_direction.x, self.dash_direction.y, self.dash_speed, obstacles
                )
            else:
                self.is_dashing = False
                self.pause_timer = PAUSE_DURATION
            self._ensure_animation(DASH_ANIMATION_WAIT)
            self.previous_position = self.sprite.position
            self.animation.update()
            return

        if distance < DASH_TRIGGER_DISTANCE and self.dash_cooldown <= 0:
            self.is_preparing_dash = True
            self.pre_dash_timer = PRE_DASH_DURATION
            if distance > 0:
                self.dash_direction = Point(dx / distance, dy / distance)
            else:
                self.dash_direction = Point(0, 0)
            self.dash_cooldown = DASH_COOLDOWN
            self._stop_animation()
            return

        if self.dash_cooldown > 0:
            self.dash_cooldown -= 1

        if distance > 1:
            self._move(
                dx / distance * self.fly_speed, dy / distance * self.fly_speed, 1, obstacles
            )

        moved = math.hypot(
            self.sprite.x - self.previous_position.x,
            self.sprite.y - self.previous_position.y,
        )
        if moved > 0.1:
            self._ensure_animation(FLY_ANIMATION_WAIT)
        else:
            self._stop_animation()

        self.previous_position = self.sprite.position
        if self.animation is not None:
            self.animation.update()

    def _ensure_animation(self, wait_updates: int) -> None:
        if self.animation is None:
            self.animation = Animation(self.sprite, wait_updates, self.sheet, FLAP_FRAMES)

    def _move(
        self, dx: float, dy: float, speed: float, obstacles: Sequence[Hitbox]
    ) -> None:
        new_x = self.sprite.x + dx * speed
        new_y = self.sprite.y + dy * speed
        future = replace(self.hitbox, x=new_x, y=new_y)
        if not future.collides_any(obstacles):
            self.sprite.move_to(new_x, new_y)
            self.hitbox = future

    def _stop_animation(self) -> None:
        if self.animation is not None:
            self.animation = None
            self.sprite.sheet = self.sheet
            self.sprite.show_frame(IDLE_FRAME)