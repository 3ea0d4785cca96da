"""Sprites, positions and looping frame animations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Point:
    """A position in world coordinates."""

    x: float
    y: float


@dataclass
class Sprite:
    """A drawable object showing one frame of a tile sheet."""

    x: float
    y: float
    sheet: str
    frame: int = 0
    visible: bool = True
    camera: Optional[Any] = None

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def show_frame(self, frame: int) -> None:
        """Display the given frame of the current sheet."""
        if frame < 0:
            raise ValueError(f"frame must not be negative: {frame}")
        self.frame = frame

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class Animation:
    """Cycles a sprite through frames forever.

    Each frame stays on screen for ``wait_updates + 1`` calls to :meth:`update`;
    the first call shows the first frame.
    """

    def __init__(
        self, sprite: Sprite, wait_updates: int, sheet: str, frames: Sequence[int]
    ) -> None:
        if wait_updates < 0:
            raise ValueError(f"wait_updates must not be negative: {wait_updates}")
        if not frames:
            raise ValueError("an animation needs at least one frame")
        self.sprite = sprite
        self.wait_updates = wait_updates
        self.sheet = sheet
        self.frames = tuple(frames)
        self._index = 0
        self._remaining_wait = 0

    def update(self) -> None:
        """Advance the animation by one tick."""
        if self._remaining_wait:
            self._remaining_wait -= 1
            return
        self._remaining_wait = self.wait_updates
        self.sprite.sheet = self.sheet
        self.sprite.show_frame(self.frames[self._index])
        self._index = (self._index + 1) % len(self.frames)