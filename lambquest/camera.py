"""A camera that eases towards a target inside world bounds."""

from __future__ import annotations

from dataclasses import dataclass

from .sprite import Point


@dataclass
class Camera:
    x: float = 0
    y: float = 0

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


def update_camera(
    camera: Camera,
    target: Point,
    min_x: float = -80,
    max_x: float = 80,
    min_y: float = -48,
    max_y: float = 48,
    follow_speed: float = 0.1,
) -> None:
    """Move the camera a fraction of the way towards the clamped target."""
    target_x = min(max_x, max(min_x, target.x))
    target_y = min(max_y, max(min_y, target.y))
    camera.x = camera.x + (target_x - camera.x) * follow_speed
    camera.y = camera.y + (target_y - camera.y) * follow_speed