"""Keys and per-frame key state."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field


class Key(enum.Enum):
    A = "a"
    B = "b"
    SELECT = "select"
    START = "start"
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    L = "l"
    R = "r"


@dataclass(frozen=True)
class KeyState:
    """The keys held and newly pressed during one frame.

    A key pressed this frame is also held.
    """

    held_keys: frozenset[Key] = field(default_factory=frozenset)
    pressed_keys: frozenset[Key] = field(default_factory=frozenset)

    def __init__(
        self, held_keys: Iterable[Key] = (), pressed_keys: Iterable[Key] = ()
    ) -> None:
        pressed = frozenset(pressed_keys)
        object.__setattr__(self, "pressed_keys", pressed)
        object.__setattr__(self, "held_keys", frozenset(held_keys) | pressed)

    def held(self, key: Key) -> bool:
        return key in self.held_keys

    def pressed(self, key: Key) -> bool:
        return key in self.pressed_keys