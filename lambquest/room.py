"""A playable room: the lamb, two enemies, a coin and a following camera."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional

from .bat import Bat
from .camera import Camera, update_camera
from .cloak import Cloak
from .coin import Coin
from .hitbox import Hitbox
from .keypad import Key, KeyState
from .player import Player

BACKGROUND = "room1_bg"
COIN_SOUND = "coin"

DEFAULT_OBSTACLES: tuple[Hitbox, ...] = (
    Hitbox(-60, -70, 30, 30),
    Hitbox(80, 0, 40, 30),
    Hitbox(-256, 0, 10, 256),
    Hitbox(256, 0, 10, 256),
    Hitbox(0, -128, 512, 10),
    Hitbox(0, 128, 512, 10),
)


class ResetRequested(Exception):
    """Raised when the player asks for the whole game to start over."""


@dataclass(frozen=True)
class RoomLayout:
    """Where everything starts in a room, and what blocks movement."""

    cloak_start: tuple[float, float]
    bat_start: tuple[float, float]
    player_start: tuple[float, float] = (0, 0)
    coin_start: tuple[float, float] = (0, 0)
    obstacles: tuple[Hitbox, ...] = DEFAULT_OBSTACLES


ROOM_1 = RoomLayout(cloak_start=(40, 40), bat_start=(-50, 50))
ROOM_2 = RoomLayout(cloak_start=(-40, -40), bat_start=(50, -50))


class Room:
    """The state of one room, advanced a frame at a time."""

    def __init__(
        self,
        layout: RoomLayout,
        rng: Optional[random.Random] = None,
        play_sound: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.layout = layout
        self.rng = rng if rng is not None else random.Random()
        self.play_sound = play_sound
        self.background = BACKGROUND
        self.camera = Camera()
        self.obstacles = layout.obstacles

        self.player = Player(*layout.player_start)
        self.cloak = Cloak(*layout.cloak_start)
        self.bat = Bat(*layout.bat_start)
        self.coin = Coin(*layout.coin_start)
        for sprite in (self.player.sprite, self.cloak.sprite, self.bat.sprite, self.coin.sprite):
            sprite.camera = self.camera

        self.coin.respawn(self.rng, self.obstacles)

        self.cloak_alive = True
        self.bat_alive = True
        self.finished = False
        self.frame = 0

    def step(self, keys: KeyState) -> bool:
        """Play one frame; return False once START ends the room.

        Raises ResetRequested when SELECT is pressed.
        """
        if keys.pressed(Key.START):
            self.finished = True
            return False

        self.coin.update_animation()
        self.player.update(keys, self.obstacles)

        target = self.player.sprite.position
        update_camera(self.camera, target)

        attack = self.player.attack_hitbox

        if self.cloak_alive:
            self.cloak.update(target, self.obstacles)
            if self.player.is_attacking and attack.collides(self.cloak.hitbox):
                self.cloak.sprite.visible = False
                self.cloak_alive = False

        if self.bat_alive:
            self.bat.update(target, self.obstacles)
            if self.player.is_attacking and attack.collides(self.bat.hitbox):
                self.bat.sprite.visible = False
                self.bat_alive = False

        if self.player.hitbox.collides(self.coin.hitbox):
            if self.play_sound is not None:
                self.play_sound(COIN_SOUND)
            self.coin.respawn(self.rng, self.obstacles)
            self.player.increase_score()

        self.frame += 1

        if keys.pressed(Key.SELECT):
            raise ResetRequested()

        return True


def play_room(
    layout: RoomLayout,
    inputs: Iterable[KeyState],
    rng: Optional[random.Random] = None,
) -> Room:
    """Play a room until START is pressed or the inputs run out."""
    room = Room(layout, rng)
    for keys in inputs:
        if not room.step(keys):
            break
    return room