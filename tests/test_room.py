import random

import pytest

from lambquest.hitbox import Hitbox
from lambquest.keypad import Key, KeyState
from lambquest.room import (
    ROOM_1,
    ROOM_2,
    ResetRequested,
    Room,
    RoomLayout,
    play_room,
)
from lambquest.sprite import Point


def held(*keys):
    return KeyState(held_keys=keys)


def pressed(*keys):
    return KeyState(pressed_keys=keys)


def make_room(layout=ROOM_1, seed=1, **kwargs):
    return Room(layout, random.Random(seed), **kwargs)


def test_room_places_actors_from_layout():
    room = make_room(ROOM_2)
    assert room.cloak.sprite.position == Point(-40, -40)
    assert room.bat.sprite.position == Point(50, -50)
    assert room.player.sprite.position == Point(0, 0)


def test_initial_coin_avoids_obstacles():
    for seed in range(20):
        room = make_room(ROOM_1, seed)
        assert not room.coin.hitbox.collides_any(room.obstacles)
        assert room.coin.sprite.position == Point(room.coin.hitbox.x, room.coin.hitbox.y)


def test_all_sprites_follow_the_room_camera():
    room = make_room()
    sprites = [room.player.sprite, room.cloak.sprite, room.bat.sprite, room.coin.sprite]
    assert all(sprite.camera is room.camera for sprite in sprites)


def test_start_ends_room_without_playing_the_frame():
    room = make_room()
    keys = KeyState(held_keys={Key.RIGHT}, pressed_keys={Key.START})
    assert room.step(keys) is False
    assert room.finished
    assert room.player.sprite.position == Point(0, 0)
    assert room.frame == 0


def test_walking_moves_player_one_unit_per_frame():
    room = make_room()
    for _ in range(3):
        assert room.step(held(Key.RIGHT)) is True
    assert room.player.sprite.x == 3
    assert room.frame == 3


def test_camera_eases_towards_player():
    room = make_room()
    for _ in range(10):
        room.step(held(Key.RIGHT))
    assert 0 < room.camera.x < room.player.sprite.x


def test_select_requests_reset():
    room = make_room()
    with pytest.raises(ResetRequested):
        room.step(pressed(Key.SELECT))


def test_attack_defeats_cloak():
    layout = RoomLayout(cloak_start=(0, 20), bat_start=(-100, -100))
    room = make_room(layout)
    room.step(pressed(Key.A))
    assert room.player.is_attacking
    assert not room.cloak_alive
    assert room.cloak.sprite.visible is False
    assert room.bat_alive


def test_attack_defeats_bat():
    layout = RoomLayout(cloak_start=(-100, -100), bat_start=(0, 20))
    room = make_room(layout)
    room.step(pressed(Key.A))
    assert not room.bat_alive
    assert room.bat.sprite.visible is False
    assert room.cloak_alive


def test_dead_cloak_no_longer_moves():
    layout = RoomLayout(cloak_start=(0, 20), bat_start=(-100, -100))
    room = make_room(layout)
    room.step(pressed(Key.A))
    position = room.cloak.sprite.position
    for _ in range(30):
        room.step(KeyState())
    assert room.cloak.sprite.position == position


def test_without_attack_enemies_survive():
    layout = RoomLayout(cloak_start=(0, 20), bat_start=(-100, -100))
    room = make_room(layout)
    room.step(KeyState())
    assert room.cloak_alive and room.bat_alive


def test_coin_pickup_scores_and_plays_sound():
    sounds = []
    room = make_room(play_sound=sounds.append)
    room.coin.sprite.move_to(0, 0)
    room.coin.hitbox = Hitbox(0, 0, 16, 16)
    room.step(KeyState())
    assert room.player.score == 1
    assert sounds == ["coin"]
    assert not room.coin.hitbox.collides_any(room.obstacles)


def test_play_room_stops_at_start():
    inputs = [KeyState()] * 4 + [pressed(Key.START)] + [held(Key.RIGHT)] * 3
    room = play_room(ROOM_1, inputs, random.Random(2))
    assert room.finished
    assert room.frame == 4
    assert room.player.sprite.x == 0


def test_play_room_returns_when_inputs_run_out():
    room = play_room(ROOM_2, [held(Key.DOWN)] * 5, random.Random(2))
    assert not room.finished
    assert room.player.sprite.y == 5


def test_play_room_leaves_remaining_inputs():
    frames = iter([pressed(Key.START), held(Key.LEFT)])
    play_room(ROOM_1, frames, random.Random(0))
    assert list(frames) == [held(Key.LEFT)]