# lambquest

lambquest models a small top-down arcade game one frame at a time. A lamb
walks around a walled room and collects coins. A bat and a cloak chase it, and
the lamb can attack them. The game state is made of plain Python objects:
sprites, hitboxes, a following camera and keypad state. No screen is needed,
so you can drive every frame from code and check the result.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `lambquest` command

```
lambquest [INPUT] [--seed N]
```

The command plays the whole game on recorded input and prints the final score
as `score: N`.

- `INPUT` is a file with one line per frame. If it is left out, the frames are
  read from standard input.
- `--seed` sets the random seed for coin placement. The default is 0.

Each line lists the keys held during that frame, separated by whitespace. The
key names are `a`, `b`, `select`, `start`, `right`, `left`, `up`, `down`, `l`
and `r`, in any case. A blank line means that no key is held. A key counts as
pressed on the first frame it appears after a frame without it. An unknown key
name is reported as a usage error.

For example:

```
right
right
right a

start
```

### How a game runs

- **Title screen.** The logo scrolls in for 80 frames, and keys are ignored
  during that time. After that, `down` selects the play button and `up`
  deselects it. While the button is not selected it flashes. Pressing `start`
  leaves the title screen.
- **Room.** The room uses the `ROOM_2` layout, and the frame that left the
  title screen is the first frame the room sees. The room ends when `start` is
  pressed, and then a fresh room begins. Pressing `select` starts the game over
  from the title screen.
- **Score.** The score printed is the score in the room that was being played
  when the input ran out. It is 0 if the input ran out on the title screen.

## Using the pieces

- `lambquest.hitbox.Hitbox` is a frozen axis-aligned rectangle. It provides
  `collides(other)` and `collides_any(obstacles)`. Edges that only touch do
  not count as a collision.
- `lambquest.sprite`:
  - `Point` is a position.
  - `Sprite` holds a position, a sheet, a frame and a visibility flag. It
    provides `show_frame` and `move_to`.
  - `Animation` loops a sprite through a sequence of frames. Each frame is held
    for `wait_updates + 1` calls to `update()`.
- `lambquest.keypad`:
  - `Key` enumerates the buttons.
  - `KeyState(held_keys=..., pressed_keys=...)` describes one frame and
    provides `held(key)` and `pressed(key)`. Any pressed key is also counted
    as held.
- `lambquest.camera`: `Camera` and `update_camera(camera, target, ...)`. The
  call moves the camera a fraction (`follow_speed`, 0.1 by default) of the way
  towards the target. The target is first clamped to x in [-80, 80] and y in
  [-48, 48].
- `lambquest.player.Player` is the lamb. Its `update(keys, obstacles)` method
  does the following:
  - moves it one unit per frame, blocked by obstacles;
  - animates a walk in one of four `Direction`s;
  - attacks on `a` for 20 frames, with an `attack_hitbox` in front of the
    lamb.

  `increase_score()` counts collected coins.
- `lambquest.bat.Bat` flies towards its target at speed 0.5. When the target is
  within 50 units, it winds up for 30 frames and dashes for 40 frames. It then
  rests for 300 frames, with a cooldown of 60 frames between dashes.
- `lambquest.cloak.Cloak` walks at speed 0.8 towards a target that is within
  80 units. It stops when the target is within 24 units.
- `lambquest.coin.Coin` spins through eight frames. Its
  `respawn(rng, obstacles)` method moves it to a random spot with x in
  [-110, 110) and y in [-80, 80) that does not overlap any obstacle.
- `lambquest.room`:
  - `RoomLayout` gives the start positions and the obstacles. `ROOM_1` and
    `ROOM_2` are the two layouts.
  - `Room.step(keys)` plays one frame. It returns `False` once `start` ends
    the room, and raises `ResetRequested` when `select` is pressed.
  - `play_room(layout, inputs, rng)` runs a room until `start` is pressed or
    the inputs run out.
  - `Room` also accepts a `play_sound` callback. The callback is called with
    `"coin"` when a coin is collected.
- `lambquest.titlescreen`: `TitleScreen.step(keys)` and
  `run_titlescreen(inputs)`.
- `lambquest.game`: `run_game(inputs, rng)` chains the title screen and the
  room. `main(argv=None)` is the command-line entry point.

A short example:

```python
import random

from lambquest.keypad import Key, KeyState
from lambquest.room import ROOM_2, play_room

inputs = [KeyState(held_keys={Key.RIGHT})] * 30 + [KeyState(pressed_keys={Key.START})]
room = play_room(ROOM_2, inputs, random.Random(1))
print(room.player.sprite.position, room.player.score, room.finished)
```

## What it does not do

lambquest only models the game state. It does not:

- draw anything to a window;
- play any audio, apart from calling a `play_sound` callback that you supply;
- read a live keyboard or gamepad.

Input comes from `KeyState` values or from the `lambquest` command's input
lines. Sprites, sheets and backgrounds are identified only by name.