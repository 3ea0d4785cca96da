"""The game loop: the title screen, then the room over and over."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from .keypad import Key, KeyState
from .room import ROOM_2, ResetRequested, Room, play_room
from .titlescreen import TitleScreen


def run_game(
    inputs: Iterable[KeyState], rng: Optional[random.Random] = None
) -> Optional[Room]:
    """Play the whole game on a sequence of frames.

    Returns the room being played when the inputs ran out, or None if they
    ran out on the title screen. SELECT in a room starts everything over.
    """
    frames = iter(inputs)
    rng = rng if rng is not None else random.Random()

    while True:
        title = TitleScreen()
        last_keys: Optional[KeyState] = None
        for keys in frames:
            if not title.step(keys):
                last_keys = keys
                break
        if last_keys is None:
            return None

        # The first room sees the same frame that closed the title screen.
        pending: list[KeyState] = [last_keys]
        while True:
            try:
                room = play_room(ROOM_2, itertools.chain(pending, frames), rng)
            except ResetRequested:
                next(frames, None)
                break
            if not room.finished:
                return room
            pending = []


def _read_frames(lines: Iterable[str]) -> Iterator[KeyState]:
    """Turn lines of held key names into frames; a key is pressed on the frame it goes down."""
    previous: frozenset[Key] = frozenset()
    for line in lines:
        current = set()
        for token in line.split():
            try:
                current.add(Key(token.lower()))
            except ValueError:
                raise ValueError(f"unknown key: {token}") from None
        held = frozenset(current)
        yield KeyState(held_keys=held, pressed_keys=held - previous)
        previous = held


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lambquest",
        description="Play the game on recorded input: one line per frame, listing held keys.",
    )
    parser.add_argument("input", nargs="?", help="file of frames (default: standard input)")
    parser.add_argument("--seed", type=int, default=0, help="random seed for coin placement")
    args = parser.parse_args(argv)

    try:
        if args.input is None:
            frames = list(_read_frames(sys.stdin))
        else:
            with open(args.input, encoding="utf-8") as handle:
                frames = list(_read_frames(handle))
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    room = run_game(frames, random.Random(args.seed))
    score = room.player.score if room is not None else 0
    print(f"score: {score}")
    return 0