"""The title screen: a logo scrolling in, then a flashing play button."""

from __future__ import annotations

from collections.abc import Iterable

from .keypad import Key, KeyState
from .sprite import Animation, Sprite

BACKGROUND = "title_bg"
LOGO_START_Y = -80
MASCOT_OFFSET_Y = -40
FLASH_INTERVAL = 30
MASCOT_BLINK_WAIT = 50
FLAME_WAIT = 10
FLAME_FRAMES = (0, 1, 2, 3, 4)
PLAY_FRAME = 0
PLAY_HOVER_FRAME = 1


class TitleScreen:
    """Title screen state, advanced a frame at a time."""

    def __init__(self) -> None:
        self.background = BACKGROUND
        self.logo_y: float = LOGO_START_Y
        self.mascot = Sprite(-50, -80, "mascot")
        self.play_button = Sprite(0, 15, "play_button")
        self.flame1 = Sprite(-58, 19, "flame1")
        self.flame2 = Sprite(87, 4, "flame2")
        self._animations = (
            Animation(self.mascot, MASCOT_BLINK_WAIT, "mascot", (0, 1)),
            Animation(self.flame1, FLAME_WAIT, "flame1", FLAME_FRAMES),
            Animation(self.flame2, FLAME_WAIT, "flame2", FLAME_FRAMES),
        )
        self.play_selected = False
        self.flash_counter = 0
        self.flash_visible = True
        self.finished = False

    @property
    def scrolling(self) -> bool:
        """True while the logo is still moving into place."""
        return self.logo_y < 0

    def step(self, keys: KeyState) -> bool:
        """Play one frame; return False once START leaves the title screen.

        Keys are ignored while the logo scrolls in.
        """
        if self.scrolling:
            self.logo_y += 1
            self.mascot.y = self.logo_y + MASCOT_OFFSET_Y
            self._animate()
            return True

        if keys.pressed(Key.START):
            self.finished = True
            return False

        if keys.pressed(Key.DOWN):
            self.play_selected = True
            self.play_button.show_frame(PLAY_HOVER_FRAME)
            self.play_button.visible = True
        elif keys.pressed(Key.UP):
            self.play_selected = False
            self.play_button.show_frame(PLAY_FRAME)

        if not self.play_selected:
            self.flash_counter += 1
            if self.flash_counter >= FLASH_INTERVAL:
                self.flash_visible = not self.flash_visible
                self.play_button.visible = self.flash_visible
                self.flash_counter = 0

        self._animate()
        return True

    def _animate(self) -> None:
        for animation in self._animations:
            animation.update()


def run_titlescreen(inputs: Iterable[KeyState]) -> TitleScreen:
    """Show the title screen until START is pressed or the inputs run out."""
    screen = TitleScreen()
    for keys in inputs:
        if not screen.step(keys):
            break
    return screen