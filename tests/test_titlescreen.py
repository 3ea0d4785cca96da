from lambquest.keypad import Key, KeyState
from lambquest.titlescreen import (
    FLASH_INTERVAL,
    LOGO_START_Y,
    MASCOT_OFFSET_Y,
    TitleScreen,
    run_titlescreen,
)

SCROLL_FRAMES = -LOGO_START_Y


def pressed(*keys):
    return KeyState(pressed_keys=keys)


def scrolled_screen():
    screen = TitleScreen()
    for _ in range(SCROLL_FRAMES):
        screen.step(KeyState())
    return screen


def test_logo_starts_offscreen_and_scrolls_in():
    screen = TitleScreen()
    assert screen.logo_y == LOGO_START_Y
    assert screen.scrolling
    screen.step(KeyState())
    assert screen.logo_y == LOGO_START_Y + 1


def test_mascot_follows_logo():
    screen = TitleScreen()
    for _ in range(10):
        screen.step(KeyState())
        assert screen.mascot.y == screen.logo_y + MASCOT_OFFSET_Y


def test_scroll_finishes_at_zero():
    screen = scrolled_screen()
    assert screen.logo_y == 0
    assert not screen.scrolling


def test_start_is_ignored_while_scrolling():
    screen = TitleScreen()
    for _ in range(SCROLL_FRAMES):
        assert screen.step(pressed(Key.START)) is True
    assert not screen.finished
    assert screen.step(pressed(Key.START)) is False
    assert screen.finished


def test_play_button_flashes_when_not_selected():
    screen = scrolled_screen()
    for _ in range(FLASH_INTERVAL - 1):
        screen.step(KeyState())
    assert screen.play_button.visible
    screen.step(KeyState())
    assert not screen.play_button.visible
    for _ in range(FLASH_INTERVAL):
        screen.step(KeyState())
    assert screen.play_button.visible


def test_down_selects_play_and_stops_flashing():
    screen = scrolled_screen()
    screen.step(pressed(Key.DOWN))
    assert screen.play_selected
    assert screen.play_button.frame == 1
    for _ in range(FLASH_INTERVAL * 3):
        screen.step(KeyState())
        assert screen.play_button.visible


def test_up_deselects_play():
    screen = scrolled_screen()
    screen.step(pressed(Key.DOWN))
    screen.step(pressed(Key.UP))
    assert not screen.play_selected
    assert screen.play_button.frame == 0


def test_mascot_blinks_between_two_frames():
    screen = TitleScreen()
    seen = set()
    for _ in range(200):
        screen.step(KeyState())
        seen.add(screen.mascot.frame)
    assert seen == {0, 1}


def test_run_titlescreen_stops_at_start():
    frames = iter([KeyState()] * SCROLL_FRAMES + [pressed(Key.START), KeyState()])
    screen = run_titlescreen(frames)
    assert screen.finished
    assert list(frames) == [KeyState()]


def test_run_titlescreen_without_start():
    screen = run_titlescreen([KeyState()] * 5)
    assert not screen.finished
    assert screen.logo_y == LOGO_START_Y + 5