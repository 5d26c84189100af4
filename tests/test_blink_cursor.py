import pytest

from fluentkit.blink_cursor import INTERVAL, PAUSE_DELAY, BlinkCursor


def test_new_cursor_is_hidden():
    cursor = BlinkCursor()
    assert cursor.visible() is False
    assert cursor.pending == 0


def test_start_shows_cursor_and_schedules_blink():
    cursor = BlinkCursor()
    assert cursor.start(0.0) is True
    assert cursor.visible() is True
    assert cursor.pending == 1


def test_blinks_every_interval():
    cursor = BlinkCursor()
    cursor.start(0.0)
    states = []
    for step in range(1, 5):
        cursor.advance(step * INTERVAL + 0.01)
        states.append(cursor.visible())
    assert states == [False, True, False, True]


def test_advance_before_deadline_changes_nothing():
    cursor = BlinkCursor()
    cursor.start(0.0)
    assert cursor.advance(INTERVAL / 2) is False
    assert cursor.visible() is True


def test_advance_catches_up_over_several_intervals():
    cursor = BlinkCursor()
    cursor.start(0.0)
    assert cursor.advance(2 * INTERVAL + 0.01) is True
    assert cursor.visible() is True
    assert cursor.pending == 1


def test_stop_freezes_blinking():
    cursor = BlinkCursor()
    cursor.start(0.0)
    cursor.stop()
    assert cursor.advance(10.0) is False
    assert cursor.visible() is True
    assert cursor.pending == 0


def test_restart_after_stop_toggles_again():
    cursor = BlinkCursor()
    cursor.start(0.0)
    cursor.stop()
    cursor.advance(10.0)
    assert cursor.start(10.0) is True
    assert cursor.visible() is False


def test_pause_keeps_cursor_visible():
    cursor = BlinkCursor()
    cursor.start(0.0)
    cursor.advance(INTERVAL + 0.01)
    assert cursor.visible() is False
    cursor.pause(1.0)
    assert cursor.visible() is True
    cursor.advance(1.0 + PAUSE_DELAY / 2)
    assert cursor.visible() is True


def test_pause_resumes_blinking_after_delay():
    cursor = BlinkCursor()
    cursor.start(0.0)
    cursor.pause(0.1)
    resume = 0.1 + PAUSE_DELAY
    assert cursor.advance(resume + 0.01) is True
    assert cursor.paused is False
    assert cursor.visible() is False
    # the blink scheduled before the pause is stale
    cursor.advance(INTERVAL + 0.05)
    assert cursor.visible() is False
    cursor.advance(resume + INTERVAL + 0.01)
    assert cursor.visible() is True


def test_start_while_paused_does_not_toggle():
    cursor = BlinkCursor()
    cursor.pause(0.0)
    assert cursor.start(0.0) is False
    assert cursor.pending == 1


@pytest.mark.parametrize("pauses", [1, 3])
def test_repeated_pauses_leave_one_live_blink_loop(pauses):
    cursor = BlinkCursor()
    cursor.start(0.0)
    for i in range(pauses):
        cursor.pause(0.05 * i)
    cursor.advance(5.0)
    live = cursor.epoch
    assert cursor.pending >= 1
    before = cursor.visible()
    cursor.advance(5.0 + INTERVAL + 0.01)
    assert cursor.visible() is not before
    assert cursor.epoch == live + 1