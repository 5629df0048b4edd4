import pytest

from xf.timing import clock
from xf.timing.timer import Timer


def test_new_timer_not_done():
    timer = Timer(1.0)
    assert not timer.is_done()
    assert timer.completion() == 0.0


def test_new_done_timer():
    timer = Timer.new_done(2.0)
    assert timer.is_done()
    assert timer.elapsed_s == timer.duration_s


def test_update_adds_frame_delta():
    clock.update_global_time_seconds(0.25)
    timer = Timer(1.0)
    timer.update()
    assert timer.elapsed_s == pytest.approx(clock.delta_s())
    assert timer.completion() == pytest.approx(clock.delta_s() / 1.0)


def test_update_and_check_restarts_when_done():
    clock.update_global_time_seconds(0.25)
    timer = Timer(0.5)
    assert timer.update_and_check() is False
    assert timer.elapsed_s == pytest.approx(0.25)
    assert timer.update_and_check() is True
    assert timer.elapsed_s == 0.0


def test_reset():
    timer = Timer.new_done(1.0)
    timer.reset()
    assert not timer.is_done()
    assert timer.elapsed_s == 0.0