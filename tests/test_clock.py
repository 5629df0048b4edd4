from datetime import timedelta

import pytest

from xf.timing import clock


def test_update_seconds_sets_delta_and_accumulates():
    start_time = clock.curr_time_s()
    start_frame = clock.frame_num()
    clock.update_global_time_seconds(0.5)
    assert clock.delta_s() == 0.5
    assert clock.curr_time_s() - start_time == pytest.approx(0.5)
    assert clock.frame_num() == start_frame + 1


def test_update_duration_is_capped():
    clock.update_global_time(timedelta(seconds=2))
    assert clock.delta_s() == pytest.approx(clock.MAX_DELTA_S)


def test_update_short_duration_is_kept():
    clock.update_global_time(timedelta(milliseconds=10))
    assert clock.delta_s() == pytest.approx(0.01)


def test_frames_count_every_update():
    start_frame = clock.frame_num()
    for _ in range(3):
        clock.update_global_time_seconds(0.0)
    assert clock.frame_num() == start_frame + 3
    assert clock.delta_s() == 0.0