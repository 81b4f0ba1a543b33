from datetime import timedelta

from terminvaders.timer import Timer


def test_new_timer_is_not_ready_and_full():
    timer = Timer.from_millis(50)
    assert timer.duration == timedelta(milliseconds=50)
    assert timer.time_left == timer.duration
    assert timer.ready is False


def test_partial_update_counts_down():
    timer = Timer.from_millis(50)
    timer.update(timedelta(milliseconds=20))
    assert timer.ready is False
    assert timer.time_left == timedelta(milliseconds=50) - timedelta(milliseconds=20)


def test_full_update_makes_ready():
    timer = Timer.from_millis(50)
    timer.update(timedelta(milliseconds=50))
    assert timer.ready is True
    assert timer.time_left == timedelta(0)


def test_overshoot_saturates_at_zero():
    timer = Timer.from_millis(50)
    timer.update(timedelta(seconds=10))
    assert timer.time_left == timedelta(0)
    assert timer.ready is True


def test_reset_restores_duration():
    timer = Timer.from_millis(50)
    timer.update(timedelta(milliseconds=60))
    timer.reset()
    assert timer.ready is False
    assert timer.time_left == timer.duration


def test_fraction_left_tracks_progress():
    timer = Timer.from_millis(2000)
    assert timer.fraction_left == 1.0
    timer.update(timedelta(milliseconds=1500))
    assert timer.fraction_left < 0.5