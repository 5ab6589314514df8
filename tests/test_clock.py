import numpy as np
import pytest

from mazegame.clock import Scheduler, SessionClock, Toast
from mazegame.levels import CHEERS, CHEER_MS, TOAST_MS


def test_recurring_task_fires_every_interval(scheduler):
    calls = []
    scheduler.call_every(1000, lambda: calls.append(scheduler.now))
    scheduler.advance(3500)

    assert calls == [1000, 2000, 3000]
    assert scheduler.now == 3500


def test_one_shot_task_fires_once(scheduler):
    calls = []
    task = scheduler.call_later(500, lambda: calls.append(1))
    scheduler.advance(2000)

    assert calls == [1]
    assert task not in scheduler.tasks


def test_tasks_fire_in_due_order(scheduler):
    order = []
    scheduler.call_every(300, lambda: order.append("b"))
    scheduler.call_later(200, lambda: order.append("a"))
    scheduler.advance(600)

    assert order == ["a", "b", "b"]


def test_cancelled_task_never_fires(scheduler):
    calls = []
    task = scheduler.call_every(100, lambda: calls.append(1))
    scheduler.advance(250)
    task.cancel()
    scheduler.advance(1000)

    assert calls == [1, 1]
    assert not task.active


def test_task_cancelled_by_another_callback(scheduler):
    calls = []
    victim = scheduler.call_every(100, lambda: calls.append("victim"))
    scheduler.call_later(150, victim.cancel)
    scheduler.advance(1000)

    assert calls == ["victim"]


def test_non_positive_interval_is_rejected(scheduler):
    with pytest.raises(ValueError):
        scheduler.call_every(0, lambda: None)


def test_session_clock_counts_seconds(scheduler, rng):
    clock = SessionClock(scheduler, rng)
    clock.start()
    scheduler.advance(4999)

    assert clock.elapsed == 4
    assert clock.running


def test_cheer_every_thirty_seconds(scheduler, rng):
    cheers = []
    clock = SessionClock(scheduler, rng, on_cheer=cheers.append)
    clock.start()
    scheduler.advance(2 * CHEER_MS)

    assert len(cheers) == 2
    assert all(msg in CHEERS for msg in cheers)
    assert clock.elapsed == 60


def test_stop_cancels_both_timers(scheduler, rng):
    cheers = []
    clock = SessionClock(scheduler, rng, on_cheer=cheers.append)
    clock.start()
    scheduler.advance(3000)
    clock.stop()
    scheduler.advance(10 * CHEER_MS)

    assert clock.elapsed == 3
    assert cheers == []
    assert scheduler.tasks == []
    assert not clock.running


def test_restart_does_not_stack_timers(scheduler, rng):
    clock = SessionClock(scheduler, rng)
    clock.start()
    scheduler.advance(2000)
    clock.start()
    scheduler.advance(3000)

    assert clock.elapsed == 3
    assert len(scheduler.tasks) == 2


def test_clock_as_context_manager(scheduler, rng):
    with SessionClock(scheduler, rng) as clock:
        scheduler.advance(2000)
        assert clock.elapsed == 2
    assert scheduler.tasks == []


def test_context_manager_releases_timers_on_error(scheduler, rng):
    with pytest.raises(RuntimeError):
        with SessionClock(scheduler, rng):
            raise RuntimeError("boom")
    assert scheduler.tasks == []


def test_toast_hides_after_timeout():
    scheduler = Scheduler()
    toast = Toast(scheduler)
    toast.show("Keep going!")
    scheduler.advance(TOAST_MS - 1)
    assert toast.text == "Keep going!"
    scheduler.advance(1)
    assert toast.text == ""


def test_new_toast_restarts_timeout():
    scheduler = Scheduler()
    toast = Toast(scheduler)
    toast.show("one")
    scheduler.advance(2000)
    toast.show("two")
    scheduler.advance(2000)
    assert toast.text == "two"
    scheduler.advance(1000)
    assert toast.text == ""


def test_cheer_picks_from_pool_with_given_rng(scheduler):
    cheers = []
    clock = SessionClock(scheduler, np.random.default_rng(0), on_cheer=cheers.append)
    clock.start()
    scheduler.advance(5 * CHEER_MS)
    assert len(cheers) == 5
    assert set(cheers) <= set(CHEERS)
