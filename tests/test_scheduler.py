"""Tests for the cancellable callback scheduler."""

import math

import pytest

from portal_platformer.scheduler import Scheduler


class TestScheduler:
    def test_fires_after_delay(self, fake_clock):
        scheduler = Scheduler(fake_clock)
        calls = []
        scheduler.call_later(3.0, lambda: calls.append("reset"))

        fake_clock.advance(2.99)
        assert scheduler.run_due() == 0
        fake_clock.advance(0.01)
        assert scheduler.run_due() == 1
        assert calls == ["reset"]

    def test_fires_once(self, fake_clock):
        scheduler = Scheduler(fake_clock)
        calls = []
        handle = scheduler.call_later(1.0, lambda: calls.append(1))
        fake_clock.advance(5)
        scheduler.run_due()
        scheduler.run_due()
        assert calls == [1]
        assert handle.fired
        assert not handle.pending

    def test_cancelled_never_fires(self, fake_clock):
        scheduler = Scheduler(fake_clock)
        calls = []
        handle = scheduler.call_later(1.0, lambda: calls.append(1))
        assert handle.cancel()
        fake_clock.advance(5)
        assert scheduler.run_due() == 0
        assert calls == []
        assert handle.cancelled

    def test_cancel_after_fire_returns_false(self, fake_clock):
        scheduler = Scheduler(fake_clock)
        handle = scheduler.call_later(0.0, lambda: None)
        scheduler.run_due()
        assert not handle.cancel()

    def test_deadline_order(self, fake_clock):
        scheduler = Scheduler(fake_clock)
        order = []
        scheduler.call_later(2.0, lambda: order.append("late"))
        scheduler.call_later(1.0, lambda: order.append("early"))
        scheduler.call_later(1.0, lambda: order.append("early-2"))
        fake_clock.advance(3)
        scheduler.run_due()
        assert order == ["early", "early-2", "late"]

    def test_explicit_now(self, fake_clock):
        scheduler = Scheduler(fake_clock)
        calls = []
        scheduler.call_later(1.0, lambda: calls.append(1))
        assert scheduler.run_due(now=1.0) == 1

    def test_pending_and_cancel_all(self, fake_clock):
        scheduler = Scheduler(fake_clock)
        a = scheduler.call_later(1.0, lambda: None)
        scheduler.call_later(2.0, lambda: None)
        assert scheduler.pending == 2
        a.cancel()
        assert scheduler.pending == 1
        scheduler.cancel_all()
        assert scheduler.pending == 0
        fake_clock.advance(10)
        assert scheduler.run_due() == 0

    @pytest.mark.parametrize("delay", [-1.0, math.nan])
    def test_rejects_bad_delay(self, fake_clock, delay):
        with pytest.raises(ValueError):
            Scheduler(fake_clock).call_later(delay, lambda: None)
