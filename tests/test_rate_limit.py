"""Tests for request throttling."""

from __future__ import annotations

import asyncio
import time

import pytest

from mtg_pricer.tools.pricing import IntervalRateLimiter, NoopRateLimiter


class FakeClock:
    """Manually advanced clock whose sleep moves time forward."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestIntervalRateLimiter:
    """Tests for IntervalRateLimiter."""

    async def test_first_acquire_is_immediate(self, clock: FakeClock) -> None:
        limiter = IntervalRateLimiter(200, clock=clock, sleep=clock.sleep)
        await limiter.acquire()
        assert clock.sleeps == []

    async def test_back_to_back_acquires_wait_full_interval(self, clock: FakeClock) -> None:
        limiter = IntervalRateLimiter(200, clock=clock, sleep=clock.sleep)
        await limiter.acquire()
        await limiter.acquire()
        await limiter.acquire()
        assert clock.sleeps == pytest.approx([0.2, 0.2])

    async def test_waits_only_for_remaining_time(self, clock: FakeClock) -> None:
        """Time spent since the previous request counts toward the interval."""
        limiter = IntervalRateLimiter(200, clock=clock, sleep=clock.sleep)
        await limiter.acquire()
        clock.now += 0.15
        await limiter.acquire()
        assert clock.sleeps == pytest.approx([0.05])

    async def test_no_wait_after_idle_period(self, clock: FakeClock) -> None:
        """Idle time does not bank extra requests beyond a burst of one."""
        limiter = IntervalRateLimiter(200, clock=clock, sleep=clock.sleep)
        await limiter.acquire()
        clock.now += 5.0
        await limiter.acquire()
        await limiter.acquire()
        assert clock.sleeps == pytest.approx([0.2])

    async def test_concurrent_callers_are_serialized(self, clock: FakeClock) -> None:
        limiter = IntervalRateLimiter(100, clock=clock, sleep=clock.sleep)
        await asyncio.gather(*(limiter.acquire() for _ in range(4)))
        assert clock.sleeps == pytest.approx([0.1, 0.1, 0.1])

    async def test_real_clock(self) -> None:
        limiter = IntervalRateLimiter(50)
        start = time.monotonic()
        for _ in range(3):
            await limiter.acquire()
        assert time.monotonic() - start >= 0.09

    @pytest.mark.parametrize("interval", [0, -10])
    def test_rejects_non_positive_interval(self, interval: int) -> None:
        with pytest.raises(ValueError):
            IntervalRateLimiter(interval)


async def test_noop_limiter_never_waits() -> None:
    limiter = NoopRateLimiter()
    start = time.monotonic()
    for _ in range(100):
        await limiter.acquire()
    assert time.monotonic() - start < 0.5
