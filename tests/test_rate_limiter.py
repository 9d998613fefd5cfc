"""Unit tests for the in-memory fixed window limiter."""

import pytest

from cbody_ops.partner.services.rate_limiter import FixedWindowRateLimiter


pytestmark = pytest.mark.unit


class Clock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def limiter(clock):
    return FixedWindowRateLimiter(clock=clock)


class TestFixedWindow:

    def test_allows_up_to_limit(self, limiter):
        results = [limiter.hit("key", 3, 60) for _ in range(3)]

        assert all(result.allowed for result in results)
        assert [result.remaining for result in results] == [2, 1, 0]

    def test_blocks_over_limit_with_retry_after(self, limiter, clock):
        for _ in range(3):
            limiter.hit("key", 3, 60)

        clock.now += 20
        blocked = limiter.hit("key", 3, 60)

        assert blocked.allowed is False
        assert blocked.remaining == 0
        assert blocked.retry_after == 40

    def test_window_reopens_after_reset_time(self, limiter, clock):
        for _ in range(3):
            limiter.hit("key", 3, 60)

        clock.now += 60

        assert limiter.hit("key", 3, 60).allowed is True

    def test_keys_are_independent(self, limiter):
        limiter.hit("a", 1, 60)

        assert limiter.hit("a", 1, 60).allowed is False
        assert limiter.hit("b", 1, 60).allowed is True

    def test_reset_clears_windows(self, limiter):
        limiter.hit("a", 1, 60)
        limiter.reset()

        assert limiter.hit("a", 1, 60).allowed is True
