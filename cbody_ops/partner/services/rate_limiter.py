"""
In-memory fixed window rate limiter

Counters live in this process only and reset on restart. Each key gets a
window that opens on its first hit and closes window_seconds later.
"""

# Python Packages
import logging
import time
from threading import Lock
from typing import NamedTuple

logger = logging.getLogger(__name__)


CLEANUP_INTERVAL_SECONDS = 300





class RateLimitResult(NamedTuple):
    allowed: bool
    limit: int
    remaining: int
    reset_at: float
    retry_after: int = 0





class FixedWindowRateLimiter:

    def __init__(self, clock = time.time):
        self._clock = clock
        self._windows = {}
        self._lock = Lock()
        self._last_cleanup = 0


    def hit(self, key: str, limit: int, window_seconds: int) -> RateLimitResult:
        """
        Count one request against key

        Returns:
            RateLimitResult: allowed is False once limit requests were made in the window
        """

        now = self._clock()
        self._cleanup(now)

        with self._lock:
            window = self._windows.get(key)

            if window is None or window["reset_at"] <= now:
                window = {"count": 0, "reset_at": now + window_seconds}
                self._windows[key] = window

            if window["count"] >= limit:
                return RateLimitResult(
                    allowed = False,
                    limit = limit,
                    remaining = 0,
                    reset_at = window["reset_at"],
                    retry_after = max(int(window["reset_at"] - now + 0.999), 1)
                )

            window["count"] += 1

            return RateLimitResult(
                allowed = True,
                limit = limit,
                remaining = limit - window["count"],
                reset_at = window["reset_at"]
            )


    def _cleanup(self, now: float):
        if now - self._last_cleanup < CLEANUP_INTERVAL_SECONDS:
            return

        with self._lock:
            expired = [key for key, window in self._windows.items() if window["reset_at"] <= now]
            for key in expired:
                del self._windows[key]

            self._last_cleanup = now

        if expired:
            logger.debug("🧹 Cleaned up %s expired rate limit windows", len(expired))


    def reset(self):
        with self._lock:
            self._windows.clear()



rate_limiter = FixedWindowRateLimiter()
