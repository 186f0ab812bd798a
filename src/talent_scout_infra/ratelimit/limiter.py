"""In-process sliding-window rate limiter for external provider calls."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

import structlog

logger = structlog.get_logger()


class SlidingWindowRateLimiter:
    """Allow at most ``max_calls`` per ``window_seconds`` for each key.

    Construct one per process and pass it to whatever needs it. Expired
    timestamps are dropped on every acquire for the touched key and for
    all keys by :meth:`evict_expired`, so memory tracks live usage only.
    """

    def __init__(
        self,
        max_calls: int,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize limits and the clock used to timestamp calls."""
        if max_calls < 1:
            msg = "max_calls must be at least 1"
            raise ValueError(msg)
        self.max_calls = max_calls
        self.window_seconds = window_seconds
        self._clock = clock
        self._calls: dict[str, deque[float]] = {}

    def try_acquire(self, key: str) -> bool:
        """Record a call for ``key`` if under the limit; False when exhausted."""
        now = self._clock()
        calls = self._calls.setdefault(key, deque())
        self._trim(calls, now)
        if len(calls) >= self.max_calls:
            logger.warning(
                "rate_limit_exceeded",
                key=key,
                max_calls=self.max_calls,
                window_seconds=self.window_seconds,
            )
            return False
        calls.append(now)
        return True

    def remaining(self, key: str) -> int:
        """Calls still allowed for ``key`` in the current window."""
        calls = self._calls.get(key)
        if calls is None:
            return self.max_calls
        self._trim(calls, self._clock())
        return self.max_calls - len(calls)

    def evict_expired(self) -> int:
        """Drop expired timestamps and empty keys; return keys removed."""
        now = self._clock()
        empty = []
        for key, calls in self._calls.items():
            self._trim(calls, now)
            if not calls:
                empty.append(key)
        for key in empty:
            del self._calls[key]
        return len(empty)

    @property
    def tracked_keys(self) -> int:
        return len(self._calls)

    def _trim(self, calls: deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while calls and calls[0] <= cutoff:
            calls.popleft()
