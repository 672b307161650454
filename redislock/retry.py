"""Retry strategies for contended locks.

A strategy answers one question: how long to wait before the next attempt.
A backoff of ``0`` (or less) means stop retrying.

Strategies that keep a counter (``ExponentialBackoff``, ``LimitRetry``) are
not thread-safe. Create a new instance for every ``obtain`` call.
"""

from abc import ABC, abstractmethod

STOP = 0.0


class RetryStrategy(ABC):
    """Abstract base class for retry strategies."""

    @abstractmethod
    def next_backoff(self) -> float:
        """Return the next wait in seconds, or 0 to stop retrying."""
        pass


class NoRetry(RetryStrategy):
    """Never retry."""

    def next_backoff(self) -> float:
        return STOP

    def __repr__(self) -> str:
        return "NoRetry()"


class LinearBackoff(RetryStrategy):
    """Retry forever at a fixed interval.

    Args:
        backoff: Wait between attempts (seconds)
    """

    def __init__(self, backoff: float) -> None:
        if backoff <= 0:
            raise ValueError(f"backoff must be positive, got {backoff}")
        self.backoff = backoff

    def next_backoff(self) -> float:
        return self.backoff

    def __repr__(self) -> str:
        return f"LinearBackoff({self.backoff!r})"


class ExponentialBackoff(RetryStrategy):
    """Retry forever with a doubling interval.

    The n-th call returns ``2 << n`` milliseconds clamped to
    ``[min_backoff, max_backoff]``. With ``min_backoff=0.01`` and
    ``max_backoff=0.3`` this yields 10ms, 10ms, 16ms, 32ms, ... 256ms,
    300ms, 300ms, ...

    Args:
        min_backoff: Smallest wait (seconds)
        max_backoff: Largest wait (seconds), 0 for no cap
    """

    def __init__(self, min_backoff: float, max_backoff: float) -> None:
        if min_backoff <= 0:
            raise ValueError(f"min_backoff must be positive, got {min_backoff}")
        if max_backoff and max_backoff < min_backoff:
            raise ValueError("max_backoff must not be smaller than min_backoff")
        self.min_backoff = min_backoff
        self.max_backoff = max_backoff
        self._attempts = 0

    def next_backoff(self) -> float:
        self._attempts += 1

        # Shift is capped so the candidate stays finite
        backoff = (2 << min(self._attempts, 25)) / 1000

        if backoff < self.min_backoff:
            return self.min_backoff
        if self.max_backoff and backoff > self.max_backoff:
            return self.max_backoff
        return backoff

    def __repr__(self) -> str:
        return f"ExponentialBackoff({self.min_backoff!r}, {self.max_backoff!r})"


class LimitRetry(RetryStrategy):
    """Allow at most ``max_retries`` retries of another strategy.

    Args:
        strategy: The wrapped strategy
        max_retries: Number of calls delegated before stopping
    """

    def __init__(self, strategy: RetryStrategy, max_retries: int) -> None:
        if max_retries < 0:
            raise ValueError(f"max_retries must not be negative, got {max_retries}")
        self.strategy = strategy
        self.max_retries = max_retries
        self._calls = 0

    def next_backoff(self) -> float:
        if self._calls >= self.max_retries:
            return STOP
        self._calls += 1
        return self.strategy.next_backoff()

    def __repr__(self) -> str:
        return f"LimitRetry({self.strategy!r}, {self.max_retries})"
