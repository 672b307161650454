"""Decorator that runs a function while holding a lock."""

import functools
from collections.abc import Callable
from typing import TypeVar

from .client import Client
from .retry import RetryStrategy
from .stores import Store

F = TypeVar("F", bound=Callable)


def locked(
    store: Store,
    ttl: float,
    key: str | Callable[..., str] | None = None,
    retry: Callable[[], RetryStrategy] | None = None,
    timeout: float | None = None,
) -> Callable[[F], F]:
    """Decorator to serialize calls to a function through a lock.

    Args:
        store: Storage backend the lock lives in
        ttl: Time-to-live of the lock (seconds)
        key: Lock key, or a function of the call arguments returning one
            (defaults to the function's module and qualified name)
        retry: Factory returning a new RetryStrategy for every call
        timeout: Maximum time to wait for the lock (seconds)

    Raises:
        NotObtainedError: If the lock is held and retries are exhausted

    Example:
        @locked(store, ttl=60, key=lambda account_id: f"billing:{account_id}")
        def charge(account_id):
            ...
    """
    if ttl <= 0:
        raise ValueError(f"ttl must be positive, got {ttl}")

    client = Client(store)

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: object, **kwargs: object) -> object:
            if callable(key):
                lock_key = key(*args, **kwargs)
            elif key is not None:
                lock_key = key
            else:
                lock_key = f"{func.__module__}.{func.__qualname__}"

            # Stateful strategies must not be shared between calls
            strategy = retry() if retry is not None else None

            with client.obtain(lock_key, ttl, strategy, timeout=timeout):
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
