"""Redis Lock - Distributed mutual exclusion on a shared key-value store.

Processes race for a key; the winner holds it until it releases the lock
or the key expires. Only the token that set a key can release or extend it.

Example:
    from redislock.stores import RedisStore

    store = RedisStore.from_url()
    lock = obtain(store, "nightly-report", ttl=30)
    try:
        build_report()
    finally:
        lock.release()
"""

from .client import Client, obtain
from .decorator import locked
from .exceptions import (
    LockCancelledError,
    LockError,
    LockNotHeldError,
    NotObtainedError,
)
from .lock import Lock
from .retry import (
    ExponentialBackoff,
    LimitRetry,
    LinearBackoff,
    NoRetry,
    RetryStrategy,
)
from .stores import MemoryStore, Store
from .tokens import generate_token

__version__ = "0.1.0"

__all__ = [
    "Client",
    "obtain",
    "locked",
    "Lock",
    "LockError",
    "NotObtainedError",
    "LockNotHeldError",
    "LockCancelledError",
    "RetryStrategy",
    "NoRetry",
    "LinearBackoff",
    "ExponentialBackoff",
    "LimitRetry",
    "Store",
    "MemoryStore",
    "generate_token",
]
