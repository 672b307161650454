"""Client that obtains locks from a store."""

import logging
import threading
import time

from .exceptions import LockCancelledError, NotObtainedError
from .lock import Lock
from .retry import NoRetry, RetryStrategy
from .stores import Store
from .tokens import generate_token

logger = logging.getLogger(__name__)


class Client:
    """Obtains locks from a shared store.

    A client holds no state besides its store and may be shared between
    threads. Retry strategies must not be shared.

    Args:
        store: Storage backend the locks live in
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    def obtain(
        self,
        key: str,
        ttl: float,
        retry_strategy: RetryStrategy | None = None,
        metadata: object = None,
        *,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> Lock:
        """Try to obtain a lock for the given key.

        Args:
            key: The lock key
            ttl: Time-to-live of the lock (seconds)
            retry_strategy: How to back off while the key is held
                (defaults to NoRetry)
            metadata: Value stored on the returned handle
            timeout: Maximum time to spend waiting between retries (seconds)
            cancel: Event that aborts the wait when set

        Returns:
            The obtained Lock

        Raises:
            NotObtainedError: If the key is held and the strategy stopped
            LockCancelledError: If cancel was set or timeout passed while waiting
        """
        if not key:
            raise ValueError("key must not be empty")
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl}")

        strategy = retry_strategy or NoRetry()
        deadline = time.monotonic() + timeout if timeout is not None else None
        token = generate_token()

        while True:
            if self.store.acquire(key, token, ttl):
                logger.debug("Obtained lock %s for %ss", key, ttl)
                return Lock(self.store, key, token, metadata)

            backoff = strategy.next_backoff()
            if backoff <= 0:
                raise NotObtainedError(key)

            logger.debug("Lock %s is held, retrying in %ss", key, backoff)
            _wait(key, backoff, deadline, cancel)


def _wait(
    key: str,
    backoff: float,
    deadline: float | None,
    cancel: threading.Event | None,
) -> None:
    """Sleep for backoff seconds unless cancel or the deadline comes first."""
    delay = backoff
    if deadline is not None:
        delay = min(delay, deadline - time.monotonic())
        if delay <= 0:
            raise LockCancelledError(key, reason="timed out")

    if cancel is not None:
        if cancel.wait(delay):
            raise LockCancelledError(key)
    else:
        time.sleep(delay)

    if delay < backoff:
        raise LockCancelledError(key, reason="timed out")


def obtain(
    store: Store,
    key: str,
    ttl: float,
    retry_strategy: RetryStrategy | None = None,
    metadata: object = None,
    *,
    timeout: float | None = None,
    cancel: threading.Event | None = None,
) -> Lock:
    """Short-cut for ``Client(store).obtain(...)``."""
    return Client(store).obtain(
        key,
        ttl,
        retry_strategy,
        metadata,
        timeout=timeout,
        cancel=cancel,
    )
