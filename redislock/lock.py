"""Handle for an obtained lock."""

import logging
from types import TracebackType

from .exceptions import LockNotHeldError, NotObtainedError
from .stores import Store

logger = logging.getLogger(__name__)


class Lock:
    """A lock obtained through a store.

    All operations go through the store's conditional primitives, so a
    handle whose key expired or was taken over simply fails; it never
    affects the new owner.

    Supports the ``with`` statement for automatic release::

        with client.obtain("report", ttl=30):
            build_report()

    Args:
        store: Store holding the lock entry
        key: The lock key
        token: Ownership token written to the store
        metadata: Caller value kept on the handle only
    """

    def __init__(
        self, store: Store, key: str, token: str, metadata: object = None
    ) -> None:
        self._store = store
        self._key = key
        self._token = token
        self._metadata = metadata

    @property
    def key(self) -> str:
        return self._key

    @property
    def token(self) -> str:
        return self._token

    @property
    def metadata(self) -> object:
        return self._metadata

    def ttl(self) -> float:
        """Return the remaining lifetime in seconds, 0.0 if no longer held.

        This is a snapshot; the lock may expire right after the call.
        """
        remaining = self._store.ttl(self._key, self._token)
        return remaining if remaining is not None else 0.0

    def refresh(self, ttl: float) -> None:
        """Extend the lock so it expires ``ttl`` seconds from now.

        Raises:
            NotObtainedError: If the lock expired or is held by someone else
        """
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl}")

        if not self._store.refresh(self._key, self._token, ttl):
            raise NotObtainedError(self._key)
        logger.debug("Refreshed lock %s for %ss", self._key, ttl)

    def release(self) -> None:
        """Release the lock.

        Raises:
            LockNotHeldError: If the lock expired or is held by someone else
        """
        if not self._store.release(self._key, self._token):
            raise LockNotHeldError(self._key)
        logger.debug("Released lock %s", self._key)

    def __enter__(self) -> "Lock":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.release()
        except LockNotHeldError:
            if exc_type is None:
                raise
            # Keep the original exception
            logger.warning(
                "Lock %s was no longer held when leaving block", self._key
            )

    def __repr__(self) -> str:
        return f"Lock(key={self._key!r}, token={self._token[:6]}...)"
