"""Base store interface for distributed locks."""

from abc import ABC, abstractmethod


class Store(ABC):
    """Abstract base class for lock stores.

    Every operation must run as a single atomic step inside the store.
    A client-side read followed by a write is never acceptable: the key
    could expire or change owner in between.

    Stores are responsible for:
    - Setting a key only when it is free
    - Deleting or extending a key only for the token that owns it
    - Managing TTL/expiration
    """

    @abstractmethod
    def acquire(self, key: str, token: str, ttl: float) -> bool:
        """Set key to token if the key is absent or expired.

        Args:
            key: The lock key
            token: Ownership token of the caller
            ttl: Time-to-live in seconds

        Returns:
            True if the key was set, False if it is held
        """
        pass

    @abstractmethod
    def release(self, key: str, token: str) -> bool:
        """Delete the key if it is still owned by token.

        Args:
            key: The lock key
            token: Ownership token of the caller

        Returns:
            True if the key was deleted, False otherwise
        """
        pass

    @abstractmethod
    def refresh(self, key: str, token: str, ttl: float) -> bool:
        """Reset the key's expiry if it is still owned by token.

        Args:
            key: The lock key
            token: Ownership token of the caller
            ttl: New time-to-live in seconds

        Returns:
            True if the expiry was reset, False otherwise
        """
        pass

    @abstractmethod
    def ttl(self, key: str, token: str) -> float | None:
        """Return the remaining lifetime of a key owned by token.

        Args:
            key: The lock key
            token: Ownership token of the caller

        Returns:
            Remaining seconds, or None if the key is absent or not owned by token
        """
        pass
