"""Exceptions for distributed locks."""


class LockError(Exception):
    """Base exception for lock-related errors."""


class NotObtainedError(LockError):
    """Raise when a lock could not be obtained or refreshed."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Lock not obtained for key: {key}")


class LockNotHeldError(LockError):
    """Raise when releasing a lock whose token no longer owns the key.

    The key may have expired or been taken by another holder; the two
    cases cannot be told apart.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Lock not held for key: {key}")


class LockCancelledError(LockError):
    """Raise when a cancel event or timeout fires while waiting to retry."""

    def __init__(self, key: str, reason: str = "cancelled") -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Obtaining lock for key '{key}' {reason}")
