"""Storage backends for distributed locks."""

from .base import Store
from .memory import MemoryStore

__all__ = ["Store", "MemoryStore", "RedisStore"]


def __getattr__(name: str) -> type:
    if name == "RedisStore":
        from .redis import RedisStore

        return RedisStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
