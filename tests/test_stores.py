"""Tests for the in-memory store."""

import time

from redislock.stores import MemoryStore


def test_memory_store_acquire():
    """Test that a key can only be acquired while free."""
    store = MemoryStore()

    assert store.acquire("test:1", "token-a", ttl=10) is True
    assert store.acquire("test:1", "token-b", ttl=10) is False

    # Other keys are independent
    assert store.acquire("test:2", "token-b", ttl=10) is True


def test_memory_store_acquire_after_expiry():
    """Test that an expired key can be acquired again."""
    store = MemoryStore()

    assert store.acquire("test:1", "token-a", ttl=0.05)
    time.sleep(0.1)
    assert store.acquire("test:1", "token-b", ttl=10)


def test_memory_store_release():
    """Test that only the owning token can release."""
    store = MemoryStore()
    store.acquire("test:1", "token-a", ttl=10)

    assert store.release("test:1", "token-b") is False
    assert store.release("test:1", "token-a") is True

    # Already gone
    assert store.release("test:1", "token-a") is False


def test_memory_store_refresh():
    """Test that only the owning token can refresh."""
    store = MemoryStore()
    store.acquire("test:1", "token-a", ttl=0.1)

    assert store.refresh("test:1", "token-b", ttl=10) is False
    assert store.refresh("test:1", "token-a", ttl=10) is True

    time.sleep(0.15)

    # Still held thanks to the refresh
    assert store.ttl("test:1", "token-a") > 9


def test_memory_store_ttl():
    """Test TTL reads for owner, other tokens and missing keys."""
    store = MemoryStore()
    store.acquire("test:1", "token-a", ttl=60)

    remaining = store.ttl("test:1", "token-a")
    assert remaining is not None
    assert 59 < remaining <= 60

    assert store.ttl("test:1", "token-b") is None
    assert store.ttl("missing", "token-a") is None


def test_memory_store_set_overwrites():
    """Test that set replaces the owner unconditionally."""
    store = MemoryStore()
    store.acquire("test:1", "token-a", ttl=60)

    store.set("test:1", "ABCD")

    assert store.release("test:1", "token-a") is False
    assert store.release("test:1", "ABCD") is True


def test_memory_store_clear():
    """Test clearing all entries."""
    store = MemoryStore()
    store.acquire("test:1", "token-a", ttl=60)
    store.acquire("test:2", "token-a", ttl=60)

    store.clear()

    assert store.acquire("test:1", "token-b", ttl=60)
    assert store.acquire("test:2", "token-b", ttl=60)
