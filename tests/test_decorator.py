"""Tests for the locked decorator."""

import threading
import time

from redislock import LimitRetry, LinearBackoff, MemoryStore, NotObtainedError, locked


def test_lock_held_during_call():
    """Test that the key is held while the function runs."""
    store = MemoryStore()

    @locked(store, ttl=10, key="jobs:report")
    def build_report():
        # Someone else can't take the key now
        assert store.acquire("jobs:report", "other", ttl=10) is False
        return {"rows": 3}

    assert build_report() == {"rows": 3}

    # Released afterwards
    assert store.acquire("jobs:report", "other", ttl=10) is True


def test_lock_released_on_exception():
    """Test that the lock is released when the function raises."""
    store = MemoryStore()

    @locked(store, ttl=10, key="jobs:report")
    def failing_function():
        raise ValueError("First call fails")

    try:
        failing_function()
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

    assert store.acquire("jobs:report", "other", ttl=10) is True


def test_default_key():
    """Test that the default key is the function's qualified name."""
    store = MemoryStore()

    @locked(store, ttl=10)
    def sync_accounts():
        return "done"

    store.set(f"{__name__}.{sync_accounts.__qualname__}", "ABCD")

    try:
        sync_accounts()
        assert False, "Should have raised NotObtainedError"
    except NotObtainedError:
        pass


def test_custom_key_function():
    """Test using a key derived from the call arguments."""
    store = MemoryStore()
    store.set("billing:1", "ABCD")

    @locked(store, ttl=10, key=lambda account_id, amount: f"billing:{account_id}")
    def charge(account_id, amount):
        return amount

    # Different account is free
    assert charge(2, 100) == 100

    try:
        charge(1, amount=100)
        assert False, "Should have raised NotObtainedError"
    except NotObtainedError as e:
        assert e.key == "billing:1"


def test_retry_factory_serializes_calls():
    """Test that concurrent calls wait for each other with retries."""
    store = MemoryStore()
    active = 0
    max_active = 0
    counter_lock = threading.Lock()

    @locked(
        store,
        ttl=10,
        key="counter",
        retry=lambda: LimitRetry(LinearBackoff(0.005), 1000),
    )
    def work():
        nonlocal active, max_active
        with counter_lock:
            active += 1
            max_active = max(max_active, active)
        time.sleep(0.01)
        with counter_lock:
            active -= 1

    threads = [threading.Thread(target=work) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert max_active == 1


def test_invalid_ttl():
    """Test that a non-positive ttl is rejected at decoration time."""
    try:
        locked(MemoryStore(), ttl=0)
        assert False, "Should have raised ValueError"
    except ValueError:
        pass
