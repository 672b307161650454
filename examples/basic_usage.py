"""Basic usage examples for redislock."""

import time

from redislock import (
    Client,
    ExponentialBackoff,
    LimitRetry,
    MemoryStore,
    NotObtainedError,
    locked,
)

store = MemoryStore()
client = Client(store)


# Example 3: Decorator
@locked(store, ttl=30, key=lambda account_id: f"billing:{account_id}")
def charge(account_id):
    """Only one charge per account at a time."""
    print(f"💳 Charging account {account_id}")
    return {"account_id": account_id, "status": "charged"}


if __name__ == "__main__":
    print("=" * 60)
    print("Example 1: Obtain and release")
    print("=" * 60)

    lock = client.obtain("nightly-report", ttl=10, metadata={"owner": "cron"})
    print(f"Obtained {lock!r}, ttl={lock.ttl():.1f}s, metadata={lock.metadata}")

    # A second caller is turned away
    try:
        client.obtain("nightly-report", ttl=10)
    except NotObtainedError as e:
        print(f"❌ Error: {e}")

    lock.refresh(60)
    print(f"Refreshed, ttl={lock.ttl():.1f}s")
    lock.release()
    print("Released\n")

    print("=" * 60)
    print("Example 2: Retry with backoff")
    print("=" * 60)

    # Someone else holds the key for 200ms
    store.set("nightly-report", "someone-else", ttl=0.2)

    started = time.monotonic()
    with client.obtain(
        "nightly-report",
        ttl=10,
        retry_strategy=LimitRetry(ExponentialBackoff(0.01, 0.1), 20),
    ):
        print(f"Obtained after {time.monotonic() - started:.2f}s")
    print()

    print("=" * 60)
    print("Example 3: Decorator")
    print("=" * 60)

    print(f"Result: {charge(account_id=123)}")
