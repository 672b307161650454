"""Example of sharing a lock between processes through Redis."""

import os
import time
from multiprocessing import Process

from redislock import Client, LimitRetry, LinearBackoff, NotObtainedError
from redislock.stores import RedisStore


def worker(name: str) -> None:
    # Every process builds its own connection
    client = Client(RedisStore.from_url(os.getenv("REDIS_URL")))
    try:
        lock = client.obtain(
            "demo:resource",
            ttl=5,
            retry_strategy=LimitRetry(LinearBackoff(0.1), 5),
        )
    except NotObtainedError:
        print(f"  {name}: gave up")
        return

    with lock:
        print(f"  {name}: working with token {lock.token[:6]}...")
        time.sleep(0.2)
    print(f"  {name}: released")


if __name__ == "__main__":
    print("=" * 60)
    print("Redis lock shared by 4 processes")
    print("=" * 60)

    processes = [Process(target=worker, args=(f"worker-{i}",)) for i in range(4)]
    for process in processes:
        process.start()
    for process in processes:
        process.join()
