import asyncio
import time

from boundedcache import LRUCache, LFUCache, ConcurrentLRUCache, MISS, cached_lru, setup_logging
from boundedcache.benchmark import run_workload, run_concurrent

@cached_lru(capacity=256)
async def find_user(user_id: int) -> dict:
    await asyncio.sleep(0.001) # stands in for a slow lookup
    return {"id": user_id, "tag": f"user{user_id}"}

async def main():
    start = time.perf_counter()
    for _ in range(5000):
        user = await find_user(45)
    print(user["tag"])
    end = time.perf_counter()
    print(f"Execution time: {end - start:.4f} seconds")

if __name__ == "__main__":
    setup_logging("INFO")

    lru = LRUCache(3)
    lru.put(1, "Value 1")
    lru.put(2, "Value 2")
    lru.put(3, "Value 3")
    print("Value for key 1:", lru.get(1))
    lru.put(4, "Value 4") # evicts key 2
    print("Key 2 evicted:", lru.get(2) is MISS)

    run_workload(LRUCache(1000), operations=100_000, key_space=100_000, seed=1)
    run_workload(LFUCache(1000), operations=100_000, key_space=100_000, seed=1)
    run_concurrent(ConcurrentLRUCache(100), threads=10, operations=1000, key_space=100, seed=1)

    asyncio.run(main())
