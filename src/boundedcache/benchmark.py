from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Optional
import logging
import random
import time

from boundedcache.cache import MISS
from boundedcache.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

@dataclass(slots=True)
class WorkloadResult:
    operations: int
    hits: int
    misses: int
    duration: float

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0

    @property
    def miss_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.misses / lookups if lookups else 0.0

def _check(operations: int, key_space: int, put_ratio: float):
    if operations < 0:
        raise InvalidArgumentError(f"operations must not be negative, got {operations}")
    if key_space <= 0:
        raise InvalidArgumentError(f"key_space must be positive, got {key_space}")
    if not 0.0 <= put_ratio <= 1.0:
        raise InvalidArgumentError(f"put_ratio must be within [0, 1], got {put_ratio}")

def _mixed_ops(cache: Any, operations: int, key_space: int, put_ratio: float, rng: random.Random) -> tuple[int, int]:
    hits = misses = 0
    for i in range(operations):
        key = rng.randrange(key_space)
        if rng.random() < put_ratio:
            cache.put(key, f"value{i}")
        elif cache.get(key) is MISS:
            misses += 1
        else:
            hits += 1
    return hits, misses

# (Brief) Random put/get mix against one cache from the calling thread.
#
# (Params)
#   cache - any cache exposing get/put
#   operations (int) - number of calls
#   key_space (int) - keys are drawn from range(key_space)
#   put_ratio (float) - share of puts, the rest are gets
#   seed (int) - makes the mix reproducible
#
def run_workload(cache: Any, operations: int, key_space: int, put_ratio: float = 0.7,
                 seed: Optional[int] = None) -> WorkloadResult:
    _check(operations, key_space, put_ratio)

    start = time.perf_counter()
    hits, misses = _mixed_ops(cache, operations, key_space, put_ratio, random.Random(seed))
    result = WorkloadResult(operations, hits, misses, time.perf_counter() - start)

    logger.info("%d operations on %r took %.4f s, hit rate %.3f",
                operations, cache, result.duration, result.hit_rate)
    return result

# (Brief) Same mix from several threads at once; operations is counted per thread.
# (Usage) Only meaningful for ConcurrentLRUCache. A worker exception is re-raised here.
#
def run_concurrent(cache: Any, threads: int, operations: int, key_space: int,
                   put_ratio: float = 0.7, seed: Optional[int] = None) -> WorkloadResult:
    _check(operations, key_space, put_ratio)
    if threads <= 0:
        raise InvalidArgumentError(f"threads must be positive, got {threads}")

    base = random.Random(seed)
    rngs = [random.Random(base.random()) for _ in range(threads)]

    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=threads) as executor:
        futures = [executor.submit(_mixed_ops, cache, operations, key_space, put_ratio, rng) for rng in rngs]
        counts = [future.result() for future in futures]
    duration = time.perf_counter() - start

    result = WorkloadResult(
        operations=operations * threads,
        hits=sum(h for h, _ in counts),
        misses=sum(m for _, m in counts),
        duration=duration,
    )
    logger.info("%d threads x %d operations on %r took %.4f s, hit rate %.3f",
                threads, operations, cache, duration, result.hit_rate)
    return result
