from boundedcache.cache import MISS, LRUCache, LFUCache, ConcurrentLRUCache
from boundedcache.exceptions import AdvancedError, CacheError, InvalidArgumentError
from boundedcache.memoize import cached, cached_lru, cached_lfu, cached_concurrent_lru
from boundedcache.logging_config import setup_logging

__all__ = [
    "MISS",
    "LRUCache",
    "LFUCache",
    "ConcurrentLRUCache",
    "AdvancedError",
    "CacheError",
    "InvalidArgumentError",
    "cached",
    "cached_lru",
    "cached_lfu",
    "cached_concurrent_lru",
    "setup_logging",
]
