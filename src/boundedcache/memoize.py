from functools import wraps
from typing import Any, Callable, Dict, Tuple
import inspect
import logging

from boundedcache.cache import MISS, LRUCache, LFUCache, ConcurrentLRUCache
from boundedcache.config import config

logger = logging.getLogger(__name__)

def make_key(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> tuple:
    if not kwargs:
        return args
    return args + (MISS,) + tuple(sorted(kwargs.items()))

# (Brief) Builds a decorator that keeps the results of a function in its own cache.
#         A result is looked up by the call arguments and stored after the first call.
# (Usage) Results equal to None are cached as well; exceptions are never cached.
#
# (Params)
#   cache_class (class of Cache) - LRUCache, LFUCache or ConcurrentLRUCache
#   capacity (int) - Falls back to CACHE_DEFAULT_CAPACITY.
#
def cached(cache_class, capacity: int | None = None):
    def decorator(func: Callable):
        cache = cache_class(config.cache.default_capacity if capacity is None else capacity)

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def wrapper(*args, **kwargs):
                key = make_key(args, kwargs)
                result = cache.get(key)
                if result is not MISS: return result

                result = await func(*args, **kwargs)
                cache.put(key, result)
                return result
        else:
            @wraps(func)
            def wrapper(*args, **kwargs):
                key = make_key(args, kwargs)
                result = cache.get(key)
                if result is not MISS: return result

                result = func(*args, **kwargs)
                cache.put(key, result)
                return result

        wrapper.cache = cache
        wrapper.cache_clear = cache.clear
        logger.debug("Memoizing %s with %r", func.__qualname__, cache)
        return wrapper
    return decorator

def cached_lru(capacity: int | None = None):
    return cached(LRUCache, capacity)

def cached_lfu(capacity: int | None = None):
    return cached(LFUCache, capacity)

# Safe for functions called from several threads. Two threads missing the same key both call the function.
def cached_concurrent_lru(capacity: int | None = None):
    return cached(ConcurrentLRUCache, capacity)
