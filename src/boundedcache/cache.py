from collections import OrderedDict, defaultdict
from threading import Lock
from typing import Any, Hashable, List
import logging

from boundedcache.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

class _Miss:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISS"

    def __bool__(self):
        return False

# Returned by get() for absent keys. Never equal to a stored value, None included.
MISS: Any = _Miss()

def check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(f"capacity must be an integer, got {type(capacity).__name__}")
    if capacity < 0:
        raise InvalidArgumentError(f"capacity must not be negative, got {capacity}")
    return capacity

class _MappingMixin:
    def __getitem__(self, key: Hashable) -> Any:
        value = self.get(key)
        if value is MISS:
            raise KeyError(key)
        return value

    def __setitem__(self, key: Hashable, value: Any):
        self.put(key, value)

    def __len__(self):
        return self.size()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __repr__(self):
        return f"{type(self).__name__}(capacity={self._capacity}, size={self.size()})"

# Evicts the least recently used entry. Not thread-safe.
class LRUCache(_MappingMixin):
    def __init__(self, capacity: int):
        self._capacity = check_capacity(capacity)
        self.cache = OrderedDict() # oldest first
        logger.debug("Created LRUCache with capacity %d", self._capacity)

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        if key not in self.cache:
            return default
        self.cache.move_to_end(key)
        return self.cache[key]

    def put(self, key: Hashable, value: Any) -> None:
        if self._capacity == 0:
            return

        if key in self.cache:
            self.cache[key] = value
            self.cache.move_to_end(key)
            return

        if len(self.cache) >= self._capacity:
            evicted, _ = self.cache.popitem(last=False)
            logger.debug("LRU evicted %r", evicted)
        self.cache[key] = value

    def size(self) -> int:
        return len(self.cache)

    def clear(self):
        self.cache.clear()

    def __contains__(self, key):
        return key in self.cache

# Evicts the least frequently used entry, the least recently used one among equal frequencies.
# Not thread-safe.
class LFUCache(_MappingMixin):
    def __init__(self, capacity: int):
        self._capacity = check_capacity(capacity)
        self.key_to_val = {}  # key -> value
        self.key_to_freq = {} # key -> freq
        self.freq_to_keys = defaultdict(OrderedDict) # freq -> OrderedDict of keys, oldest first
        self.min_freq = 0
        logger.debug("Created LFUCache with capacity %d", self._capacity)

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        if key not in self.key_to_val:
            return default

        self._increase_freq(key)
        return self.key_to_val[key]

    def put(self, key: Hashable, value: Any) -> None:
        if self._capacity <= 0:
            return

        if key in self.key_to_val:
            self._increase_freq(key)
            self.key_to_val[key] = value
            return

        if len(self.key_to_val) >= self._capacity:
            self._evict()

        self.key_to_val[key] = value
        self.key_to_freq[key] = 1
        self.freq_to_keys[1][key] = None
        self.min_freq = 1

    def frequency(self, key: Hashable) -> int:
        return self.key_to_freq.get(key, 0)

    def size(self) -> int:
        return len(self.key_to_val)

    def clear(self):
        self.key_to_val.clear()
        self.key_to_freq.clear()
        self.freq_to_keys.clear()
        self.min_freq = 0

    def __contains__(self, key):
        return key in self.key_to_val

    # Only an emptied minimum bucket moves min_freq; higher buckets never hold the minimum.
    def _increase_freq(self, key):
        freq = self.key_to_freq[key]
        del self.freq_to_keys[freq][key]
        if not self.freq_to_keys[freq]:
            del self.freq_to_keys[freq]
            if freq == self.min_freq:
                self.min_freq += 1

        self.key_to_freq[key] = freq + 1
        self.freq_to_keys[freq + 1][key] = None

    def _evict(self):
        key, _ = self.freq_to_keys[self.min_freq].popitem(last=False)
        if not self.freq_to_keys[self.min_freq]:
            del self.freq_to_keys[self.min_freq]

        del self.key_to_val[key]
        del self.key_to_freq[key]
        logger.debug("LFU evicted %r", key)

# (Brief) Thread-safe LRU cache.
# (Usage) Share one instance between threads without external locking.
#
# Reads fetch the value without the lock; moving the key in the recency order,
# inserting and evicting always happen under one lock, so puts are linearizable
# and a full cache evicts exactly one key per insert.
#
class ConcurrentLRUCache(_MappingMixin):
    def __init__(self, capacity: int):
        self._capacity = check_capacity(capacity)
        self._values = {}
        self._order = OrderedDict() # key -> None, oldest first
        self._lock = Lock()
        logger.debug("Created ConcurrentLRUCache with capacity %d", self._capacity)

    def get(self, key: Hashable, default: Any = MISS) -> Any:
        value = self._values.get(key, MISS)
        if value is MISS:
            return default

        with self._lock:
            # May have been evicted since the read.
            if key in self._order:
                self._order.move_to_end(key)
        return value

    def put(self, key: Hashable, value: Any) -> None:
        if self._capacity == 0:
            return

        evicted = MISS
        with self._lock:
            if key in self._values:
                self._values[key] = value
                self._order.move_to_end(key)
                return

            if len(self._values) >= self._capacity:
                evicted, _ = self._order.popitem(last=False)
                del self._values[evicted]

            self._values[key] = value
            self._order[key] = None

        if evicted is not MISS:
            logger.debug("Concurrent LRU evicted %r", evicted)

    def size(self) -> int:
        return len(self._values)

    def keys(self) -> List[Hashable]:
        with self._lock:
            return list(self._order)

    def clear(self):
        with self._lock:
            self._values.clear()
            self._order.clear()

    def __contains__(self, key):
        return key in self._values
