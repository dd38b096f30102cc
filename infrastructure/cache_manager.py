"""
infrastructure/cache_manager.py

Named, lock-guarded LRU caches shared across the SFloat modules.

The number values cached here are immutable, so entries are handed out
as-is. The value module keeps the per-radix zero/one constants in the
"radix_constants" cache.

Usage:
    from infrastructure.cache_manager import get_cache_manager

    cache_mgr = get_cache_manager()
    if not cache_mgr.is_registered("radix_constants"):
        cache_mgr.register_cache("radix_constants", maxsize=256)

    cache_mgr.set("radix_constants", ("0", 16, 128), value)
    value = cache_mgr.get("radix_constants", ("0", 16, 128))
"""

import threading
from typing import Any, Dict, Hashable, Optional

from cachetools import LRUCache

from component_7_logging_config import get_logger

logger = get_logger(__name__)


class CacheManager:
    """
    Process-wide registry of named LRU caches (singleton).

    Attributes:
        caches: cache name -> cachetools.LRUCache
    """

    _instance: Optional["CacheManager"] = None
    _lock = threading.RLock()

    def __new__(cls) -> "CacheManager":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.caches: Dict[str, LRUCache] = {}
        self._cache_lock = threading.RLock()
        self._initialized = True

    def register_cache(self, name: str, maxsize: int, overwrite: bool = False) -> None:
        """
        Create the LRU cache `name` holding at most `maxsize` entries.

        Raises:
            ValueError: maxsize is not positive, or the name is taken and
                overwrite is False
        """
        if maxsize <= 0:
            raise ValueError(f"Cache size must be positive, got {maxsize}")

        with self._cache_lock:
            if name in self.caches and not overwrite:
                raise ValueError(f"Cache '{name}' is already registered")
            self.caches[name] = LRUCache(maxsize=maxsize)

        logger.debug("Cache registered", extra={"cache": name, "maxsize": maxsize})

    def is_registered(self, name: str) -> bool:
        with self._cache_lock:
            return name in self.caches

    def _cache(self, name: str) -> LRUCache:
        if name not in self.caches:
            raise ValueError(f"Cache '{name}' is not registered")
        return self.caches[name]

    def get(self, name: str, key: Hashable) -> Optional[Any]:
        """Cached value for key, None on a miss (refreshes LRU order on a hit)."""
        with self._cache_lock:
            return self._cache(name).get(key)

    def set(self, name: str, key: Hashable, value: Any) -> None:
        with self._cache_lock:
            self._cache(name)[key] = value


_cache_manager_instance: Optional[CacheManager] = None
_instance_lock = threading.RLock()


def get_cache_manager() -> CacheManager:
    """Global CacheManager, created on first use."""
    global _cache_manager_instance

    if _cache_manager_instance is None:
        with _instance_lock:
            if _cache_manager_instance is None:
                _cache_manager_instance = CacheManager()

    return _cache_manager_instance


def reset_cache_manager() -> None:
    """Drop every cache and the singleton itself (tests only)."""
    global _cache_manager_instance

    with _instance_lock:
        _cache_manager_instance = None
        CacheManager._instance = None
