from .keys import derive_key
from .memoize import Memoized, memoize
from .ttl_cache import MISSING, CacheEntry, TTLCache, configure

__all__ = [
    "CacheEntry",
    "MISSING",
    "Memoized",
    "TTLCache",
    "configure",
    "derive_key",
    "memoize",
]
