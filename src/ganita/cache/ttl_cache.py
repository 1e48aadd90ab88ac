from __future__ import annotations

import logging
import time
import typing as t
from collections import OrderedDict
from dataclasses import dataclass

from ..monitoring import metrics
from ..utils.config import CacheConfig
from .keys import derive_key

_logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0
DEFAULT_MAX_ENTRIES = 1000


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: t.Any = _Missing()


@dataclass
class CacheEntry:
    value: t.Any
    created_at: float


class TTLCache:
    """Bounded TTL cache with insertion-order eviction.

    Keys are derived with :func:`derive_key`, so any JSON-friendly value can be
    used. Expired entries are dropped lazily on ``get``; ``purge_expired``
    sweeps them on demand. When full, the oldest inserted entry goes first,
    regardless of how recently it was read.

    Not thread safe.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        *,
        sort_keys: bool = False,
        name: str = "default",
        clock: t.Callable[[], float] = time.time,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds!r}")
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries!r}")
        # iteration order of the store is the insertion order used for eviction
        self._store: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._ttl = float(ttl_seconds)
        self._max_entries = int(max_entries)
        self._sort_keys = sort_keys
        self._clock = clock
        self.name = name

    @classmethod
    def from_config(cls, config: CacheConfig, *, name: str = "default", **kwargs: t.Any) -> "TTLCache":
        return cls(
            ttl_seconds=config.ttl_seconds,
            max_entries=config.max_entries,
            sort_keys=config.sort_keys,
            name=name,
            **kwargs,
        )

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def _key(self, key: t.Any) -> str:
        return derive_key(key, sort_keys=self._sort_keys)

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at > self._ttl

    def get(self, key: t.Any, default: t.Any = None) -> t.Any:
        skey = self._key(key)
        entry = self._store.get(skey)
        if entry is None:
            metrics.cache_requests_total.inc(cache=self.name, result="miss")
            return default
        if self._expired(entry, self._clock()):
            del self._store[skey]
            _logger.debug("cache %s: expired key %s", self.name, skey)
            metrics.cache_evictions_total.inc(cache=self.name, reason="expired")
            metrics.cache_requests_total.inc(cache=self.name, result="miss")
            return default
        metrics.cache_requests_total.inc(cache=self.name, result="hit")
        return entry.value

    def set(self, key: t.Any, value: t.Any) -> None:
        skey = self._key(key)
        if skey in self._store:
            # refreshed keys move to the tail so they are not evicted early
            self._store.move_to_end(skey)
        elif len(self._store) >= self._max_entries:
            oldest, _ = self._store.popitem(last=False)
            _logger.debug("cache %s: capacity %d reached, evicted %s", self.name, self._max_entries, oldest)
            metrics.cache_evictions_total.inc(cache=self.name, reason="capacity")
        self._store[skey] = CacheEntry(value=value, created_at=self._clock())

    def remove(self, key: t.Any) -> bool:
        return self._store.pop(self._key(key), None) is not None

    def clear(self) -> None:
        self._store.clear()

    def size(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: t.Any) -> bool:
        """Membership without side effects: no metrics, no eviction."""
        entry = self._store.get(self._key(key))
        return entry is not None and not self._expired(entry, self._clock())

    def keys(self) -> t.List[str]:
        """Derived keys, oldest first."""
        return list(self._store)

    def purge_expired(self) -> int:
        now = self._clock()
        expired = [k for k, entry in self._store.items() if self._expired(entry, now)]
        for k in expired:
            del self._store[k]
        if expired:
            _logger.debug("cache %s: purged %d expired entries", self.name, len(expired))
            metrics.cache_evictions_total.inc(len(expired), cache=self.name, reason="expired")
        return len(expired)


def configure(
    ttl_seconds: t.Optional[float] = None,
    max_entries: t.Optional[int] = None,
    **kwargs: t.Any,
) -> TTLCache:
    """Build a cache, falling back to the defaults for options left as None."""
    return TTLCache(
        ttl_seconds=DEFAULT_TTL_SECONDS if ttl_seconds is None else ttl_seconds,
        max_entries=DEFAULT_MAX_ENTRIES if max_entries is None else max_entries,
        **kwargs,
    )
