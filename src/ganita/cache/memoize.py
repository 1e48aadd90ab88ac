from __future__ import annotations

import copy
import functools
import typing as t

from ..utils.config import CacheConfig
from .ttl_cache import MISSING, TTLCache

F = t.TypeVar("F", bound=t.Callable[..., t.Any])


def callable_identity(fn: t.Callable[..., t.Any]) -> str:
    """Stable name for ``fn``; partials and callable objects fall back to their repr."""
    module = getattr(fn, "__module__", None) or type(fn).__module__
    name = getattr(fn, "__qualname__", None) or repr(fn)
    return f"{module}.{name}"


class Memoized:
    """Callable wrapper that stores results in a :class:`TTLCache`.

    The cache key combines the function identity, the owning class name when
    the wrapper is used as a method, and the literal arguments. Instances of
    the same class therefore share cached results. Exceptions are not cached.

    Results are deep-copied on the way in and out unless ``copy_results`` is
    off, so callers never hold a reference to a cache entry.
    """

    def __init__(self, fn: t.Callable[..., t.Any], cache: TTLCache, *, copy_results: bool = True) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._identity = callable_identity(fn)
        self._copy = copy_results
        self.cache = cache

    def make_key(self, instance: t.Any, args: t.Tuple[t.Any, ...], kwargs: t.Dict[str, t.Any]) -> t.Dict[str, t.Any]:
        return {
            "function": self._identity,
            "owner": type(instance).__name__ if instance is not None else None,
            "args": list(args),
            "kwargs": kwargs,
        }

    def _invoke(self, instance: t.Any, args: t.Tuple[t.Any, ...], kwargs: t.Dict[str, t.Any]) -> t.Any:
        key = self.make_key(instance, args, kwargs)
        cached = self.cache.get(key, MISSING)
        if cached is not MISSING:
            return copy.deepcopy(cached) if self._copy else cached
        if instance is None:
            result = self._fn(*args, **kwargs)
        else:
            result = self._fn(instance, *args, **kwargs)
        self.cache.set(key, copy.deepcopy(result) if self._copy else result)
        return result

    def __call__(self, *args: t.Any, **kwargs: t.Any) -> t.Any:
        return self._invoke(None, args, kwargs)

    def __get__(self, instance: t.Any, owner: t.Optional[type] = None) -> t.Any:
        if instance is None:
            return self

        def bound(*args: t.Any, **kwargs: t.Any) -> t.Any:
            return self._invoke(instance, args, kwargs)

        functools.update_wrapper(bound, self._fn)
        bound.cache = self.cache  # type: ignore[attr-defined]
        bound.cache_clear = self.cache_clear  # type: ignore[attr-defined]
        return bound

    def cache_clear(self) -> None:
        self.cache.clear()


def memoize(
    fn: t.Optional[t.Callable[..., t.Any]] = None,
    *,
    cache: t.Optional[TTLCache] = None,
    config: t.Optional[CacheConfig] = None,
    copy_results: bool = True,
) -> t.Any:
    """Wrap ``fn`` so repeated calls with the same arguments hit the cache.

    Usable directly (``memoize(fn, cache=c)``) or as a decorator with or
    without arguments. Without an explicit cache, a private one is built from
    ``config`` (or the defaults). Pass ``copy_results=False`` for results that
    are immutable or cannot be deep-copied.
    """

    def wrap(target: t.Callable[..., t.Any]) -> Memoized:
        own_cache = cache
        if own_cache is None:
            own_cache = TTLCache.from_config(config or CacheConfig(), name=callable_identity(target))
        return Memoized(target, own_cache, copy_results=copy_results)

    if fn is not None:
        return wrap(fn)
    return wrap
