"""Unit tests for the memoizing wrapper."""

import functools

import pytest

from ganita.cache import Memoized, TTLCache, memoize
from ganita.utils.config import CacheConfig


class TestMemoizeFunction:
    """Test memoize on plain functions."""

    def test_same_arguments_call_once(self):
        """Test identical arguments reuse the cached result."""
        calls = []

        def expensive(param):
            calls.append(param)
            return f"result_{param}"

        cached = memoize(expensive)

        assert cached("test") == "result_test"
        assert cached("test") == "result_test"
        assert len(calls) == 1

        assert cached("other") == "result_other"
        assert len(calls) == 2

    def test_decorator_forms(self):
        """Test bare and parametrised decorator usage."""
        counter = {"a": 0, "b": 0}

        @memoize
        def a(x):
            counter["a"] += 1
            return x * 2

        @memoize(config=CacheConfig(max_entries=1))
        def b(x):
            counter["b"] += 1
            return x * 3

        assert a(2) == a(2) == 4
        assert counter["a"] == 1
        assert isinstance(a, Memoized)
        assert a.__name__ == "a"

        b(1)
        b(2)
        b(1)  # evicted by the call with 2
        assert counter["b"] == 3

    def test_shared_cache(self, cache):
        """Test an injected cache stores the composite key."""
        wrapped = memoize(lambda x, y=0: x + y, cache=cache)

        assert wrapped(1, y=2) == 3
        assert cache.size() == 1
        assert wrapped.cache is cache

    def test_kwargs_are_part_of_key(self):
        """Test keyword arguments distinguish calls."""
        calls = []

        @memoize
        def f(x, scale=1):
            calls.append((x, scale))
            return x * scale

        assert f(2, scale=3) == 6
        assert f(2, scale=4) == 8
        assert f(2, scale=3) == 6
        assert len(calls) == 2

    def test_none_results_are_cached(self):
        """Test a None result is not recomputed."""
        calls = []

        @memoize
        def nothing():
            calls.append(1)

        nothing()
        nothing()
        assert len(calls) == 1

    def test_exceptions_are_not_cached(self):
        """Test failed calls run again next time."""
        calls = []

        @memoize
        def flaky(x):
            calls.append(x)
            if len(calls) == 1:
                raise RuntimeError("boom")
            return x

        with pytest.raises(RuntimeError, match="boom"):
            flaky(1)
        assert flaky(1) == 1
        assert len(calls) == 2

    def test_expiry_recomputes(self, clock):
        """Test a call after the TTL window runs the function again."""
        calls = []
        cache = TTLCache(ttl_seconds=5, clock=clock)

        @memoize(cache=cache)
        def f(x):
            calls.append(x)
            return x

        f(1)
        clock.advance(4)
        f(1)
        clock.advance(2)
        f(1)
        assert len(calls) == 2

    def test_cache_clear(self):
        """Test cache_clear forces recomputation."""
        calls = []

        @memoize
        def f(x):
            calls.append(x)
            return x

        f(1)
        f.cache_clear()
        f(1)
        assert len(calls) == 2


class TestMemoizeMethod:
    """Test memoize on methods."""

    def test_method_call_counting(self):
        """Test method results are cached per argument list."""

        class Expensive:
            calls = 0

            @memoize
            def compute(self, param):
                type(self).calls += 1
                return f"result_{param}"

        obj = Expensive()
        assert obj.compute("test") == "result_test"
        assert Expensive.calls == 1
        assert obj.compute("test") == "result_test"
        assert Expensive.calls == 1
        assert obj.compute("other") == "result_other"
        assert Expensive.calls == 2

    def test_owner_class_is_part_of_key(self):
        """Test the owner class name is recorded in the composite key."""
        shared = TTLCache()

        def describe(self, x):
            return f"{type(self).__name__}:{x}"

        class First:
            run = memoize(describe, cache=shared)

        class Second:
            run = memoize(describe, cache=shared)

        assert First().run(1) == "First:1"
        assert Second().run(1) == "Second:1"
        assert shared.size() == 2

    def test_instances_of_same_class_share_results(self):
        """Test two instances of one class hit the same entry."""

        class Counter:
            calls = 0

            @memoize
            def value(self, x):
                Counter.calls += 1
                return x

        Counter().value(5)
        Counter().value(5)
        assert Counter.calls == 1

    def test_bound_method_exposes_cache(self):
        """Test the bound wrapper keeps cache helpers."""

        class Thing:
            @memoize
            def f(self):
                return 1

        thing = Thing()
        assert thing.f.cache is Thing.f.cache
        assert thing.f.__name__ == "f"


class TestMemoizeCopies:
    """Test callers never hold a reference to a cached result."""

    def test_mutating_result_does_not_touch_cache(self):
        """Test changing a returned list leaves later calls intact."""
        f = memoize(lambda n: list(range(n)))

        f(3).append(99)
        second = f(3)
        second.append(100)

        assert f(3) == [0, 1, 2]

    def test_copy_results_can_be_disabled(self):
        """Test copy_results=False hands out the stored object."""
        f = memoize(lambda: [], copy_results=False)
        assert f() is f()

    def test_dict_keyed_arguments(self):
        """Test arguments holding tuple-keyed dicts can be memoized."""
        calls = []

        @memoize
        def count(grid):
            calls.append(grid)
            return len(grid)

        assert count({(0, 0): 1}) == 1
        assert count({(0, 0): 1}) == 1
        assert len(calls) == 1


class TestMemoizeCallables:
    """Test wrapping callables that are not plain functions."""

    def test_partial(self):
        """Test functools.partial targets."""
        calls = []

        def add(a, b):
            calls.append((a, b))
            return a + b

        add_one = memoize(functools.partial(add, 1))

        assert add_one(2) == 3
        assert add_one(2) == 3
        assert len(calls) == 1

    def test_partials_do_not_collide_in_shared_cache(self):
        """Test two partials of one function keep separate entries."""
        shared = TTLCache()

        def add(a, b):
            return a + b

        add_one = memoize(functools.partial(add, 1), cache=shared)
        add_two = memoize(functools.partial(add, 2), cache=shared)

        assert add_one(5) == 6
        assert add_two(5) == 7

    def test_callable_instance(self):
        """Test objects implementing __call__."""

        class Doubler:
            calls = 0

            def __call__(self, x):
                Doubler.calls += 1
                return x * 2

        doubled = memoize(Doubler())
        assert doubled(4) == 8
        assert doubled(4) == 8
        assert Doubler.calls == 1
