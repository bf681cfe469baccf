"""Tests for lazily constructed options and memoization."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from adhoc import ArgumentNullError, Nothing, Option, ValueIsNullError, lazy, some
from hypothesis import given

from tests.strategies import lazy_options, options


class Producer:
    """Counts how often a lazy producer runs."""

    def __init__(self, result: Option[object]) -> None:
        self.result = result
        self.calls = 0

    def __call__(self) -> Option[object]:
        self.calls += 1
        return self.result


class TestLazyConstruction:
    """Tests for lazy() and Option.lazy()."""

    def test_lazy_rejects_null_producer(self):
        """A None producer is a null-argument violation."""
        with pytest.raises(ArgumentNullError) as exc_info:
            lazy(None)
        assert exc_info.value.name == 'producer'

    def test_construction_does_not_run_producer(self):
        """Nothing runs until the option is observed."""
        producer = Producer(some(1))
        opt = lazy(producer)
        assert producer.calls == 0
        assert repr(opt) == 'Lazy(memo=True)'

    def test_classmethod_lazy(self):
        """Option.lazy builds the same deferred option."""
        assert Option.lazy(lambda: some(2), memo=False).to_list() == [2]

    def test_lazy_absent(self):
        """A producer may yield an absent option."""
        assert lazy(lambda: Nothing).is_none()

    def test_producer_returning_none(self):
        """A producer returning a raw None is a null-payload violation."""
        opt = lazy(lambda: None)
        with pytest.raises(ValueIsNullError):
            opt.is_some()

    def test_producer_returning_raw_value(self):
        """A producer must return an Option."""
        opt = lazy(lambda: 5)
        with pytest.raises(TypeError, match='must return an Option'):
            opt.count()

    def test_nested_lazy(self):
        """A producer may return another lazy option."""
        inner = lazy(lambda: some('x'))
        assert lazy(lambda: inner).match(lambda v: v, lambda: '') == 'x'


class TestMemoization:
    """Tests for the memo flag."""

    def test_memo_runs_producer_once(self):
        """With memo, observing twice invokes the producer exactly once."""
        producer = Producer(some(1))
        opt = lazy(producer, memo=True)
        assert opt.is_some()
        assert opt.map(lambda x: x + 1) == some(2)
        assert producer.calls == 1
        assert repr(opt) == 'Some(1)'

    def test_no_memo_runs_producer_per_observation(self):
        """Without memo, each observation re-runs the producer."""
        producer = Producer(some(1))
        opt = lazy(producer, memo=False)
        opt.is_some()
        opt.count()
        opt.to_list()
        assert producer.calls == 3
        assert repr(opt) == 'Lazy(memo=False)'

    def test_no_memo_sees_changing_results(self):
        """Without memo, side effects and changing results are visible."""
        results = iter([some(1), Nothing, some(3)])
        opt = lazy(lambda: next(results), memo=False)
        assert [opt.count(), opt.count(), opt.count()] == [1, 0, 1]

    def test_failed_evaluation_is_not_cached(self):
        """A producer that raises leaves the option unevaluated."""
        attempts = []

        def flaky() -> Option[int]:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError('first call fails')
            return some(7)

        opt = lazy(flaky, memo=True)
        with pytest.raises(RuntimeError):
            opt.is_some()
        assert opt.get_or_else(0) == 7
        assert len(attempts) == 2

    def test_filter_on_unmemoized_lazy_materializes(self):
        """Filtering a non-memo lazy option does not keep re-running the producer."""
        producer = Producer(some(10))
        kept = lazy(producer, memo=False).filter(lambda x: x > 5)
        kept.count()
        kept.count()
        assert producer.calls == 1

    @given(lazy_options(memo=True))
    def test_memo_equals_eager(self, opt):
        """A memoized lazy option behaves like the eager option it wraps."""
        eager = some(opt.get_or_else_unsafe(None)) if opt.is_some() else Nothing
        assert opt == eager

    @given(options)
    def test_lazy_matches_eager(self, eager):
        """Every operation agrees between an eager option and its lazy wrapper."""
        deferred = lazy(lambda: eager, memo=False)
        assert deferred.count() == eager.count()
        assert deferred.to_list() == eager.to_list()
        assert deferred.forall(lambda _: False) == eager.forall(lambda _: False)


class TestConcurrentMemoization:
    """Tests for memoization under concurrent first observation."""

    def test_all_observers_see_one_value(self):
        """Concurrent first observers all end up with the same cached value."""
        calls = []

        def producer() -> Option[object]:
            calls.append(1)
            return some(object())

        opt = lazy(producer, memo=True)
        with ThreadPoolExecutor(max_workers=8) as pool:
            seen = list(pool.map(lambda _: opt.match(lambda v: v, lambda: None), range(64)))

        assert len({id(v) for v in seen}) == 1
        assert opt.match(lambda v: v, lambda: None) is seen[0]
        assert 1 <= len(calls) <= 64
