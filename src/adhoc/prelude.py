"""Function-style spelling of the Option API.

Every function forwards to an `Option` method or to a generic function in
`adhoc.typeclass` with the Option witnesses filled in. Nothing here adds
behaviour.

Example:
    ```python
    from adhoc.instances import TInt
    from adhoc.prelude import add_opt, map_opt, some

    map_opt(some(2), lambda x: x + 1)
    # Some(3)
    add_opt(TInt, some(3), some(4))
    # Some(7)
    ```
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from adhoc import typeclass
from adhoc.instances.option import MOption
from adhoc.option import Option, lazy, optional, some
from adhoc.typeclass.core import Unit

__all__ = [
    'action_opt',
    'add_opt',
    'apply2_opt',
    'apply_curried_opt',
    'apply_opt',
    'apply_partial_opt',
    'biexists_opt',
    'bifold_opt',
    'biforall_opt',
    'bimap_opt',
    'bind_opt',
    'count_opt',
    'difference_opt',
    'divide_opt',
    'exists_opt',
    'filter_opt',
    'fold_opt',
    'forall_opt',
    'get_or_else_opt',
    'get_or_else_unsafe_opt',
    'if_none_opt',
    'if_some_opt',
    'is_none',
    'is_some',
    'lazy',
    'map_opt',
    'match_action_opt',
    'match_all',
    'match_opt',
    'match_unsafe_opt',
    'optional',
    'parmap_opt',
    'product_opt',
    'some',
    'somes',
    'to_array_opt',
    'to_list_opt',
]

_EMPTY = object()


# --- Numeric lifts ---


def difference_opt[T](DIFF: Any, lhs: Option[T], rhs: Option[T]) -> Option[T]:  # noqa: N803
    """`lhs - rhs` with the Difference witness `DIFF`; absent if either side is."""
    return typeclass.difference(DIFF, MOption, lhs, rhs)


def product_opt[T](PROD: Any, lhs: Option[T], rhs: Option[T]) -> Option[T]:  # noqa: N803
    """`lhs * rhs` with the Product witness `PROD`; absent if either side is."""
    return typeclass.product(PROD, MOption, lhs, rhs)


def divide_opt[T](DIV: Any, lhs: Option[T], rhs: Option[T]) -> Option[T]:  # noqa: N803
    """`lhs / rhs` with the Divisible witness `DIV`; absent if either side is."""
    return typeclass.divide(DIV, MOption, lhs, rhs)


def add_opt[T](ADD: Any, lhs: Option[T], rhs: Option[T]) -> Option[T]:  # noqa: N803
    """`lhs + rhs` with the Addition witness `ADD`; absent if either side is."""
    return typeclass.add(ADD, MOption, lhs, rhs)


# --- State ---


def is_some(value: Option[Any]) -> bool:
    return value.is_some()


def is_none(value: Option[Any]) -> bool:
    return value.is_none()


# --- Extraction ---


def if_some_opt[T](option: Option[T], action: Callable[[T], Any]) -> Unit:
    return option.if_some(action)


def if_none_opt(option: Option[Any], action: Callable[[], Any]) -> Unit:
    return option.if_none(action)


def get_or_else_opt[T](option: Option[T], fallback: T | Callable[[], T]) -> T:
    return option.get_or_else(fallback)


def get_or_else_unsafe_opt[T](option: Option[T], fallback: T | Callable[[], T | None] | None) -> T | None:
    return option.get_or_else_unsafe(fallback)


def match_opt[T, R](option: Option[T], some: Callable[[T], R], none: Callable[[], R]) -> R:
    return option.match(some, none)


def match_unsafe_opt[T, R](option: Option[T], some: Callable[[T], R | None], none: Callable[[], R | None]) -> R | None:
    return option.match_unsafe(some, none)


def match_action_opt[T](option: Option[T], some: Callable[[T], Any], none: Callable[[], Any]) -> Unit:
    return option.match_action(some, none)


# --- Apply ---


def apply_opt(mf: Option[Callable[[Any], Any]], ma: Option[Any]) -> Option[Any]:
    """Apply an optional 1-ary function to an optional argument."""
    return typeclass.apply(MOption, MOption, MOption, mf, ma)


def apply2_opt(mf: Option[Callable[[Any, Any], Any]], ma: Option[Any], mb: Option[Any]) -> Option[Any]:
    """Apply an optional 2-ary function to two optional arguments."""
    return typeclass.apply2(MOption, MOption, MOption, MOption, mf, ma, mb)


def apply_partial_opt(mf: Option[Callable[[Any, Any], Any]], ma: Option[Any]) -> Option[Callable[[Any], Any]]:
    """Apply the first argument of an optional 2-ary function."""
    return typeclass.apply_partial(MOption, MOption, MOption, mf, ma)


def apply_curried_opt(mf: Option[Callable[[Any], Callable[[Any], Any]]], ma: Option[Any]) -> Option[Callable[[Any], Any]]:
    """Apply one argument to an optional curried function."""
    return typeclass.apply_curried(MOption, MOption, MOption, mf, ma)


def action_opt[A, B](ma: Option[A], mb: Option[B]) -> Option[B]:
    """`mb` if `ma` is present, else absent."""
    return typeclass.action(MOption, MOption, ma, mb)


# --- Folds ---


def fold_opt[S, A](option: Option[A], state: S, folder: Callable[[S, A], S]) -> S:
    return option.fold(state, folder)


def bifold_opt[S, A](option: Option[A], state: S, some: Callable[[S, A], S], none: Callable[[S], S]) -> S:
    return option.bifold(state, some, none)


def forall_opt[A](option: Option[A], pred: Callable[[A], bool]) -> bool:
    return option.forall(pred)


def biforall_opt[A](option: Option[A], some: Callable[[A], bool], none: Callable[[], bool]) -> bool:
    return option.biforall(some, none)


def count_opt(option: Option[Any]) -> int:
    return option.count()


def exists_opt[A](option: Option[A], pred: Callable[[A], bool]) -> bool:
    return option.exists(pred)


def biexists_opt[A](option: Option[A], some: Callable[[A], bool], none: Callable[[], bool]) -> bool:
    return option.biexists(some, none)


# --- Transformation ---


def map_opt[A, B](option: Option[A], f: Callable[[A], B]) -> Option[B]:
    return option.map(f)


def bimap_opt[A, B](option: Option[A], some: Callable[[A], B], none: Callable[[], B]) -> Option[B]:
    return option.bimap(some, none)


def parmap_opt(option: Option[Any], mapper: Callable[..., Any]) -> Option[Callable[..., Any]]:
    return option.parmap(mapper)


def filter_opt[T](option: Option[T], pred: Callable[[T], bool]) -> Option[T]:
    return option.filter(pred)


def bind_opt[T, R](option: Option[T], binder: Callable[[T], Option[R]]) -> Option[R]:
    return option.bind(binder)


# --- Sequences of options ---


def match_all[T, R](
    options: Iterable[Option[T]],
    some: Callable[[T], Iterable[R]],
    none: Callable[[], Iterable[R]],
) -> Iterator[R]:
    """Concatenate, in order, `some(value)` or `none()` for each option.

    An empty `options` yields the contents of `none()`. Lazy: each option is
    matched only when its part of the output is reached.
    """
    items = iter(options)
    first = next(items, _EMPTY)
    if first is _EMPTY:
        yield from none()
        return
    for option in itertools.chain((first,), items):
        yield from option.match(some, none)


def somes[T](options: Iterable[Option[T]]) -> Iterator[T]:
    """The values of the present options, in order."""
    for option in options:
        yield from option


def to_list_opt[T](option: Option[T]) -> list[T]:
    return option.to_list()


def to_array_opt[T](option: Option[T]) -> tuple[T, ...]:
    return option.to_array()
