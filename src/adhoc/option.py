"""Option: zero or one value, never a present None.

An Option is either present (`Some(value)`) or absent (`Nothing`). It may
also be built lazily from a producer function, optionally memoized. All
operations go through the Option witnesses in `adhoc.instances.option`; the
methods here are the method-style spelling of the same behaviour, using the
safe policy unless the name says `unsafe`.

Example:
    ```python
    from adhoc import optional

    optional(5).map(lambda x: x * 2).filter(lambda x: x > 5).match(lambda v: v, lambda: -1)
    # 10

    optional(None).match(lambda v: v, lambda: -1)
    # -1
    ```
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

import msgspec

from adhoc._config import get_config
from adhoc._logging import get_logger
from adhoc.errors import ArgumentNullError, ValueIsNullError
from adhoc.typeclass import dispatch
from adhoc.typeclass.core import Unit

if TYPE_CHECKING:
    from adhoc.instances.option import MOption, MOptionUnsafe

__all__ = [
    'Nothing',
    'Option',
    'lazy',
    'optional',
    'some',
]

_log = get_logger(__name__)


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Evaluated present case of an Option."""

    value: T


class Absent(msgspec.Struct, frozen=True, gc=False):
    """Evaluated absent case of an Option."""


_ABSENT = Absent()


@functools.cache
def _safe() -> MOption:
    from adhoc.instances.option import MOption

    return MOption()


@functools.cache
def _unsafe() -> MOptionUnsafe:
    from adhoc.instances.option import MOptionUnsafe

    return MOptionUnsafe()


def _no_arg(handler: Callable[[], Any] | None) -> Callable[[Any], Any] | None:
    """Adapt a zero-argument absent handler to the `Unit -> B` shape."""
    if handler is None:
        return None
    return lambda _: handler()


class Option[T]:
    """Zero or one value of type T.

    Build instances with `some`, `optional`, `lazy` or `Nothing` rather than
    calling the class. Options are immutable; every transformation returns a
    new Option.
    """

    __slots__ = ('_case', '_lock', '_memo', '_producer')

    _case: Present[T] | Absent | None
    _producer: Callable[[], Option[T]] | None
    _memo: bool
    _lock: threading.Lock | None

    def __init__(self, case: Present[T] | Absent) -> None:
        match case:
            case Present(None):
                _log.debug('contract_violation', kind='value_is_null', context='Option')
                raise ValueIsNullError('Option')
            case Present() | Absent():
                pass
            case _:
                msg = f'Option case must be Present or Absent, got {type(case).__name__}'
                raise TypeError(msg)
        object.__setattr__(self, '_case', case)
        object.__setattr__(self, '_producer', None)
        object.__setattr__(self, '_memo', True)
        object.__setattr__(self, '_lock', None)

    @classmethod
    def _deferred(cls, producer: Callable[[], Option[T]], memo: bool) -> Option[T]:
        self = cls.__new__(cls)
        object.__setattr__(self, '_case', None)
        object.__setattr__(self, '_producer', producer)
        object.__setattr__(self, '_memo', memo)
        object.__setattr__(self, '_lock', threading.Lock() if memo else None)
        return self

    # --- Construction ---

    @classmethod
    def some(cls, value: T) -> Option[T]:
        """Present Option; raises ValueIsNullError for None."""
        return some(value)

    @classmethod
    def optional(cls, value: T | None) -> Option[T]:
        """Present Option for a value, absent for None."""
        return optional(value)

    @classmethod
    def lazy(cls, producer: Callable[[], Option[T]], memo: bool | None = None) -> Option[T]:
        """Deferred Option; see `adhoc.option.lazy`."""
        return lazy(producer, memo)

    @classmethod
    def none(cls) -> Option[Any]:
        """The absent Option."""
        return Nothing

    # --- Observation ---

    def _observe(self) -> Present[T] | Absent:
        """Return the evaluated case, running the producer if needed."""
        case = self._case
        if case is not None:
            return case

        producer = self._producer
        if producer is None:
            # Published by a concurrent observer between the two reads.
            return self._case  # type: ignore[return-value]

        case = _evaluate(producer)
        if not self._memo:
            return case

        with self._lock:  # type: ignore[union-attr]
            if self._case is None:
                object.__setattr__(self, '_case', case)
                object.__setattr__(self, '_producer', None)
                return case

        _log.debug('lazy_option_discarded', present=isinstance(case, Present))
        return self._case  # type: ignore[return-value]

    def is_some(self) -> bool:
        """True if the Option holds a value."""
        return isinstance(self._observe(), Present)

    def is_none(self) -> bool:
        """True if the Option is absent."""
        return isinstance(self._observe(), Absent)

    # --- Extraction ---

    def match[R](self, some: Callable[[T], R], none: Callable[[], R]) -> R:
        """Run the handler for the current state and return its result.

        Raises:
            ValueIsNullError: If the handler that ran returned None.
        """
        return _safe().match(self, some, none)

    def match_unsafe[R](self, some: Callable[[T], R | None], none: Callable[[], R | None]) -> R | None:
        """Like `match`, but a None result is returned instead of rejected."""
        return _unsafe().match(self, some, none)

    def match_action(self, some: Callable[[T], Any], none: Callable[[], Any]) -> Unit:
        """Run the side-effecting handler for the current state."""
        return _safe().match_action(self, some, none)

    def if_some(self, action: Callable[[T], Any]) -> Unit:
        """Run `action` with the value if present."""
        return _safe().if_some(self, action)

    def if_none(self, action: Callable[[], Any]) -> Unit:
        """Run `action` if absent."""
        return _safe().if_none(self, action)

    def get_or_else(self, fallback: T | Callable[[], T]) -> T:
        """The value, or the fallback (called if callable) when absent.

        Raises:
            ValueIsNullError: If the fallback is or returns None.
        """
        return _safe().get_or_else(self, fallback)

    def get_or_else_unsafe(self, fallback: T | Callable[[], T | None] | None) -> T | None:
        """Like `get_or_else`, but a None fallback is returned as-is."""
        return _unsafe().get_or_else(self, fallback)

    # --- Transformation ---

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Apply `f` to the value if present."""
        return _safe().map(self, f)

    def bimap[U](self, some: Callable[[T], U], none: Callable[[], U]) -> Option[U]:
        """Map the present value with `some`, or produce a value with `none`."""
        return _safe().bimap(self, _no_arg(none), some)

    def parmap(self, f: Callable[..., Any]) -> Option[Callable[..., Any]]:
        """Partially apply `f` to the value, giving an Option of the remaining function."""
        return _safe().parmap(self, f)

    def filter(self, pred: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if `pred` holds."""
        return _safe().filter(self, pred)

    def bind[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function (flatmap)."""
        witness = _safe()
        return witness.bind(self, f, witness)

    # --- Folds ---

    def fold[S](self, state: S, f: Callable[[S, T], S]) -> S:
        """Fold the value (if any) into `state`."""
        return _safe().fold(self, state, f)

    def bifold[S](self, state: S, some: Callable[[S, T], S], none: Callable[[S], S]) -> S:
        """Fold with `some` when present, `none` when absent."""
        return _safe().bifold(self, state, some, none)

    def forall(self, pred: Callable[[T], bool]) -> bool:
        """True if absent or the value satisfies `pred`."""
        return dispatch.forall(_safe(), self, pred)

    def exists(self, pred: Callable[[T], bool]) -> bool:
        """True if present and the value satisfies `pred`."""
        return dispatch.exists(_safe(), self, pred)

    def biforall(self, some: Callable[[T], bool], none: Callable[[], bool]) -> bool:
        """`some(value)` when present, `none()` when absent."""
        return dispatch.biforall(_safe(), self, some, _no_arg(none))

    def biexists(self, some: Callable[[T], bool], none: Callable[[], bool]) -> bool:
        """`some(value)` when present, `none()` when absent."""
        return dispatch.biexists(_safe(), self, some, _no_arg(none))

    def count(self) -> int:
        """0 when absent, 1 when present."""
        return dispatch.count(_safe(), self)

    def to_list(self) -> list[T]:
        """A list of zero or one items."""
        return list(self)

    def to_array(self) -> tuple[T, ...]:
        """A tuple of zero or one items."""
        return tuple(self)

    # --- Dunder ---

    def __iter__(self) -> Iterator[T]:
        match self._observe():
            case Present(value):
                yield value
            case _:
                return

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._observe() == other._observe()

    def __hash__(self) -> int:
        return hash(self._observe())

    def __repr__(self) -> str:
        match self._case:
            case Present(value):
                return f'Some({value!r})'
            case Absent():
                return 'Nothing'
            case _:
                return f'Lazy(memo={self._memo})'

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'Option' object is immutable (cannot set {name!r})")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'Option' object is immutable (cannot delete {name!r})")

    def __copy__(self) -> Option[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Option[T]:
        return self


def _evaluate[T](producer: Callable[[], Option[T]]) -> Present[T] | Absent:
    """Run a lazy producer and return the case of the Option it built."""
    result = producer()
    if result is None:
        _log.debug('contract_violation', kind='value_is_null', context='lazy')
        raise ValueIsNullError('lazy producer returned None')
    if not isinstance(result, Option):
        msg = f'lazy producer must return an Option, got {type(result).__name__}'
        raise TypeError(msg)
    case = result._observe()
    _log.debug('lazy_option_evaluated', present=isinstance(case, Present))
    return case


Nothing: Option[Any] = Option(_ABSENT)
"""The absent Option."""


def some[T](value: T) -> Option[T]:
    """Create a present Option.

    Args:
        value: Non-None payload.

    Raises:
        ValueIsNullError: If `value` is None.

    Example:
        ```python
        some(42)
        # Some(42)
        some(None)
        # ValueIsNullError: some: Value is None
        ```
    """
    if value is None:
        _log.debug('contract_violation', kind='value_is_null', context='some')
        raise ValueIsNullError('some')
    return Option(Present(value))


def optional[T](value: T | None) -> Option[T]:
    """Create an Option that is absent when `value` is None."""
    if value is None:
        return Nothing
    return Option(Present(value))


def lazy[T](producer: Callable[[], Option[T]], memo: bool | None = None) -> Option[T]:
    """Create an Option whose state is computed on first observation.

    Args:
        producer: Zero-argument function returning an Option.
        memo: Run the producer at most once and cache the result (True), or
            re-run it on every observation (False). None uses
            `get_config().memoize_lazy`.

    Raises:
        ArgumentNullError: If `producer` is None.

    Example:
        ```python
        opt = lazy(lambda: some(expensive()))
        opt.map(str)  # expensive() runs here, once
        ```
    """
    if producer is None:
        raise ArgumentNullError('producer')
    if memo is None:
        memo = get_config().memoize_lazy
    return Option._deferred(producer, memo)
