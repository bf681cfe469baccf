"""Option witnesses: one implementation, two null-handling policies.

`MOption` is the safe policy: a transform, handler or fallback that yields
None is a contract violation. `MOptionUnsafe` is the explicit opt-in to the
looser policy: such a None becomes an absent Option (or is handed back as-is
by extraction operations), and a missing `bimap` handler yields absent.

Both implement Functor, BiFunctor, Monad and Foldable for `Option`.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from adhoc._logging import get_logger
from adhoc.errors import ArgumentNullError, ValueIsNullError
from adhoc.option import Nothing, Option, Present, optional, some
from adhoc.typeclass.core import Monad, Unit, Witness, unit

__all__ = ['MOption', 'MOptionUnsafe']

_log = get_logger(__name__)


def _require(fn: Any, name: str) -> None:
    if fn is None:
        raise ArgumentNullError(name)


class _OptionWitness(Witness, ABC):
    """Operations shared by both policies; subclasses fill in the policy hooks."""

    __slots__ = ()

    # --- Policy hooks ---

    @abstractmethod
    def _wrap(self, value: Any, context: str) -> Option[Any]:
        """Build an Option from a transform result."""

    @abstractmethod
    def _accept(self, value: Any, context: str) -> Any:
        """Vet a value handed back to the caller by an extraction."""

    @abstractmethod
    def _check_handlers(self, **handlers: Any) -> None:
        """Vet the handlers passed to `bimap`."""

    # --- Functor / BiFunctor ---

    def map(self, fa: Option[Any], f: Callable[[Any], Any]) -> Option[Any]:
        _require(f, 'f')
        match fa._observe():
            case Present(value):
                return self._wrap(f(value), 'map')
            case _:
                return Nothing

    def bimap(
        self,
        fa: Option[Any],
        f_none: Callable[[Unit], Any] | None,
        f_some: Callable[[Any], Any] | None,
    ) -> Option[Any]:
        self._check_handlers(f_none=f_none, f_some=f_some)
        match fa._observe():
            case Present(value):
                return Nothing if f_some is None else self._wrap(f_some(value), 'bimap')
            case _:
                return Nothing if f_none is None else self._wrap(f_none(unit), 'bimap')

    def parmap(self, fa: Option[Any], f: Callable[..., Any]) -> Option[Callable[..., Any]]:
        _require(f, 'f')
        return self.map(fa, lambda a: functools.partial(f, a))

    def filter(self, fa: Option[Any], pred: Callable[[Any], bool]) -> Option[Any]:
        _require(pred, 'pred')
        match fa._observe():
            case Present(value) as present if pred(value):
                return fa if fa._case is present else Option(present)
            case _:
                return Nothing

    # --- Monad ---

    def pure(self, a: Any) -> Option[Any]:
        return self._wrap(a, 'pure')

    def zero(self) -> Option[Any]:
        return Nothing

    def bind(self, ma: Option[Any], f: Callable[[Any], Any], out: Monad) -> Any:
        _require(f, 'f')
        match ma._observe():
            case Present(value):
                result = f(value)
            case _:
                return out.zero()
        if isinstance(out, _OptionWitness):
            if result is None:
                return out._wrap(None, 'bind')
            if not isinstance(result, Option):
                msg = f'bind function must return an Option, got {type(result).__name__}'
                raise TypeError(msg)
        elif result is None:
            _log.debug('contract_violation', kind='value_is_null', context='bind')
            raise ValueIsNullError('bind')
        return result

    # --- Foldable ---

    def fold(self, fa: Option[Any], state: Any, f: Callable[[Any, Any], Any]) -> Any:
        _require(f, 'f')
        match fa._observe():
            case Present(value):
                return f(state, value)
            case _:
                return state

    def bifold(
        self,
        fa: Option[Any],
        state: Any,
        f_some: Callable[[Any, Any], Any],
        f_none: Callable[[Any], Any],
    ) -> Any:
        _require(f_some, 'f_some')
        _require(f_none, 'f_none')
        match fa._observe():
            case Present(value):
                return f_some(state, value)
            case _:
                return f_none(state)

    # --- Extraction ---

    def match(self, fa: Option[Any], some: Callable[[Any], Any], none: Callable[[], Any]) -> Any:
        _require(some, 'some')
        _require(none, 'none')
        match fa._observe():
            case Present(value):
                return self._accept(some(value), 'match')
            case _:
                return self._accept(none(), 'match')

    def match_action(self, fa: Option[Any], some: Callable[[Any], Any], none: Callable[[], Any]) -> Unit:
        _require(some, 'some')
        _require(none, 'none')
        match fa._observe():
            case Present(value):
                some(value)
            case _:
                none()
        return unit

    def if_some(self, fa: Option[Any], action: Callable[[Any], Any]) -> Unit:
        _require(action, 'action')
        match fa._observe():
            case Present(value):
                action(value)
        return unit

    def if_none(self, fa: Option[Any], action: Callable[[], Any]) -> Unit:
        _require(action, 'action')
        if not isinstance(fa._observe(), Present):
            action()
        return unit

    def get_or_else(self, fa: Option[Any], fallback: Any) -> Any:
        match fa._observe():
            case Present(value):
                return value
            case _:
                return self._accept(fallback() if callable(fallback) else fallback, 'get_or_else')


class MOption(_OptionWitness):
    """Safe Option witness: None results are contract violations."""

    __slots__ = ()

    def _wrap(self, value: Any, context: str) -> Option[Any]:
        if value is None:
            _log.debug('contract_violation', kind='value_is_null', context=context)
            raise ValueIsNullError(context)
        return some(value)

    def _accept(self, value: Any, context: str) -> Any:
        if value is None:
            _log.debug('contract_violation', kind='value_is_null', context=context)
            raise ValueIsNullError(context)
        return value

    def _check_handlers(self, **handlers: Any) -> None:
        for name, handler in handlers.items():
            _require(handler, name)


class MOptionUnsafe(_OptionWitness):
    """Unsafe Option witness: None results mean "no value"."""

    __slots__ = ()

    def _wrap(self, value: Any, context: str) -> Option[Any]:
        return optional(value)

    def _accept(self, value: Any, context: str) -> Any:
        return value

    def _check_handlers(self, **handlers: Any) -> None:
        return None
