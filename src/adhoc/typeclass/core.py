"""Witnesses and capability contracts.

A capability contract is a `Protocol` naming the shape of one operation
family (map, bimap, bind, fold, the numeric operators). A witness is a
stateless class that implements one or more contracts for exactly one
container (or element) type. Generic functions take the witness as an
explicit leading argument, so the implementation that runs is chosen by
the caller, never by inspecting the container value:

    ```python
    from adhoc.instances import MOption
    from adhoc.typeclass import fmap

    fmap(MOption, some(2), lambda x: x + 1)
    # Some(3)
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

import msgspec
import wrapt

from adhoc.errors import ArgumentNullError

__all__ = [
    'Addition',
    'BiFunctor',
    'Difference',
    'Divisible',
    'Foldable',
    'Functor',
    'Monad',
    'NoInstanceError',
    'Product',
    'Unit',
    'Witness',
    'resolve_witness',
    'unit',
    'witnessed',
]

F = TypeVar('F', bound=Callable[..., Any])


class Unit(msgspec.Struct, frozen=True, gc=False):
    """The type with exactly one value, `unit`.

    Handed to absent-branch handlers and returned by side-effecting
    operations in place of None.
    """

    def __repr__(self) -> str:
        return 'unit'


unit: Unit = Unit()
"""The single value of `Unit`."""


class NoInstanceError(TypeError):
    """Raised when a witness does not implement the required contract."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


class Witness:
    """Base class for zero-state witnesses.

    Witnesses carry no data: any two instances of the same witness class are
    interchangeable, compare equal and hash alike.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f'{type(self).__name__}()'


# --- Capability contracts ---


@runtime_checkable
class Functor(Protocol):
    """`map(container<A>, A -> B) -> container<B>`."""

    def map(self, fa: Any, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class BiFunctor(Protocol):
    """`bimap(container<A>, Unit -> B, A -> B) -> container<B>`.

    The first handler covers the absent branch, the second the present one.
    Exactly one of them runs per call.
    """

    def bimap(self, fa: Any, f_none: Callable[[Unit], Any], f_some: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Monad(Protocol):
    """Lift, empty and bind, bridged through an output witness.

    `bind(ma, f, out)` feeds each value of `ma` to `f`, which returns a
    container produced by `out`; `out.zero()` is used when `ma` has nothing
    to feed. Every `apply` variant is built from `bind` and `pure`.
    """

    def pure(self, a: Any) -> Any: ...

    def zero(self) -> Any: ...

    def bind(self, ma: Any, f: Callable[[Any], Any], out: Monad) -> Any: ...


@runtime_checkable
class Foldable(Protocol):
    """Left folds over zero or more elements."""

    def fold(self, fa: Any, state: Any, f: Callable[[Any, Any], Any]) -> Any: ...

    def bifold(
        self,
        fa: Any,
        state: Any,
        f_some: Callable[[Any, Any], Any],
        f_none: Callable[[Any], Any],
    ) -> Any: ...


@runtime_checkable
class Addition(Protocol):
    def plus(self, x: Any, y: Any) -> Any: ...


@runtime_checkable
class Difference(Protocol):
    def difference(self, x: Any, y: Any) -> Any: ...


@runtime_checkable
class Product(Protocol):
    def product(self, x: Any, y: Any) -> Any: ...


@runtime_checkable
class Divisible(Protocol):
    def divide(self, x: Any, y: Any) -> Any: ...


# --- Witness resolution ---


def resolve_witness(witness: Any, contract: type, name: str = 'witness') -> Any:
    """Return a witness instance that implements `contract`.

    Args:
        witness: A `Witness` subclass or an instance of one.
        contract: The capability Protocol the witness must satisfy.
        name: Parameter name reported when `witness` is None.

    Raises:
        ArgumentNullError: If `witness` is None.
        NoInstanceError: If the witness does not implement `contract`.
    """
    if witness is None:
        raise ArgumentNullError(name)
    if isinstance(witness, type):
        if not issubclass(witness, Witness):
            raise NoInstanceError(contract.__name__, witness)
        witness = witness()
    if not isinstance(witness, contract):
        raise NoInstanceError(contract.__name__, type(witness))
    return witness


def witnessed(*, required: tuple[str, ...] = (), **contracts: type) -> Callable[[F], F]:
    """Decorator for generic functions that take witnesses as arguments.

    Named witness parameters are resolved to instances and checked against
    their contract; required parameters (functions and the containers they
    are applied to) are checked for None. Both checks happen before the
    wrapped function runs.

    Args:
        required: Names of parameters that must not be None.
        **contracts: Parameter name -> required capability Protocol.

    Example:
        ```python
        @witnessed(F=Functor, required=('f',))
        def fmap(F, fa, f):
            return F.map(fa, f)
        ```
    """

    def decorate(fn: F) -> F:
        signature = inspect.signature(fn)
        nullable = _optional(signature)

        @wrapt.decorator
        def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
            bound = signature.bind(*args, **kwargs)
            arguments = bound.arguments
            for param, contract in contracts.items():
                if param in arguments and (arguments[param] is not None or param not in nullable):
                    arguments[param] = resolve_witness(arguments[param], contract, param)
            for param in required:
                if param in arguments and arguments[param] is None:
                    raise ArgumentNullError(param)
            return wrapped(*bound.args, **bound.kwargs)

        return wrapper(fn)

    return decorate


def _optional(signature: inspect.Signature) -> frozenset[str]:
    """Names of parameters that default to None."""
    return frozenset(name for name, p in signature.parameters.items() if p.default is None)
