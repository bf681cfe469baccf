"""Generic functions over any container with a matching witness.

Each function takes its witness(es) first, in upper case to mirror type
arguments. The witness decides which implementation runs; the container
value is never inspected to pick one.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from adhoc.typeclass.core import (
    Addition,
    BiFunctor,
    Difference,
    Divisible,
    Foldable,
    Functor,
    Monad,
    Product,
    unit,
    witnessed,
)

__all__ = [
    'action',
    'add',
    'apply',
    'apply2',
    'apply_curried',
    'apply_partial',
    'biexists',
    'bifold',
    'biforall',
    'bimap',
    'bind',
    'count',
    'difference',
    'divide',
    'exists',
    'fmap',
    'fold',
    'forall',
    'product',
    'pure',
]


# --- Functor / BiFunctor ---


@witnessed(F=Functor, required=('fa', 'f'))
def fmap(F: Any, fa: Any, f: Callable[[Any], Any]) -> Any:  # noqa: N803
    """Map `f` over `fa` using the Functor witness `F`."""
    return F.map(fa, f)


@witnessed(F=BiFunctor, required=('fa',))
def bimap(F: Any, fa: Any, f_none: Callable[[Any], Any] | None, f_some: Callable[[Any], Any] | None) -> Any:  # noqa: N803
    """Map either branch of `fa` using the BiFunctor witness `F`.

    Null handlers are passed through: whether they are rejected or treated
    as "no value" is the witness's policy.
    """
    return F.bimap(fa, f_none, f_some)


# --- Monad ---


@witnessed(M=Monad)
def pure(M: Any, a: Any) -> Any:  # noqa: N803
    """Lift `a` into the container of `M`."""
    return M.pure(a)


@witnessed(M=Monad, out=Monad, required=('ma', 'f'))
def bind(M: Any, ma: Any, f: Callable[[Any], Any], out: Any = None) -> Any:  # noqa: N803
    """Bind `f` over `ma`; `f` returns containers of `out` (defaults to `M`)."""
    return M.bind(ma, f, M if out is None else out)


def _apply_with(MF: Any, MA: Any, MB: Any, mf: Any, ma: Any, call: Callable[[Any, Any], Any]) -> Any:  # noqa: N803
    return MF.bind(mf, lambda f: MA.bind(ma, lambda a: MB.pure(call(f, a)), MB), MB)


@witnessed(MF=Monad, MA=Monad, MB=Monad, required=('mf', 'ma'))
def apply(MF: Any, MA: Any, MB: Any, mf: Any, ma: Any) -> Any:  # noqa: N803
    """Apply a contained 1-ary function to a contained argument.

    Example:
        ```python
        apply(MOption, MOption, MOption, some(lambda x: x + 1), some(1))
        # Some(2)
        ```
    """
    return _apply_with(MF, MA, MB, mf, ma, lambda f, a: f(a))


@witnessed(MF=Monad, MA=Monad, MB=Monad, MC=Monad, required=('mf', 'ma', 'mb'))
def apply2(MF: Any, MA: Any, MB: Any, MC: Any, mf: Any, ma: Any, mb: Any) -> Any:  # noqa: N803
    """Apply a contained 2-ary function to two contained arguments."""
    return MF.bind(
        mf,
        lambda f: MA.bind(ma, lambda a: MB.bind(mb, lambda b: MC.pure(f(a, b)), MC), MC),
        MC,
    )


@witnessed(MF=Monad, MA=Monad, MB=Monad, required=('mf', 'ma'))
def apply_partial(MF: Any, MA: Any, MB: Any, mf: Any, ma: Any) -> Any:  # noqa: N803
    """Apply the first argument of a contained 2-ary function.

    Returns a container (of `MB`) holding the remaining 1-ary function.
    """
    return _apply_with(MF, MA, MB, mf, ma, functools.partial)


@witnessed(MF=Monad, MA=Monad, MB=Monad, required=('mf', 'ma'))
def apply_curried(MF: Any, MA: Any, MB: Any, mf: Any, ma: Any) -> Any:  # noqa: N803
    """Apply one argument to a contained curried function `a -> (b -> c)`."""
    return _apply_with(MF, MA, MB, mf, ma, lambda f, a: f(a))


@witnessed(MA=Monad, MB=Monad, required=('ma', 'mb'))
def action(MA: Any, MB: Any, ma: Any, mb: Any) -> Any:  # noqa: N803
    """Sequence `ma` then `mb`, keeping only `mb`'s value."""
    return MA.bind(ma, lambda _: mb, MB)


# --- Foldable ---


@witnessed(F=Foldable, required=('fa', 'f'))
def fold(F: Any, fa: Any, state: Any, f: Callable[[Any, Any], Any]) -> Any:  # noqa: N803
    """Left-fold the elements of `fa` into `state`."""
    return F.fold(fa, state, f)


@witnessed(F=Foldable, required=('fa', 'f_some', 'f_none'))
def bifold(
    F: Any,  # noqa: N803
    fa: Any,
    state: Any,
    f_some: Callable[[Any, Any], Any],
    f_none: Callable[[Any], Any],
) -> Any:
    """Fold with a separate step for the empty case."""
    return F.bifold(fa, state, f_some, f_none)


@witnessed(F=Foldable, required=('fa',))
def count(F: Any, fa: Any) -> int:  # noqa: N803
    """Number of elements in `fa`."""
    return F.fold(fa, 0, lambda n, _: n + 1)


@witnessed(F=Foldable, required=('fa', 'pred'))
def forall(F: Any, fa: Any, pred: Callable[[Any], bool]) -> bool:  # noqa: N803
    """True if every element satisfies `pred` (vacuously true when empty)."""
    return F.fold(fa, True, lambda ok, a: ok and bool(pred(a)))


@witnessed(F=Foldable, required=('fa', 'pred'))
def exists(F: Any, fa: Any, pred: Callable[[Any], bool]) -> bool:  # noqa: N803
    """True if any element satisfies `pred` (false when empty)."""
    return F.fold(fa, False, lambda found, a: found or bool(pred(a)))


@witnessed(F=Foldable, required=('fa', 'p_some', 'p_none'))
def biforall(F: Any, fa: Any, p_some: Callable[[Any], bool], p_none: Callable[[Any], bool]) -> bool:  # noqa: N803
    """Like `forall`, but the empty case is decided by `p_none(unit)`."""
    return F.bifold(
        fa,
        True,
        lambda ok, a: ok and bool(p_some(a)),
        lambda ok: ok and bool(p_none(unit)),
    )


@witnessed(F=Foldable, required=('fa', 'p_some', 'p_none'))
def biexists(F: Any, fa: Any, p_some: Callable[[Any], bool], p_none: Callable[[Any], bool]) -> bool:  # noqa: N803
    """Like `exists`, but the empty case is decided by `p_none(unit)`."""
    return F.bifold(
        fa,
        False,
        lambda found, a: found or bool(p_some(a)),
        lambda found: found or bool(p_none(unit)),
    )


# --- Numeric lifts ---


def _lift2(M: Any, op: Callable[[Any, Any], Any], x: Any, y: Any) -> Any:  # noqa: N803
    return apply2(M, M, M, M, M.pure(op), x, y)


@witnessed(ADD=Addition, M=Monad, required=('x', 'y'))
def add(ADD: Any, M: Any, x: Any, y: Any) -> Any:  # noqa: N803
    """Add the contents of two containers with the Addition witness `ADD`."""
    return _lift2(M, ADD.plus, x, y)


@witnessed(DIFF=Difference, M=Monad, required=('x', 'y'))
def difference(DIFF: Any, M: Any, x: Any, y: Any) -> Any:  # noqa: N803
    """Subtract the contents of `y` from `x` with the Difference witness `DIFF`."""
    return _lift2(M, DIFF.difference, x, y)


@witnessed(PROD=Product, M=Monad, required=('x', 'y'))
def product(PROD: Any, M: Any, x: Any, y: Any) -> Any:  # noqa: N803
    """Multiply the contents of two containers with the Product witness `PROD`."""
    return _lift2(M, PROD.product, x, y)


@witnessed(DIV=Divisible, M=Monad, required=('x', 'y'))
def divide(DIV: Any, M: Any, x: Any, y: Any) -> Any:  # noqa: N803
    """Divide the contents of `x` by `y` with the Divisible witness `DIV`."""
    return _lift2(M, DIV.divide, x, y)
