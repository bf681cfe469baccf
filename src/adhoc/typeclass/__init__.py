"""Witness-based type classes for ad-hoc polymorphism."""

from adhoc.typeclass.core import (
    Addition,
    BiFunctor,
    Difference,
    Divisible,
    Foldable,
    Functor,
    Monad,
    NoInstanceError,
    Product,
    Unit,
    Witness,
    resolve_witness,
    unit,
    witnessed,
)
from adhoc.typeclass.dispatch import (
    action,
    add,
    apply,
    apply2,
    apply_curried,
    apply_partial,
    biexists,
    bifold,
    biforall,
    bimap,
    bind,
    count,
    difference,
    divide,
    exists,
    fmap,
    fold,
    forall,
    product,
    pure,
)

__all__ = [
    # Contracts
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
    # Dispatch
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
    'resolve_witness',
    'unit',
    'witnessed',
]
