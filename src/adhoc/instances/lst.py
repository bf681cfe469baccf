"""List witness: Functor and Foldable over Python lists."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any

from adhoc.typeclass.core import Witness

__all__ = ['FList']


class FList(Witness):
    """Functor and Foldable for `list`.

    Any iterable is accepted as input; mapped results are always lists.
    """

    __slots__ = ()

    def map(self, fa: Iterable[Any], f: Callable[[Any], Any]) -> list[Any]:
        return [f(a) for a in fa]

    def fold(self, fa: Iterable[Any], state: Any, f: Callable[[Any, Any], Any]) -> Any:
        return functools.reduce(f, fa, state)

    def bifold(
        self,
        fa: Iterable[Any],
        state: Any,
        f_some: Callable[[Any, Any], Any],
        f_none: Callable[[Any], Any],
    ) -> Any:
        items = list(fa)
        if not items:
            return f_none(state)
        return functools.reduce(f_some, items, state)
