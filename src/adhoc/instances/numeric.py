"""Numeric witnesses for the element types used with the container lifts."""

from __future__ import annotations

from adhoc.typeclass.core import Witness

__all__ = ['TFloat', 'TInt', 'TStr']


class TInt(Witness):
    """Addition, Difference, Product and Divisible for `int`.

    `divide` is floor division, so results stay integral.
    """

    __slots__ = ()

    def plus(self, x: int, y: int) -> int:
        return x + y

    def difference(self, x: int, y: int) -> int:
        return x - y

    def product(self, x: int, y: int) -> int:
        return x * y

    def divide(self, x: int, y: int) -> int:
        return x // y


class TFloat(Witness):
    """Addition, Difference, Product and Divisible for `float`."""

    __slots__ = ()

    def plus(self, x: float, y: float) -> float:
        return x + y

    def difference(self, x: float, y: float) -> float:
        return x - y

    def product(self, x: float, y: float) -> float:
        return x * y

    def divide(self, x: float, y: float) -> float:
        return x / y


class TStr(Witness):
    """Addition (concatenation) for `str`."""

    __slots__ = ()

    def plus(self, x: str, y: str) -> str:
        return x + y
