"""
Monoid - associative combine with a neutral element
===================================================
"""

from __future__ import annotations

import operator
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Monoid[I]:
    """
    Monoid typeclass record.

    Laws:
    - Left identity: concat(empty(), x) == x
    - Right identity: concat(x, empty()) == x
    - Associativity: concat(concat(x, y), z) == concat(x, concat(y, z))

    `empty` is a thunk so mutable carriers never share one instance.
    """

    empty: Callable[[], I]
    concat: Callable[[I, I], I]

    def fold(self, items: Iterable[I], /) -> I:
        """
        Fold left-to-right starting from empty().

        Example:
            MonoidSum.fold([1, 2, 3])  # 6
        """
        acc = self.empty()
        for item in items:
            acc = self.concat(acc, item)
        return acc


def _zero() -> int:
    return 0


def _one() -> int:
    return 1


def _true() -> bool:
    return True


def _false() -> bool:
    return False


def _empty_str() -> str:
    return ""


def _empty_tuple() -> tuple[typing.Any, ...]:
    return ()


def _all(a: bool, b: bool) -> bool:
    return a and b


def _any(a: bool, b: bool) -> bool:
    return a or b


MonoidSum: typing.Final[Monoid[typing.Any]] = Monoid(_zero, operator.add)
MonoidProduct: typing.Final[Monoid[typing.Any]] = Monoid(_one, operator.mul)
MonoidAll: typing.Final[Monoid[bool]] = Monoid(_true, _all)
MonoidAny: typing.Final[Monoid[bool]] = Monoid(_false, _any)
MonoidStr: typing.Final[Monoid[str]] = Monoid(_empty_str, operator.add)
MonoidTuple: typing.Final[Monoid[tuple[typing.Any, ...]]] = Monoid(_empty_tuple, operator.add)


__all__ = (
    "Monoid",
    "MonoidAll",
    "MonoidAny",
    "MonoidProduct",
    "MonoidStr",
    "MonoidSum",
    "MonoidTuple",
)
