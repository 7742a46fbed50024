from __future__ import annotations

import operator
import typing
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Eq[A]:
    """Equality typeclass: decides when two values count as the same key."""

    equals: Callable[[A, A], bool]

    @staticmethod
    def by[T, K](selector: Callable[[T], K]) -> Eq[T]:
        """
        Compare values by a derived key.

        Example:
            Eq.by(str.casefold)  # case-insensitive string keys
        """

        def equals(a: T, b: T) -> bool:
            return selector(a) == selector(b)

        return Eq(equals)


EqStrict: typing.Final[Eq[typing.Any]] = Eq(operator.eq)
EqIdentity: typing.Final[Eq[typing.Any]] = Eq(operator.is_)


__all__ = ("Eq", "EqIdentity", "EqStrict")
