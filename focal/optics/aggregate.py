"""
Aggregation over optics.

Collect every focus, map it into a monoid, and fold.
"""

from __future__ import annotations

from collections.abc import Callable

from ..algebra.monoid import Monoid
from .core import Viewer, cast
from .strength import Strength


def concat_all[S, A, I](
    source: Viewer[S, A],
    monoid: Monoid[I],
    f: Callable[[A], I],
) -> Callable[[S], I]:
    """
    Fold all foci of an optic (of any strength) through a monoid.

    The optic is cast up to MANY, each focus is mapped with `f`, and the
    results are combined left-to-right starting from `monoid.empty()`.

    Example:
        total_age = concat_all(id_().array().prop("age"), MonoidSum, identity)
        total_age(people)
    """
    view = cast(source, Strength.MANY)

    def run(s: S) -> I:
        return monoid.fold(f(a) for a in view(s))

    return run


__all__ = ("concat_all",)
