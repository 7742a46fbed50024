"""
Strength lattice
================

Сила оптики = сколько фокусов возвращает view:

    EXACT   - ровно один      (Getter, контейнер Identity)
    PARTIAL - ноль или один   (Affine, контейнер Option)
    MANY    - ноль или много  (Fold,   контейнер tuple)

Ordered EXACT < PARTIAL < MANY: any weaker view can be lifted into a
stronger container, never the other way around.
"""

from __future__ import annotations

import enum


class Strength(enum.IntEnum):
    """Cardinality guarantee of an optic's view."""

    EXACT = 0
    PARTIAL = 1
    MANY = 2


def align(u: Strength, v: Strength, /) -> Strength:
    """
    Join of two strengths: the loosest of the pair.

    Commutative, associative and idempotent. This is the strength of
    `compose(first, second)` for optics of strengths u and v.
    """
    return u if u >= v else v


__all__ = ("Strength", "align")
