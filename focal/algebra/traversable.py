"""
Traversable instances
=====================

Typeclass records for the containers optics can traverse:

    TraversableSequence - list / tuple, index order
    TraversableRecord   - mapping values, insertion order
    TraversableSet      - set / frozenset, iteration order of the given set
    TraversableTree     - Tree, pre-order (value, then forest left to right)

Every `map` is identity-stable: when no element changed (per
`_helpers.unchanged`) the original container object is returned, not a
copy. This costs one check per element and lets callers detect no-op
updates with `is`.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from .._helpers import all_unchanged, rebuild, unchanged
from .._types import Endo
from .tree import Tree

type Reducer[O] = Callable[[O, typing.Any], O]


@dataclass(frozen=True, slots=True)
class Traversable:
    """
    Typeclass record for a container.

    map:    (container, fn) -> container of the same shape
    reduce: (container, reducer, initial) -> accumulated value
    """

    map: Callable[[typing.Any, Callable[[typing.Any], typing.Any]], typing.Any]
    reduce: Callable[[typing.Any, Reducer[typing.Any], typing.Any], typing.Any]

    def to_tuple(self, ta: typing.Any, /) -> tuple[typing.Any, ...]:
        """All elements, in the container's natural order."""
        return tuple(self.reduce(ta, _push, []))

    def modify(self, fn: Endo[typing.Any], /) -> Endo[typing.Any]:
        """Curried map, in the shape an optic's modify expects."""

        def run(ta: typing.Any) -> typing.Any:
            return self.map(ta, fn)

        return run


def _push(acc: list[typing.Any], a: typing.Any) -> list[typing.Any]:
    acc.append(a)
    return acc


# ============================================================================
# Sequence
# ============================================================================


def _sequence_map(ta: Sequence[typing.Any], fn: Endo[typing.Any]) -> Sequence[typing.Any]:
    out = [fn(a) for a in ta]
    return ta if all_unchanged(ta, out) else rebuild(ta, out)


def _sequence_reduce[O](ta: Sequence[typing.Any], f: Reducer[O], initial: O) -> O:
    return functools.reduce(f, ta, initial)


TraversableSequence: typing.Final = Traversable(map=_sequence_map, reduce=_sequence_reduce)


# ============================================================================
# Record (mapping values)
# ============================================================================


def _record_map(ta: Mapping[typing.Any, typing.Any], fn: Endo[typing.Any]) -> Mapping[typing.Any, typing.Any]:
    out = {k: fn(v) for k, v in ta.items()}
    return ta if all_unchanged(ta.values(), out.values()) else out


def _record_reduce[O](ta: Mapping[typing.Any, typing.Any], f: Reducer[O], initial: O) -> O:
    return functools.reduce(f, ta.values(), initial)


TraversableRecord: typing.Final = Traversable(map=_record_map, reduce=_record_reduce)


# ============================================================================
# Set
# ============================================================================


def _set_map(ta: typing.AbstractSet[typing.Any], fn: Endo[typing.Any]) -> typing.AbstractSet[typing.Any]:
    items = tuple(ta)
    out = [fn(a) for a in items]
    if all_unchanged(items, out):
        return ta
    # NOTE: equal results collapse, so the new set can be smaller
    return frozenset(out) if isinstance(ta, frozenset) else set(out)


def _set_reduce[O](ta: typing.AbstractSet[typing.Any], f: Reducer[O], initial: O) -> O:
    return functools.reduce(f, ta, initial)


TraversableSet: typing.Final = Traversable(map=_set_map, reduce=_set_reduce)


# ============================================================================
# Tree
# ============================================================================


def _tree_map(ta: Tree[typing.Any], fn: Endo[typing.Any]) -> Tree[typing.Any]:
    value = fn(ta.value)
    forest = tuple(_tree_map(child, fn) for child in ta.forest)
    if unchanged(ta.value, value) and all_unchanged(ta.forest, forest):
        return ta
    return Tree(value, forest)


def _tree_reduce[O](ta: Tree[typing.Any], f: Reducer[O], initial: O) -> O:
    acc = f(initial, ta.value)
    for child in ta.forest:
        acc = _tree_reduce(child, f, acc)
    return acc


TraversableTree: typing.Final = Traversable(map=_tree_map, reduce=_tree_reduce)


__all__ = (
    "Traversable",
    "TraversableRecord",
    "TraversableSequence",
    "TraversableSet",
    "TraversableTree",
)
