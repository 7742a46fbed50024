"""
Optic combinators
=================

Каждый комбинатор = compose(first, <примитивная оптика>).

The primitive is built here, composition in `core.compose` does the rest,
so the resulting strength is always align(first.tag, primitive.tag):

    prop / props / first / second / imap / at_key / at_map  -> EXACT
    index / key / filter_ / nilable / some / right / left   -> PARTIAL
    traverse / array / record / set_ / tree                 -> MANY

Every modify here short-circuits to the original object when the update
did not change anything (see `_helpers.unchanged`).
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Mapping, Sequence
from typing import assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some

from .._helpers import get_field, identity, pick, rebuild, set_fields, unchanged
from .._types import Endo, Predicate
from ..algebra.eq import Eq, EqStrict
from ..algebra.iso import Iso
from ..algebra.traversable import (
    Traversable,
    TraversableRecord,
    TraversableSequence,
    TraversableSet,
    TraversableTree,
)
from .core import Affine, Getter, Optic, affine, compose, fold, getter, id_

# ============================================================================
# Structure: properties
# ============================================================================


def prop[S](first: Optic[S, typing.Any], name: str) -> Optic[S, typing.Any]:
    """
    Focus on a named field.

    Works on mappings (read with `.get`), dataclasses, NamedTuples,
    pydantic-style models and plain objects.
    """

    def get(a: typing.Any) -> typing.Any:
        return get_field(a, name)

    def modify(fn: Endo[typing.Any]) -> Endo[typing.Any]:
        def run(a: typing.Any) -> typing.Any:
            current = get_field(a, name)
            out = fn(current)
            return a if unchanged(current, out) else set_fields(a, {name: out})

        return run

    return compose(first, getter(get, modify))


def props[S](
    first: Optic[S, typing.Any],
    name: str,
    other: str,
    /,
    *rest: str,
) -> Optic[S, dict[str, typing.Any]]:
    """
    Focus on a sub-record of two or more fields, as a dict.

    Only picked fields the update actually changed are merged back.
    Keys the update adds beyond the picked names are ignored, picked
    names it drops are left as they were.
    """
    names = (name, other, *rest)

    def get(a: typing.Any) -> dict[str, typing.Any]:
        return pick(a, names)

    def modify(fn: Endo[dict[str, typing.Any]]) -> Endo[typing.Any]:
        def run(a: typing.Any) -> typing.Any:
            current = pick(a, names)
            out = fn(current)
            changes = {n: out[n] for n in names if n in out and not unchanged(current[n], out[n])}
            return set_fields(a, changes) if changes else a

        return run

    return compose(first, getter(get, modify))


# ============================================================================
# Structure: indexed / keyed access
# ============================================================================


def _lookup_index(i: int) -> Callable[[Sequence[typing.Any]], Option[typing.Any]]:
    def lookup(seq: Sequence[typing.Any]) -> Option[typing.Any]:
        return Some(seq[i]) if 0 <= i < len(seq) else Nothing()

    return lookup


def _modify_index(i: int) -> Callable[[Endo[typing.Any]], Endo[Sequence[typing.Any]]]:
    def modify(fn: Endo[typing.Any]) -> Endo[Sequence[typing.Any]]:
        def run(seq: Sequence[typing.Any]) -> Sequence[typing.Any]:
            if not 0 <= i < len(seq):
                return seq
            current = seq[i]
            out = fn(current)
            if unchanged(current, out):
                return seq
            return rebuild(seq, (*seq[:i], out, *seq[i + 1 :]))

        return run

    return modify


def index[S](first: Optic[S, Sequence[typing.Any]], i: int) -> Optic[S, typing.Any]:
    """
    Focus on the element at index `i`.

    Negative indices are out of range here, not counted from the end.
    """
    return compose(first, affine(_lookup_index(i), _modify_index(i)))


def _lookup_key(k: typing.Any) -> Callable[[Mapping[typing.Any, typing.Any]], Option[typing.Any]]:
    def lookup(m: Mapping[typing.Any, typing.Any]) -> Option[typing.Any]:
        return Some(m[k]) if k in m else Nothing()

    return lookup


def key[S](first: Optic[S, Mapping[str, typing.Any]], k: str) -> Optic[S, typing.Any]:
    """Focus on the value at key `k`; absent keys are Nothing and never modified."""

    def modify(fn: Endo[typing.Any]) -> Endo[Mapping[str, typing.Any]]:
        def run(m: Mapping[str, typing.Any]) -> Mapping[str, typing.Any]:
            if k not in m:
                return m
            current = m[k]
            out = fn(current)
            return m if unchanged(current, out) else {**m, k: out}

        return run

    return compose(first, affine(_lookup_key(k), modify))


def _modify_slot[K](
    lookup: Callable[[Mapping[K, typing.Any]], Option[typing.Any]],
    find: Callable[[Mapping[K, typing.Any]], Option[K]],
    k: K,
) -> Callable[[Endo[Option[typing.Any]]], Endo[Mapping[K, typing.Any]]]:
    # `find` returns the key as stored in the mapping (may differ from k under a custom Eq)
    def modify(fn: Endo[Option[typing.Any]]) -> Endo[Mapping[K, typing.Any]]:
        def run(m: Mapping[K, typing.Any]) -> Mapping[K, typing.Any]:
            stored = find(m)
            match fn(lookup(m)):
                case Nothing():
                    match stored:
                        case Some(existing):
                            return {
                                kk: v for kk, v in m.items() if not (kk is existing or kk == existing)
                            }
                        case _:
                            return m
                case Some(value):
                    match stored:
                        case Some(existing) if unchanged(m[existing], value):
                            return m
                        case Some(existing):
                            return {**m, existing: value}
                        case _:
                            return {**m, k: value}
                case _ as unreachable:
                    assert_never(unreachable)

        return run

    return modify


def at_key[S](first: Optic[S, Mapping[str, typing.Any]], k: str) -> Optic[S, Option[typing.Any]]:
    """
    Focus on the Option of a key's value (not flattened).

    Writing Nothing() deletes the key, writing Some(v) inserts or overwrites.
    """
    lookup = _lookup_key(k)

    def find(m: Mapping[str, typing.Any]) -> Option[str]:
        return Some(k) if k in m else Nothing()

    return compose(first, getter(lookup, _modify_slot(lookup, find, k)))


def at_map[S, K](
    first: Optic[S, Mapping[K, typing.Any]],
    k: K,
    *,
    eq: Eq[K] | None = None,
) -> Optic[S, Option[typing.Any]]:
    """
    Like `at_key`, for mappings with arbitrary keys compared through an Eq.

    Without `eq` keys are compared with `==`. With a custom Eq the first
    stored key equal to `k` is the one read, replaced or deleted.
    """
    equals = (eq or EqStrict).equals

    def find(m: Mapping[K, typing.Any]) -> Option[K]:
        for stored in m:
            if equals(stored, k):
                return Some(stored)
        return Nothing()

    def lookup(m: Mapping[K, typing.Any]) -> Option[typing.Any]:
        return find(m).map(m.__getitem__)

    return compose(first, getter(lookup, _modify_slot(lookup, find, k)))


# ============================================================================
# Structure: pairs
# ============================================================================


def _get_first[A](pair: tuple[A, typing.Any]) -> A:
    return pair[0]


def _get_second[B](pair: tuple[typing.Any, B]) -> B:
    return pair[1]


def _modify_first(fn: Endo[typing.Any]) -> Endo[tuple[typing.Any, typing.Any]]:
    def run(pair: tuple[typing.Any, typing.Any]) -> tuple[typing.Any, typing.Any]:
        current, other = pair
        out = fn(current)
        return pair if unchanged(current, out) else (out, other)

    return run


def _modify_second(fn: Endo[typing.Any]) -> Endo[tuple[typing.Any, typing.Any]]:
    def run(pair: tuple[typing.Any, typing.Any]) -> tuple[typing.Any, typing.Any]:
        other, current = pair
        out = fn(current)
        return pair if unchanged(current, out) else (other, out)

    return run


_FIRST: typing.Final = getter(_get_first, _modify_first)
_SECOND: typing.Final = getter(_get_second, _modify_second)


def first[S](optic: Optic[S, tuple[typing.Any, typing.Any]]) -> Optic[S, typing.Any]:
    """Focus on the first half of a 2-tuple."""
    return compose(optic, _FIRST)


def second[S](optic: Optic[S, tuple[typing.Any, typing.Any]]) -> Optic[S, typing.Any]:
    """Focus on the second half of a 2-tuple."""
    return compose(optic, _SECOND)


# ============================================================================
# Structure: invariant map / isos
# ============================================================================


def imap[S, A, B](first: Optic[S, A], to: Callable[[A], B], back: Callable[[B], A]) -> Optic[S, B]:
    """Invariant map over the focus: view through `to`, write back through `back`."""

    def modify(fn: Endo[B]) -> Endo[A]:
        def run(a: A) -> A:
            return back(fn(to(a)))

        return run

    return compose(first, getter(to, modify))


def from_iso[S, A](iso: Iso[S, A]) -> Getter[S, A]:
    """EXACT optic from an Iso."""
    return imap(id_(), iso.view, iso.review)


# ============================================================================
# Refinement
# ============================================================================


def _refine[A](predicate: Predicate[A]) -> Affine[A, A]:
    def get(a: A) -> Option[A]:
        return Some(a) if predicate(a) else Nothing()

    def modify(fn: Endo[A]) -> Endo[A]:
        def run(a: A) -> A:
            return fn(a) if predicate(a) else a

        return run

    return affine(get, modify)


def filter_[S, A](first: Optic[S, A], predicate: Predicate[A]) -> Optic[S, A]:
    """Keep the focus only while `predicate` holds; updates skip failing values."""
    return compose(first, _refine(predicate))


def from_predicate[A](predicate: Predicate[A]) -> Affine[A, A]:
    """PARTIAL optic focused on the source whenever `predicate` holds."""
    return _refine(predicate)


def _is_not_none(a: object) -> bool:
    return a is not None


_NILABLE: typing.Final = _refine(_is_not_none)


def nilable[S, A](first: Optic[S, A | None]) -> Optic[S, A]:
    """Focus only on non-None values."""
    return compose(first, _NILABLE)


def _modify_some(fn: Endo[typing.Any]) -> Endo[Option[typing.Any]]:
    def run(o: Option[typing.Any]) -> Option[typing.Any]:
        match o:
            case Some(value):
                out = fn(value)
                return o if unchanged(value, out) else Some(out)
            case _:
                return o

    return run


_SOME: typing.Final = affine(identity, _modify_some)


def some[S](optic: Optic[S, Option[typing.Any]]) -> Optic[S, typing.Any]:
    """Focus inside a kungfu Option."""
    return compose(optic, _SOME)


# ============================================================================
# Sum branches (kungfu Result: Ok = right, Error = left)
# ============================================================================


def _get_right(r: Result[typing.Any, typing.Any]) -> Option[typing.Any]:
    match r:
        case Ok(value):
            return Some(value)
        case _:
            return Nothing()


def _modify_right(fn: Endo[typing.Any]) -> Endo[Result[typing.Any, typing.Any]]:
    def run(r: Result[typing.Any, typing.Any]) -> Result[typing.Any, typing.Any]:
        match r:
            case Ok(value):
                out = fn(value)
                return r if unchanged(value, out) else Ok(out)
            case _:
                return r

    return run


def _get_left(r: Result[typing.Any, typing.Any]) -> Option[typing.Any]:
    match r:
        case Ok(_):
            return Nothing()
        case Error(err):
            return Some(err)
        case _ as unreachable:
            assert_never(unreachable)


def _modify_left(fn: Endo[typing.Any]) -> Endo[Result[typing.Any, typing.Any]]:
    def run(r: Result[typing.Any, typing.Any]) -> Result[typing.Any, typing.Any]:
        match r:
            case Ok(_):
                return r
            case Error(err):
                out = fn(err)
                return r if unchanged(err, out) else Error(out)
            case _ as unreachable:
                assert_never(unreachable)

    return run


_RIGHT: typing.Final = affine(_get_right, _modify_right)
_LEFT: typing.Final = affine(_get_left, _modify_left)


def right[S](optic: Optic[S, Result[typing.Any, typing.Any]]) -> Optic[S, typing.Any]:
    """Focus on the Ok branch of a Result."""
    return compose(optic, _RIGHT)


def left[S](optic: Optic[S, Result[typing.Any, typing.Any]]) -> Optic[S, typing.Any]:
    """Focus on the Error branch of a Result."""
    return compose(optic, _LEFT)


# ============================================================================
# Traversal
# ============================================================================


def traverse[S](first: Optic[S, typing.Any], traversable: Traversable) -> Optic[S, typing.Any]:
    """
    Focus on every element of a container, using its Traversable.

    View collects elements in the container's natural order,
    modify maps the update over the container keeping its shape.
    """
    return compose(first, fold(traversable.to_tuple, traversable.modify))


def array[S](first: Optic[S, Sequence[typing.Any]]) -> Optic[S, typing.Any]:
    """Focus on every element of a list/tuple, in index order."""
    return traverse(first, TraversableSequence)


def record[S](first: Optic[S, Mapping[typing.Any, typing.Any]]) -> Optic[S, typing.Any]:
    """Focus on every value of a mapping, in insertion order."""
    return traverse(first, TraversableRecord)


def set_[S](first: Optic[S, typing.AbstractSet[typing.Any]]) -> Optic[S, typing.Any]:
    """Focus on every member of a set/frozenset."""
    return traverse(first, TraversableSet)


def tree[S](first: Optic[S, typing.Any]) -> Optic[S, typing.Any]:
    """Focus on every value of a Tree, pre-order."""
    return traverse(first, TraversableTree)


__all__ = (
    # Structure
    "at_key",
    "at_map",
    "first",
    "from_iso",
    "imap",
    "index",
    "key",
    "prop",
    "props",
    "second",
    # Refinement
    "filter_",
    "from_predicate",
    "nilable",
    "some",
    # Sum branches
    "left",
    "right",
    # Traversal
    "array",
    "record",
    "set_",
    "traverse",
    "tree",
)
