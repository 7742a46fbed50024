"""
Optic core.

An optic is two functions over a source S and a focus A:

    view:   S -> Focus[A]          (container depends on strength)
    modify: (A -> A) -> (S -> S)

There is no separate `set`: replace(value) is modify(constant(value)).

Architecture:
- Viewer[S, A]  - tag + view (read-only half, supports map/ap)
- Optic[S, A]   - Viewer + modify (the unit of composition)
- cast()        - natural transformations EXACT -> PARTIAL -> MANY
- compose()     - align, cast both sides up, chain views, nest modifies

Fluent methods on Optic delegate to `combinators` / `aggregate`, so

    id_().prop("children").nilable().array().prop("name")

is the same optic as the nested function calls.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Nothing, Option, Some

from .._errors import InvalidCastError
from .._helpers import constant, identity
from .._types import Endo, Modify, Predicate, View
from .monad import monad_for
from .strength import Strength, align

if typing.TYPE_CHECKING:
    from ..algebra.eq import Eq
    from ..algebra.monoid import Monoid
    from ..algebra.traversable import Traversable

logger = logging.getLogger(__name__)


# ============================================================================
# Viewer / Optic
# ============================================================================


@dataclass(frozen=True, slots=True)
class Viewer[S, A]:
    """
    Read-only half of an optic.

    `view` returns a bare A for EXACT, Option[A] for PARTIAL and
    tuple[A, ...] for MANY.
    """

    tag: Strength
    view: View[S, A]

    def map[B](self, f: Callable[[A], B], /) -> Viewer[S, B]:
        """Map over the focus, inside whatever container the strength uses."""
        return map_(self, f)

    def ap[B](self, arg: Viewer[S, typing.Any], /) -> Viewer[S, B]:
        """Apply a viewer of functions to a viewer of arguments."""
        return ap(self, arg)


@dataclass(frozen=True, slots=True)
class Optic[S, A](Viewer[S, A]):
    """
    Viewer plus a modify function sharing the same S and A.

    Immutable and stateless. Every combinator allocates a fresh Optic,
    so optics can be built once at import time and shared freely.
    """

    modify: Modify[S, A]

    # Composition

    def compose[B](self, second: Optic[A, B], /) -> Optic[S, B]:
        return compose(self, second)

    def replace(self, value: A, /) -> Endo[S]:
        """Update function that sets every focus to `value`."""
        return replace(self, value)

    # Structure

    def prop(self, name: str, /) -> Optic[S, typing.Any]:
        from .combinators import prop
        return prop(self, name)

    def props(self, first: str, second: str, /, *rest: str) -> Optic[S, dict[str, typing.Any]]:
        from .combinators import props
        return props(self, first, second, *rest)

    def index(self, i: int, /) -> Optic[S, typing.Any]:
        from .combinators import index
        return index(self, i)

    def key(self, k: str, /) -> Optic[S, typing.Any]:
        from .combinators import key
        return key(self, k)

    def at_key(self, k: str, /) -> Optic[S, Option[typing.Any]]:
        from .combinators import at_key
        return at_key(self, k)

    def at_map(self, k: typing.Any, /, *, eq: Eq[typing.Any] | None = None) -> Optic[S, Option[typing.Any]]:
        from .combinators import at_map
        return at_map(self, k, eq=eq)

    def first(self) -> Optic[S, typing.Any]:
        from .combinators import first
        return first(self)

    def second(self) -> Optic[S, typing.Any]:
        from .combinators import second
        return second(self)

    def imap[B](self, to: Callable[[A], B], back: Callable[[B], A], /) -> Optic[S, B]:
        from .combinators import imap
        return imap(self, to, back)

    # Refinement

    def filter(self, predicate: Predicate[A], /) -> Optic[S, A]:
        from .combinators import filter_
        return filter_(self, predicate)

    def nilable(self) -> Optic[S, A]:
        from .combinators import nilable
        return nilable(self)

    def some(self) -> Optic[S, typing.Any]:
        from .combinators import some
        return some(self)

    def right(self) -> Optic[S, typing.Any]:
        from .combinators import right
        return right(self)

    def left(self) -> Optic[S, typing.Any]:
        from .combinators import left
        return left(self)

    # Traversal

    def traverse(self, traversable: Traversable, /) -> Optic[S, typing.Any]:
        from .combinators import traverse
        return traverse(self, traversable)

    def array(self) -> Optic[S, typing.Any]:
        from .combinators import array
        return array(self)

    def record(self) -> Optic[S, typing.Any]:
        from .combinators import record
        return record(self)

    def set(self) -> Optic[S, typing.Any]:
        from .combinators import set_
        return set_(self)

    def tree(self) -> Optic[S, typing.Any]:
        from .combinators import tree
        return tree(self)

    # Aggregation

    def concat_all[I](self, monoid: Monoid[I], f: Callable[[A], I], /) -> Callable[[S], I]:
        from .aggregate import concat_all
        return concat_all(self, monoid, f)


# Named views of the same runtime type, kept for readability of signatures.
# NOTE: Strength is checked at runtime via `tag`, not by the type checker.
type Getter[S, A] = Optic[S, A]
type Affine[S, A] = Optic[S, A]
type Fold[S, A] = Optic[S, A]


# ============================================================================
# Constructors
# ============================================================================


def viewer[S, A](tag: Strength, view: View[S, A]) -> Viewer[S, A]:
    return Viewer(tag, view)


def optic[S, A](tag: Strength, view: View[S, A], modify: Modify[S, A]) -> Optic[S, A]:
    return Optic(tag, view, modify)


def getter[S, A](view: Callable[[S], A], modify: Modify[S, A]) -> Getter[S, A]:
    """Construct an EXACT optic from view and modify functions."""
    return Optic(Strength.EXACT, view, modify)


def affine[S, A](view: Callable[[S], Option[A]], modify: Modify[S, A]) -> Affine[S, A]:
    """Construct a PARTIAL optic from view and modify functions."""
    return Optic(Strength.PARTIAL, view, modify)


def fold[S, A](view: Callable[[S], Iterable[A]], modify: Modify[S, A]) -> Fold[S, A]:
    """
    Construct a MANY optic from view and modify functions.

    The view result is normalized to a tuple, so any iterable is accepted.
    """

    def as_tuple(s: S) -> tuple[A, ...]:
        return tuple(view(s))

    return Optic(Strength.MANY, as_tuple, modify)


_IDENTITY: typing.Final[Getter[typing.Any, typing.Any]] = getter(identity, identity)


def id_[A]() -> Getter[A, A]:
    """
    The starting place for most optics: view is the source itself,
    modify applies the update to the source directly.
    """
    return _IDENTITY


# ============================================================================
# Cast (natural transformations between strengths)
# ============================================================================


def cast[S, A](source: Viewer[S, A], tag: Strength) -> View[S, A]:
    """
    Lift a view function into the container of a stronger `tag`.

        EXACT   -> PARTIAL : a       -> Some(a)
        EXACT   -> MANY    : a       -> (a,)
        PARTIAL -> MANY    : Nothing -> (), Some(a) -> (a,)

    Same strength returns the original view function untouched.
    Downcasts raise InvalidCastError: compose and ap always align first,
    so they never ask for one.
    """
    view = source.view
    match source.tag, tag:
        case (u, v) if u is v:
            return view
        case Strength.EXACT, Strength.PARTIAL:

            def exact_to_partial(s: S) -> Option[A]:
                return Some(view(s))

            return exact_to_partial
        case Strength.EXACT, Strength.MANY:

            def exact_to_many(s: S) -> tuple[A, ...]:
                return (view(s),)

            return exact_to_many
        case Strength.PARTIAL, Strength.MANY:

            def partial_to_many(s: S) -> tuple[A, ...]:
                match view(s):
                    case Some(a):
                        return (a,)
                    case Nothing():
                        return ()
                    case _ as unreachable:
                        assert_never(unreachable)

            return partial_to_many
        case _:
            logger.error("Invalid optic cast %s -> %s", source.tag.name, tag.name)
            raise InvalidCastError(source.tag, tag)


# ============================================================================
# Composition
# ============================================================================


def compose[S, A, B](first: Optic[S, A], second: Optic[A, B]) -> Optic[S, B]:
    """
    Compose two optics:

    1. tag = align(first.tag, second.tag)
    2. cast both view functions up to tag (one of the casts is a noop)
    3. view   = chain first view into second view, in tag's monad
    4. modify = second.modify then first.modify (outer optic wraps inner update)
    """
    tag = align(first.tag, second.tag)
    chain = monad_for(tag).chain
    view_first = cast(first, tag)
    view_second = cast(second, tag)
    logger.debug("compose %s . %s -> %s", first.tag.name, second.tag.name, tag.name)

    def view(s: S) -> typing.Any:
        return chain(view_first(s), view_second)

    def modify(fn: Endo[B]) -> Endo[S]:
        return first.modify(second.modify(fn))

    return Optic(tag, view, modify)


# ============================================================================
# Viewer algebra
# ============================================================================


def of[A](value: A) -> Viewer[typing.Any, A]:
    """EXACT viewer that ignores its source and returns `value`."""
    return Viewer(Strength.EXACT, constant(value))


def map_[S, A, B](source: Viewer[S, A], f: Callable[[A], B]) -> Viewer[S, B]:
    """Map over the focus of a viewer, keeping its strength."""
    container_map = monad_for(source.tag).map
    view = source.view

    def run(s: S) -> typing.Any:
        return container_map(view(s), f)

    return Viewer(source.tag, run)


def ap[S, A, B](fns: Viewer[S, Callable[[A], B]], arg: Viewer[S, A]) -> Viewer[S, B]:
    """Apply a viewer of functions to a viewer of values, at their aligned strength."""
    tag = align(fns.tag, arg.tag)
    container_ap = monad_for(tag).ap
    view_fns = cast(fns, tag)
    view_arg = cast(arg, tag)

    def run(s: S) -> typing.Any:
        return container_ap(view_fns(s), view_arg(s))

    return Viewer(tag, run)


# ============================================================================
# Consumption
# ============================================================================


def view[S](source: Viewer[S, typing.Any], s: S) -> typing.Any:
    """Run a viewer against a source."""
    return source.view(s)


def modify[S, A](target: Optic[S, A], fn: Endo[A]) -> Endo[S]:
    """Lift an update over the focus into an update over the source."""
    return target.modify(fn)


def replace[S, A](target: Optic[S, A], value: A) -> Endo[S]:
    """Update function setting every focus to `value`."""
    return target.modify(constant(value))


__all__ = (
    # Types
    "Affine",
    "Fold",
    "Getter",
    "Optic",
    "Viewer",
    # Constructors
    "affine",
    "fold",
    "getter",
    "id_",
    "optic",
    "viewer",
    # Engine
    "cast",
    "compose",
    # Viewer algebra
    "ap",
    "map_",
    "of",
    # Consumption
    "modify",
    "replace",
    "view",
)
