"""
Container monads per strength.

Each strength has a container for its view results, and composition
needs that container's `chain`. The table is static and closed:

    EXACT   -> Identity (bare value)
    PARTIAL -> kungfu Option (Some / Nothing)
    MANY    -> tuple

Lookup happens once, when an optic is composed, never per view call.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Nothing, Option, Some

from .._helpers import identity
from .strength import Strength

# ============================================================================
# Monad typeclass
# ============================================================================


@dataclass(frozen=True, slots=True)
class Monad:
    """
    Typeclass record for a container at one strength.

    Argument order is data-first (`map(ma, f)`), matching kungfu's
    method style `ma.map(f)`.
    """

    of: Callable[[typing.Any], typing.Any]
    map: Callable[[typing.Any, Callable[[typing.Any], typing.Any]], typing.Any]
    chain: Callable[[typing.Any, Callable[[typing.Any], typing.Any]], typing.Any]
    ap: Callable[[typing.Any, typing.Any], typing.Any]


# ============================================================================
# Identity
# ============================================================================


def _identity_map[A, B](ma: A, f: Callable[[A], B]) -> B:
    return f(ma)


def _identity_ap[A, B](mf: Callable[[A], B], ma: A) -> B:
    return mf(ma)


MonadIdentity: typing.Final = Monad(
    of=identity,
    map=_identity_map,
    chain=_identity_map,
    ap=_identity_ap,
)


# ============================================================================
# Option
# ============================================================================


def _option_map[A, B](ma: Option[A], f: Callable[[A], B]) -> Option[B]:
    # Nothing.map returns itself
    return ma.map(f)


def _option_chain[A, B](ma: Option[A], f: Callable[[A], Option[B]]) -> Option[B]:
    return ma.then(f)


def _option_ap[A, B](mf: Option[Callable[[A], B]], ma: Option[A]) -> Option[B]:
    match mf:
        case Some(f):
            return ma.map(f)
        case Nothing():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


MonadOption: typing.Final = Monad(
    of=Some,
    map=_option_map,
    chain=_option_chain,
    ap=_option_ap,
)


# ============================================================================
# Sequence (tuple)
# ============================================================================


def _sequence_of[A](a: A) -> tuple[A, ...]:
    return (a,)


def _sequence_map[A, B](ma: tuple[A, ...], f: Callable[[A], B]) -> tuple[B, ...]:
    return tuple(f(a) for a in ma)


def _sequence_chain[A, B](ma: tuple[A, ...], f: Callable[[A], tuple[B, ...]]) -> tuple[B, ...]:
    return tuple(b for a in ma for b in f(a))


def _sequence_ap[A, B](mf: tuple[Callable[[A], B], ...], ma: tuple[A, ...]) -> tuple[B, ...]:
    return tuple(f(a) for f in mf for a in ma)


MonadSequence: typing.Final = Monad(
    of=_sequence_of,
    map=_sequence_map,
    chain=_sequence_chain,
    ap=_sequence_ap,
)


# ============================================================================
# Dispatch
# ============================================================================


def monad_for(tag: Strength) -> Monad:
    """Container monad for a strength."""
    match tag:
        case Strength.EXACT:
            return MonadIdentity
        case Strength.PARTIAL:
            return MonadOption
        case Strength.MANY:
            return MonadSequence
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "Monad",
    "MonadIdentity",
    "MonadOption",
    "MonadSequence",
    "monad_for",
)
