"""
Core type definitions for focal.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Option

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Endo = update function over a focus, A -> A
type Endo[A] = Callable[[A], A]

# Modify = lifts an update over the focus into an update over the source
type Modify[S, A] = Callable[[Endo[A]], Endo[S]]

# Focus = whatever a view function hands back, depending on strength:
#   EXACT   -> A
#   PARTIAL -> Option[A]
#   MANY    -> tuple[A, ...]
# NOTE: Python не умеет индексировать тип контейнера по тегу,
#       поэтому это объединение, а не type-level функция.
type Focus[A] = A | Option[A] | tuple[A, ...]

# View = S -> Focus[A]
type View[S, A] = Callable[[S], typing.Any]

__all__ = (
    "Endo",
    "Focus",
    "Modify",
    "Predicate",
    "View",
)
