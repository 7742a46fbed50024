from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Iso[S, A]:
    """Lossless conversion pair: review(view(s)) == s and view(review(a)) == a."""

    view: Callable[[S], A]
    review: Callable[[A], S]


__all__ = ("Iso",)
