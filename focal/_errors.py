from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .optics.strength import Strength


class InvalidCastError(AssertionError):
    """A viewer was asked to narrow to a weaker strength.

    Composition only ever casts up to the aligned strength, so reaching
    this means the composition algorithm itself is broken.
    """

    source: Strength
    target: Strength

    def __init__(self, source: Strength, target: Strength) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Attempted to cast {source.name} to {target.name}")


__all__ = ("InvalidCastError",)
