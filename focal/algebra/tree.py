from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Tree[A]:
    """Rose tree: a value and a forest of child trees."""

    value: A
    forest: tuple[Tree[A], ...] = ()

    @staticmethod
    def of[T](value: T, *forest: Tree[T]) -> Tree[T]:
        """
        Example:
            Tree.of(1, Tree.of(2), Tree.of(3, Tree.of(4)))
        """
        return Tree(value, forest)


__all__ = ("Tree",)
