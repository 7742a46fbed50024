"""Internal helpers for focal.

Structural access and identity checks shared by the optic combinators
and the traversable instances. Not part of the public API, but usable
when writing custom optics with `getter`/`affine`/`fold`."""

from __future__ import annotations

import copy
import dataclasses
import typing
from collections.abc import Callable, Iterable, Mapping, Sequence

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def constant[T](value: T) -> Callable[[typing.Any], T]:
    """Function that ignores its argument and returns `value`."""

    def run(_: typing.Any) -> T:
        return value

    return run

# Change detection
_SCALARS: typing.Final = (bool, int, float, complex, str, bytes)

def unchanged(old: object, new: object) -> bool:
    """
    Check whether an update left a value as it was.

    Reference check for everything, plus value equality for builtin
    scalars of the same type (so `1000 + 0` counts as unchanged, but
    `1 -> True` does not). Nested structures are compared by reference only.
    """
    if old is new:
        return True
    return type(old) is type(new) and isinstance(old, _SCALARS) and old == new

# Field access (Mapping / dataclass / NamedTuple / model / plain object)
def get_field(obj: typing.Any, name: str) -> typing.Any:
    """
    Read a named field.

    Mappings are read with `.get`, so an absent optional key reads as None
    and can be narrowed with `nilable`. Everything else goes through getattr.
    """
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name)

def set_fields[T](obj: T, changes: Mapping[str, typing.Any]) -> T:
    """
    Return a copy of `obj` with `changes` applied. Never mutates `obj`.

    NOTE: Mappings come back as plain dict.
    """
    if isinstance(obj, Mapping):
        return typing.cast(T, {**obj, **changes})
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.replace(obj, **changes)
    if isinstance(obj, tuple) and hasattr(obj, "_replace"):
        return obj._replace(**changes)  # type: ignore[attr-defined]
    model_copy = getattr(obj, "model_copy", None)
    if callable(model_copy):
        return model_copy(update=dict(changes))
    clone = copy.copy(obj)
    for name, value in changes.items():
        object.__setattr__(clone, name, value)
    return clone

def pick(obj: typing.Any, names: Iterable[str]) -> dict[str, typing.Any]:
    """Sub-record of the named fields as a plain dict."""
    return {name: get_field(obj, name) for name in names}

# Sequence rebuilding
def rebuild[A](original: Sequence[A], items: Iterable[A]) -> Sequence[A]:
    """
    Build a sequence of the same kind as `original`.

    list stays list, NamedTuple stays the same NamedTuple (via `_make`),
    anything else becomes a plain tuple.
    """
    if isinstance(original, list):
        return list(items)
    if isinstance(original, tuple) and hasattr(original, "_make"):
        return type(original)._make(items)  # type: ignore[attr-defined]
    return tuple(items)

def all_unchanged[A](old: Iterable[A], new: Iterable[A]) -> bool:
    """Pairwise `unchanged` over two equally long iterables."""
    return all(unchanged(a, b) for a, b in zip(old, new, strict=True))

__all__ = (
    # Identity
    "identity",
    "constant",
    # Change detection
    "all_unchanged",
    "unchanged",
    # Fields
    "get_field",
    "set_fields",
    "pick",
    # Sequences
    "rebuild",
)
