"""
Algebraic collaborators for optics
==================================

Typeclass records (frozen dataclasses) and the Tree container.
Option / Result come from kungfu and are used as-is.
"""

from .eq import Eq, EqIdentity, EqStrict
from .iso import Iso
from .monoid import (
    Monoid,
    MonoidAll,
    MonoidAny,
    MonoidProduct,
    MonoidStr,
    MonoidSum,
    MonoidTuple,
)
from .traversable import (
    Traversable,
    TraversableRecord,
    TraversableSequence,
    TraversableSet,
    TraversableTree,
)
from .tree import Tree

__all__ = (
    # Eq
    "Eq",
    "EqIdentity",
    "EqStrict",
    # Iso
    "Iso",
    # Monoid
    "Monoid",
    "MonoidAll",
    "MonoidAny",
    "MonoidProduct",
    "MonoidStr",
    "MonoidSum",
    "MonoidTuple",
    # Traversable
    "Traversable",
    "TraversableRecord",
    "TraversableSequence",
    "TraversableSet",
    "TraversableTree",
    # Containers
    "Tree",
)
