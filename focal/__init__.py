"""
Focal: optics and environment-reading effects over kungfu containers.

Core building blocks for viewing and updating immutable nested data,
plus a Reader-style async Result for dependency-injected pipelines.

Architecture:
- optics  - strength-indexed view/modify pairs, composition, combinators
- algebra - typeclass records (Monoid, Eq, Iso, Traversable) and Tree
- effect  - FnAsyncEither (env -> LazyCoroResult)

Option/Result are kungfu's (Some/Nothing, Ok/Error).
"""

import logging

# Core types
from ._types import Endo, Focus, Modify, Predicate, View

# Internal helpers (for custom optics)
from . import _helpers

# Optics
from . import optics
from .optics import (
    Affine,
    Fold,
    Getter,
    Optic,
    Strength,
    Viewer,
    # Engine
    align,
    cast,
    compose,
    # Constructors
    affine,
    fold,
    getter,
    id_,
    optic,
    viewer,
    # Viewer algebra
    ap,
    map_,
    of,
    # Consumption
    modify,
    replace,
    view,
    # Combinators
    array,
    at_key,
    at_map,
    filter_,
    first,
    from_iso,
    from_predicate,
    imap,
    index,
    key,
    left,
    nilable,
    prop,
    props,
    record,
    right,
    second,
    set_,
    some,
    traverse,
    tree,
    # Aggregation
    concat_all,
)

# Algebra
from . import algebra
from .algebra import (
    Eq,
    EqIdentity,
    EqStrict,
    Iso,
    Monoid,
    MonoidAll,
    MonoidAny,
    MonoidProduct,
    MonoidStr,
    MonoidSum,
    MonoidTuple,
    Traversable,
    TraversableRecord,
    TraversableSequence,
    TraversableSet,
    TraversableTree,
    Tree,
)

# Effects
from . import effect
from .effect import FnAsyncEither, fn_error, fn_ok

# Errors
from ._errors import InvalidCastError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Endo",
    "Focus",
    "Modify",
    "Predicate",
    "View",
    # Internal helpers (for custom optics)
    "_helpers",
    # Optics module
    "optics",
    # Optics - types
    "Affine",
    "Fold",
    "Getter",
    "Optic",
    "Strength",
    "Viewer",
    # Optics - engine
    "align",
    "cast",
    "compose",
    # Optics - constructors
    "affine",
    "fold",
    "getter",
    "id_",
    "optic",
    "viewer",
    # Optics - viewer algebra
    "ap",
    "map_",
    "of",
    # Optics - consumption
    "modify",
    "replace",
    "view",
    # Optics - combinators
    "array",
    "at_key",
    "at_map",
    "filter_",
    "first",
    "from_iso",
    "from_predicate",
    "imap",
    "index",
    "key",
    "left",
    "nilable",
    "prop",
    "props",
    "record",
    "right",
    "second",
    "set_",
    "some",
    "traverse",
    "tree",
    # Optics - aggregation
    "concat_all",
    # Algebra module
    "algebra",
    "Eq",
    "EqIdentity",
    "EqStrict",
    "Iso",
    "Monoid",
    "MonoidAll",
    "MonoidAny",
    "MonoidProduct",
    "MonoidStr",
    "MonoidSum",
    "MonoidTuple",
    "Traversable",
    "TraversableRecord",
    "TraversableSequence",
    "TraversableSet",
    "TraversableTree",
    "Tree",
    # Effect module
    "effect",
    "FnAsyncEither",
    "fn_error",
    "fn_ok",
    # Errors
    "InvalidCastError",
)
