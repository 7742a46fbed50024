"""
Optics
======

Composable view/modify pairs over immutable nested data.

Оптика = (view, modify). Сила (Strength) говорит сколько фокусов:
EXACT (ровно один), PARTIAL (0..1), MANY (0..n). Композиция берет
максимум сил и поднимает обе стороны через cast.

Example:
    from focal import optics as O

    names = O.id_().prop("children").nilable().array().prop("name")
    O.view(names, jackie)                          # ("Brandon",)
    O.modify(names, str.upper)(jackie)             # new Jackie, children renamed
"""

from .aggregate import concat_all
from .combinators import (
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
)
from .core import (
    Affine,
    Fold,
    Getter,
    Optic,
    Viewer,
    affine,
    ap,
    cast,
    compose,
    fold,
    getter,
    id_,
    map_,
    modify,
    of,
    optic,
    replace,
    view,
    viewer,
)
from .monad import Monad, MonadIdentity, MonadOption, MonadSequence, monad_for
from .strength import Strength, align

__all__ = (
    # Strength lattice
    "Strength",
    "align",
    # Container monads
    "Monad",
    "MonadIdentity",
    "MonadOption",
    "MonadSequence",
    "monad_for",
    # Core types
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
    # Combinators - structure
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
    # Combinators - refinement
    "filter_",
    "from_predicate",
    "nilable",
    "some",
    # Combinators - sum branches
    "left",
    "right",
    # Combinators - traversal
    "array",
    "record",
    "set_",
    "traverse",
    "tree",
    # Aggregation
    "concat_all",
)
