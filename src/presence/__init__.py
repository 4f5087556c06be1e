"""presence — existence checking, independent of truthiness.

``exists(value)`` answers "does this value represent present data?"
rather than "is this value conditionally true?".  The derived operators
(``fallback``, ``precondition``, ``maybe_getattr``, ``maybe_getitem``,
``assign_if_absent``) are built on that single predicate.
"""

from presence.domain.errors import EvaluationError, PresenceError, TargetError
from presence.domain.evaluator import exists, is_absent
from presence.domain.operators import (
    Attr,
    Item,
    fallback,
    maybe_chain,
    maybe_getattr,
    maybe_getitem,
    precondition,
)
from presence.domain.protocol import ExistenceCheckable
from presence.domain.registry import (
    existence_check,
    get_existence_check,
    register_existence_check,
    registered_types,
    unregister_existence_check,
)
from presence.domain.targets import (
    AttrTarget,
    ItemTarget,
    NameTarget,
    assign_if_absent,
    attr,
    item,
    var,
)

__version__ = "0.1.0"

__all__ = [
    "Attr",
    "AttrTarget",
    "EvaluationError",
    "ExistenceCheckable",
    "Item",
    "ItemTarget",
    "NameTarget",
    "PresenceError",
    "TargetError",
    "__version__",
    "assign_if_absent",
    "attr",
    "existence_check",
    "exists",
    "fallback",
    "get_existence_check",
    "is_absent",
    "item",
    "maybe_chain",
    "maybe_getattr",
    "maybe_getitem",
    "precondition",
    "register_existence_check",
    "registered_types",
    "unregister_existence_check",
    "var",
]
