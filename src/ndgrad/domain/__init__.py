"""
Backend-agnostic domain layer of ndgrad.

Nothing in this package imports NumPy: it holds the error hierarchy, the
`ElementKind` and `GradRule` tags, the `ITensor` protocol and pure-Python
layout utilities.
"""

from ._errors import (
    ShapeMismatchError,
    BroadcastError,
    InvalidShapeError,
    BoundsError,
    InvalidPermutationError,
    ElementKindMismatchError,
)
from ._element_kind import ElementKind, DEFAULT_KIND, KindLike
from ._grad_rule import GradRule
from ._tensor import ITensor

__all__ = [
    ShapeMismatchError.__name__,
    BroadcastError.__name__,
    InvalidShapeError.__name__,
    BoundsError.__name__,
    InvalidPermutationError.__name__,
    ElementKindMismatchError.__name__,
    ElementKind.__name__,
    "DEFAULT_KIND",
    "KindLike",
    GradRule.__name__,
    ITensor.__name__,
]
