"""
ndgrad: a small N-dimensional tensor engine with symbolic reverse-mode
differentiation.

Build typed, shaped tensors, combine them with broadcasting elementwise
arithmetic and transcendental functions, and ask any result for its
derivative with respect to any tensor in its history:

    >>> from ndgrad import Tensor
    >>> a = Tensor.from_nested(2.0)
    >>> b = Tensor.from_nested(5.0)
    >>> c = a * b
    >>> c.backward(a).item()
    5.0
"""

from .domain import (
    ShapeMismatchError,
    BroadcastError,
    InvalidShapeError,
    BoundsError,
    InvalidPermutationError,
    ElementKindMismatchError,
    ElementKind,
    DEFAULT_KIND,
    GradRule,
    ITensor,
)
from .domain.utils import (
    flatten,
    shape_of,
    rebuild,
    numel,
    row_major_strides,
    ravel_index,
    unravel_index,
)
from .infrastructure.tensor import Tensor

__version__ = "0.1.0"

__all__ = [
    "Tensor",
    "ITensor",
    "ElementKind",
    "DEFAULT_KIND",
    "GradRule",
    "ShapeMismatchError",
    "BroadcastError",
    "InvalidShapeError",
    "BoundsError",
    "InvalidPermutationError",
    "ElementKindMismatchError",
    "flatten",
    "shape_of",
    "rebuild",
    "numel",
    "row_major_strides",
    "ravel_index",
    "unravel_index",
]
