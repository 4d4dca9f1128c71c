"""
Concrete Tensor implementation (NumPy backend).

This module provides the concrete `Tensor` that satisfies the domain-level
`ITensor` protocol. A Tensor owns a flat, read-only NumPy buffer of its element
kind, a row-major shape, and (for derived tensors) a `Context` recording its
parents and local gradient rule.

Design notes
------------
- Behavior is assembled from mixins: memory/factories, shape & indexing,
  elementwise dispatch, arithmetic, unary and autograd. This class only holds
  state and the metadata accessors.
- Tensors are immutable. Operations never write into an existing buffer;
  reshape and rank-reducing indexing may share the (read-only) buffer of
  their source.
- Equality is identity: the class does not define ``__eq__``, so graph nodes
  can be matched with ``is`` and used as dictionary keys.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from ...domain._tensor import ITensor
from ...domain._element_kind import DEFAULT_KIND, ElementKind, KindLike
from ...domain._grad_rule import GradRule
from ...domain._errors import ShapeMismatchError
from ...domain.utils._layout import numel
from ._kinds import dtype_of, store_as_kind
from ._tensor_context import Context

from .mixins import (
    TensorMixinAutograd,
    TensorMixinUnary,
    TensorMixinArithmetic,
    TensorMixinElementwise,
    TensorMixinShape,
    TensorMixinMemory,
)


def _validate_shape(shape: Sequence[Any]) -> tuple[int, ...]:
    out = []
    for d in shape:
        if isinstance(d, bool) or not isinstance(d, (int, np.integer)):
            raise TypeError(f"Shape extents must be integers, got {d!r}")
        if d < 0:
            raise ShapeMismatchError(
                "non-negative extents", tuple(shape), f"Negative extent in shape {tuple(shape)}"
            )
        out.append(int(d))
    return tuple(out)


class Tensor(
    TensorMixinAutograd,
    TensorMixinUnary,
    TensorMixinArithmetic,
    TensorMixinElementwise,
    TensorMixinShape,
    TensorMixinMemory,
    ITensor,
):
    """
    Concrete tensor implementation (NumPy CPU backend).

    Parameters
    ----------
    buffer : array_like
        Element values in row-major order. Any shape is accepted; values are
        flattened and stored into a read-only buffer of ``kind``.
    shape : Sequence[int]
        Tensor shape. ``()`` denotes a scalar held in a one-element buffer.
    kind : KindLike, optional
        Element kind. Defaults to ``float32``.
    ctx : Optional[Context], optional
        Graph record of the producing operation. Set internally by operations;
        ``None`` makes a leaf.

    Raises
    ------
    ShapeMismatchError
        If the number of values differs from the product of ``shape``.
    TypeError
        If a shape extent is not an integer.
    ValueError
        If ``kind`` is not a supported element kind.

    Notes
    -----
    User code normally builds leaves through the factories
    (`from_nested`, `from_numpy`, `zeros`, `ones`, `rand`).
    """

    # NumPy scalars on the left of an operator defer to the reflected dunders.
    __array_ufunc__ = None

    def __init__(
        self,
        buffer: Any,
        shape: Sequence[int],
        kind: KindLike = DEFAULT_KIND,
        *,
        ctx: Optional[Context] = None,
    ) -> None:
        self._shape = _validate_shape(shape)
        self._kind = ElementKind.parse(kind)
        self._buffer = store_as_kind(buffer, self._kind)
        if self._buffer.size != numel(self._shape):
            raise ShapeMismatchError(
                numel(self._shape),
                self._buffer.size,
                f"Buffer of {self._buffer.size} elements does not fit shape "
                f"{self._shape}",
            )
        self._ctx: Optional[Context] = ctx

    def __repr__(self) -> str:
        """
        Return a human-readable string representation of the tensor.

        Returns
        -------
        str
            Shape, element kind, gradient rule and values.
        """
        return (
            f"Tensor(shape={self._shape}, kind={self._kind}, "
            f"grad_rule={self.grad_rule.value}, data={self.data!r})"
        )

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape; ``()`` for a scalar.
        """
        return self._shape

    @property
    def kind(self) -> ElementKind:
        """
        Return the element kind of the tensor.

        Returns
        -------
        ElementKind
            The numeric precision tag fixed at construction.
        """
        return self._kind

    @property
    def dtype(self) -> np.dtype:
        """NumPy dtype of the backing buffer."""
        return dtype_of(self._kind)

    @property
    def ndim(self) -> int:
        return len(self._shape)

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.

        Returns
        -------
        int
            Product of the shape extents (1 for a scalar).
        """
        return numel(self._shape)

    @property
    def parents(self) -> tuple["Tensor", ...]:
        """
        Return the tensors consumed to derive this tensor.

        Returns
        -------
        tuple[Tensor, ...]
            Operands of the producing operation in order; empty for leaves.
        """
        if self._ctx is None:
            return ()
        return tuple(self._ctx.parents)

    @property
    def grad_rule(self) -> GradRule:
        """
        Return the local gradient rule tag of this tensor.

        Returns
        -------
        GradRule
            The producing operation's rule, or `GradRule.IDENTITY` for leaves.
        """
        if self._ctx is None:
            return GradRule.IDENTITY
        return self._ctx.rule

    @property
    def is_leaf(self) -> bool:
        """True if the tensor was not produced by an operation."""
        return self._ctx is None

    def _get_ctx(self) -> Optional[Context]:
        """
        Return the graph context attached to this tensor, if any.

        Notes
        -----
        This is an internal hook intended for use by the autograd engine and
        tests.
        """
        return self._ctx


__all__ = ["Tensor"]
