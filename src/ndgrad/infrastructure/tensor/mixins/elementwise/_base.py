"""
Elementwise dispatch mixin.

This module defines `TensorMixinElementwise`, the engine behind every
arithmetic and unary Tensor operation. Given a kernel and the operand tensors,
it unifies their shapes by broadcasting to a reference shape, applies the
kernel position-wise, and records the graph `Context` of the result.

Reference shape
---------------
Among the receiver and all operands, the reference is the one with the
largest rank; ties are broken by the largest element count, then by first
occurrence. Every other candidate is broadcast to the reference shape.

Numerics
--------
Kernels run over float64 views of the buffers under ``np.errstate(all=
"ignore")``: division by zero and logarithms of non-positive values produce
``inf``/``nan`` silently. The result is stored into the receiver's element
kind (see `_kinds.store_as_kind`).
"""

from typing import Any, Callable, Sequence, Union
from abc import ABC

import numpy as np

from .....domain._tensor import ITensor
from .....domain._grad_rule import GradRule
from .....domain._errors import ElementKindMismatchError
from ..._tensor_context import Context


Number = Union[int, float]
"""Scalar types accepted by Tensor arithmetic operators."""

Kernel = Callable[..., np.ndarray]


class TensorMixinElementwise(ABC):
    """
    Mixin implementing broadcasting elementwise dispatch.

    Notes
    -----
    - The mixin never mutates operands; each call allocates one output tensor.
    - Parents are recorded as the *original* operands, not their broadcast
      copies, so gradients are expressed against the tensors the caller built.
    """

    def _as_tensor_like(self: ITensor, x: Union["ITensor", Number]) -> "ITensor":
        """
        Convert an operand into a Tensor compatible with this tensor.

        If `x` is already a Tensor, it is returned as-is. If `x` is a Python
        or NumPy scalar, a rank-0 leaf tensor of this tensor's element kind is
        created; broadcasting then expands it as needed.

        Raises
        ------
        TypeError
            If `x` is neither a Tensor nor a supported scalar type.
        """
        if isinstance(x, TensorMixinElementwise):
            return x
        if isinstance(x, (int, float, np.integer, np.floating)):
            return type(self)(np.asarray([x], dtype=np.float64), (), self.kind)
        raise TypeError(f"Unsupported operand type: {type(x)!r}")

    @staticmethod
    def _reference_index(candidates: Sequence["ITensor"]) -> int:
        """
        Return the index of the candidate whose shape all others broadcast to.

        Largest rank wins; ties go to the largest element count, then to the
        earliest candidate.
        """
        return max(
            range(len(candidates)),
            key=lambda i: (len(candidates[i].shape), candidates[i].numel()),
        )

    def _operate(
        self: ITensor, kernel: Kernel, rule: GradRule, *operands: Any
    ) -> "ITensor":
        """
        Apply ``kernel`` position-wise over ``self`` and ``operands``.

        Parameters
        ----------
        kernel : Callable[..., np.ndarray]
            Vectorized function receiving one float64 array per candidate
            (``self`` first) and returning the result array.
        rule : GradRule
            Local gradient rule recorded on the output.
        *operands : Union[ITensor, Number]
            Remaining operands (one for binary ops, none for unary ops).

        Returns
        -------
        ITensor
            New tensor of the reference shape and ``self.kind`` whose parents
            are ``(self, *operands)``.

        Raises
        ------
        ElementKindMismatchError
            If an operand has a different element kind.
        BroadcastError
            If an operand cannot be broadcast to the reference shape.
        """
        Tensor = type(self)
        others = tuple(self._as_tensor_like(o) for o in operands)
        for o in others:
            if o.kind is not self.kind:
                raise ElementKindMismatchError(str(self.kind), str(o.kind))

        candidates = (self, *others)
        ref_shape = candidates[self._reference_index(candidates)].shape

        views = [
            c.broadcast_to(*ref_shape)._buffer.astype(np.float64, copy=False)
            for c in candidates
        ]
        with np.errstate(all="ignore"):
            result = kernel(*views)

        return Tensor(
            result, ref_shape, self.kind, ctx=Context(parents=candidates, rule=rule)
        )
