"""
Arithmetic mixin defining broadcasting elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, the mixin that
implements the binary arithmetic API (``add``, ``sub``, ``mul``, ``div``) and
the matching Python operators on top of the elementwise dispatch engine.

Each method applies a NumPy kernel through ``_operate`` and tags the output
with the `GradRule` whose derivative composition is registered in the
autograd mixin.
"""

from typing import Union
from abc import ABC

import numpy as np

from .....domain._tensor import ITensor
from .....domain._grad_rule import GradRule

Number = Union[int, float]


class TensorMixinArithmetic(ABC):
    """
    Mixin defining elementwise binary arithmetic for tensors.

    Notes
    -----
    - Operands are broadcast to the reference shape chosen by the
      elementwise dispatch engine (largest rank, then largest size).
    - Scalars are lifted to rank-0 tensors of the receiver's kind.
    - Both operands must share an element kind.
    - Backward rules described in method docstrings are contractual.
    """

    # ----------------------------
    # Addition
    # ----------------------------
    def add(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise addition.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand.

        Returns
        -------
        ITensor
            Tensor containing ``self + other``.

        Notes
        -----
        Backward rule: ``d(f + g) = df + dg``
        """
        return self._operate(np.add, GradRule.ADD, other)

    def __add__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.add(other)

    def __radd__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand addition to support ``scalar + Tensor``.

        The scalar becomes the first parent so the recorded graph mirrors the
        written expression.
        """
        return self._as_tensor_like(other).add(self)

    # ----------------------------
    # Subtraction
    # ----------------------------
    def sub(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise subtraction.

        Notes
        -----
        Backward rule: ``d(f - g) = df - dg``
        """
        return self._operate(np.subtract, GradRule.SUB, other)

    def __sub__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.sub(other)

    def __rsub__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).sub(self)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def mul(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise multiplication.

        Notes
        -----
        Backward rule (product rule): ``d(f * g) = df * g + f * dg``
        """
        return self._operate(np.multiply, GradRule.MUL, other)

    def __mul__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.mul(other)

    def __rmul__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).mul(self)

    # ----------------------------
    # True division
    # ----------------------------
    def div(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise true division.

        Division is carried out in floating point and the quotient is stored
        into the receiver's kind, so integer kinds truncate toward zero and
        division by zero yields ``inf`` (float kinds) or 0 (integer kinds).

        Notes
        -----
        Backward rule (quotient rule): ``d(f / g) = (df * g - f * dg) / g^2``
        """
        return self._operate(np.true_divide, GradRule.DIV, other)

    def __truediv__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.div(other)

    def __rtruediv__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).div(self)
