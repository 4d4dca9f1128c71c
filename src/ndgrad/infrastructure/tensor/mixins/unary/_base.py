"""
Unary operation mixin defining elementwise transcendental Tensor APIs.

This module declares :class:`TensorMixinUnary`, which implements ``exp`` and
``ln`` on top of the elementwise dispatch engine. Both run in float64 and
store into the receiver's element kind; on integer kinds the results are
truncated, which is reported with a ``RuntimeWarning``.
"""

import warnings
from abc import ABC

import numpy as np

from .....domain._tensor import ITensor
from .....domain._grad_rule import GradRule


def _warn_integer_kind(t: ITensor, op: str) -> None:
    if t.kind.is_integer():
        warnings.warn(
            f"{op}() on a tensor of integer kind '{t.kind}' truncates results "
            "to integers.",
            RuntimeWarning,
            stacklevel=3,
        )


class TensorMixinUnary(ABC):
    """
    Mixin defining elementwise unary operations.

    Notes
    -----
    - Output shape equals input shape; output kind equals input kind.
    - Non-positive inputs to ``ln`` follow NumPy/IEEE semantics
      (``-inf`` or ``nan``) and do not raise.
    """

    def exp(self: ITensor) -> "ITensor":
        """
        Compute the elementwise natural exponential.

        Returns
        -------
        ITensor
            Tensor with ``exp`` applied elementwise.

        Notes
        -----
        Backward rule: ``d(exp(f)) = exp(f) * df``
        """
        _warn_integer_kind(self, "exp")
        return self._operate(np.exp, GradRule.EXP)

    def ln(self: ITensor) -> "ITensor":
        """
        Compute the elementwise natural logarithm.

        Returns
        -------
        ITensor
            Tensor with ``log`` applied elementwise.

        Notes
        -----
        Backward rule: ``d(ln(f)) = df / f``
        """
        _warn_integer_kind(self, "ln")
        return self._operate(np.log, GradRule.LN)

    log = ln
