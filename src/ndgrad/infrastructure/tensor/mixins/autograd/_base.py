"""
Autograd mixin: symbolic derivative composition over the recorded graph.

This module defines `TensorMixinAutograd`, which implements
``Tensor.backward(target)``. Instead of accumulating gradients into leaves,
`backward` *returns* the derivative of the receiver with respect to an
arbitrary tensor in its history, built out of ordinary Tensor operations.

Because the result is itself a derived tensor, calling `backward` on it again
yields higher-order derivatives.

Dispatch
--------
`backward` handles the terminal case (``self is target``) and defers every
other case to ``_compose_grad``, whose implementation is selected by the
receiver's `GradRule` through the tensor control-path manager. The rule
registrations live in `._grad_rules`.

Notes
-----
- Targets are matched by identity. Two tensors holding equal values are still
  different variables.
- Shared sub-expressions are re-derived each time they are reached; no result
  is cached between branches.
"""

from abc import ABC

from .....domain._tensor import ITensor


class TensorMixinAutograd(ABC):
    """
    Mixin implementing derivative queries against a target tensor.
    """

    def backward(self: ITensor, target: "ITensor") -> "ITensor":
        """
        Compute the derivative of this tensor with respect to ``target``.

        Parameters
        ----------
        target : ITensor
            The differentiation variable, matched by identity. It may be a
            leaf or any derived tensor in this tensor's history.

        Returns
        -------
        ITensor
            The elementwise derivative. Differentiating a tensor against itself
            yields ones shaped like it; differentiating against an unrelated
            tensor yields zeros.

        Raises
        ------
        TypeError
            If ``target`` is not a tensor.
        """
        if not isinstance(target, TensorMixinAutograd):
            raise TypeError(
                f"backward() target must be a Tensor, got {type(target).__name__}"
            )
        if self is target:
            return type(self).ones(self.shape, self.kind)
        return self._compose_grad(target)

    def _compose_grad(self: ITensor, target: "ITensor") -> "ITensor":
        """
        Compose the derivative of a non-target tensor from its parents.

        Replaced at import time by a dispatcher keyed on ``self.grad_rule``.
        """
        raise NotImplementedError
