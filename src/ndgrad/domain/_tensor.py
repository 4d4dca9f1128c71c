"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the backend-agnostic surface a
tensor exposes to callers: shape and kind queries, layout transforms,
broadcasting elementwise arithmetic, and the derivative query `backward`.

Notes
-----
The concrete NumPy-backed implementation lives in
`ndgrad.infrastructure.tensor`. Domain code types against `ITensor` so that it
never has to import the infrastructure layer.
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from ._element_kind import ElementKind
from ._grad_rule import GradRule

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is an immutable N-dimensional numeric array value plus the
    graph metadata needed for differentiation.

    Notes
    -----
    - Every operation returns a new tensor; nothing mutates in place.
    - Graph nodes are compared by identity, never by value.
    """

    # ---------------------------------------------------------------------
    # Core identity / layout
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape; ``()`` for a scalar.
        """
        ...

    @property
    def kind(self) -> ElementKind:
        """
        Return the element kind of the tensor.

        Returns
        -------
        ElementKind
            The numeric precision tag fixed at construction.
        """
        ...

    @property
    def data(self) -> Any:
        """
        Materialize the tensor as nested Python lists.

        Returns
        -------
        Any
            Nested lists for rank >= 1; the scalar itself for rank 0.
        """
        ...

    # ---------------------------------------------------------------------
    # Graph metadata
    # ---------------------------------------------------------------------
    @property
    def parents(self) -> tuple["ITensor", ...]:
        """
        Return the tensors consumed to derive this tensor.

        Returns
        -------
        tuple[ITensor, ...]
            Empty for leaf tensors.
        """
        ...

    @property
    def grad_rule(self) -> GradRule:
        """
        Return the local gradient rule tag of this tensor.

        Returns
        -------
        GradRule
            `GradRule.IDENTITY` for leaves.
        """
        ...

    # ---------------------------------------------------------------------
    # Layout transforms
    # ---------------------------------------------------------------------
    def at(self, index: int) -> "ITensor":
        """
        Return the sub-tensor obtained by fixing the leading axis to ``index``.

        Raises
        ------
        BoundsError
            If ``index`` is outside ``[0, shape[0])`` or the tensor is rank 0.
        """
        ...

    def reshape(self, *shape: Any) -> "ITensor":
        """
        Return the same data interpreted under a new shape.

        Raises
        ------
        ShapeMismatchError
            If the element counts differ.
        """
        ...

    def permute(self, *dims: Any) -> "ITensor":
        """
        Return a tensor with axes reordered by ``dims``.

        Raises
        ------
        InvalidPermutationError
            If ``dims`` is not a permutation of ``range(rank)``.
        """
        ...

    def broadcast_to(self, *shape: Any) -> "ITensor":
        """
        Return this tensor broadcast to ``shape``.

        Raises
        ------
        BroadcastError
            If the shapes are not compatible.
        """
        ...

    # ---------------------------------------------------------------------
    # Elementwise ops
    # ---------------------------------------------------------------------
    def add(self, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise broadcasting addition."""
        ...

    def sub(self, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise broadcasting subtraction."""
        ...

    def mul(self, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise broadcasting multiplication."""
        ...

    def div(self, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise broadcasting true division."""
        ...

    def exp(self) -> "ITensor":
        """Elementwise natural exponential."""
        ...

    def ln(self) -> "ITensor":
        """Elementwise natural logarithm."""
        ...

    # ---------------------------------------------------------------------
    # Autograd
    # ---------------------------------------------------------------------
    def backward(self, target: "ITensor") -> "ITensor":
        """
        Compute the derivative of this tensor with respect to ``target``.

        Parameters
        ----------
        target : ITensor
            The differentiation variable, matched by identity.

        Returns
        -------
        ITensor
            Gradient tensor shaped like the result of composing the local
            rules along the recorded graph.
        """
        ...


__all__ = ["ITensor", "Number"]
