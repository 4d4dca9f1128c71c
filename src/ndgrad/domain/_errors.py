"""
Shape-, index- and kind-related exceptions for ndgrad.

This module defines the custom errors raised by tensor construction, layout
transforms, broadcasting and elementwise dispatch. Every error is raised
synchronously at the point of violation and carries the offending values as
attributes so callers can inspect them programmatically.

Hierarchy
---------
- ``ShapeMismatchError`` (``ValueError``)
    - ``BroadcastError``
        - ``InvalidShapeError``
- ``BoundsError`` (``IndexError``)
- ``InvalidPermutationError`` (``ValueError``)
- ``ElementKindMismatchError`` (``TypeError``)

Numeric edge cases (division by zero, logarithm of non-positive values) are
not errors; they follow IEEE floating-point convention.
"""

from typing import Any, Sequence


class ShapeMismatchError(ValueError):
    """
    Raised when two element counts or shapes that must agree do not.

    Typical sources are `Tensor.reshape` with a different number of elements,
    constructing a tensor whose buffer length differs from the product of its
    shape (e.g. a ragged nested literal), and `Tensor.item` on a tensor with
    more than one element.

    Attributes
    ----------
    expected : Any
        The expected shape or element count.
    actual : Any
        The shape or element count actually provided.
    """

    def __init__(self, expected: Any, actual: Any, message: str = "") -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        expected : Any
            The expected shape or element count.
        actual : Any
            The offending shape or element count.
        message : str, optional
            Custom message. A default message is built when omitted.
        """
        super().__init__(message or f"Shape mismatch: expected {expected}, got {actual}.")
        self.expected = expected
        self.actual = actual


class BroadcastError(ShapeMismatchError):
    """
    Raised when a source shape cannot be broadcast to a target shape.

    A trailing-aligned source dimension must either equal the corresponding
    target dimension or be 1.

    Attributes
    ----------
    source : tuple[int, ...]
        Shape being broadcast.
    target : tuple[int, ...]
        Requested target shape.
    """

    def __init__(
        self, source: Sequence[int], target: Sequence[int], message: str = ""
    ) -> None:
        source = tuple(source)
        target = tuple(target)
        super().__init__(
            target,
            source,
            message or f"Shapes not compatible: cannot broadcast {source} to {target}.",
        )
        self.source = source
        self.target = target


class InvalidShapeError(BroadcastError):
    """
    Raised when a broadcast target has fewer dimensions than the source.

    Broadcasting only ever adds leading dimensions or expands extent-1
    dimensions; it never drops dimensions.
    """

    def __init__(self, source: Sequence[int], target: Sequence[int]) -> None:
        source = tuple(source)
        target = tuple(target)
        super().__init__(
            source,
            target,
            f"Cannot broadcast rank-{len(source)} shape {source} "
            f"to lower-rank shape {target}.",
        )


class BoundsError(IndexError):
    """
    Raised when an index falls outside ``[0, extent)``.

    Attributes
    ----------
    index : Any
        The offending index.
    extent : int
        The extent of the indexed axis (0 for rank-0 tensors).
    """

    def __init__(self, index: Any, extent: int, message: str = "") -> None:
        super().__init__(
            message or f"Index {index!r} out of range for axis of extent {extent}."
        )
        self.index = index
        self.extent = extent


class InvalidPermutationError(ValueError):
    """
    Raised when `permute` arguments are not a permutation of ``range(rank)``.

    Attributes
    ----------
    dims : tuple
        The axes that were passed.
    rank : int
        Rank of the tensor being permuted.
    """

    def __init__(self, dims: Sequence[Any], rank: int) -> None:
        dims = tuple(dims)
        super().__init__(
            f"Invalid permutation {dims} for a tensor of rank {rank}; "
            f"expected a permutation of {tuple(range(rank))}."
        )
        self.dims = dims
        self.rank = rank


class ElementKindMismatchError(TypeError):
    """
    Raised when an elementwise operation combines tensors of different kinds.

    ndgrad performs no implicit promotion between element kinds.

    Attributes
    ----------
    kind_a : str
        Element kind of the receiver.
    kind_b : str
        Element kind of the operand.
    """

    def __init__(self, kind_a: str, kind_b: str) -> None:
        super().__init__(f"Element kind mismatch: '{kind_a}' vs '{kind_b}'.")
        self.kind_a = kind_a
        self.kind_b = kind_b
