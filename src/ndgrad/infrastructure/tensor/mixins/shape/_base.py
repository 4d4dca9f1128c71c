"""
Tensor shape, indexing, and structural ops mixin (NumPy CPU backend).

This module defines `TensorMixinShape`, a cohesive mixin that implements the
shape-transforming and indexing-related Tensor methods: leading-axis indexing
(`at` / ``t[i]``), `reshape`, `permute` and `broadcast_to`.

Design notes
------------
- This mixin is intended to be inherited by the concrete `Tensor` class.
- To avoid circular imports, the implementation does not import `Tensor`
  directly; instead it constructs new tensors via `type(self)`.
- All results are new *leaf* tensors of the same element kind: layout
  transforms do not record graph history.
- Shape arguments are accepted either as varargs (``t.reshape(2, 3)``) or as a
  single sequence (``t.reshape((2, 3))``).
"""

from __future__ import annotations

from typing import Any, Sequence
from abc import ABC

import numpy as np

from .....domain._tensor import ITensor
from .....domain._errors import BoundsError, ShapeMismatchError
from .....domain.utils._layout import numel
from ._broadcast import broadcast_buffer
from ._permute import permute_buffer, validate_permutation


def _shape_args(args: Sequence[Any]) -> tuple[Any, ...]:
    if len(args) == 1 and isinstance(args[0], (tuple, list)):
        return tuple(args[0])
    return tuple(args)


def _is_index(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def _int_extents(args: Sequence[Any]) -> tuple[int, ...]:
    extents = _shape_args(args)
    for d in extents:
        if not _is_index(d):
            raise TypeError(f"Shape extents must be integers, got {d!r}")
    return tuple(int(d) for d in extents)


class TensorMixinShape(ABC):
    """
    Shape and indexing operations for the concrete Tensor implementation.

    Notes
    -----
    - Methods assume the host class provides `shape`, `kind`, `_buffer`
      and the constructor ``Tensor(buffer, shape, kind)``.
    """

    def at(self, index: int) -> "ITensor":
        """
        Return the sub-tensor obtained by fixing the leading axis to ``index``.

        Parameters
        ----------
        index : int
            Position along axis 0, in ``[0, shape[0])``. Negative indices are
            not supported.

        Returns
        -------
        ITensor
            A new tensor of shape ``shape[1:]`` backed by the corresponding
            contiguous slice of this tensor's read-only buffer.

        Raises
        ------
        BoundsError
            If the tensor is rank 0 or ``index`` is out of range.
        TypeError
            If ``index`` is not an integer.
        """
        if not _is_index(index):
            raise TypeError(f"Tensor index must be an int, got {type(index)!r}")
        if len(self.shape) == 0:
            raise BoundsError(index, 0, "Cannot index into a rank-0 tensor.")
        extent = self.shape[0]
        if not 0 <= index < extent:
            raise BoundsError(int(index), extent)

        sub_shape = self.shape[1:]
        step = numel(sub_shape)
        start = int(index) * step
        return type(self)(self._buffer[start : start + step], sub_shape, self.kind)

    def __getitem__(self, key: Any) -> "ITensor":
        """
        Operator form of `at`: ``t[i]`` is ``t.at(i)``.

        Only a single integer key is supported; slices, tuples and masks raise
        `TypeError`.
        """
        if not _is_index(key):
            raise TypeError(
                f"Tensor indices must be integers, got {type(key).__name__}"
            )
        return self.at(key)

    def __len__(self) -> int:
        if len(self.shape) == 0:
            raise TypeError("len() of a rank-0 tensor")
        return self.shape[0]

    def __bool__(self) -> bool:
        """
        Truth value of a single-element tensor.

        Raises
        ------
        ValueError
            If the tensor does not hold exactly one element.
        """
        if self._buffer.size != 1:
            raise ValueError(
                f"The truth value of a tensor with {self._buffer.size} elements "
                "is ambiguous."
            )
        return bool(self._buffer[0])

    def reshape(self, *shape: Any) -> "ITensor":
        """
        Return the same buffer interpreted under a new shape.

        Parameters
        ----------
        *shape : int
            New extents. A single ``-1`` extent is inferred from the others.

        Returns
        -------
        ITensor
            A new leaf tensor sharing this tensor's (read-only) buffer.

        Raises
        ------
        ShapeMismatchError
            If the element counts differ, more than one ``-1`` is given, or an
            extent is negative.
        TypeError
            If an extent is not an integer.
        """
        requested = _int_extents(shape)
        size = self._buffer.size

        if requested.count(-1) > 1 or any(d < -1 for d in requested):
            raise ShapeMismatchError(
                size, requested, f"Invalid reshape from {self.shape} to {requested}"
            )
        if -1 in requested:
            known = numel(d for d in requested if d != -1)
            if known == 0 or size % known != 0:
                raise ShapeMismatchError(
                    size, requested, f"Invalid reshape from {self.shape} to {requested}"
                )
            requested = tuple(size // known if d == -1 else d for d in requested)

        if numel(requested) != size:
            raise ShapeMismatchError(
                size,
                numel(requested),
                f"Invalid reshape from {self.shape} to {requested}: "
                f"{size} elements vs {numel(requested)}",
            )
        return type(self)(self._buffer, requested, self.kind)

    def permute(self, *dims: Any) -> "ITensor":
        """
        Reorder axes, physically rearranging the buffer.

        Output axis ``k`` is input axis ``dims[k]``; the result is row-major
        over the new shape ``tuple(shape[d] for d in dims)``.

        Raises
        ------
        InvalidPermutationError
            If ``dims`` is not a permutation of ``range(rank)``.
        """
        dims = validate_permutation(_shape_args(dims), len(self.shape))
        buf, new_shape = permute_buffer(self._buffer, self.shape, dims)
        return type(self)(buf, new_shape, self.kind)

    def broadcast_to(self, *shape: Any) -> "ITensor":
        """
        Broadcast this tensor to ``shape`` by replication.

        Parameters
        ----------
        *shape : int
            Target extents (trailing-aligned with this tensor's shape).

        Returns
        -------
        ITensor
            ``self`` when the shape already matches, otherwise a new leaf tensor
            of shape ``shape``.

        Raises
        ------
        InvalidShapeError
            If the target has fewer dimensions than this tensor.
        BroadcastError
            If an aligned extent is neither 1 nor equal to the target extent.
        TypeError
            If an extent is not an integer.
        """
        target = _int_extents(shape)
        if target == self.shape:
            return self
        buf = broadcast_buffer(self._buffer, self.shape, target)
        return type(self)(buf, target, self.kind)
