"""
Tensor memory / construction mixin.

This module defines `TensorMixinMemory`, a focused mixin that provides the
leaf-tensor factory constructors (from nested literals, from NumPy arrays,
zeros, ones, uniform random) and the materialization helpers (`data`,
`to_numpy`, `item`) for a concrete `Tensor` that satisfies the domain-level
`ITensor` protocol.

Design intent
-------------
- Keep object creation centralized in the tensor implementation
  (infrastructure layer), while still presenting a framework-style API
  (`Tensor.zeros`, `Tensor.ones`, etc.).
- Every factory returns a *leaf*: no parents and `GradRule.IDENTITY`.

Notes
-----
- The mixin assumes the concrete `Tensor` class accepts
  ``Tensor(buffer, shape, kind, ctx=None)`` and exposes `_buffer`, `shape`
  and `kind`.
- Factories are classmethods, so `cls` is the concrete Tensor type and no
  import of `Tensor` is required here.
"""

from typing import Any, Optional, Sequence, Type, Union
from abc import ABC

import numpy as np

from .....domain._tensor import ITensor
from .....domain._element_kind import DEFAULT_KIND, ElementKind, KindLike
from .....domain._errors import ShapeMismatchError
from .....domain.utils._layout import NestedData, flatten, numel, rebuild, shape_of
from ..._kinds import kind_of


Number = Union[int, float]


def _normalize_shape(shape: Union[int, Sequence[int]]) -> tuple[int, ...]:
    if isinstance(shape, (int, np.integer)):
        return (int(shape),)
    return tuple(int(d) for d in shape)


class TensorMixinMemory(ABC):
    """
    Mixin that implements tensor construction and materialization helpers.

    This mixin is intended to be inherited by a concrete `Tensor` class that
    implements `ITensor`. It provides:

    - Factory constructors: `from_nested`, `from_numpy`, `zeros`, `ones`, `rand`
    - Materialization: `data`, `to_numpy`, `item`
    """

    @classmethod
    def from_nested(
        cls: Type[ITensor], data: NestedData, kind: KindLike = DEFAULT_KIND
    ) -> "ITensor":
        """
        Build a leaf tensor from a (possibly nested) Python literal.

        The literal is flattened depth-first and its shape inferred by
        following element 0 at each nesting level; values are stored into the
        buffer of the requested element kind.

        Parameters
        ----------
        data : NestedData
            A scalar or nested lists/tuples of numbers.
        kind : KindLike, optional
            Element kind. Defaults to ``float32``.

        Returns
        -------
        ITensor
            A new leaf tensor. A scalar literal produces a rank-0 tensor.

        Raises
        ------
        ShapeMismatchError
            If the literal is ragged, i.e. its flat length disagrees with the
            shape inferred from its first elements.
        """
        flat = flatten(data)
        shape = shape_of(data)
        return cls(np.asarray(flat, dtype=np.float64), shape, kind)

    @classmethod
    def from_numpy(
        cls: Type[ITensor], arr: Any, kind: Optional[KindLike] = None
    ) -> "ITensor":
        """
        Build a leaf tensor holding a copy of a NumPy array.

        Parameters
        ----------
        arr : array_like
            Source values; its shape becomes the tensor shape.
        kind : Optional[KindLike], optional
            Element kind. Defaults to the kind matching ``arr.dtype``.

        Returns
        -------
        ITensor
            A new leaf tensor.

        Raises
        ------
        ValueError
            If ``kind`` is omitted and the array dtype has no matching kind.
        """
        arr = np.asarray(arr)
        if kind is None:
            kind = kind_of(arr.dtype)
        return cls(arr, arr.shape, kind)

    @classmethod
    def zeros(
        cls: Type[ITensor],
        shape: Union[int, Sequence[int]],
        kind: KindLike = DEFAULT_KIND,
    ) -> "ITensor":
        """
        Create a leaf tensor filled with zeros.

        Parameters
        ----------
        shape : Union[int, Sequence[int]]
            Shape of the output tensor. ``()`` creates a scalar.
        kind : KindLike, optional
            Element kind. Defaults to ``float32``.

        Returns
        -------
        ITensor
            Newly created tensor filled with zeros.
        """
        shape = _normalize_shape(shape)
        return cls(np.zeros(numel(shape)), shape, kind)

    @classmethod
    def ones(
        cls: Type[ITensor],
        shape: Union[int, Sequence[int]],
        kind: KindLike = DEFAULT_KIND,
    ) -> "ITensor":
        """
        Create a leaf tensor filled with ones.

        Parameters
        ----------
        shape : Union[int, Sequence[int]]
            Shape of the output tensor. ``()`` creates a scalar.
        kind : KindLike, optional
            Element kind. Defaults to ``float32``.

        Returns
        -------
        ITensor
            Newly created tensor filled with ones.
        """
        shape = _normalize_shape(shape)
        return cls(np.ones(numel(shape)), shape, kind)

    @classmethod
    def rand(cls: Type[ITensor], *shape: int) -> "ITensor":
        """
        Create a float32 leaf tensor of independent uniform [0, 1) samples.

        Parameters
        ----------
        *shape : int
            Dimension extents. ``Tensor.rand()`` creates a scalar; a single
            tuple argument is also accepted.

        Notes
        -----
        Samples come from NumPy's global random state, so ``np.random.seed``
        makes the result reproducible.
        """
        if len(shape) == 1 and not isinstance(shape[0], (int, np.integer)):
            shape = tuple(shape[0])
        shape = _normalize_shape(shape)
        arr = np.random.rand(numel(shape)).astype(np.float32, copy=False)
        return cls(arr, shape, ElementKind.FLOAT32)

    @property
    def data(self: ITensor) -> NestedData:
        """
        Materialize the tensor as nested Python lists.

        Returns
        -------
        NestedData
            Nested lists of Python numbers following the tensor shape; a
            rank-0 tensor yields its scalar.
        """
        return rebuild(self._buffer.tolist(), self.shape)

    def to_numpy(self: ITensor) -> np.ndarray:
        """
        Return a writable NumPy copy of the tensor, shaped like the tensor.

        Returns
        -------
        np.ndarray
            Array with dtype matching the element kind.
        """
        return self._buffer.reshape(self.shape).copy()

    def item(self: ITensor) -> Number:
        """
        Return the sole element of a single-element tensor as a Python number.

        Raises
        ------
        ShapeMismatchError
            If the tensor does not hold exactly one element.
        """
        if self._buffer.size != 1:
            raise ShapeMismatchError(
                1,
                self._buffer.size,
                f"item() requires a single-element tensor, got shape {self.shape}",
            )
        return self._buffer[0].item()
