"""
CPU axis-permutation kernel for ndgrad tensors.

The permuted buffer is built by scattering: each flat index is decomposed into
its N-dimensional coordinate under the old shape, the coordinate is reordered
by ``dims``, re-linearized under the new shape, and the value is written to
that position. The coordinate arithmetic is vectorized over all flat indices
at once.
"""

from typing import Any, Sequence

import numpy as np

from .....domain._errors import InvalidPermutationError
from .....domain.utils._layout import numel, row_major_strides


def validate_permutation(dims: Sequence[Any], rank: int) -> tuple[int, ...]:
    """
    Check that ``dims`` is a permutation of ``range(rank)``.

    Returns
    -------
    tuple[int, ...]
        ``dims`` as a tuple of Python ints.

    Raises
    ------
    InvalidPermutationError
        If any entry is not an integer, or the entries are not exactly
        ``0 .. rank-1`` in some order.
    """
    dims = tuple(dims)
    if not all(
        isinstance(d, (int, np.integer)) and not isinstance(d, bool) for d in dims
    ):
        raise InvalidPermutationError(dims, rank)
    dims = tuple(int(d) for d in dims)
    if sorted(dims) != list(range(rank)):
        raise InvalidPermutationError(dims, rank)
    return dims


def permute_buffer(
    buffer: np.ndarray, shape: Sequence[int], dims: Sequence[int]
) -> tuple[np.ndarray, tuple[int, ...]]:
    """
    Physically reorder a flat buffer so it is row-major for the permuted shape.

    Parameters
    ----------
    buffer : np.ndarray
        Flat row-major values of a tensor with shape ``shape``.
    shape : Sequence[int]
        Current shape.
    dims : Sequence[int]
        A validated permutation of ``range(len(shape))``; output axis ``k``
        is input axis ``dims[k]``.

    Returns
    -------
    tuple[np.ndarray, tuple[int, ...]]
        The reordered flat buffer and the new shape.
    """
    shape = tuple(shape)
    new_shape = tuple(shape[d] for d in dims)
    n = numel(shape)
    if n == 0 or len(shape) == 0:
        return np.array(buffer, copy=True).reshape(-1), new_shape

    flat = np.arange(n, dtype=np.int64)
    coords = [
        (flat // stride) % extent
        for stride, extent in zip(row_major_strides(shape), shape)
    ]

    target = np.zeros(n, dtype=np.int64)
    for new_axis, stride in enumerate(row_major_strides(new_shape)):
        target += coords[dims[new_axis]] * stride

    out = np.empty(n, dtype=np.asarray(buffer).dtype)
    out[target] = buffer
    return out, new_shape
