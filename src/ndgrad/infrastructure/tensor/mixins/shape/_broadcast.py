"""
CPU broadcast kernel for ndgrad tensors.

This module expands a flat row-major buffer from a source shape to a target
shape by physical replication, following the trailing-aligned (NumPy-style)
broadcasting rule:

- walking both shapes from the rightmost dimension, a source extent must be 1
  or equal to the aligned target extent;
- an extent-1 source dimension is expanded by repeating every contiguous
  segment of ``step`` elements ``b`` times, where ``step`` is the number of
  (already broadcast) elements spanned by the dimensions to its right;
- extra leading target dimensions repeat the whole buffer.

Compatibility is validated for every dimension before any data is copied.
"""

from typing import Sequence

import numpy as np

from .....domain._errors import BroadcastError, InvalidShapeError
from .....domain.utils._layout import numel


def check_broadcastable(source: Sequence[int], target: Sequence[int]) -> None:
    """
    Validate that ``source`` can be broadcast to ``target``.

    Raises
    ------
    InvalidShapeError
        If ``target`` has fewer dimensions than ``source``.
    BroadcastError
        If an aligned source extent is neither 1 nor the target extent.
    """
    source = tuple(source)
    target = tuple(target)
    if len(target) < len(source):
        raise InvalidShapeError(source, target)
    for s, b in zip(reversed(source), reversed(target)):
        if s != 1 and s != b:
            raise BroadcastError(source, target)


def broadcast_buffer(
    buffer: np.ndarray, source: Sequence[int], target: Sequence[int]
) -> np.ndarray:
    """
    Replicate a flat buffer from ``source`` shape to ``target`` shape.

    Parameters
    ----------
    buffer : np.ndarray
        Flat row-major values; ``buffer.size == numel(source)``.
    source : Sequence[int]
        Shape the buffer currently describes.
    target : Sequence[int]
        Shape to broadcast to.

    Returns
    -------
    np.ndarray
        A new flat buffer of ``numel(target)`` elements, same dtype.
    """
    source = tuple(source)
    target = tuple(target)
    check_broadcastable(source, target)

    out = np.asarray(buffer).reshape(-1)
    step = 1
    for s, b in zip(reversed(source), reversed(target)):
        if s == 1 and b != 1:
            if step == 0 or b == 0:
                out = out[:0]
            else:
                out = np.repeat(out.reshape(-1, step), b, axis=0).reshape(-1)
        step *= b

    lead = numel(target[: len(target) - len(source)])
    if lead != 1:
        out = np.tile(out, lead)
    return np.ascontiguousarray(out)
