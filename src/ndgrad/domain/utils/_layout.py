"""
Shape and row-major layout utilities.

Pure-Python helpers converting between nested-sequence literals and
``(flat buffer, shape)`` pairs, plus the index arithmetic of a row-major
("C-order") layout. These helpers are backend-agnostic and do not import
NumPy.

Notes
-----
- `flatten` and `shape_of` perform no validation: a ragged literal yields a
  flat length inconsistent with its inferred shape. The tensor constructor is
  where that inconsistency is rejected.
- Shapes are returned as tuples.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple, Union

from .._errors import BoundsError

Number = Union[int, float]
NestedData = Union[Number, Sequence["NestedData"]]


def _is_sequence(x: Any) -> bool:
    return isinstance(x, (list, tuple))


def flatten(nested: NestedData) -> List[Number]:
    """
    Return the depth-first sequence of scalar leaves of a nested literal.

    Parameters
    ----------
    nested : NestedData
        A scalar, or arbitrarily nested lists/tuples of scalars.

    Returns
    -------
    list
        The scalar leaves in depth-first order. A scalar input yields a
        one-element list.
    """
    if not _is_sequence(nested):
        return [nested]
    out: List[Number] = []
    for item in nested:
        out.extend(flatten(item))
    return out


def shape_of(nested: NestedData) -> Tuple[int, ...]:
    """
    Infer the shape of a nested literal by following element 0 at each level.

    Assumes the literal is rectangular; other branches are not inspected.

    Parameters
    ----------
    nested : NestedData
        A scalar, or nested lists/tuples.

    Returns
    -------
    tuple[int, ...]
        ``()`` for a scalar, ``(0,)`` for an empty sequence.
    """
    dims: List[int] = []
    cur = nested
    while _is_sequence(cur):
        dims.append(len(cur))
        if len(cur) == 0:
            break
        cur = cur[0]
    return tuple(dims)


def rebuild(buffer: Sequence[Number], shape: Sequence[int]) -> NestedData:
    """
    Rebuild a nested list from a flat buffer and a shape.

    The buffer is partitioned into ``shape[0]`` contiguous chunks of size
    ``len(buffer) // shape[0]``, each rebuilt against ``shape[1:]``.

    Parameters
    ----------
    buffer : Sequence[Number]
        Flat row-major values.
    shape : Sequence[int]
        Target shape. An empty shape returns the sole scalar.

    Returns
    -------
    NestedData
        Nested lists, or a scalar when ``shape`` is empty.
    """
    shape = tuple(shape)
    if len(shape) == 0:
        return buffer[0] if len(buffer) == 1 else list(buffer)
    length = shape[0]
    rest = shape[1:]
    if length == 0:
        return []
    chunk = len(buffer) // length
    return [
        rebuild(buffer[i * chunk : (i + 1) * chunk], rest) for i in range(length)
    ]


def numel(shape: Sequence[int]) -> int:
    """Return the number of elements described by ``shape`` (1 for ``()``)."""
    n = 1
    for d in shape:
        n *= int(d)
    return n


def row_major_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Compute element strides of a row-major layout.

    ``stride[k] = product(shape[k+1:])``, so the last axis has stride 1.

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape.

    Returns
    -------
    tuple[int, ...]
        One stride per axis.
    """
    strides = [1] * len(shape)
    acc = 1
    for k in range(len(shape) - 1, -1, -1):
        strides[k] = acc
        acc *= int(shape[k])
    return tuple(strides)


def ravel_index(index: Sequence[int], shape: Sequence[int]) -> int:
    """
    Convert an N-dimensional coordinate into a flat row-major offset.

    Raises
    ------
    BoundsError
        If the coordinate has the wrong length or any component lies outside
        ``[0, shape[k])``.
    """
    if len(index) != len(shape):
        raise BoundsError(
            tuple(index),
            len(shape),
            f"Index {tuple(index)} has {len(index)} components; expected {len(shape)}.",
        )
    flat = 0
    for i, d, s in zip(index, shape, row_major_strides(shape)):
        if not 0 <= i < d:
            raise BoundsError(i, d)
        flat += i * s
    return flat


def unravel_index(flat: int, shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Convert a flat row-major offset into an N-dimensional coordinate.

    Raises
    ------
    BoundsError
        If ``flat`` lies outside ``[0, numel(shape))``.
    """
    total = numel(shape)
    if not 0 <= flat < total:
        raise BoundsError(flat, total)
    coord = []
    remainder = flat
    for s in row_major_strides(shape):
        coord.append(remainder // s)
        remainder %= s
    return tuple(coord)
