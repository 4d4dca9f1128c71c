"""
NumPy boundary for element kinds.

This module maps domain-level `ElementKind` tags onto NumPy dtypes and
implements the store semantics of typed buffers: values are produced in
float64 (or as integers) and then written into the kind's representation.

Store semantics
---------------
- Float kinds round to the target precision (overflow saturates to ``inf``).
- Integer kinds truncate toward zero, map ``NaN``/``inf`` to 0 and wrap
  modulo ``2**bits`` (so ``300`` stored as ``uint8`` reads back as ``44`` and
  ``-1`` reads back as ``255``).

Buffers returned by `store_as_kind` are 1-D, contiguous and read-only.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...domain._element_kind import ElementKind, KindLike


_DTYPES = {
    ElementKind.FLOAT32: np.dtype(np.float32),
    ElementKind.INT32: np.dtype(np.int32),
    ElementKind.FLOAT64: np.dtype(np.float64),
    ElementKind.INT8: np.dtype(np.int8),
    ElementKind.UINT8: np.dtype(np.uint8),
}


def dtype_of(kind: KindLike) -> np.dtype:
    """
    Return the NumPy dtype backing an element kind.

    Parameters
    ----------
    kind : KindLike
        `ElementKind` member or its name.

    Returns
    -------
    np.dtype
        The concrete dtype.
    """
    return _DTYPES[ElementKind.parse(kind)]


def kind_of(dtype: Any) -> ElementKind:
    """
    Return the element kind matching a NumPy dtype.

    Raises
    ------
    ValueError
        If the dtype has no ndgrad counterpart (e.g. ``complex64``).
    """
    dt = np.dtype(dtype)
    for kind, candidate in _DTYPES.items():
        if candidate == dt:
            return kind
    raise ValueError(f"Unsupported dtype {dt}; expected one of {list(_DTYPES.values())}")


def _wrap_integers(values: np.ndarray, kind: ElementKind) -> np.ndarray:
    modulus = 2.0 ** kind.bits
    if values.dtype.kind in "iub":
        # Integer -> narrower integer casts wrap in NumPy.
        return values.astype(np.int64).astype(_DTYPES[kind])
    f = np.trunc(values.astype(np.float64))
    f = np.where(np.isfinite(f), f, 0.0)
    f = np.fmod(f, modulus)
    return f.astype(np.int64).astype(_DTYPES[kind])


def store_as_kind(values: Any, kind: KindLike) -> np.ndarray:
    """
    Convert values into a read-only flat buffer of the given kind.

    Parameters
    ----------
    values : Any
        Array-like of numbers (any shape; it is flattened in row-major order).
    kind : KindLike
        Target element kind.

    Returns
    -------
    np.ndarray
        A 1-D, contiguous, read-only array with dtype ``dtype_of(kind)``.
        Inputs that already satisfy this are returned as-is; anything else
        is copied.
    """
    kind = ElementKind.parse(kind)
    if (
        isinstance(values, np.ndarray)
        and values.dtype == _DTYPES[kind]
        and values.ndim == 1
        and values.flags.c_contiguous
        and not values.flags.writeable
    ):
        # Already an immutable buffer of this kind; share it.
        return values

    arr = np.asarray(values)
    if arr.dtype == object:
        arr = arr.astype(np.float64)

    with np.errstate(over="ignore", invalid="ignore"):
        if kind.is_float():
            out = arr.astype(_DTYPES[kind])
        else:
            out = _wrap_integers(arr, kind)

    out = np.array(out.reshape(-1), dtype=_DTYPES[kind], copy=True, order="C")
    out.flags.writeable = False
    return out
