"""
Shape and indexing mixin for Tensor operations.

Provides leading-axis indexing (``at`` / ``t[i]``), ``reshape``, ``permute``
and ``broadcast_to``. The buffer-level kernels live in ``_broadcast`` and
``_permute``.

Public API
----------
- ``TensorMixinShape``
"""

from ._base import TensorMixinShape

__all__ = [
    TensorMixinShape.__name__,
]
