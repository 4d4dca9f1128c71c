"""
Memory / construction mixin for Tensor.

Provides the leaf factories (``from_nested``, ``from_numpy``, ``zeros``,
``ones``, ``rand``) and materialization helpers (``data``, ``to_numpy``,
``item``).

Public API
----------
- ``TensorMixinMemory``
"""

from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
