"""
Arithmetic mixin for Tensor operations.

Provides ``add``, ``sub``, ``mul`` and ``div`` together with their operator
forms (including the reflected ``scalar op Tensor`` variants).

Public API
----------
- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
