"""
Unary mixin for Tensor operations.

- ``exp`` : elementwise exponential
- ``ln``  : elementwise natural logarithm (alias ``log``)

Public API
----------
- ``TensorMixinUnary``
"""

from ._base import TensorMixinUnary

__all__ = [
    TensorMixinUnary.__name__,
]
