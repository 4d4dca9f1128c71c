"""
NumPy-backed tensor implementation.

Public API
----------
- ``Tensor``  : the concrete tensor class
- ``Context`` : graph record attached to derived tensors
"""

from ._tensor_context import Context
from ._tensor import Tensor

__all__ = [
    Tensor.__name__,
    Context.__name__,
]
