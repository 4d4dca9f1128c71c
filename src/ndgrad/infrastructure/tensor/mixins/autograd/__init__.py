"""
Autograd mixin for Tensor derivative queries.

The `GradRule` compositions in ``_grad_rules`` are imported for their side
effects: registering control paths of `TensorMixinAutograd._compose_grad`
with the tensor control-path manager.

Public API
----------
- ``TensorMixinAutograd``
"""

from ._grad_rules import *
from ._base import TensorMixinAutograd

__all__ = [
    TensorMixinAutograd.__name__,
]
