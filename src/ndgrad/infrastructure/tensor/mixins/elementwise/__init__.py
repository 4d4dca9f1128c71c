from ._base import TensorMixinElementwise

__all__ = [
    TensorMixinElementwise.__name__,
]
