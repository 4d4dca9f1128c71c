from .memory import TensorMixinMemory
from .shape import TensorMixinShape
from .elementwise import TensorMixinElementwise
from .arithmetic import TensorMixinArithmetic
from .unary import TensorMixinUnary
from .autograd import TensorMixinAutograd

__all__ = [
    TensorMixinMemory.__name__,
    TensorMixinShape.__name__,
    TensorMixinElementwise.__name__,
    TensorMixinArithmetic.__name__,
    TensorMixinUnary.__name__,
    TensorMixinAutograd.__name__,
]
