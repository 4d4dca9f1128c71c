"""
Derivative composition rules registered per `GradRule`.

Each function below is a control path of
`TensorMixinAutograd._compose_grad`, selected by the receiver's
``grad_rule``. ``f`` and ``g`` denote the receiver's parents in the order the
forward operation received them; ``x`` is the differentiation target.
"""

from ..._tensor_builder import tensor_control_path_manager

from .....domain._tensor import ITensor
from .....domain._grad_rule import GradRule

from ._base import TensorMixinAutograd as TMA


@tensor_control_path_manager(TMA, TMA._compose_grad, GradRule.IDENTITY)
def compose_identity(self: ITensor, x: "ITensor") -> "ITensor":
    # A leaf other than the target does not depend on it.
    return type(self).zeros(self.shape, self.kind)


@tensor_control_path_manager(TMA, TMA._compose_grad, GradRule.ADD)
def compose_add(self: ITensor, x: "ITensor") -> "ITensor":
    """d(f + g) = df + dg"""
    f, g = self.parents
    return f.backward(x).add(g.backward(x))


@tensor_control_path_manager(TMA, TMA._compose_grad, GradRule.SUB)
def compose_sub(self: ITensor, x: "ITensor") -> "ITensor":
    """d(f - g) = df - dg"""
    f, g = self.parents
    return f.backward(x).sub(g.backward(x))


@tensor_control_path_manager(TMA, TMA._compose_grad, GradRule.MUL)
def compose_mul(self: ITensor, x: "ITensor") -> "ITensor":
    """d(f * g) = df * g + f * dg"""
    f, g = self.parents
    return f.backward(x).mul(g).add(f.mul(g.backward(x)))


@tensor_control_path_manager(TMA, TMA._compose_grad, GradRule.DIV)
def compose_div(self: ITensor, x: "ITensor") -> "ITensor":
    """d(f / g) = (df * g - f * dg) / g^2"""
    f, g = self.parents
    numerator = f.backward(x).mul(g).sub(f.mul(g.backward(x)))
    return numerator.div(g.mul(g))


@tensor_control_path_manager(TMA, TMA._compose_grad, GradRule.EXP)
def compose_exp(self: ITensor, x: "ITensor") -> "ITensor":
    """d(exp(f)) = exp(f) * df"""
    # The forward output already holds exp(f).
    (f,) = self.parents
    return self.mul(f.backward(x))


@tensor_control_path_manager(TMA, TMA._compose_grad, GradRule.LN)
def compose_ln(self: ITensor, x: "ITensor") -> "ITensor":
    """d(ln(f)) = df / f"""
    (f,) = self.parents
    return f.backward(x).div(f)
