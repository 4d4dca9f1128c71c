"""
Local gradient rule tags.

Every tensor carries a `GradRule` describing how its derivative with respect
to an arbitrary target is composed from the derivatives of its parents. Leaf
tensors carry `GradRule.IDENTITY`.

The tag is data, not a stored closure: the autograd engine dispatches on it
through a control-path registry, which keeps the computation graph
inspectable.
"""

from enum import Enum


class GradRule(Enum):
    """
    Tagged local gradient rule of a tensor.

    Attributes
    ----------
    IDENTITY : GradRule
        Leaf tensor. ``d(t)/d(t) = 1``; ``d(t)/d(x) = 0`` for any other ``x``.
    ADD : GradRule
        ``d(f + g) = df + dg``
    SUB : GradRule
        ``d(f - g) = df - dg``
    MUL : GradRule
        ``d(f * g) = df * g + f * dg``
    DIV : GradRule
        ``d(f / g) = (df * g - f * dg) / g^2``
    EXP : GradRule
        ``d(exp(f)) = exp(f) * df``
    LN : GradRule
        ``d(ln(f)) = df / f``
    """

    IDENTITY = "identity"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    EXP = "exp"
    LN = "ln"

    @property
    def arity(self) -> int:
        """Number of parents a tensor tagged with this rule must have."""
        return _ARITY[self]


_ARITY = {
    GradRule.IDENTITY: 0,
    GradRule.ADD: 2,
    GradRule.SUB: 2,
    GradRule.MUL: 2,
    GradRule.DIV: 2,
    GradRule.EXP: 1,
    GradRule.LN: 1,
}
