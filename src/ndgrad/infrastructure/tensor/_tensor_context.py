from typing import Sequence
from dataclasses import dataclass

from ...domain._tensor import ITensor
from ...domain._grad_rule import GradRule


@dataclass(frozen=True)
class Context:
    """
    Graph record attached to a Tensor produced by an operation.

    A `Context` records what the autograd engine needs to differentiate the
    output: the operand tensors, in the order the rule expects them, and the
    tagged local gradient rule.

    Attributes
    ----------
    parents : Sequence[ITensor]
        The operand tensors consumed to produce the output. Holding them keeps
        the whole upstream graph alive for as long as the output is reachable.
    rule : GradRule
        The calculus rule of the producing operation.

    Raises
    ------
    ValueError
        If the number of parents does not match ``rule.arity``.
    """

    parents: Sequence["ITensor"]
    rule: GradRule

    def __post_init__(self) -> None:
        object.__setattr__(self, "parents", tuple(self.parents))
        if len(self.parents) != self.rule.arity:
            raise ValueError(
                f"{self.rule.name} expects {self.rule.arity} parent(s), "
                f"got {len(self.parents)}"
            )
