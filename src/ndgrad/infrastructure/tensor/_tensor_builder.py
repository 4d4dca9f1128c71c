"""
Tensor control-path manager for gradient-rule dispatch.

This module defines a shared control-path manager used to register and resolve
the derivative composition function of each `GradRule`.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"grad_rule"``. As a result, method
dispatch is performed based on the runtime value of ``self.grad_rule`` on
Tensor objects.

Typical usage
-------------
    @tensor_control_path_manager(TensorMixinAutograd, TensorMixinAutograd._compose_grad, GradRule.ADD)
    def compose_add(self, target): ...

At runtime, calling ``t._compose_grad(target)`` dispatches to the
implementation whose registered rule matches ``t.grad_rule``.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Tensor methods based on `self.grad_rule`
tensor_control_path_manager = create_path_builder("grad_rule")
