"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on the runtime value of a
named state attribute on the receiver.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the configured state attribute of ``self``
  and dispatches to the registered implementation matching its value.

In ndgrad the state attribute is a tensor's ``grad_rule``: each `GradRule`
tag registers the function composing that rule's derivative.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Implementations are called like ordinary instance methods:
  ``sub_method(self, *args, **kwargs)``.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

_MISSING = object()


def create_path_builder(state_attr: str) -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[Union[Exception, Callable[[Callable[P, R], Any], None]]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" used to register stateful control paths.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("mode")

        class MyClass:
            mode = "A"
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, "A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, "B")
        def foo_B(self, x: int) -> int:
            ...

    When `MyClass().foo(...)` is called, it dispatches to `foo_A` or `foo_B`
    depending on ``self.mode``.

    Parameters
    ----------
    state_attr : str
        Name of the attribute (or property) read from ``self`` to select the
        implementation.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control path
        and replaces `cls.method` with a dispatcher wrapper.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )
    """
    Tuple-like key used to uniquely identify a control path.

    Fields
    ------
    ClassName : str
        The owning class name.
    MethodName : str
        The base method name being templated.
    StateVal : Hashable
        The state value that selects this implementation.
    """

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[
            Union[Exception, Callable[[Callable[P, R], Any], None]]
        ] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
            The wrapper is installed on this class under `method.__name__`.
        method : Callable[P, R]
            The base method being templated. Its signature and metadata (name,
            docstring, annotations) are used for the installed wrapper via
            `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[Union[Exception, Callable[[Callable[P, R], Any], None]]]
            Controls what happens when a dispatch target is missing:

            - If `None`, the wrapper raises `NotImplementedError`.
            - If an exception class, the wrapper raises `trap_exception()`.
            - If another callable, it is invoked as
              `trap_exception(method, state_value)` before raising
              `NotImplementedError`.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator registering `sub_method` for `(cls, method, state)`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"The argument for 'state' must be hashable. Got {state!r}")

        smk: MethodKey = MethodKey(cls.__name__, method.__name__, state)
        """Static method key for the control path being registered by this call."""

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` as the implementation for the configured state.

            Returns
            -------
            Callable[P, R]
                The original `sub_method` (returned unchanged), enabling normal
                decorator stacking and introspection.
            """
            methods_map[smk] = sub_method

            # Re-registering on an already wrapped method must not nest wrappers.
            base = getattr(method, "__control_path_base__", method)

            @wraps(base)
            def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
                """
                Dispatch to a registered implementation based on the state value.
                """
                cur = getattr(self, state_attr, _MISSING)
                if cur is _MISSING:
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(type(self), repr(state_attr))
                    )
                sm = methods_map.get(MethodKey(cls.__name__, base.__name__, cur))
                if sm is not None:
                    return sm(self, *args, **kwargs)
                if isinstance(trap_exception, type) and issubclass(
                    trap_exception, BaseException
                ):
                    raise trap_exception()
                if callable(trap_exception):
                    trap_exception(base, cur)
                raise NotImplementedError(
                    "Missing control path ({}={}) for {}".format(
                        state_attr, repr(cur), repr(base)
                    )
                )

            wrapper.__control_path_base__ = base
            setattr(cls, base.__name__, wrapper)
            return sub_method

        return decorator

    return templator
