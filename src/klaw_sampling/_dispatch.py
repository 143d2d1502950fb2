"""@typeclass decorator: type-directed dispatch on a function's first argument.

Used to pick per-container adapters (list, span, numpy array, ...) so the
shuffle and selection algorithms are written once.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A function with registered per-type instances.

    Lookup order for the first argument's type: exact match, then the MRO,
    then ``isinstance`` against registered types in registration order (which
    catches virtual subclasses of ABCs such as ``list`` for
    ``MutableSequence``). The decorated function is the fallback.

    Attributes:
        _self_name: The name of the typeclass function.
        _self_instances: Dictionary mapping types to their instance implementations.

    Example:
        ```python
        @typeclass
        def describe(value) -> str:
            return 'something'

        @describe.instance(MutableSequence)
        def describe_seq(value) -> str:
            return 'mutable sequence'

        describe([1, 2])  # 'mutable sequence'
        describe(3)       # 'something'
        ```
    """

    def __init__(self, default_fn: F) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default = default_fn
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an instance implementation for a specific type.

        Args:
            type_: The type (or ABC) to register the instance for.

        Returns:
            A decorator that registers the implementation.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_instances[type_] = fn
            return fn

        return decorator

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        """Find the best matching instance for a value."""
        value_type = type(value)

        if value_type in self._self_instances:
            return self._self_instances[value_type]

        for base in value_type.__mro__[1:]:
            if base in self._self_instances:
                return self._self_instances[base]

        for registered_type, fn in self._self_instances.items():
            if isinstance(value, registered_type):
                return fn

        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the appropriate instance based on first argument."""
        if not args:
            msg = f'{self._self_name}() requires at least one argument'
            raise TypeError(msg)

        instance_fn = self._find_instance(args[0])
        if instance_fn is not None:
            return instance_fn(*args, **kwargs)
        return self._self_default(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F) -> TypeClass[F]:
    """Decorator to create a typeclass whose body is the fallback implementation.

    Args:
        fn: The fallback implementation, also defining the signature.

    Returns:
        A TypeClass instance that can dispatch to registered instances.
    """
    return TypeClass(fn)
