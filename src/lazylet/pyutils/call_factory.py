from inspect import Parameter, signature
from typing import Any, Callable, TypeVar

__all__ = ["call_factory", "expects_context"]


T = TypeVar("T")

positional_kinds = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


def expects_context(factory: Callable[..., Any]) -> bool:
    """Check if the factory has exactly one required positional parameter."""
    try:
        parameters = signature(factory).parameters.values()
    except (TypeError, ValueError):  # some builtins have no signature
        return False
    required = [
        parameter
        for parameter in parameters
        if parameter.kind in positional_kinds and parameter.default is Parameter.empty
    ]
    return len(required) == 1


def call_factory(factory: Callable[..., T], context: Any) -> T:
    """Call the factory like a method of the given context.

    A factory that expects one argument gets the context passed in, so that it can
    read other lazy attributes of the same context. Any other factory is called
    without arguments.
    """
    return factory(context) if expects_context(factory) else factory()
