from typing import Any

from .lazy_error import LazyError

__all__ = ["LazyContextError"]


class LazyContextError(LazyError, TypeError):
    """Error when an object cannot carry lazy attributes.

    Lazy attributes are data descriptors on a private subclass of the context's
    class, so the context must allow having its ``__class__`` reassigned. This is not
    the case for instances of built-in types like ``object``, ``int`` or ``dict``.
    """

    context: Any
    """The object that was rejected"""

    def __init__(self, context: Any, reason: str = "") -> None:
        self.context = context
        message = f"Cannot attach lazy attributes to {type(context).__name__!r} object."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
