"""Lazy Errors

The exceptions raised by the lazy property engine. Errors raised by factories are
never wrapped and propagate to whoever reads the attribute.
"""

from .lazy_error import LazyError
from .context_error import LazyContextError
from .name_error import LazyNameError

__all__ = ["LazyError", "LazyContextError", "LazyNameError"]
