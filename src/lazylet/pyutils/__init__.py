"""Python Utils

This package contains dependency-free Python utility functions used by the lazy
property engine.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .call_factory import call_factory, expects_context
from .is_test_double import is_test_double
from .undefined import Undefined, UndefinedType

__all__ = [
    "call_factory",
    "expects_context",
    "is_test_double",
    "Undefined",
    "UndefinedType",
]
