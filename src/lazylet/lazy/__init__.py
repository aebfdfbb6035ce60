"""Lazy Property Engine

Installs lazily evaluated, memoized attributes on arbitrary objects.
"""

from .assert_valid_name import assert_valid_name
from .lazy_property import LazyProperty
from .declaration import LazyDeclaration
from .attach import attach, get_lazy_class, Namespace

__all__ = [
    "assert_valid_name",
    "attach",
    "get_lazy_class",
    "LazyDeclaration",
    "LazyProperty",
    "Namespace",
]
