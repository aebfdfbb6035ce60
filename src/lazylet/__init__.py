"""lazylet

Lazily evaluated and memoized attributes for test fixtures, like ``let`` and
``subject`` in RSpec.

A lazy attribute is declared with a name and either a value or a factory function.
The factory is called the first time the attribute is read, and the result is
cached for all later reads. After a test, all declared attributes can be removed in
one go so that tests do not pollute each other::

    from lazylet import attach

    context = attach()
    context.set("numbers", lambda: [1, 2, 3])
    context.set("total", lambda self: sum(self.numbers))
    assert context.total == 6
    context.set.restore()

When running tests with pytest, the ``lazy`` fixture provides such a context and
restores it automatically after each test.
"""

# The lazylet package version.
from .version import version, version_info

# The primary entry point for attaching lazy attributes.
from .lazy import (
    attach,
    assert_valid_name,
    get_lazy_class,
    LazyDeclaration,
    LazyProperty,
    Namespace,
)

# Errors raised by lazylet itself.
from .error import LazyError, LazyContextError, LazyNameError

# Utilities
from .pyutils import Undefined, is_test_double

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "attach",
    "assert_valid_name",
    "get_lazy_class",
    "LazyDeclaration",
    "LazyProperty",
    "Namespace",
    "LazyError",
    "LazyContextError",
    "LazyNameError",
    "Undefined",
    "is_test_double",
]
