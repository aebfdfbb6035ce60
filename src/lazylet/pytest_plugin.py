"""pytest plugin providing the ``lazy`` fixture

The plugin is registered automatically when lazylet is installed. The name of the
declaration function can be configured with the ``lazylet_method`` ini option.
"""

from typing import Any, Iterator

import pytest

from .lazy import attach

__all__ = ["lazy"]


def pytest_addoption(parser):
    parser.addini(
        "lazylet_method",
        help="name of the declaration function of the lazy fixture",
        default="set",
    )


@pytest.fixture
def lazy(request) -> Iterator[Any]:
    """Provide a context for lazy attributes that is restored after the test."""
    method_name = request.config.getini("lazylet_method") or "set"
    context = attach(method_name=method_name)
    yield context
    getattr(context, method_name).restore()
