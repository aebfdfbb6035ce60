from typing import Any
from unittest.mock import NonCallableMock

__all__ = ["is_test_double"]


def is_test_double(value: Any) -> bool:
    """Check whether the given value is a mock object standing in for something.

    Test doubles are callable, but calling them would record a call the test never
    made, so they must be treated as plain values. Besides all kinds of mocks from
    ``unittest.mock`` (which pytest-mock uses as well), this also recognizes functions
    created with ``create_autospec()``, which carry their mock in a ``mock`` attribute.
    """
    if isinstance(value, NonCallableMock):
        return True
    return callable(value) and isinstance(getattr(value, "mock", None), NonCallableMock)
