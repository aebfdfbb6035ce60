"""Assertions for naming conventions"""

from typing import Optional

from ..error import LazyNameError

__all__ = ["assert_valid_name"]


def assert_valid_name(name: str, reserved: Optional[str] = None) -> str:
    """Make sure the name can be used as a lazy attribute.

    The name must be a valid identifier so that it can be read with attribute
    syntax. Dunder names are refused since they would be installed on the class of
    the context and could change how the context itself behaves. The reserved name
    is the name of the declaration function which cannot be shadowed.
    """
    if name is None:
        msg = "Must provide name."
        raise TypeError(msg)
    if not isinstance(name, str):
        msg = "Expected name to be a string."
        raise TypeError(msg)
    if not name:
        msg = "Expected name to be a non-empty string."
        raise LazyNameError(msg)
    if not name.isidentifier():
        msg = f"Names must be valid identifiers but {name!r} is not."
        raise LazyNameError(msg)
    if name.startswith("__") and name.endswith("__"):
        msg = f"Name {name!r} is reserved for special methods."
        raise LazyNameError(msg)
    if name == reserved:
        msg = f"Name {name!r} is used by the declaration function."
        raise LazyNameError(msg)
    return name
