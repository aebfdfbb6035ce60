import logging
from types import SimpleNamespace
from typing import Any, Optional

from ..error import LazyContextError
from .assert_valid_name import assert_valid_name
from .declaration import LazyDeclaration

__all__ = ["attach", "get_lazy_class", "Namespace"]

logger = logging.getLogger(__name__)


class Namespace(SimpleNamespace):
    """Default context for lazy attributes."""


def get_lazy_class(context: Any) -> type:
    """Get the private class of the context holding its lazy attributes.

    The class is created as subclass of the original class of the context the first
    time this is called, and the context is turned into an instance of it. Since it
    has no slots of its own, the memory layout of the context does not change.

    Copies of a context share its lazy class, but not its ownership, so a copy gets
    a lazy class of its own derived from the original class.
    """
    cls = type(context)
    if cls.__dict__.get("__lazy_class__"):
        if cls.__dict__.get("__lazy_owner__") == id(context):
            return cls
        cls = cls.__bases__[0]
    try:
        lazy_class = type(
            cls.__name__,
            (cls,),
            {
                "__slots__": (),
                "__lazy_class__": True,
                "__lazy_owner__": id(context),
                "__module__": cls.__module__,
                "__qualname__": cls.__qualname__,
            },
        )
        context.__class__ = lazy_class
    except (TypeError, AttributeError) as error:
        # frozen dataclasses raise FrozenInstanceError, an AttributeError
        raise LazyContextError(context, str(error)) from error
    logger.debug("Created lazy class for %r object.", cls.__name__)
    return lazy_class


def attach(context: Optional[Any] = None, method_name: str = "set") -> Any:
    """Attach a declaration function for lazy attributes to the context.

    Lazy attributes behave like ``let`` and ``subject`` in RSpec: they are either
    set to a static value, or to a factory function which is evaluated on first
    access and memoized. The factory can take the context as argument, which gives
    access to the other lazy attributes::

        context = attach()
        context.set("fixture", "fixture")
        context.set("target", lambda self: self.fixture.upper())
        context.target  # => "FIXTURE"

    Call ``context.set.restore()`` to remove all added attributes again, e.g. after
    each test, so that tests do not pollute each other.

    The name of the declaration function can be specified, e.g. ``"let"``. If no
    context is passed, an empty namespace is used. Returns the context.
    """
    if context is None:
        context = Namespace()
    assert_valid_name(method_name)
    lazy_class = get_lazy_class(context)
    declaration = LazyDeclaration(lazy_class, method_name)
    # the declaration function must not be shadowed by an instance attribute
    instance_dict = getattr(context, "__dict__", None)
    if isinstance(instance_dict, dict):
        instance_dict.pop(method_name, None)
    setattr(lazy_class, method_name, declaration)
    logger.debug("Attached declaration function %r.", method_name)
    return context
