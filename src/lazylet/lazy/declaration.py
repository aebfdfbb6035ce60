import logging
from typing import Any, List, Tuple

from ..error import LazyNameError
from ..pyutils import Undefined
from .assert_valid_name import assert_valid_name
from .lazy_property import LazyProperty

__all__ = ["LazyDeclaration"]

logger = logging.getLogger(__name__)


class LazyDeclaration:
    """Declaration function for lazy attributes of one context.

    Calling it with a name and a value or factory installs a lazy attribute of that
    name on the context. It remembers every declared name, so that ``restore()`` can
    remove all of them again, e.g. in the teardown of a test.

    Usually this is created by ``attach()`` and then used through the context::

        context = attach()
        context.set("user", lambda: User(name="Alice"))
        context.set("greeting", lambda self: f"Hello {self.user.name}")
        context.greeting  # => "Hello Alice"
        context.set.restore()
    """

    __slots__ = ("lazy_class", "method_name", "_registry")

    lazy_class: type
    method_name: str
    _registry: List[str]

    def __init__(self, lazy_class: type, method_name: str) -> None:
        self.lazy_class = lazy_class
        self.method_name = method_name
        self._registry = []

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.method_name!r} names={self.names!r}>"

    def __call__(self, name: str, value: Any = Undefined, *, literal: bool = False):
        """Declare a lazy attribute with the given name.

        The value can be a literal or a factory. A factory is called on first access
        to the attribute, with the context as argument if it takes one. Pass
        ``literal=True`` to store a callable as it is. If no value is passed at all,
        the attribute has the value None.
        """
        assert_valid_name(name, self.method_name)
        if isinstance(self.lazy_class.__dict__.get(name), LazyDeclaration):
            msg = f"Name {name!r} is used by a declaration function."
            raise LazyNameError(msg)
        subject = None if value is Undefined else value
        LazyProperty(self.lazy_class, name, subject, literal).install()
        # only register after the property could be installed
        self._registry.append(name)
        logger.debug("Declared lazy attribute %r.", name)

    @property
    def names(self) -> Tuple[str, ...]:
        """The declared names that are currently installed, in declaration order."""
        names = dict.fromkeys(self._registry)
        lazy_dict = self.lazy_class.__dict__
        return tuple(
            name for name in names if isinstance(lazy_dict.get(name), LazyProperty)
        )

    def restore(self) -> None:
        """Remove all lazy attributes declared with this function from the context.

        Can be called any number of times, e.g. after every test.
        """
        registry = self._registry
        lazy_dict = self.lazy_class.__dict__
        removed = 0
        while registry:
            lazy_property = lazy_dict.get(registry.pop())
            if isinstance(lazy_property, LazyProperty) and lazy_property.remove():
                removed += 1
        logger.debug("Restored context, %d lazy attribute(s) removed.", removed)

    clean = restore
