import logging
from typing import Any

from ..pyutils import call_factory, is_test_double

__all__ = ["LazyProperty"]

logger = logging.getLogger(__name__)


class LazyProperty:
    """A lazily evaluated and memoized attribute.

    The subject is either a plain value or a factory. A factory is called the first
    time the attribute is read and its result is returned on every following read.
    Assigning to the attribute replaces the subject and forgets what has been
    resolved, deleting the attribute removes the property from its owner.

    Instances live on the private class of exactly one context, so they can keep the
    state for that context themselves.
    """

    __slots__ = ("owner", "name", "subject", "memoized", "literal")

    owner: type
    name: str
    subject: Any
    memoized: bool
    literal: bool

    def __init__(self, owner: type, name: str, subject: Any, literal: bool = False):
        self.owner = owner
        self.name = name
        self.subject = subject
        self.memoized = False
        self.literal = literal

    def __repr__(self) -> str:
        state = "resolved" if self.memoized else "pending"
        return f"<{self.__class__.__name__} {self.name!r} {state}>"

    def __get__(self, obj: Any, cls: Any = None) -> Any:
        if obj is None:
            return self
        if self.memoized:
            return self.subject
        subject = self.subject
        if self.is_factory:
            logger.debug("Resolving lazy attribute %r.", self.name)
            # if the factory raises, we stay unmemoized so that it will be retried
            subject = self.subject = call_factory(subject, obj)
        self.memoized = True
        return subject

    def __set__(self, obj: Any, value: Any) -> None:
        self.subject = value
        self.memoized = False
        self.literal = False

    def __delete__(self, obj: Any) -> None:
        self.remove()

    @property
    def is_factory(self) -> bool:
        """Whether the current subject must be called to get the value."""
        subject = self.subject
        return callable(subject) and not (self.literal or is_test_double(subject))

    @property
    def installed(self) -> bool:
        """Whether this property is still installed on its owner."""
        return self.owner.__dict__.get(self.name) is self

    def install(self) -> None:
        """Install this property on its owner, replacing a previous one."""
        setattr(self.owner, self.name, self)

    def remove(self) -> bool:
        """Remove this property from its owner if it is still installed there."""
        if not self.installed:
            return False
        delattr(self.owner, self.name)
        return True
