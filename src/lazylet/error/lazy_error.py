__all__ = ["LazyError"]


class LazyError(Exception):
    """Base class for all errors raised by lazylet itself."""
