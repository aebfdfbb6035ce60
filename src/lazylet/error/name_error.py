from .lazy_error import LazyError

__all__ = ["LazyNameError"]


class LazyNameError(LazyError, ValueError):
    """Error when a lazy attribute or declaration function has an invalid name."""
