"""Exceptions raised by statement construction."""


class ShapeMismatchError(ValueError):
    """Raised when CRUD input cannot be compiled into a well-formed statement."""
