"""Error classes and helpers"""

__all__ = ["ShapeError"]


class ShapeError(Exception):
    """Exception raised for shape descriptors that cannot be compiled.

    Args:
        message: (str) Error description
        descriptor: (object) The offending descriptor
        path: (str | None) Dotted property path to the descriptor, None at the root

    Attributes:
        message: (str) Error description
        descriptor: (object) The offending descriptor
        path: (str | None) Dotted property path to the descriptor
    """

    def __init__(self, message, descriptor=None, path=None):
        self.message = message
        self.descriptor = descriptor
        self.path = path
        if path:
            message = f"{message} (at '{path}')"
        super().__init__(message)
