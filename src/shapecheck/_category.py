"""Runtime value categories"""

__all__ = ["MISSING", "CATEGORIES", "category_of"]

import numbers


class _Missing:
    """Marker for an argument that was never supplied.

    Distinct from None, which is an ordinary value with the "undefined"
    category.
    """

    __slots__ = ()

    def __repr__(self):
        return "MISSING"

    def __reduce__(self):
        return "MISSING"


MISSING = _Missing()

# Tags a PrimitiveChecker can be built for
CATEGORIES = ("number", "string", "boolean", "undefined", "function")


def category_of(value):
    """Classify a value into one of the runtime categories.

    bool is tested before number since it subclasses int.

    Args:
        value: (object) Value to classify

    Returns:
        str | None: A tag from CATEGORIES, "object" for anything else,
            or None when the value is MISSING
    """
    if value is MISSING:
        return None
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, numbers.Number):
        return "number"
    if callable(value):
        return "function"
    return "object"
