"""Validator protocol and the leaf checkers"""

__all__ = [
    "Validator",
    "PrimitiveChecker",
    "PredicateChecker",
    "primitive_checkers",
]

import types
from typing import Protocol, runtime_checkable

import shapecheck

from ._category import CATEGORIES, MISSING, category_of


@runtime_checkable
class Validator(Protocol):
    """Anything that answers whether a value matches with a check method.

    PrimitiveChecker, ObjectChecker and PredicateChecker all satisfy this,
    as does any user object with a compatible check method.
    """

    def check(self, value=MISSING) -> bool:
        ...


class PrimitiveChecker:
    """Checks that a value belongs to one fixed runtime category.

    Args:
        category: (str) One of CATEGORIES

    Attributes:
        category: (str) The category this checker accepts

    Raises:
        ShapeError: If category is not a known tag
    """

    __slots__ = ("_category",)

    def __init__(self, category):
        if category not in CATEGORIES:
            raise shapecheck.ShapeError(
                f"Unknown category {category!r}, expected one of {', '.join(CATEGORIES)}",
                category,
            )
        self._category = category

    @property
    def category(self):
        return self._category

    def check(self, value=MISSING):
        """Does the value belong to this category?

        A call without a value never matches, not even for "undefined".
        """
        return category_of(value) == self._category

    def __call__(self, value=MISSING):
        return self.check(value)

    def __repr__(self):
        return f"PrimitiveChecker<{self._category}>"


class PredicateChecker:
    """Adapts a plain predicate function to the Validator protocol.

    Args:
        predicate: (Callable[[object], object]) Called with the checked value

    Attributes:
        predicate: (Callable) The wrapped function
    """

    __slots__ = ("predicate",)

    def __init__(self, predicate):
        self.predicate = predicate

    def check(self, value=MISSING):
        if value is MISSING:
            return False
        return bool(self.predicate(value))

    def __call__(self, value=MISSING):
        return self.check(value)

    def __repr__(self):
        name = getattr(self.predicate, "__qualname__", None) or repr(self.predicate)
        return f"PredicateChecker<{name}>"


# One shared checker per category, never mutated after import
primitive_checkers = types.MappingProxyType(
    {category: PrimitiveChecker(category) for category in CATEGORIES}
)
