"""Compile shape descriptors into checkers"""

__all__ = ["make_type_checker", "is_type"]

import logging
from collections.abc import Mapping

import shapecheck

from ._category import CATEGORIES
from ._checker import PredicateChecker, primitive_checkers
from ._object import ObjectChecker


logger = logging.getLogger(__name__)


def make_type_checker(shape):
    """Build a checker from a shape descriptor.

    A descriptor is one of:
    - a category name ("number", "string", "boolean", "undefined", "function")
    - a mapping of property names to nested descriptors
    - a predicate function called with the value

    Category names resolve to the shared checkers in primitive_checkers.
    Mappings build a new ObjectChecker each time. The returned checker does
    not keep a reference to the descriptor mapping.

    Args:
        shape: (str | Mapping | Callable) The shape descriptor

    Returns:
        Validator: Checker for values of this shape

    Raises:
        ShapeError: If the descriptor, or any nested descriptor, is not
            one of the recognized forms
    """
    return _compile(shape, None)


def _compile(shape, path):
    if isinstance(shape, str):
        checker = primitive_checkers.get(shape)
        if checker is None:
            raise shapecheck.ShapeError(
                f"Unknown category {shape!r}, expected one of {', '.join(CATEGORIES)}",
                shape, path,
            )
        return checker

    if isinstance(shape, Mapping):
        checker = ObjectChecker()
        for name, prop_shape in shape.items():
            if not isinstance(name, str):
                raise shapecheck.ShapeError(
                    f"Property names must be strings, got {type(name).__name__}",
                    shape, path,
                )
            prop_path = f"{path}.{name}" if path else name
            checker.add_prop_checker(name, _compile(prop_shape, prop_path))
        logger.debug("Compiled object shape at %s with %d properties", path or "<root>", len(checker))
        return checker

    if callable(shape):
        logger.debug("Wrapped predicate %r at %s", shape, path or "<root>")
        return PredicateChecker(shape)

    raise shapecheck.ShapeError(
        f"Shape descriptor must be a category name, mapping, or predicate, got {type(shape).__name__}",
        shape, path,
    )


def is_type(value, shape):
    """Check a single value against a shape descriptor.

    The shape is compiled on every call. Compile once with
    make_type_checker when checking many values against the same shape.

    Args:
        value: (object) Value to check
        shape: (str | Mapping | Callable) The shape descriptor

    Returns:
        bool: Does the value match the shape?

    Raises:
        ShapeError: If the shape cannot be compiled
    """
    return make_type_checker(shape).check(value)
