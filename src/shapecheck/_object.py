"""Object shape checking"""

__all__ = ["ObjectChecker", "lookup_prop"]

import types
from collections.abc import Mapping

from ._category import MISSING
from ._checker import Validator


def lookup_prop(value, name):
    """Find a named property on a value.

    Mappings are searched by key. Everything else is searched by attribute,
    which includes attributes provided by the class and its bases.

    Args:
        value: (object) Value to search
        name: (str) Property name

    Returns:
        object: The property value, or MISSING if the value has no such property
    """
    if value is MISSING or value is None:
        return MISSING
    if isinstance(value, Mapping):
        if name in value:
            return value[name]
        return MISSING
    return getattr(value, name, MISSING)


class ObjectChecker:
    """Checks that a value has a set of properties matching their checkers.

    Properties not registered with the checker are ignored. A checker with
    no registered properties accepts any value.

    Attributes:
        prop_checkers: (Mapping[str, Validator]) Read-only view of the
            registered checkers, in registration order
    """

    __slots__ = ("_prop_checkers",)

    def __init__(self):
        self._prop_checkers = {}

    @property
    def prop_checkers(self):
        return types.MappingProxyType(self._prop_checkers)

    def add_prop_checker(self, name, checker):
        """Register a checker for a named property.

        Registering the same name again replaces the earlier checker.

        Args:
            name: (str) Property expected on checked values
            checker: (Validator) Checker for the property's value

        Raises:
            TypeError: If checker has no check method
        """
        if not isinstance(checker, Validator):
            raise TypeError(f"Property checker for {name!r} has no check method: {checker!r}")
        self._prop_checkers[name] = checker

    def check(self, value=MISSING):
        """Does the value carry every registered property with a matching value?

        Stops at the first property that is absent or fails its checker.
        """
        for name, checker in self._prop_checkers.items():
            prop = lookup_prop(value, name)
            if prop is MISSING or not checker.check(prop):
                return False
        return True

    def __call__(self, value=MISSING):
        return self.check(value)

    def __len__(self):
        return len(self._prop_checkers)

    def __contains__(self, name):
        return name in self._prop_checkers

    def __repr__(self):
        names = ", ".join(self._prop_checkers)
        return f"ObjectChecker<{names}>"
