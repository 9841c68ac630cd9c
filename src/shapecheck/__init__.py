"""
Shapecheck Runtime Shape Validation

Checks at runtime that values match a shape described by a category name,
a nested mapping of property shapes, or a predicate function.
"""

__version__ = "0.1.0"


from ._error import *
from ._category import *
from ._checker import *
from ._object import *
from ._compile import *
