"""Tests for one-shot shape checks."""

from unittest import mock

import pytest
from shapecheck import _compile, is_type


# (value, shape, expected, description)
is_type_cases = [
    ({"bar": True}, {"bar": "boolean"}, True, "boolean property"),
    ({"bar": 1}, {"bar": "boolean"}, False, "wrong property category"),
    ({}, {"bar": "boolean"}, False, "missing property"),
    (3, "number", True, "number"),
    ("3", "number", False, "text is not number"),
    (None, "undefined", True, "none is undefined"),
    (print, "function", True, "builtin function"),
    ({"a": {"b": 1}}, {"a": {"b": "number"}}, True, "nested"),
    ({"a": {"b": "1"}}, {"a": {"b": "number"}}, False, "nested mismatch"),
    ({"n": 4}, {"n": lambda n: n % 2 == 0}, True, "predicate property"),
    ({"n": 5}, {"n": lambda n: n % 2 == 0}, False, "predicate property mismatch"),
    (42, {}, True, "empty shape"),
]


@pytest.mark.parametrize(
    "value,shape,expected,description",
    is_type_cases,
    ids=[case[3] for case in is_type_cases],
)
def test_is_type(value, shape, expected, description):
    assert is_type(value, shape) is expected


def test_recompiles_each_call():
    """Each call compiles the shape again."""
    with mock.patch.object(_compile, "make_type_checker", wraps=_compile.make_type_checker) as compile_shape:
        is_type(1, "number")
        is_type(2, "number")
    assert compile_shape.call_count == 2
