"""Tests for variable collection and the single-variable rule."""

import pytest

from kurva_pkg.parser import parse_expression
from kurva_pkg.types import ValidationError
from kurva_pkg.variables import collect_variables, require_single_variable


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("sin(x)+cos(x)", ["x"]),
        ("x+y", ["x", "y"]),
        ("y*x+x", ["y", "x"]),
        ("sin(b)/a^b", ["b", "a"]),
        ("2+3", []),
        ("x1 + x", ["x1", "x"]),
    ],
)
def test_collect_variables(expression, expected):
    assert collect_variables(parse_expression(expression)) == expected


def test_none_is_noop():
    assert collect_variables(None) == []


def test_extends_accumulator():
    names = ["t"]
    result = collect_variables(parse_expression("x*t"), names)
    assert result is names
    assert names == ["t", "x"]


def test_single_variable_accepted():
    assert require_single_variable(["x"]) == "x"
    assert require_single_variable([]) is None


def test_multiple_variables_rejected():
    names = collect_variables(parse_expression("x+y"))
    with pytest.raises(ValidationError) as exc_info:
        require_single_variable(names)
    assert exc_info.value.code == "MULTIPLE_VARIABLES"
    assert "x, y" in str(exc_info.value)
