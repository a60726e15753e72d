"""Test that API functions return typed dataclasses."""

import math

from kurva_pkg.api import evaluate, plot, sweep, validate_expression
from kurva_pkg.types import EvalError, EvalValue, PlotResult, Sample, SweepResult


class TestAPITypedReturns:
    """Test that all API functions return typed dataclasses."""

    def test_evaluate_returns_value(self):
        result = evaluate("2+3*4")
        assert isinstance(result, EvalValue)
        assert result.ok is True
        assert result.value == 14.0

    def test_evaluate_with_x(self):
        assert evaluate("x", 5.0).value == 5.0

    def test_evaluate_huge_integer_literal(self):
        result = evaluate("1" * 5000)
        assert isinstance(result, EvalValue)
        assert result.value == math.inf

    def test_evaluate_division_by_zero(self):
        result = evaluate("1/(x-x)", 2.0)
        assert isinstance(result, EvalError)
        assert result.code == "DIVISION_BY_ZERO"

    def test_evaluate_parse_error(self):
        result = evaluate("(1+2")
        assert isinstance(result, EvalError)
        assert result.code == "MISSING_CLOSE_PAREN"

    def test_evaluate_rejects_two_variables(self):
        assert evaluate("x+y").code == "MULTIPLE_VARIABLES"

    def test_sweep_returns_sweep_result(self):
        result = sweep("x*2", "[0, 10]", step=1)
        assert isinstance(result, SweepResult)
        assert result.ok is True
        assert result.variables == ["x"]
        assert len(result.samples) == 10
        assert all(isinstance(s, Sample) for s in result.samples)
        assert result.samples[3].result.value == 6.0
        assert result.error_count == 0

    def test_sweep_structural_errors(self):
        assert sweep("x", "0,10]").code == "RANGE_FORMAT"
        assert sweep("x+y", "[0,10]").code == "MULTIPLE_VARIABLES"
        assert sweep("+", "[0,10]").code == "UNEXPECTED_TOKEN"
        failed = sweep("x", "[10,0]")
        assert failed.ok is False
        assert failed.samples is None

    def test_sweep_to_dict(self):
        data = sweep("1/(x-1)", "[0,2]", step=1).to_dict()
        assert data["ok"] is True
        assert data["variables"] == ["x"]
        assert data["range"]["x_min_inclusive"] is True
        assert data["samples"][0] == {"index": 0, "x": 0.0, "ok": True, "value": -1.0}
        assert data["samples"][1]["code"] == "DIVISION_BY_ZERO"

    def test_validate_expression(self):
        assert validate_expression("sin(x) + 1") == (True, None)
        is_valid, error = validate_expression("(x + 1")
        assert is_valid is False
        assert error == "Expected closing parenthesis at position 6"

    def test_plot_ascii(self):
        result = plot("sin(x)", "[-3, 3]", ascii=True)
        assert isinstance(result, PlotResult)
        assert result.ok is True
        assert "*" in result.result

    def test_plot_propagates_errors(self):
        result = plot("x", "[3, 1]", ascii=True)
        assert result.ok is False
        assert "x_min" in result.error
