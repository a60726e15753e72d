"""Tests for ASCII and matplotlib charts."""

import os

import pytest

from kurva_pkg.parser import parse_expression
from kurva_pkg.plotting import ascii_plot, plot_samples
from kurva_pkg.sampler import sample
from kurva_pkg.types import Range


def sweep(expression, r):
    return sample(parse_expression(expression), r)


class TestAsciiPlot:
    """Test character charts."""

    def test_dimensions(self):
        result = ascii_plot(sweep("x", Range(-5, 5, 1.0)), rows=10, cols=30)
        assert result.ok
        lines = result.result.splitlines()
        assert len(lines) == 10
        assert all(len(line) == 30 for line in lines)
        assert "*" in result.result

    def test_default_size(self):
        result = ascii_plot(sweep("sin(x)", Range(-3, 3, 0.1)))
        lines = result.result.splitlines()
        assert len(lines) == 20
        assert len(lines[0]) == 60

    def test_error_samples_skipped(self):
        result = ascii_plot(sweep("1/(x-1)", Range(0, 3, 1.0)))
        assert result.ok

    def test_all_errors(self):
        result = ascii_plot(sweep("1/(x-x)", Range(0, 3, 1.0)))
        assert not result.ok
        assert "no finite values" in result.error

    def test_no_samples(self):
        assert not ascii_plot([]).ok


class TestImagePlot:
    """Test matplotlib output."""

    def test_saves_png(self, tmp_path):
        pytest.importorskip("matplotlib")
        out = tmp_path / "curve.png"
        r = Range(-5, 5, 0.05)
        result = plot_samples(sweep("1/sin(x)", r), r, "1/sin(x)", output=str(out))
        assert result.ok, result.error
        assert result.result == str(out)
        assert os.path.getsize(out) > 0

    def test_temporary_file(self):
        pytest.importorskip("matplotlib")
        r = Range(0, 2, 0.5)
        result = plot_samples(sweep("x^2", r), r, "x^2")
        try:
            assert result.ok
            assert result.result.endswith(".png")
            assert os.path.exists(result.result)
        finally:
            if result.ok:
                os.remove(result.result)

    def test_constant_expression(self, tmp_path):
        pytest.importorskip("matplotlib")
        r = Range(0, 3, 1.0)
        result = plot_samples(sweep("2", r), r, "2", output=str(tmp_path / "flat.png"))
        assert result.ok

    def test_empty_sweep(self):
        result = plot_samples([], Range(5, 5, 1.0), "x")
        assert not result.ok
