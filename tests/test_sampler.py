"""Tests for range sweeps."""

import pytest

from kurva_pkg.parser import parse_expression
from kurva_pkg.ranges import parse_range
from kurva_pkg.sampler import iter_samples, sample
from kurva_pkg.types import Range


def test_unit_step_stops_before_x_max():
    samples = sample(parse_expression("x"), parse_range("[0,10]", step=1))
    assert len(samples) == 10
    assert [s.x for s in samples] == [float(i) for i in range(10)]
    assert [s.result.value for s in samples] == [float(i) for i in range(10)]
    assert [s.index for s in samples] == list(range(10))


@pytest.mark.parametrize("text", ["[0,10]", "(0,10)", "[0,10)", "(0,10]"])
def test_bracket_flags_do_not_change_sweep(text):
    samples = sample(parse_expression("x"), parse_range(text, step=1))
    assert [s.x for s in samples] == [float(i) for i in range(10)]


@pytest.mark.parametrize(
    "x_min, x_max, step, expected",
    [
        (-2, 3, 0.5, 10),
        (0, 1, 0.25, 4),
        (0, 10, 3, 4),
        (5, 5, 1, 0),
    ],
)
def test_sample_count(x_min, x_max, step, expected):
    samples = sample(parse_expression("1"), Range(x_min, x_max, step))
    assert len(samples) == expected


def test_errors_are_per_sample():
    samples = sample(parse_expression("1/(x-3)"), Range(0, 6, 1.0))
    assert len(samples) == 6
    failed = [s for s in samples if not s.result.ok]
    assert [s.x for s in failed] == [3.0]
    assert failed[0].result.code == "DIVISION_BY_ZERO"
    assert samples[4].result.value == 1.0


def test_iter_samples_is_lazy():
    samples = iter_samples(parse_expression("x*x"), Range(0, 1000000, 1.0))
    first = next(samples)
    assert first.x == 0.0
    assert next(samples).result.value == 1.0


def test_repeated_sweeps_identical():
    r = Range(-3, 3, 0.25)
    assert sample(parse_expression("sin(x)^2"), r) == sample(
        parse_expression("sin(x)^2"), r
    )
