"""Repeated evaluation of one AST across a range."""

from __future__ import annotations

from collections.abc import Iterator

from .evaluator import evaluate
from .logging_config import get_logger
from .nodes import Node
from .types import Range, Sample

logger = get_logger("sampler")


def iter_samples(ast: Node, r: Range) -> Iterator[Sample]:
    """Yield one Sample per x from x_min while x < x_max.

    x advances by repeated addition of the step in double precision, so the
    number of samples is ceil((x_max - x_min) / step) up to rounding. The
    bracket flags on ``r`` do not change where the sweep starts or stops.
    """
    x = float(r.x_min)
    index = 0
    while x < r.x_max:
        yield Sample(index, x, evaluate(ast, x))
        index += 1
        x += r.step


def sample(ast: Node, r: Range) -> list[Sample]:
    """Evaluate ``ast`` over ``r`` and return the outcomes in order.

    Evaluation errors stay attached to their sample; one failing x does not
    stop the sweep.
    """
    samples = list(iter_samples(ast, r))
    errors = sum(1 for s in samples if not s.result.ok)
    logger.info(
        "Sampled %d points over [%d, %d) step %g, %d errors",
        len(samples),
        r.x_min,
        r.x_max,
        r.step,
        errors,
    )
    return samples
