"""Command-line interface: ``kurva <expression> <range>``."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from . import config
from .config import VERSION
from .formatting import format_samples, format_tree, format_variables
from .logging_config import get_logger, setup_logging
from .parser import parse_expression
from .plotting import ascii_plot, plot_samples
from .ranges import parse_range
from .sampler import sample
from .symbolic import simplified_form, symbolic_form
from .types import ParseError, ValidationError
from .variables import collect_variables, require_single_variable

logger = get_logger("cli")

EPILOG = """\
<expression> is a mathematical expression like 1/sin(x)
<range> is the interval to evaluate it over, e.g. "[-5, 5]"

Supported:
  x + y    x - y    x * y    x / y
  x ^ a    sin(x)   cos(x)   tan(x)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kurva",
        description="Evaluate a single-variable expression over a range.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("expression", help="Expression to evaluate, e.g. 1/sin(x)")
    parser.add_argument("range", help="Range to sweep, e.g. [-5,5]")
    parser.add_argument(
        "-s",
        "--step",
        type=float,
        help=f"Distance between samples (default: {config.STEP})",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--show-ast", action="store_true", help="Print the parsed syntax tree"
    )
    parser.add_argument(
        "--symbolic",
        action="store_true",
        help="Print the expression as parsed and simplified by SymPy",
    )
    parser.add_argument(
        "--ascii", action="store_true", help="Print an ASCII chart of the sweep"
    )
    parser.add_argument(
        "--plot",
        nargs="?",
        const="",
        metavar="PATH",
        help="Save a PNG chart (to PATH, or a temporary file)",
    )
    parser.add_argument(
        "--open", action="store_true", help="Open the saved chart in the default viewer"
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {VERSION}"
    )
    return parser


def _fail(error: Exception, output_format: str) -> int:
    code = getattr(error, "code", "ERROR")
    print(f"Error: {error}", file=sys.stderr)
    if output_format == "json":
        print(json.dumps({"ok": False, "error": str(error), "code": code}))
    return 1


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Kurva CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for structural errors)
    """
    args = build_parser().parse_args(argv)
    output_format = args.format

    setup_logging(level=args.log_level, log_file=args.log_file)
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)

    # 1. Expression
    try:
        ast = parse_expression(args.expression)
    except (ParseError, ValidationError) as e:
        return _fail(e, output_format)

    # 2. Variables
    variables = collect_variables(ast)
    try:
        require_single_variable(variables)
    except ValidationError as e:
        return _fail(e, output_format)

    # 3. Range
    try:
        r = parse_range(args.range, args.step)
    except ValidationError as e:
        return _fail(e, output_format)

    # 4. Sweep
    samples = sample(ast, r)

    # 5. Report
    report: dict[str, Any] = {
        "ok": True,
        "expression": args.expression,
        "variables": variables,
        "range": r.to_dict(),
    }
    if args.show_ast:
        report["tree"] = format_tree(ast)
    if args.symbolic:
        try:
            report["symbolic"] = symbolic_form(ast)
            report["simplified"] = simplified_form(ast)
        except ValidationError as e:
            report.pop("symbolic", None)
            report["symbolic_error"] = str(e)
    if args.ascii:
        chart = ascii_plot(samples)
        report["ascii"] = chart.result if chart.ok else None
        if not chart.ok:
            report["plot_error"] = chart.error
    if args.plot is not None:
        image = plot_samples(
            samples, r, args.expression, output=args.plot or None, open_viewer=args.open
        )
        report["plot"] = image.result if image.ok else None
        if not image.ok:
            report["plot_error"] = image.error
            logger.warning(f"Plotting failed: {image.error}")

    if output_format == "json":
        report["samples"] = [s.to_dict() for s in samples]
        print(json.dumps(report))
        return 0

    if "tree" in report:
        print(report["tree"])
    print(f"Variables: {format_variables(variables)}")
    if "symbolic" in report:
        print(f"f(x) = {report['symbolic']}")
        print(f"Simplified: {report['simplified']}")
    print(format_samples(samples))
    if report.get("ascii"):
        print(report["ascii"])
    if report.get("plot"):
        print(f"Plot saved to: {report['plot']}")
    if "symbolic_error" in report:
        print(f"Error: {report['symbolic_error']}", file=sys.stderr)
    if "plot_error" in report:
        print(f"Error: {report['plot_error']}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
