"""Kurva package: lexer, parser, evaluator and range sweeps for single-variable expressions."""

__all__ = [
    "config",
    "lexer",
    "nodes",
    "parser",
    "evaluator",
    "variables",
    "ranges",
    "sampler",
    "formatting",
    "symbolic",
    "plotting",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "sweep",
    "validate_expression",
    "plot",
]
