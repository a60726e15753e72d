"""Discovery of the variable names an expression refers to."""

from __future__ import annotations

from .nodes import Node, Variable, children
from .types import ValidationError


def collect_variables(node: Node | None, names: list[str] | None = None) -> list[str]:
    """Return distinct variable names in pre-order, first occurrence first.

    Args:
        node: Root of the tree; None contributes nothing
        names: Accumulator to extend in place (a new list if omitted)

    Returns:
        The accumulated list of names
    """
    if names is None:
        names = []
    if node is None:
        return names
    if isinstance(node, Variable) and node.name not in names:
        names.append(node.name)
    for child in children(node):
        collect_variables(child, names)
    return names


def require_single_variable(names: list[str]) -> str | None:
    """Return the only variable name, None for a constant expression.

    Raises:
        ValidationError: More than one distinct name
    """
    if len(names) > 1:
        raise ValidationError(
            f"Multiple variables are not supported: {', '.join(names)}",
            code="MULTIPLE_VARIABLES",
        )
    return names[0] if names else None
