"""
Text rendering for expressions and truth tables.

expression_to_string() emits canonical symbolic notation with only
the parentheses the grammar needs, so parsing the output gives back
an equal tree.
"""

from typing import Dict, List, Sequence, Tuple

from truthtable.expressions import (
    Expression,
    BinaryExpression,
    BinaryOperator,
    VariableReference,
    Literal,
    UnaryExpression,
)
from truthtable.table import TruthTableRow


BINARY_SYMBOLS: Dict[BinaryOperator, str] = {
    BinaryOperator.AND: "&",
    BinaryOperator.XOR: "^",
    BinaryOperator.OR: "|",
    BinaryOperator.IMPLIES: "->",
    BinaryOperator.EQUIVALENT: "<->",
}

NOT_SYMBOL = "!"

# Higher binds tighter.
_PRECEDENCE: Dict[BinaryOperator, int] = {
    BinaryOperator.EQUIVALENT: 1,
    BinaryOperator.IMPLIES: 2,
    BinaryOperator.OR: 3,
    BinaryOperator.XOR: 4,
    BinaryOperator.AND: 5,
}
_UNARY_PRECEDENCE = 6
_ATOM_PRECEDENCE = 7


def _precedence(expr: Expression) -> int:
    if isinstance(expr, BinaryExpression):
        return _PRECEDENCE[expr.operator]
    if isinstance(expr, UnaryExpression):
        return _UNARY_PRECEDENCE
    return _ATOM_PRECEDENCE


def _wrap(expr: Expression, needs_parens: bool) -> str:
    text = expression_to_string(expr)
    return f"({text})" if needs_parens else text


def expression_to_string(expr: Expression) -> str:
    """Render an expression in canonical symbolic notation."""
    if isinstance(expr, VariableReference):
        return expr.name

    if isinstance(expr, Literal):
        return "1" if expr.value else "0"

    if isinstance(expr, UnaryExpression):
        operand = _wrap(expr.operand, _precedence(expr.operand) < _UNARY_PRECEDENCE)
        return f"{NOT_SYMBOL}{operand}"

    if isinstance(expr, BinaryExpression):
        level = _PRECEDENCE[expr.operator]
        # Left-associative: an equal-precedence right operand needs parentheses
        left = _wrap(expr.left, _precedence(expr.left) < level)
        right = _wrap(expr.right, _precedence(expr.right) <= level)
        return f"{left} {BINARY_SYMBOLS[expr.operator]} {right}"

    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def format_tree(expr: Expression, indent: str = "  ") -> str:
    """
    Render the AST as an indented outline, one node per line.

    Example for "A | !B":
        Binary: OR
          Variable: A
          Unary: NOT
            Variable: B
    """
    lines: List[str] = []
    pending: List[Tuple[Expression, int]] = [(expr, 0)]

    while pending:
        node, depth = pending.pop()
        prefix = indent * depth
        if isinstance(node, VariableReference):
            lines.append(f"{prefix}Variable: {node.name}")
        elif isinstance(node, Literal):
            lines.append(f"{prefix}Literal: {str(node.value).lower()}")
        elif isinstance(node, UnaryExpression):
            lines.append(f"{prefix}Unary: {node.operator.value}")
            pending.append((node.operand, depth + 1))
        elif isinstance(node, BinaryExpression):
            lines.append(f"{prefix}Binary: {node.operator.value}")
            pending.append((node.right, depth + 1))
            pending.append((node.left, depth + 1))
        else:
            raise TypeError(f"Unsupported Expression type: {type(node)}")

    return "\n".join(lines)


def format_table(rows: Sequence[TruthTableRow], result_header: str = "Result") -> str:
    """
    Render rows as a plain-text grid with T/F cells.

    Column headers come from the first row's variable names.
    """
    if not rows:
        return ""

    headers = [v.name for v in rows[0].variables] + [result_header]
    widths = [max(len(h), 1) for h in headers]

    def render(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [render(headers), "-+-".join("-" * w for w in widths)]
    for row in rows:
        cells = ["T" if v.value else "F" for v in row.variables]
        cells.append("T" if row.result else "F")
        lines.append(render(cells))

    return "\n".join(lines)


__all__ = [
    "BINARY_SYMBOLS",
    "NOT_SYMBOL",
    "expression_to_string",
    "format_tree",
    "format_table",
]
