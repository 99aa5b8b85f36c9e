"""
Graphviz DOT diagram generator for expression trees.

Converts a parsed Expression into Graphviz DOT format for visualization.

Supports two modes:
    - SIMPLE: One node per AST node, labelled by operator or name
    - DETAILED: Each operator node also shows the text of its subtree
"""

from enum import Enum
from typing import List

from truthtable.expressions import (
    Expression,
    BinaryExpression,
    VariableReference,
    Literal,
    UnaryExpression,
)
from truthtable.formatting import BINARY_SYMBOLS, NOT_SYMBOL, expression_to_string


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"      # Operators and names only
    DETAILED = "detailed"  # Include subexpression text


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Escape backslashes first so the \n escapes below survive
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _node_label(expr: Expression, mode: DotMode) -> str:
    if isinstance(expr, VariableReference):
        return expr.name
    if isinstance(expr, Literal):
        return "1" if expr.value else "0"

    if isinstance(expr, UnaryExpression):
        label = f"NOT ({NOT_SYMBOL})"
    elif isinstance(expr, BinaryExpression):
        label = f"{expr.operator.value} ({BINARY_SYMBOLS[expr.operator]})"
    else:
        raise TypeError(f"Unsupported Expression type: {type(expr)}")

    if mode == DotMode.DETAILED:
        label = f"{label}\n{expression_to_string(expr)}"
    return label


def _node_style(expr: Expression) -> str:
    if isinstance(expr, VariableReference):
        return "shape=ellipse, fillcolor=lightgreen"
    if isinstance(expr, Literal):
        return "shape=ellipse, fillcolor=lightyellow"
    return "shape=box, fillcolor=lightblue"


def generate_dot(expr: Expression, mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for an expression tree.

    Every AST node gets its own graph node (n0, n1, ... in pre-order),
    so a variable used twice appears twice. Edges run from operator to
    operand, left operand first.

    Args:
        expr: Expression to visualize
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    lines = [
        "digraph expression {",
        "  rankdir=TB;",
        "  node [style=filled];",
    ]
    edges: List[str] = []
    counter = [0]

    def visit(node: Expression) -> str:
        node_id = f"n{counter[0]}"
        counter[0] += 1
        label = _escape_dot_string(_node_label(node, mode))
        lines.append(f"  {node_id} [label={label}, {_node_style(node)}];")

        children: List[Expression] = []
        if isinstance(node, UnaryExpression):
            children = [node.operand]
        elif isinstance(node, BinaryExpression):
            children = [node.left, node.right]

        for child in children:
            child_id = visit(child)
            edges.append(f"  {node_id} -> {child_id};")
        return node_id

    visit(expr)
    lines.extend(edges)
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(expr: Expression, filename: str, mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        expr: Expression to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
    """
    dot = generate_dot(expr, mode=mode)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
