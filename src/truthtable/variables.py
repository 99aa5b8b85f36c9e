"""
Variable Collector.

Walks an expression depth-first, left operand before right, and
records each variable name the first time it is seen.
"""

from typing import Dict, List

from truthtable.expressions import (
    Expression,
    BinaryExpression,
    VariableReference,
    Literal,
    UnaryExpression,
)


def collect_variables(expr: Expression) -> List[str]:
    """
    Return the distinct variable names of an expression.

    Order is first occurrence in a left-to-right reading of the
    source, e.g. "B & (A | B)" gives ["B", "A"].
    """
    seen: Dict[str, None] = {}
    # Right operand pushed first so the left one is visited first
    pending: List[Expression] = [expr]

    while pending:
        node = pending.pop()
        if isinstance(node, VariableReference):
            seen.setdefault(node.name, None)
        elif isinstance(node, UnaryExpression):
            pending.append(node.operand)
        elif isinstance(node, BinaryExpression):
            pending.append(node.right)
            pending.append(node.left)
        elif isinstance(node, Literal):
            pass
        else:
            raise TypeError(f"Unsupported Expression type: {type(node)}")

    return list(seen)


__all__ = ["collect_variables"]
