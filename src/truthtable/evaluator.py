"""
Expression Evaluator.

Computes the truth value of an AST under a complete assignment.
Both operands of a binary node are always evaluated; evaluation has
no side effects, so the order does not affect the result.
"""

from typing import Callable, Dict, List, Mapping, Tuple

from truthtable.errors import UnboundVariableError
from truthtable.expressions import (
    Expression,
    BinaryExpression,
    BinaryOperator,
    VariableReference,
    Literal,
    UnaryExpression,
    UnaryOperator,
)


BINARY_SEMANTICS: Dict[BinaryOperator, Callable[[bool, bool], bool]] = {
    BinaryOperator.AND: lambda a, b: a and b,
    BinaryOperator.OR: lambda a, b: a or b,
    BinaryOperator.XOR: lambda a, b: a != b,
    BinaryOperator.IMPLIES: lambda a, b: (not a) or b,
    BinaryOperator.EQUIVALENT: lambda a, b: a == b,
}


def evaluate(expr: Expression, assignment: Mapping[str, bool]) -> bool:
    """
    Evaluate an expression.

    Args:
        expr: Expression AST
        assignment: Truth value for every variable the AST references

    Returns:
        The expression's truth value

    Raises:
        UnboundVariableError: If a referenced variable has no value
    """
    # Post-order walk on an explicit stack: a node is pushed once to
    # schedule its operands and once more to combine their values.
    values: List[bool] = []
    pending: List[Tuple[Expression, bool]] = [(expr, False)]

    while pending:
        node, operands_done = pending.pop()

        if isinstance(node, VariableReference):
            try:
                values.append(bool(assignment[node.name]))
            except KeyError:
                raise UnboundVariableError(node.name) from None

        elif isinstance(node, Literal):
            values.append(node.value)

        elif isinstance(node, UnaryExpression):
            if node.operator != UnaryOperator.NOT:
                raise ValueError(f"Unsupported unary operator: {node.operator}")
            if operands_done:
                values.append(not values.pop())
            else:
                pending.append((node, True))
                pending.append((node.operand, False))

        elif isinstance(node, BinaryExpression):
            if operands_done:
                right = values.pop()
                left = values.pop()
                values.append(BINARY_SEMANTICS[node.operator](left, right))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))

        else:
            raise TypeError(f"Unsupported Expression type: {type(node)}")

    return values.pop()


__all__ = ["BINARY_SEMANTICS", "evaluate"]
