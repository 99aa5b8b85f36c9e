"""
Sample expressions for demos and tests.

EXAMPLE_EXPRESSIONS holds source text in the accepted notations;
build_majority_expression() builds the same kind of tree by hand.
"""
from truthtable.expressions import (
    BinaryExpression,
    BinaryOperator,
    VariableReference,
)


EXAMPLE_EXPRESSIONS = {
    "conjunction": "A && B",
    "disjunction": "A || B",
    "negation": "!A",
    "precedence": "A || B && C",
    "keywords": "NOT rain AND (umbrella OR hood)",
    "exclusive": "A ^ B",
    "modus_ponens": "((p -> q) & p) -> q",
    "biconditional": "(a <-> b) <-> (!a <-> !b)",
    "excluded_middle": "x | !x",
    "contradiction": "x & !x",
    "half_adder_carry": "a ∧ b",
    "constant": "TRUE & !FALSE",
}


def build_majority_expression(a: str = "A", b: str = "B", c: str = "C") -> BinaryExpression:
    """(a & b) | (a & c) | (b & c): true when at least two inputs are true."""
    def both(x: str, y: str) -> BinaryExpression:
        return BinaryExpression(
            operator=BinaryOperator.AND,
            left=VariableReference(x),
            right=VariableReference(y),
        )

    return BinaryExpression(
        operator=BinaryOperator.OR,
        left=BinaryExpression(
            operator=BinaryOperator.OR,
            left=both(a, b),
            right=both(a, c),
        ),
        right=both(b, c),
    )


__all__ = ["EXAMPLE_EXPRESSIONS", "build_majority_expression"]
