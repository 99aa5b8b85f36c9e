"""
Expression System

A parsed boolean expression is an Abstract Syntax Tree built from a
closed set of node types. Every node owns its children exclusively;
trees never share subtrees and never contain cycles.

ARCHITECTURAL RULE:
    Nodes are structure only.
    Evaluation, variable collection, printing and simplification
    live in their own modules and dispatch on the node type.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum


class Expression(ABC):
    """
    Base class for all AST expressions.

    It exists to give the node hierarchy a common type.
    """
    pass


class BinaryOperator(Enum):
    """
    Binary connectives, listed from tightest to loosest binding.

    All of them are left-associative.
    """

    AND = "AND"
    XOR = "XOR"
    OR = "OR"
    IMPLIES = "IMPLIES"
    EQUIVALENT = "EQUIVALENT"


class UnaryOperator(Enum):
    """Unary connectives. Negation is the only one."""

    NOT = "NOT"


@dataclass(frozen=True)
class VariableReference(Expression):
    """
    References a propositional variable by name.

    Examples:
        - A
        - door_open
        - x1

    Properties:
        name: Non-empty identifier, compared case-sensitively
    """

    name: str


@dataclass(frozen=True)
class Literal(Expression):
    """
    A constant truth value, written 1/0 or TRUE/FALSE.

    Literals never contribute variables to a truth table.
    """

    value: bool


@dataclass(frozen=True)
class UnaryExpression(Expression):
    """
    Represents a negation.

    Example:
        !(A & B)

    Becomes:
        UnaryExpression(
            operator=UnaryOperator.NOT,
            operand=BinaryExpression(
                operator=BinaryOperator.AND,
                left=VariableReference("A"),
                right=VariableReference("B"),
            ),
        )
    """

    operator: UnaryOperator
    operand: Expression


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """
    Represents a binary connective applied to two operands.

    Example:
        A | B & C

    Becomes:
        BinaryExpression(
            operator=BinaryOperator.OR,
            left=VariableReference("A"),
            right=BinaryExpression(
                operator=BinaryOperator.AND,
                left=VariableReference("B"),
                right=VariableReference("C"),
            ),
        )

    Properties:
        operator: BinaryOperator enum
        left: Left operand, written first in the source
        right: Right operand
    """

    operator: BinaryOperator
    left: Expression
    right: Expression


def negate(operand: Expression) -> UnaryExpression:
    """Shorthand for a NOT node."""
    return UnaryExpression(UnaryOperator.NOT, operand)


__all__ = [
    "Expression",
    "BinaryOperator",
    "UnaryOperator",
    "VariableReference",
    "Literal",
    "UnaryExpression",
    "BinaryExpression",
    "negate",
]
