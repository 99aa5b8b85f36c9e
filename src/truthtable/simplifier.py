"""
Algebraic simplification of boolean expressions.

Rewrites are applied bottom-up: children first, then every rule is
tried on the rebuilt node until none fires. Whole-tree passes repeat
until the tree stops changing (at most MAX_PASSES times).

Every rewrite is an equivalence of propositional logic, so the result
has the same truth table as the input over the input's variables.
Variables can disappear (A & !A becomes 0); callers that need the
original Variable List must collect it before simplifying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from truthtable.expressions import (
    Expression,
    BinaryExpression,
    BinaryOperator,
    Literal,
    UnaryExpression,
    UnaryOperator,
    negate,
)
from truthtable.formatting import expression_to_string


MAX_PASSES = 100

TRUE = Literal(True)
FALSE = Literal(False)

Rule = Callable[[Expression], Optional[Expression]]


@dataclass(frozen=True)
class RuleApplication:
    """One rewrite, recorded in canonical text form."""

    rule: str
    before: str
    after: str


@dataclass
class SimplificationResult:
    """Simplified expression plus the rewrites that produced it."""

    expression: Expression
    applications: List[RuleApplication] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.applications)


def _is_not(expr: Expression) -> bool:
    return isinstance(expr, UnaryExpression) and expr.operator == UnaryOperator.NOT


def _is_complement(a: Expression, b: Expression) -> bool:
    """True if one side is the negation of the other."""
    return (_is_not(a) and a.operand == b) or (_is_not(b) and b.operand == a)


def _operands(expr: Expression, operator: BinaryOperator) -> Optional[Tuple[Expression, Expression]]:
    if isinstance(expr, BinaryExpression) and expr.operator == operator:
        return expr.left, expr.right
    return None


# =========================================================================
# RULES
# =========================================================================

def literal_negation(expr: Expression) -> Optional[Expression]:
    """!1 = 0, !0 = 1"""
    if _is_not(expr) and isinstance(expr.operand, Literal):
        return Literal(not expr.operand.value)
    return None


def double_negation(expr: Expression) -> Optional[Expression]:
    """!!A = A"""
    if _is_not(expr) and _is_not(expr.operand):
        return expr.operand.operand
    return None


def identity(expr: Expression) -> Optional[Expression]:
    """A & 1 = A, A | 0 = A, A ^ 0 = A, 1 -> A = A, A <-> 1 = A"""
    if not isinstance(expr, BinaryExpression):
        return None
    op, left, right = expr.operator, expr.left, expr.right

    neutral = {
        BinaryOperator.AND: TRUE,
        BinaryOperator.OR: FALSE,
        BinaryOperator.XOR: FALSE,
        BinaryOperator.EQUIVALENT: TRUE,
    }
    if op in neutral:
        if left == neutral[op]:
            return right
        if right == neutral[op]:
            return left
    if op == BinaryOperator.IMPLIES and left == TRUE:
        return right
    return None


def domination(expr: Expression) -> Optional[Expression]:
    """A & 0 = 0, A | 1 = 1, 0 -> A = 1, A -> 1 = 1"""
    if not isinstance(expr, BinaryExpression):
        return None
    op, left, right = expr.operator, expr.left, expr.right

    if op == BinaryOperator.AND and FALSE in (left, right):
        return FALSE
    if op == BinaryOperator.OR and TRUE in (left, right):
        return TRUE
    if op == BinaryOperator.IMPLIES and (left == FALSE or right == TRUE):
        return TRUE
    return None


def literal_inversion(expr: Expression) -> Optional[Expression]:
    """A ^ 1 = !A, A -> 0 = !A, A <-> 0 = !A"""
    if not isinstance(expr, BinaryExpression):
        return None
    op, left, right = expr.operator, expr.left, expr.right

    if op == BinaryOperator.XOR:
        if left == TRUE:
            return negate(right)
        if right == TRUE:
            return negate(left)
    if op == BinaryOperator.EQUIVALENT:
        if left == FALSE:
            return negate(right)
        if right == FALSE:
            return negate(left)
    if op == BinaryOperator.IMPLIES and right == FALSE:
        return negate(left)
    return None


def idempotency(expr: Expression) -> Optional[Expression]:
    """A & A = A, A | A = A, A ^ A = 0, A -> A = 1, A <-> A = 1"""
    if not isinstance(expr, BinaryExpression) or expr.left != expr.right:
        return None

    if expr.operator in (BinaryOperator.AND, BinaryOperator.OR):
        return expr.left
    if expr.operator == BinaryOperator.XOR:
        return FALSE
    return TRUE


def complement(expr: Expression) -> Optional[Expression]:
    """A & !A = 0, A | !A = 1, A ^ !A = 1, A <-> !A = 0"""
    if not isinstance(expr, BinaryExpression) or not _is_complement(expr.left, expr.right):
        return None

    if expr.operator in (BinaryOperator.AND, BinaryOperator.EQUIVALENT):
        return FALSE
    if expr.operator in (BinaryOperator.OR, BinaryOperator.XOR):
        return TRUE
    return None


def absorption(expr: Expression) -> Optional[Expression]:
    """A & (A | B) = A, A | (A & B) = A (either operand order)"""
    if not isinstance(expr, BinaryExpression):
        return None

    inner = {
        BinaryOperator.AND: BinaryOperator.OR,
        BinaryOperator.OR: BinaryOperator.AND,
    }.get(expr.operator)
    if inner is None:
        return None

    for kept, other in ((expr.left, expr.right), (expr.right, expr.left)):
        pair = _operands(other, inner)
        if pair is not None and kept in pair:
            return kept
    return None


DEFAULT_RULES: List[Tuple[str, Rule]] = [
    ("Literal negation", literal_negation),
    ("Double negation", double_negation),
    ("Identity law", identity),
    ("Domination law", domination),
    ("Literal inversion", literal_inversion),
    ("Idempotency law", idempotency),
    ("Complement law", complement),
    ("Absorption law", absorption),
]


# =========================================================================
# DRIVER
# =========================================================================

class Simplifier:
    """
    Applies a list of named rules to an expression until a fixed point.

    A Simplifier keeps no state between simplify() calls.
    """

    def __init__(self, rules: Optional[List[Tuple[str, Rule]]] = None, max_passes: int = MAX_PASSES):
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)
        self.max_passes = max_passes

    def simplify(self, expr: Expression) -> SimplificationResult:
        applications: List[RuleApplication] = []
        current = expr

        for _ in range(self.max_passes):
            rewritten = self._visit(current, applications)
            if rewritten == current:
                break
            current = rewritten

        return SimplificationResult(expression=current, applications=applications)

    def _visit(self, expr: Expression, applications: List[RuleApplication]) -> Expression:
        if isinstance(expr, UnaryExpression):
            expr = UnaryExpression(expr.operator, self._visit(expr.operand, applications))
        elif isinstance(expr, BinaryExpression):
            expr = BinaryExpression(
                expr.operator,
                self._visit(expr.left, applications),
                self._visit(expr.right, applications),
            )
        return self._apply_rules(expr, applications)

    def _apply_rules(self, expr: Expression, applications: List[RuleApplication]) -> Expression:
        fired = True
        while fired:
            fired = False
            for name, rule in self.rules:
                rewritten = rule(expr)
                if rewritten is not None and rewritten != expr:
                    applications.append(RuleApplication(
                        rule=name,
                        before=expression_to_string(expr),
                        after=expression_to_string(rewritten),
                    ))
                    expr = rewritten
                    fired = True
                    break
        return expr


def simplify(expr: Expression) -> SimplificationResult:
    """Simplify with the default rule set."""
    return Simplifier().simplify(expr)


__all__ = [
    "RuleApplication",
    "SimplificationResult",
    "Simplifier",
    "DEFAULT_RULES",
    "simplify",
]
