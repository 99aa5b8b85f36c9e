"""
Expression Analyzer: read-only diagnostics for a parsed expression.

Reports:
    - Size and nesting depth
    - Operator usage
    - Variable inventory
    - Classification (tautology / contradiction / contingency)
    - Warning flags for large or degenerate expressions

IMPORTANT: This module never rewrites the expression.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from truthtable.config import EngineConfig
from truthtable.expressions import (
    Expression,
    BinaryExpression,
    VariableReference,
    Literal,
    UnaryExpression,
)
from truthtable.formatting import expression_to_string
from truthtable.table import generate_table
from truthtable.variables import collect_variables


class Classification(Enum):
    TAUTOLOGY = "tautology"
    CONTRADICTION = "contradiction"
    CONTINGENCY = "contingency"


@dataclass
class ExpressionMetrics:
    """Metrics about a single expression tree."""
    depth: int = 0
    node_count: int = 0
    literal_count: int = 0
    operator_counts: Dict[str, int] = field(default_factory=lambda: defaultdict(int))


def _measure(expr: Expression, metrics: ExpressionMetrics) -> int:
    """Accumulate counts into metrics and return the subtree depth."""
    metrics.node_count += 1

    if isinstance(expr, BinaryExpression):
        metrics.operator_counts[expr.operator.value] += 1
        return 1 + max(_measure(expr.left, metrics), _measure(expr.right, metrics))

    if isinstance(expr, UnaryExpression):
        metrics.operator_counts[expr.operator.value] += 1
        return 1 + _measure(expr.operand, metrics)

    if isinstance(expr, Literal):
        metrics.literal_count += 1
    elif not isinstance(expr, VariableReference):
        raise TypeError(f"Unsupported Expression type: {type(expr)}")

    return 0


def measure_expression(expr: Expression) -> ExpressionMetrics:
    metrics = ExpressionMetrics()
    metrics.depth = _measure(expr, metrics)
    metrics.operator_counts = dict(metrics.operator_counts)
    return metrics


@dataclass
class ExpressionReport:
    """Analysis report for one expression."""

    expression: str
    variables: List[str] = field(default_factory=list)
    depth: int = 0
    node_count: int = 0
    literal_count: int = 0
    operator_counts: Dict[str, int] = field(default_factory=dict)

    # None when the table was too large to enumerate
    classification: Optional[Classification] = None
    true_rows: Optional[int] = None
    total_rows: Optional[int] = None

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def classify_rows(true_rows: int, total_rows: int) -> Classification:
    if true_rows == total_rows:
        return Classification.TAUTOLOGY
    if true_rows == 0:
        return Classification.CONTRADICTION
    return Classification.CONTINGENCY


def analyze_expression(expr: Expression, config: Optional[EngineConfig] = None) -> ExpressionReport:
    """
    Perform analysis of a parsed expression.

    The truth table is enumerated only when the variable count is
    within config.max_free_variables.
    """
    config = config or EngineConfig()
    metrics = measure_expression(expr)

    report = ExpressionReport(
        expression=expression_to_string(expr),
        variables=collect_variables(expr),
        depth=metrics.depth,
        node_count=metrics.node_count,
        literal_count=metrics.literal_count,
        operator_counts=metrics.operator_counts,
    )

    count = len(report.variables)
    limit = config.max_free_variables

    if limit is None or count <= limit:
        rows = generate_table(expr, variables=report.variables)
        report.total_rows = len(rows)
        report.true_rows = sum(1 for row in rows if row.result)
        report.classification = classify_rows(report.true_rows, report.total_rows)
    else:
        report.add_warning(
            f"Classification skipped: {count} variables exceed the limit of {limit}"
        )

    # =========================================================================
    # WARNING FLAGS
    # =========================================================================

    if report.depth > config.max_expression_depth:
        report.add_warning(f"High expression complexity: depth {report.depth}")

    if config.warn_free_variables is not None and count > config.warn_free_variables:
        report.add_warning(f"Large truth table: {count} variables ({2 ** count} rows)")

    if report.literal_count:
        report.add_warning(
            f"Constant literals present: {report.literal_count} (expression can be simplified)"
        )

    if report.classification == Classification.TAUTOLOGY:
        report.add_warning("Expression is a tautology: result is always true")
    elif report.classification == Classification.CONTRADICTION:
        report.add_warning("Expression is a contradiction: result is always false")

    return report


__all__ = [
    "Classification",
    "ExpressionMetrics",
    "ExpressionReport",
    "measure_expression",
    "classify_rows",
    "analyze_expression",
]
