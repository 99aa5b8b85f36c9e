"""
Request-level operations offered to front ends.

Each call runs the whole pipeline from raw text:

    text → tokenize → parse → AST → collect variables → generate table

Calls are independent and hold no state, so they can be served
concurrently without locking. Errors propagate as TruthTableError
subclasses and never come with a partial result. Parsing, variable
collection and evaluation handle any nesting the parser accepts; the
recursive simplify and analyze passes report RecursionError as
ExpressionTooComplexError.
"""

import warnings
from typing import Any, Dict, List, Mapping, Optional

from truthtable.analyzer import ExpressionReport, analyze_expression
from truthtable.config import EngineConfig
from truthtable.errors import ExpressionTooComplexError
from truthtable.formatting import expression_to_string
from truthtable.parser import parse_expression
from truthtable.serialization import table_to_dicts
from truthtable.simplifier import simplify
from truthtable.table import (
    TruthTableRow,
    free_variables,
    generate_table,
    validate_fixed_values,
)
from truthtable.variables import collect_variables


def extract_variables(expression: str) -> List[str]:
    """
    List the variables an expression uses, in first-occurrence order.

    Raises:
        LexicalError, ExpressionSyntaxError: If the text is not a valid expression
    """
    return collect_variables(parse_expression(expression))


def calculate_truth_table(
    expression: str,
    fixed_values: Optional[Mapping[str, bool]] = None,
    config: Optional[EngineConfig] = None,
) -> List[TruthTableRow]:
    """
    Compute the truth table of an expression.

    Args:
        expression: Raw expression text
        fixed_values: Variables pinned to a value; every other variable
            is enumerated
        config: Limits and options (defaults to EngineConfig())

    Returns:
        Rows in ascending binary order of the free variables

    Raises:
        LexicalError, ExpressionSyntaxError: If the text is not a valid expression
        UnknownVariableError: If fixed_values names variables not in the expression
        FixedValueTypeError: If a fixed value is not a bool
        TooManyVariablesError: If more variables are free than the config allows
        ExpressionTooComplexError: If config.simplify is set and the
            expression is nested too deeply to simplify
    """
    config = config or EngineConfig()
    fixed = dict(fixed_values or {})

    expr = parse_expression(expression)
    variables = collect_variables(expr)
    validate_fixed_values(variables, fixed)

    free_count = len(free_variables(variables, fixed))
    limit = config.max_free_variables
    within_limit = limit is None or free_count <= limit
    if within_limit and config.warn_free_variables is not None and free_count > config.warn_free_variables:
        warnings.warn(
            f"Truth table for {free_count} free variables has {2 ** free_count} rows",
            UserWarning,
        )

    if config.simplify:
        try:
            expr = simplify(expr).expression
        except RecursionError:
            raise ExpressionTooComplexError("simplify") from None

    # Rows always report the variables of the expression as written,
    # even those simplification removed.
    return generate_table(
        expr,
        fixed,
        variables=variables,
        max_free_variables=limit,
    )


def calculate_truth_table_payload(
    expression: str,
    fixed_values: Optional[Mapping[str, bool]] = None,
    config: Optional[EngineConfig] = None,
) -> List[Dict[str, Any]]:
    """calculate_truth_table() in the wire shape ({"Result", "Variables"})."""
    return table_to_dicts(calculate_truth_table(expression, fixed_values, config))


def simplify_expression(expression: str) -> str:
    """Parse, simplify and render an expression in canonical notation."""
    expr = parse_expression(expression)
    try:
        return expression_to_string(simplify(expr).expression)
    except RecursionError:
        raise ExpressionTooComplexError("simplify") from None


def analyze(expression: str, config: Optional[EngineConfig] = None) -> ExpressionReport:
    """Parse an expression and produce its analysis report."""
    expr = parse_expression(expression)
    try:
        return analyze_expression(expr, config)
    except RecursionError:
        raise ExpressionTooComplexError("analyze") from None


__all__ = [
    "extract_variables",
    "calculate_truth_table",
    "calculate_truth_table_payload",
    "simplify_expression",
    "analyze",
]
