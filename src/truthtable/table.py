"""
Truth Table Generator

Enumerates every completion of a partial assignment and evaluates
the expression once per completion.

Row order:
    Free (unfixed) variables are treated as the bits of a counter,
    the first free variable in Variable List order being the most
    significant bit, False = 0 and True = 1. Rows appear in ascending
    counter order. Fixed variables keep their value in every row and
    are still reported at their Variable List position.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from truthtable.errors import (
    FixedValueTypeError,
    TooManyVariablesError,
    UnknownVariableError,
)
from truthtable.evaluator import evaluate
from truthtable.expressions import Expression
from truthtable.variables import collect_variables


@dataclass(frozen=True)
class TruthTableVariable:
    """
    One variable's value within a row.

    Properties:
        name: Variable name
        value: Truth value in this row
    """

    name: str
    value: bool


@dataclass(frozen=True)
class TruthTableRow:
    """
    One complete assignment paired with the expression's result.

    Properties:
        result: Value of the expression under this row's assignment
        variables: Every variable of the Variable List, in that order
    """

    result: bool
    variables: Tuple[TruthTableVariable, ...] = ()

    def assignment(self) -> Dict[str, bool]:
        """Row values as a name -> value mapping."""
        return {v.name: v.value for v in self.variables}


def validate_fixed_values(variables: Sequence[str], fixed: Mapping[str, bool]) -> None:
    """
    Check that every fixed value names a known variable and is a bool.

    Raises:
        UnknownVariableError: Listing all unknown names together
        FixedValueTypeError: For the first value that is not a bool
    """
    known = set(variables)
    unknown = [name for name in fixed if name not in known]
    if unknown:
        raise UnknownVariableError(unknown)

    for name, value in fixed.items():
        if not isinstance(value, bool):
            raise FixedValueTypeError(name, value)


def free_variables(variables: Sequence[str], fixed: Mapping[str, bool]) -> List[str]:
    """Variables without a fixed value, in Variable List order."""
    return [name for name in variables if name not in fixed]


def generate_table(
    expr: Expression,
    fixed: Optional[Mapping[str, bool]] = None,
    variables: Optional[Sequence[str]] = None,
    max_free_variables: Optional[int] = None,
) -> List[TruthTableRow]:
    """
    Compute the truth table of an expression.

    Args:
        expr: Expression AST
        fixed: Values for variables that must not be enumerated
        variables: Variable List to report; defaults to the variables
            collected from expr and must include all of them
        max_free_variables: Refuse to enumerate more free variables
            than this (None = no limit)

    Returns:
        2**k rows for k free variables, in ascending binary order

    Raises:
        UnknownVariableError: If fixed names variables not in the list
        FixedValueTypeError: If a fixed value is not a bool
        TooManyVariablesError: If the free variable limit is exceeded
    """
    fixed = dict(fixed or {})
    variables = list(variables) if variables is not None else collect_variables(expr)

    validate_fixed_values(variables, fixed)

    free = free_variables(variables, fixed)
    width = len(free)

    if max_free_variables is not None and width > max_free_variables:
        raise TooManyVariablesError(width, max_free_variables)

    rows: List[TruthTableRow] = []
    for counter in range(2 ** width):
        assignment = dict(fixed)
        for index, name in enumerate(free):
            assignment[name] = bool((counter >> (width - 1 - index)) & 1)

        rows.append(TruthTableRow(
            result=evaluate(expr, assignment),
            variables=tuple(TruthTableVariable(name, assignment[name]) for name in variables),
        ))

    return rows


__all__ = [
    "TruthTableVariable",
    "TruthTableRow",
    "validate_fixed_values",
    "free_variables",
    "generate_table",
]
