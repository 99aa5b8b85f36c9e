"""
Tests for the Truth Table Generator.

Tests cover:
    - Row counts (2**k for k free variables)
    - Ascending binary row order, first free variable most significant
    - Fixed variables held constant and still reported in place
    - Validation of fixed values
    - Zero free variables
"""

import pytest
from truthtable.errors import (
    FixedValueTypeError,
    TooManyVariablesError,
    UnknownVariableError,
)
from truthtable.parser import parse_expression
from truthtable.table import (
    TruthTableRow,
    TruthTableVariable,
    free_variables,
    generate_table,
    validate_fixed_values,
)

T, F = True, False


def summary(rows):
    """Rows as ((values...), result) tuples."""
    return [(tuple(v.value for v in row.variables), row.result) for row in rows]


class TestConcreteScenarios:
    """Known tables."""

    def test_and_table(self):
        rows = generate_table(parse_expression("A && B"))
        assert summary(rows) == [
            ((F, F), F),
            ((F, T), F),
            ((T, F), F),
            ((T, T), T),
        ]
        assert [v.name for v in rows[0].variables] == ["A", "B"]

    def test_or_with_fixed_variable(self):
        rows = generate_table(parse_expression("A || B"), {"A": True})
        assert summary(rows) == [
            ((T, F), T),
            ((T, T), T),
        ]

    def test_not_table(self):
        rows = generate_table(parse_expression("!A"))
        assert summary(rows) == [((F,), T), ((T,), F)]


class TestEnumerationOrder:
    """Row i holds the binary digits of i over the free variables."""

    def test_three_free_variables(self):
        rows = generate_table(parse_expression("A | B | C"))
        assert len(rows) == 8
        for index, row in enumerate(rows):
            bits = tuple(bool(int(d)) for d in format(index, "03b"))
            assert tuple(v.value for v in row.variables) == bits

    def test_fixed_variable_in_the_middle(self):
        """Fixed B stays in position; A and C are counted as two bits."""
        rows = generate_table(parse_expression("A & B | C"), {"B": False})
        assert [v.name for v in rows[0].variables] == ["A", "B", "C"]
        assert summary(rows) == [
            ((F, F, F), F),
            ((F, F, T), T),
            ((T, F, F), F),
            ((T, F, T), T),
        ]

    def test_row_count_with_fixed_values(self):
        expr = parse_expression("a & b & c & d")
        for fixed in ({}, {"a": True}, {"a": True, "c": False}, {"a": T, "b": T, "c": T}):
            rows = generate_table(expr, fixed)
            assert len(rows) == 2 ** (4 - len(fixed))
            for row in rows:
                for name, value in fixed.items():
                    assert row.assignment()[name] == value


class TestZeroFreeVariables:
    """Exactly one row when nothing is enumerated."""

    def test_all_variables_fixed(self):
        rows = generate_table(parse_expression("A & B"), {"A": True, "B": True})
        assert summary(rows) == [((T, T), T)]

    def test_literal_only_expression(self):
        rows = generate_table(parse_expression("1 & !0"))
        assert rows == [TruthTableRow(result=True, variables=())]


class TestValidation:
    """Fixed values must name variables of the expression and be bools."""

    def test_unknown_variable(self):
        with pytest.raises(UnknownVariableError) as exc_info:
            generate_table(parse_expression("A && B"), {"C": True})
        assert exc_info.value.names == ["C"]

    def test_all_unknown_names_reported(self):
        with pytest.raises(UnknownVariableError) as exc_info:
            generate_table(parse_expression("A"), {"X": True, "A": False, "Y": False})
        assert exc_info.value.names == ["X", "Y"]
        assert "X" in str(exc_info.value) and "Y" in str(exc_info.value)

    def test_names_are_case_sensitive(self):
        with pytest.raises(UnknownVariableError):
            validate_fixed_values(["A"], {"a": True})

    @pytest.mark.parametrize("value", ["false", 0, 1, None])
    def test_non_bool_values_rejected(self, value):
        with pytest.raises(FixedValueTypeError) as exc_info:
            generate_table(parse_expression("A | B"), {"A": value})
        assert exc_info.value.name == "A"
        assert isinstance(exc_info.value, TypeError)

    def test_unknown_names_checked_first(self):
        with pytest.raises(UnknownVariableError):
            validate_fixed_values(["A"], {"A": "yes", "Z": True})

    def test_free_variables_keep_list_order(self):
        assert free_variables(["C", "A", "B"], {"A": True}) == ["C", "B"]


class TestLimits:
    """The optional free variable limit."""

    def test_limit_exceeded(self):
        expr = parse_expression("a | b | c")
        with pytest.raises(TooManyVariablesError) as exc_info:
            generate_table(expr, max_free_variables=2)
        assert exc_info.value.count == 3
        assert exc_info.value.limit == 2

    def test_fixed_values_do_not_count(self):
        rows = generate_table(parse_expression("a | b | c"), {"a": False}, max_free_variables=2)
        assert len(rows) == 4


class TestRows:
    """Row objects."""

    def test_rows_are_immutable(self):
        row = generate_table(parse_expression("A"))[0]
        with pytest.raises(AttributeError):
            row.result = True

    def test_assignment_mapping(self):
        row = TruthTableRow(True, (TruthTableVariable("A", True), TruthTableVariable("B", False)))
        assert row.assignment() == {"A": True, "B": False}

    def test_assignment_keeps_variable_order(self):
        rows = generate_table(parse_expression("b | a"))
        assert list(rows[0].assignment()) == ["b", "a"]

    def test_explicit_variable_list(self):
        """A wider Variable List is reported even if the AST no longer uses it."""
        rows = generate_table(parse_expression("A"), variables=["A", "B"])
        assert len(rows) == 4
        assert summary(rows)[1] == ((F, T), F)
