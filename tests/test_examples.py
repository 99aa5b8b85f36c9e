"""
Test the sample expression catalogue.

Every sample must parse, and the hand-built majority tree must behave
like its textual form.
"""

from truthtable.api import calculate_truth_table, extract_variables
from truthtable.examples import EXAMPLE_EXPRESSIONS, build_majority_expression
from truthtable.parser import parse_expression
from truthtable.table import generate_table


def test_every_example_parses():
    for name, text in EXAMPLE_EXPRESSIONS.items():
        assert parse_expression(text) is not None, name


def test_keyword_example_variables():
    assert extract_variables(EXAMPLE_EXPRESSIONS["keywords"]) == ["rain", "umbrella", "hood"]


def test_constant_example_has_one_row():
    rows = calculate_truth_table(EXAMPLE_EXPRESSIONS["constant"])
    assert len(rows) == 1
    assert rows[0].result is True
    assert rows[0].variables == ()


def test_majority_expression():
    by_hand = generate_table(build_majority_expression())
    from_text = generate_table(parse_expression("A & B | A & C | B & C"))
    assert by_hand == from_text
    assert [r.result for r in by_hand] == [False, False, False, True, False, True, True, True]
