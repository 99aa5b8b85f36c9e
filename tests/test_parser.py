"""
Tests for the expression parser (Layer 2: Tokens → AST).

We need to:
1. Build the right tree for every operator
2. Respect precedence: NOT > AND > XOR > OR > IMPLIES > IFF
3. Fold binary operators to the left
4. Report syntax errors with position and expected/found kinds
"""

import pytest
from truthtable.errors import ExpressionSyntaxError, LexicalError
from truthtable.expressions import (
    BinaryExpression,
    BinaryOperator,
    VariableReference,
    Literal,
    UnaryExpression,
    UnaryOperator,
)
from truthtable.lexer import TokenType, tokenize
from truthtable.parser import MAX_NESTING_DEPTH, parse, parse_expression


A = VariableReference("A")
B = VariableReference("B")
C = VariableReference("C")


def AND(left, right):
    return BinaryExpression(BinaryOperator.AND, left, right)


def OR(left, right):
    return BinaryExpression(BinaryOperator.OR, left, right)


def NOT(operand):
    return UnaryExpression(UnaryOperator.NOT, operand)


class TestPrimaries:
    """Test variables, literals and grouping."""

    def test_single_variable(self):
        assert parse_expression("A") == A

    def test_literals(self):
        assert parse_expression("1") == Literal(True)
        assert parse_expression("FALSE") == Literal(False)

    def test_parentheses_leave_no_node(self):
        """Grouping only affects structure, it adds no node."""
        assert parse_expression("((A))") == A

    def test_parse_accepts_token_list(self):
        assert parse(tokenize("A & B")) == AND(A, B)


class TestOperators:
    """Each connective produces its node type."""

    @pytest.mark.parametrize("text,operator", [
        ("A & B", BinaryOperator.AND),
        ("A | B", BinaryOperator.OR),
        ("A ^ B", BinaryOperator.XOR),
        ("A -> B", BinaryOperator.IMPLIES),
        ("A <-> B", BinaryOperator.EQUIVALENT),
    ])
    def test_binary_operators(self, text, operator):
        assert parse_expression(text) == BinaryExpression(operator, A, B)

    def test_negation(self):
        assert parse_expression("!A") == NOT(A)

    def test_repeated_negation(self):
        assert parse_expression("!!A") == NOT(NOT(A))

    def test_keyword_notation(self):
        assert parse_expression("NOT A AND B") == AND(NOT(A), B)


class TestPrecedence:
    """Operator precedence and associativity."""

    def test_and_binds_tighter_than_or(self):
        """A || B && C is A || (B && C)."""
        assert parse_expression("A || B && C") == OR(A, AND(B, C))

    def test_and_binds_tighter_than_or_on_the_left(self):
        assert parse_expression("A && B || C") == OR(AND(A, B), C)

    def test_not_binds_tighter_than_and(self):
        """!A && B is (!A) && B."""
        assert parse_expression("!A && B") == AND(NOT(A), B)

    def test_not_applies_to_group(self):
        assert parse_expression("!(A && B)") == NOT(AND(A, B))

    def test_xor_between_and_and_or(self):
        """A | B ^ C & A is A | (B ^ (C & A))."""
        expected = OR(A, BinaryExpression(BinaryOperator.XOR, B, AND(C, A)))
        assert parse_expression("A | B ^ C & A") == expected

    def test_implication_looser_than_or(self):
        expected = BinaryExpression(BinaryOperator.IMPLIES, OR(A, B), C)
        assert parse_expression("A | B -> C") == expected

    def test_equivalence_loosest(self):
        expected = BinaryExpression(
            BinaryOperator.EQUIVALENT,
            BinaryExpression(BinaryOperator.IMPLIES, A, B),
            C,
        )
        assert parse_expression("A -> B <-> C") == expected

    def test_and_is_left_associative(self):
        assert parse_expression("A & B & C") == AND(AND(A, B), C)

    def test_implication_is_left_associative(self):
        expected = BinaryExpression(
            BinaryOperator.IMPLIES,
            BinaryExpression(BinaryOperator.IMPLIES, A, B),
            C,
        )
        assert parse_expression("A -> B -> C") == expected

    def test_parentheses_override_precedence(self):
        assert parse_expression("(A || B) && C") == AND(OR(A, B), C)


class TestSyntaxErrors:
    """Malformed input is rejected with a positioned error."""

    def test_empty_input(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            parse_expression("")
        assert exc_info.value.position == 0
        assert exc_info.value.found == TokenType.END

    def test_whitespace_only_input(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            parse_expression("   ")
        assert exc_info.value.found == TokenType.END

    def test_missing_right_operand(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            parse_expression("A &&")
        assert exc_info.value.position == 4
        assert TokenType.IDENTIFIER in exc_info.value.expected

    def test_missing_left_operand(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            parse_expression("|| B")
        assert exc_info.value.position == 0
        assert exc_info.value.found == TokenType.OR

    def test_unclosed_parenthesis(self):
        with pytest.raises(ExpressionSyntaxError, match="Missing closing parenthesis") as exc_info:
            parse_expression("(A & B")
        assert exc_info.value.found == TokenType.END
        assert TokenType.RIGHT_PAREN in exc_info.value.expected

    def test_unmatched_closing_parenthesis(self):
        with pytest.raises(ExpressionSyntaxError, match="Unmatched") as exc_info:
            parse_expression("A & B)")
        assert exc_info.value.position == 5

    def test_trailing_tokens(self):
        """Two operands with no operator between them."""
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            parse_expression("A B")
        assert exc_info.value.position == 2
        assert exc_info.value.found == TokenType.IDENTIFIER
        assert TokenType.END in exc_info.value.expected

    def test_empty_parentheses(self):
        with pytest.raises(ExpressionSyntaxError):
            parse_expression("()")

    def test_dangling_not(self):
        with pytest.raises(ExpressionSyntaxError):
            parse_expression("A & !")

    def test_multi_digit_number(self):
        """'10' lexes as two literals and cannot parse."""
        with pytest.raises(ExpressionSyntaxError):
            parse_expression("10")

    def test_lexical_errors_propagate(self):
        with pytest.raises(LexicalError):
            parse_expression("A # B")

    def test_message_is_readable(self):
        with pytest.raises(ExpressionSyntaxError, match="found end of input"):
            parse_expression("A ->")


class TestDeepExpressions:
    """Long operator chains parse in loops; parenthesis nesting is capped."""

    def test_long_negation_chain(self):
        expr = parse_expression("!" * 1500 + "A")
        for _ in range(1500):
            assert isinstance(expr, UnaryExpression)
            expr = expr.operand
        assert expr == A

    def test_long_binary_chain_folds_left(self):
        expr = parse_expression(" | ".join(["A"] * 1500))
        depth = 0
        while isinstance(expr, BinaryExpression):
            assert expr.right == A
            expr = expr.left
            depth += 1
        assert depth == 1499

    def test_nesting_at_the_limit(self):
        depth = MAX_NESTING_DEPTH
        assert parse_expression("(" * depth + "A" + ")" * depth) == A

    def test_nesting_beyond_the_limit(self):
        depth = MAX_NESTING_DEPTH + 1
        with pytest.raises(ExpressionSyntaxError, match="nested deeper") as exc_info:
            parse_expression("(" * depth + "A" + ")" * depth)
        assert exc_info.value.position == MAX_NESTING_DEPTH
        assert exc_info.value.found == TokenType.LEFT_PAREN

    def test_sibling_groups_do_not_add_up(self):
        """Only open groups count towards the limit."""
        text = " & ".join(["(A)"] * (MAX_NESTING_DEPTH * 2))
        assert isinstance(parse_expression(text), BinaryExpression)

    def test_far_too_deep_nesting(self):
        with pytest.raises(ExpressionSyntaxError):
            parse_expression("(" * 1000 + "A" + ")" * 1000)
