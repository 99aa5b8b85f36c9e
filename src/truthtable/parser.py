"""
Expression Parser (Layer 2: Tokens → AST).

Recursive descent, one function per precedence level.

Grammar (loosest first):
    expression  := equivalence END
    equivalence := implication ( IFF implication )*
    implication := disjunction ( IMPLIES disjunction )*
    disjunction := exclusive ( OR exclusive )*
    exclusive   := conjunction ( XOR conjunction )*
    conjunction := unary ( AND unary )*
    unary       := NOT unary | primary
    primary     := IDENTIFIER | TRUE | FALSE | "(" equivalence ")"

So "A | B & C" is "A | (B & C)" and "!A & B" is "(!A) & B".

Each precedence level is a function taking and returning the token
position, so a parenthesized group costs a dozen stack frames. Groups
nested deeper than MAX_NESTING_DEPTH are rejected with an
ExpressionSyntaxError before descent starts. Chains of NOT and of
binary operators are built in loops and have no depth limit.
"""

from typing import Callable, List, Tuple

from truthtable.errors import ExpressionSyntaxError
from truthtable.expressions import (
    Expression,
    BinaryExpression,
    BinaryOperator,
    VariableReference,
    Literal,
    UnaryExpression,
    UnaryOperator,
)
from truthtable.lexer import Token, TokenType, tokenize


_BINARY_TOKENS = (
    TokenType.AND,
    TokenType.XOR,
    TokenType.OR,
    TokenType.IMPLIES,
    TokenType.EQUIVALENT,
)

_OPERAND_START = (
    TokenType.IDENTIFIER,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.NOT,
    TokenType.LEFT_PAREN,
)

# Deepest accepted parenthesis nesting, kept well inside the default
# interpreter recursion limit.
MAX_NESTING_DEPTH = 50


def parse(tokens: List[Token]) -> Expression:
    """
    Build an AST from a token list produced by tokenize().

    Args:
        tokens: Tokens, normally terminated by an END token

    Returns:
        Root Expression of a fully reduced tree

    Raises:
        ExpressionSyntaxError: On empty input, missing operands,
            unbalanced parentheses, trailing tokens or parentheses
            nested deeper than MAX_NESTING_DEPTH
    """
    _check_nesting(tokens)
    ast, pos = _parse_equivalence(tokens, 0)

    token = _peek(tokens, pos)
    if token.type != TokenType.END:
        message = None
        if token.type == TokenType.RIGHT_PAREN:
            message = f"Unmatched ')' at position {token.position}"
        raise ExpressionSyntaxError(
            token.position,
            _BINARY_TOKENS + (TokenType.END,),
            token.type,
            message,
        )

    return ast


def parse_expression(text: str) -> Expression:
    """Tokenize and parse expression text in one step."""
    return parse(tokenize(text))


def _check_nesting(tokens: List[Token]) -> None:
    depth = 0
    for token in tokens:
        if token.type == TokenType.LEFT_PAREN:
            depth += 1
            if depth > MAX_NESTING_DEPTH:
                raise ExpressionSyntaxError(
                    token.position,
                    _OPERAND_START[:-1],
                    token.type,
                    f"Parentheses nested deeper than {MAX_NESTING_DEPTH} levels "
                    f"at position {token.position}",
                )
        elif token.type == TokenType.RIGHT_PAREN and depth > 0:
            depth -= 1


def _peek(tokens: List[Token], pos: int) -> Token:
    """Current token, or a synthetic END past the end of the list."""
    if pos < len(tokens):
        return tokens[pos]
    end = tokens[-1].position + len(tokens[-1].value) if tokens else 0
    return Token(TokenType.END, "", end)


def _parse_left_associative(
    tokens: List[Token],
    pos: int,
    token_type: TokenType,
    operator: BinaryOperator,
    operand: Callable[[List[Token], int], Tuple[Expression, int]],
) -> Tuple[Expression, int]:
    """Parse `operand (token operand)*` folding to the left."""
    left, pos = operand(tokens, pos)

    while _peek(tokens, pos).type == token_type:
        pos += 1
        right, pos = operand(tokens, pos)
        left = BinaryExpression(operator, left, right)

    return left, pos


def _parse_equivalence(tokens: List[Token], pos: int) -> Tuple[Expression, int]:
    """Parse equivalence (loosest binding)."""
    return _parse_left_associative(
        tokens, pos, TokenType.EQUIVALENT, BinaryOperator.EQUIVALENT, _parse_implication
    )


def _parse_implication(tokens: List[Token], pos: int) -> Tuple[Expression, int]:
    return _parse_left_associative(
        tokens, pos, TokenType.IMPLIES, BinaryOperator.IMPLIES, _parse_disjunction
    )


def _parse_disjunction(tokens: List[Token], pos: int) -> Tuple[Expression, int]:
    return _parse_left_associative(
        tokens, pos, TokenType.OR, BinaryOperator.OR, _parse_exclusive
    )


def _parse_exclusive(tokens: List[Token], pos: int) -> Tuple[Expression, int]:
    return _parse_left_associative(
        tokens, pos, TokenType.XOR, BinaryOperator.XOR, _parse_conjunction
    )


def _parse_conjunction(tokens: List[Token], pos: int) -> Tuple[Expression, int]:
    return _parse_left_associative(
        tokens, pos, TokenType.AND, BinaryOperator.AND, _parse_unary
    )


def _parse_unary(tokens: List[Token], pos: int) -> Tuple[Expression, int]:
    """Parse NOT (prefix, may repeat)."""
    negations = 0
    while _peek(tokens, pos).type == TokenType.NOT:
        negations += 1
        pos += 1

    expr, pos = _parse_primary(tokens, pos)
    for _ in range(negations):
        expr = UnaryExpression(UnaryOperator.NOT, expr)
    return expr, pos


def _parse_primary(tokens: List[Token], pos: int) -> Tuple[Expression, int]:
    """Parse primary expression (variable, literal or parenthesized)."""
    token = _peek(tokens, pos)

    if token.type == TokenType.IDENTIFIER:
        return VariableReference(token.value), pos + 1

    if token.type == TokenType.TRUE:
        return Literal(True), pos + 1

    if token.type == TokenType.FALSE:
        return Literal(False), pos + 1

    if token.type == TokenType.LEFT_PAREN:
        expr, pos = _parse_equivalence(tokens, pos + 1)
        closing = _peek(tokens, pos)
        if closing.type != TokenType.RIGHT_PAREN:
            raise ExpressionSyntaxError(
                closing.position,
                _BINARY_TOKENS + (TokenType.RIGHT_PAREN,),
                closing.type,
                f"Missing closing parenthesis for '(' at position {token.position}, "
                f"found {closing.type.value} at position {closing.position}",
            )
        return expr, pos + 1

    raise ExpressionSyntaxError(token.position, _OPERAND_START, token.type)


__all__ = ["MAX_NESTING_DEPTH", "parse", "parse_expression"]
