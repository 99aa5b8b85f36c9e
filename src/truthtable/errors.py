"""
Error types raised by the truth table engine.

All user-facing failures are raised as exceptions and never come
with a partial result. Each error renders a readable message via
str() and keeps the structured details as attributes.
"""

from typing import Iterable, Optional, Sequence


class TruthTableError(Exception):
    """Base class for every error raised by the engine."""
    pass


class LexicalError(TruthTableError):
    """Raised when the tokenizer meets a character that starts no token."""

    def __init__(self, position: int, character: str, expression: str = ""):
        self.position = position
        self.character = character
        self.expression = expression
        super().__init__(f"Unexpected character {character!r} at position {position}")


class ExpressionSyntaxError(TruthTableError):
    """
    Raised when a token sequence does not form a valid expression.

    Covers unmatched parentheses, missing operands, trailing tokens,
    parentheses nested too deeply and empty input.

    Properties:
        position: Offset of the offending token in the source text
        expected: Token kinds that would have been accepted
        found: Token kind that was actually present
    """

    def __init__(self, position: int, expected: Sequence, found, message: Optional[str] = None):
        self.position = position
        self.expected = tuple(expected)
        self.found = found
        if message is None:
            message = (
                f"Expected {_describe_kinds(self.expected)} at position {position}, "
                f"found {_describe_kind(found)}"
            )
        super().__init__(message)


class UnknownVariableError(TruthTableError):
    """Raised when fixed values name variables the expression does not use."""

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(f"Unknown variables in fixed values: {', '.join(self.names)}")


class FixedValueTypeError(TruthTableError, TypeError):
    """Raised when a fixed value is not a bool ("false" or 0 are rejected)."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(
            f"Fixed value for {name!r} must be a bool, got {type(value).__name__} {value!r}"
        )


class ExpressionTooComplexError(TruthTableError):
    """
    Raised when a valid expression is too deeply nested to process.

    The parser, collector, evaluator and tree printer walk any depth;
    the simplifier, analyzer and canonical printer recurse and stop at
    the interpreter's recursion limit.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Expression is nested too deeply to {operation}")


class UnboundVariableError(TruthTableError):
    """
    Raised when evaluation meets a variable with no assigned value.

    This is an internal invariant failure: the table generator always
    builds complete assignments, so callers of the public operations
    never see it.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No value assigned to variable {name!r}")


class TooManyVariablesError(TruthTableError):
    """Raised when a table would need more free variables than allowed."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Expression has {count} free variables, the limit is {limit} "
            f"({2 ** count} rows requested)"
        )


class ConfigError(TruthTableError):
    """Raised when engine configuration is malformed."""
    pass


def _describe_kind(kind) -> str:
    return getattr(kind, "value", str(kind))


def _describe_kinds(kinds: Sequence) -> str:
    names = [_describe_kind(k) for k in kinds]
    if not names:
        return "nothing"
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " or " + names[-1]


__all__ = [
    "TruthTableError",
    "LexicalError",
    "ExpressionSyntaxError",
    "UnknownVariableError",
    "FixedValueTypeError",
    "ExpressionTooComplexError",
    "UnboundVariableError",
    "TooManyVariablesError",
    "ConfigError",
]
