"""
Tokenizer for boolean expressions (Layer 1: Raw Text → Tokens).

Accepted notation:
    AND         &&  &  ∧          AND
    OR          ||  |  ∨  \\/      OR
    NOT         !   ¬  -          NOT
    XOR         ^   ⊕             XOR
    IMPLIES     ->  =>  →         IMPLIES
    EQUIVALENT  <-> <=> ↔  ~      IFF
    literals    1   0             TRUE  FALSE
    grouping    (   )

Keywords are case-insensitive and reserved. Variable names follow
[A-Za-z][A-Za-z0-9_]* and are case-sensitive.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from truthtable.errors import LexicalError


class TokenType(Enum):
    """Lexical token kinds. Values double as readable names in error messages."""

    IDENTIFIER = "identifier"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    XOR = "XOR"
    IMPLIES = "IMPLIES"
    EQUIVALENT = "IFF"
    TRUE = "TRUE"
    FALSE = "FALSE"
    LEFT_PAREN = "'('"
    RIGHT_PAREN = "')'"
    END = "end of input"


@dataclass(frozen=True)
class Token:
    """
    A single lexical token.

    Properties:
        type: TokenType
        value: Source text of the token ("" for END)
        position: 0-based character offset in the source text
    """

    type: TokenType
    value: str
    position: int


# Order matters: alternatives are tried left to right, so longer
# symbols must come before their prefixes (-> before -, && before &).
_TOKEN_SPEC = [
    ("WHITESPACE", r"\s+"),
    ("EQUIVALENT", r"<->|<=>|↔|~"),
    ("IMPLIES", r"->|=>|→"),
    ("AND", r"&&|&|∧"),
    ("OR", r"\|\||\||∨|\\/"),
    ("XOR", r"\^|⊕"),
    ("NOT", r"!|¬|-"),
    ("LEFT_PAREN", r"\("),
    ("RIGHT_PAREN", r"\)"),
    ("TRUE", r"1"),
    ("FALSE", r"0"),
    ("IDENTIFIER", r"[A-Za-z][A-Za-z0-9_]*"),
]

_TOKEN_RE = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC))

KEYWORDS = {
    "AND": TokenType.AND,
    "OR": TokenType.OR,
    "NOT": TokenType.NOT,
    "XOR": TokenType.XOR,
    "IMPLIES": TokenType.IMPLIES,
    "IFF": TokenType.EQUIVALENT,
    "TRUE": TokenType.TRUE,
    "FALSE": TokenType.FALSE,
}


def tokenize(text: str) -> List[Token]:
    """
    Split expression text into tokens.

    Args:
        text: Raw expression as typed by the user

    Returns:
        List of tokens, always terminated by exactly one END token

    Raises:
        LexicalError: On the first character that starts no token
    """
    tokens: List[Token] = []
    pos = 0

    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise LexicalError(pos, text[pos], text)

        kind = match.lastgroup
        value = match.group()

        if kind == "IDENTIFIER":
            token_type = KEYWORDS.get(value.upper(), TokenType.IDENTIFIER)
            tokens.append(Token(token_type, value, pos))
        elif kind != "WHITESPACE":
            tokens.append(Token(TokenType[kind], value, pos))

        pos = match.end()

    tokens.append(Token(TokenType.END, "", len(text)))
    return tokens


__all__ = ["TokenType", "Token", "KEYWORDS", "tokenize"]
