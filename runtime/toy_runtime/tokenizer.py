"""
Toy Tokenizer - Expression Lexing

Turns the right-hand side of an assignment into a flat token list:

    x + 2 * (y - 10)
    -> IDENTIFIER(x) OPERATOR(+) LITERAL(2) OPERATOR(*) OPERATOR(()
       IDENTIFIER(y) OPERATOR(-) LITERAL(10) OPERATOR())

Identifiers are checked against the variable table while lexing, so a
reference to a name that has not been assigned yet fails here rather than
during evaluation. The table is only read, never written.
"""

from typing import Any, List
from dataclasses import dataclass
import logging
import re
import string

from .errors import (
    ToyError,
    E_INVALID_CHARACTER, E_INVALID_LITERAL, E_UNINITIALIZED_VARIABLE,
)
from .tables import VariableTable

logger = logging.getLogger(__name__)


IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
LITERAL_PATTERN = re.compile(r"0|[1-9][0-9]*")

OPERATORS = "()+-*/"
DIGITS = string.digits
IDENTIFIER_START = string.ascii_letters + "_"
IDENTIFIER_CHARS = IDENTIFIER_START + string.digits


# ============================================================================
# Token Types
# ============================================================================

@dataclass(frozen=True)
class Token:
    """Token from an expression"""
    type: str
    value: Any
    pos: int


class TokenType:
    """Token type constants"""
    LITERAL = "LITERAL"
    IDENTIFIER = "IDENTIFIER"
    OPERATOR = "OPERATOR"


# ============================================================================
# Tokenizer
# ============================================================================

class ToyTokenizer:
    """Tokenize one expression against the current variable table"""

    def __init__(self, source: str, variables: VariableTable):
        self.source = source
        self.variables = variables
        self.pos = 0
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """Tokenize entire source"""
        while self.pos < len(self.source):
            ch = self.source[self.pos]

            if ch.isspace():
                self.pos += 1
            elif ch in OPERATORS:
                self._add_token(TokenType.OPERATOR, ch, self.pos)
                self.pos += 1
            elif ch in DIGITS:
                self._read_literal()
            elif ch in IDENTIFIER_START:
                self._read_identifier()
            else:
                raise ToyError(E_INVALID_CHARACTER, f"Invalid character {ch!r} at position {self.pos}")

        logger.debug(f"tokenized {self.source!r} into {len(self.tokens)} tokens")
        return self.tokens

    def _read_literal(self):
        """Read a maximal digit run"""
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in DIGITS:
            self.pos += 1

        text = self.source[start:self.pos]
        if not LITERAL_PATTERN.fullmatch(text):
            raise ToyError(E_INVALID_LITERAL, f"Invalid literal {text!r} at position {start}")
        self._add_token(TokenType.LITERAL, int(text), start)

    def _read_identifier(self):
        """Read an identifier; it must already be bound"""
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in IDENTIFIER_CHARS:
            self.pos += 1

        name = self.source[start:self.pos]
        if name not in self.variables:
            raise ToyError(E_UNINITIALIZED_VARIABLE, f"Uninitialized variable: {name}")
        self._add_token(TokenType.IDENTIFIER, name, start)

    def _add_token(self, type: str, value: Any, pos: int):
        self.tokens.append(Token(type=type, value=value, pos=pos))


def tokenize(source: str, variables: VariableTable) -> List[Token]:
    """
    Tokenize an expression (convenience function)

    Example:
        >>> [t.value for t in tokenize('1 + 2', VariableTable())]
        [1, '+', 2]
    """
    return ToyTokenizer(source, variables).tokenize()


__all__ = [
    'Token',
    'TokenType',
    'ToyTokenizer',
    'tokenize',
    'IDENTIFIER_PATTERN',
    'LITERAL_PATTERN',
    'OPERATORS',
]
