"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class EvalError(Exception):
    """
    Base class for errors caused by a malformed input line.
    """
    line = None


class TokenizationError(EvalError):
    """
    Error for characters that are not digits, whitespace or symbols.
    """
    def __init__(self, position, character=None):
        self.position = position
        self.character = character
        message = "Tokenization error"
        if character is not None:
            message += f" on character {character!r}"
        message += f" at position {position}"
        super().__init__(message)


class ParseErrorKind(str, Enum):
    """
    The ways in which a token sequence can violate the grammar.
    """
    UNEXPECTED_END = "unexpected end of input"
    UNEXPECTED_TOKEN = "unexpected token"
    UNMATCHED_PARENTHESIS = "unmatched parenthesis"
    TRAILING_TOKENS = "trailing tokens"


class ParseError(EvalError):
    """
    Error for token sequences that do not form an expression.
    """
    def __init__(self, kind, token=None):
        self.kind = kind
        self.token = token
        message = kind.value.capitalize()
        if token is not None:
            message += f" {token.value}"
            if token.position is not None:
                message += f" at position {token.position}"
        super().__init__(message)

    @property
    def position(self):
        """
        Source position of the offending token, if known.
        """
        return self.token.position if self.token is not None else None


class UnknownOperatorError(Exception):
    """
    Error for a symbol reaching a grammar rule that cannot turn it into an
    operator. Signals a parser fault, never bad input.
    """
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Unknown operator for symbol '{symbol}'")
