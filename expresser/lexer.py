"""Lexer for expresser.

This lexer performs a single pass over one line of source text using a
combined regular expression of named groups. Each match yields a
:class:`Token` carrying its type, value and source position.

Tokens cover decimal integer literals, the operator and parenthesis symbols
(see :class:`expresser.operations.Symbol`) and whitespace. Whitespace is not
skipped here: every whitespace character becomes its own ``WHITESPACE`` token
and it is up to the parser to ignore them.

A multi-digit literal starting with ``0`` (``"007"``) is rejected, as is any
character outside the three classes above. The empty line yields no tokens.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from expresser.exceptions import TokenizationError
from expresser.operations import Symbol


@dataclass(frozen=True, repr=False)
class Token:
    """
    Represents a lexical token with a type and value.

    Tokens are immutable values. Equality and hashing use the type and value
    only; `position` is metadata recording where the token started.
    """
    type: str
    value: Union[Symbol, int, str]
    position: Optional[int] = field(default=None, compare=False)

    @classmethod
    def op(cls, symbol, position=None):
        return cls('OP', symbol, position)

    @classmethod
    def number(cls, value, position=None):
        return cls('NUMBER', value, position)

    @classmethod
    def whitespace(cls, char, position=None):
        return cls('WHITESPACE', char, position)

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, position={self.position})"


token_specification = [
    ('NUMBER',      r'[0-9]+'),
    ('WHITESPACE',  r'\s'),
    ('OP',          '|'.join(re.escape(symbol.value) for symbol in Symbol)),
    ('MISMATCH',    r'.'),
]

tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


def tokenize(code: str) -> list[Token]:
    """
    Convert a line of source text into a list of tokens.

    Parameters:
        code (str): The source text to tokenize.

    Returns:
        list[Token]: A list of Token instances, whitespace included.

    Raises:
        TokenizationError: If an unexpected character or a number with a
            leading zero is encountered.
    """
    tokens = []

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        position = match_obj.start()

        if kind == 'MISMATCH':
            raise TokenizationError(position, value)

        if kind == 'NUMBER':
            if len(value) > 1 and value[0] == '0':
                # A zero cannot be extended, the next digit is the offender
                raise TokenizationError(position + 1, value[1])
            tokens.append(Token.number(int(value), position))
        elif kind == 'OP':
            tokens.append(Token.op(Symbol.from_char(value), position))
        else:
            tokens.append(Token.whitespace(value, position))

    return tokens
