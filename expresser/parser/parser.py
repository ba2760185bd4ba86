"""
Main parser entry point for expresser.

This module defines the `Parser` class, which owns the token cursor and
coordinates parsing. The grammar rules themselves live in
`expresser.parser.expressions`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from typing import Iterable, Optional

from expresser.cursor import TokenCursor
from expresser.exceptions import ParseError, ParseErrorKind
from expresser.lexer import Token
from expresser.operations import Symbol
from expresser.tree import Expression

from . import expressions as _expr


class Parser:
    """expresser parser."""

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize the parser with a sequence of tokens.

        Whitespace tokens are dropped here, before any grammar rule runs, so
        the rules only ever see numbers and symbols.

        Parameters:
            tokens (Iterable[Token]): Tokens as produced by the lexer.
        """
        self.cursor = TokenCursor(tok for tok in tokens if tok.type != 'WHITESPACE')

    @property
    def curr_token(self) -> Optional[Token]:
        """
        The token under the cursor, or None at end of input.
        """
        return self.cursor.read()

    def at_symbol(self, symbols) -> Optional[Symbol]:
        """
        Return the current symbol if the current token is one of `symbols`.
        """
        tok = self.cursor.read()
        if tok is not None and tok.type == 'OP' and tok.value in symbols:
            return tok.value
        return None

    def eat(self, symbol: Symbol, kind: ParseErrorKind) -> None:
        """
        Consume the current token if it is the expected symbol.

        Parameters:
            symbol (Symbol): The expected symbol.
            kind (ParseErrorKind): The error kind to raise on mismatch.

        Raises:
            ParseError: If the token is missing or is not the expected symbol.
        """
        tok = self.cursor.read()
        if tok is None or tok.type != 'OP' or tok.value != symbol:
            raise ParseError(kind, tok)
        self.cursor.advance()

    def relation(self) -> Expression:
        """
        Parse a comparison chain, parenthesised groups included.
        """
        return _expr.parse_relation(self)

    def parse(self) -> Expression:
        """
        Parse the whole token sequence as a single relation.

        Raises:
            ParseError: If the grammar is violated or tokens remain once the
                relation is complete.
        """
        expr = self.relation()
        tok = self.cursor.read()
        if tok is not None:
            raise ParseError(ParseErrorKind.TRAILING_TOKENS, tok)
        return expr
