"""
Expression parsing utilities for expresser.

These functions operate on a `expresser.parser.parser.Parser` instance and
implement the grammar, lowest precedence first:

    relation := term (('<' | '>' | '=') term)*
    term     := factor (('+' | '-') factor)*
    factor   := primary ('*' primary)*
    primary  := NUMBER | '(' relation ')'

Every binary level folds to the left, so ``1-2-3`` is ``(1-2)-3``.

Parenthesised groups are kept on an explicit stack of :class:`_Group`
records instead of recursing, so nesting depth is bounded by memory rather
than by the interpreter's recursion limit.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.2.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from expresser.exceptions import ParseError, ParseErrorKind, UnknownOperatorError
from expresser.operations import (
    FACTOR_SYMBOLS,
    RELATION_SYMBOLS,
    TERM_SYMBOLS,
    Operator,
    Symbol,
)
from expresser.tree import Action, Const, Expression

if TYPE_CHECKING:
    from expresser.parser import Parser


# Index into this tuple is the binding level: 0 relation, 1 term, 2 factor.
LEVELS = (RELATION_SYMBOLS, TERM_SYMBOLS, FACTOR_SYMBOLS)


def _operator(symbol: Symbol) -> Operator:
    op = Operator.from_symbol(symbol)
    if op is None:
        raise UnknownOperatorError(symbol)
    return op


class _Group:
    """
    Partially folded operands of one parenthesis level.

    `pending[level]` holds the left operand and operator still waiting for
    their right operand at that binding level.
    """
    def __init__(self):
        self.pending = [None] * len(LEVELS)

    def close(self, operand: Expression, level: int) -> Expression:
        """
        Fold `operand` into every pending operation binding at `level` or tighter.
        """
        for lvl in range(len(LEVELS) - 1, level - 1, -1):
            if self.pending[lvl] is not None:
                left, op = self.pending[lvl]
                operand = Action(left, op, operand)
                self.pending[lvl] = None
        return operand


def _next_operator(parser: 'Parser') -> tuple[int, Optional[Symbol]]:
    """
    Return the binding level and symbol of the operator under the cursor, or
    (0, None) if the current token does not continue the expression.
    """
    for level, symbols in enumerate(LEVELS):
        symbol = parser.at_symbol(symbols)
        if symbol is not None:
            return level, symbol
    return 0, None


# ---- Highest precedence ----

def parse_primary(parser: 'Parser', groups: list[_Group]) -> Optional[Expression]:
    """
    Parse a number literal, or open a parenthesized group.

    Returns:
        Const | None: The literal, or None when a new group was pushed.
    """
    tok = parser.curr_token
    if tok is None:
        raise ParseError(ParseErrorKind.UNEXPECTED_END)

    if tok.type == 'NUMBER':
        parser.cursor.advance()
        return Const(tok.value)

    if tok.type == 'OP' and tok.value == Symbol.LEFT_PARENTHESIS:
        parser.cursor.advance()
        groups.append(_Group())
        return None

    raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, tok)


# ---- Lowest precedence ----

def parse_relation(parser: 'Parser') -> Expression:
    """Parse a full relation, including any nested groups."""
    groups = [_Group()]
    while True:
        operand = parse_primary(parser, groups)
        if operand is None:
            continue

        # A complete primary: fold it in, closing groups as their ')' arrives
        while True:
            level, symbol = _next_operator(parser)
            operand = groups[-1].close(operand, level)
            if symbol is not None:
                parser.cursor.advance()
                groups[-1].pending[level] = (operand, _operator(symbol))
                break
            if len(groups) == 1:
                return operand
            parser.eat(Symbol.RIGHT_PARENTHESIS, ParseErrorKind.UNMATCHED_PARENTHESIS)
            groups.pop()
