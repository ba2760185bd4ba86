"""Shared definitions for lexical symbols and expression operators.

`Symbol` is what the lexer sees: a single non-alphanumeric character.
`Operator` is what the tree evaluates: a binary function over two integers.
The two are kept apart because parentheses are symbols with no operator
counterpart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum
from typing import Optional


class Symbol(str, Enum):
    """
    Enumeration of recognised symbol characters.
    """

    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    LESS_THAN = "<"
    BIGGER_THAN = ">"
    EQUAL = "="
    LEFT_PARENTHESIS = "("
    RIGHT_PARENTHESIS = ")"

    @classmethod
    def from_char(cls, char: str) -> Optional["Symbol"]:
        """
        Classify a single character, returning None if it is not a symbol.
        """
        try:
            return cls(char)
        except ValueError:
            return None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Operator(str, Enum):
    """
    Enumeration of binary operators supported by the expression tree.
    """

    # Arithmetic
    SUMMATION = "add"
    SUBTRACTION = "sub"
    MULTIPLICATION = "mul"

    # Comparison
    LESS_THAN_COMPARISON = "lt"
    BIGGER_THAN_COMPARISON = "gt"
    EQUALITY_COMPARISON = "eq"

    @classmethod
    def from_symbol(cls, symbol: Symbol) -> Optional["Operator"]:
        """
        Map a symbol to its operator.

        Parameters:
            symbol (Symbol): The lexical symbol.

        Returns:
            Operator | None: The operator, or None for symbols without one
            (parentheses).
        """
        return _SYMBOL_OPERATORS.get(symbol)

    @property
    def symbol(self) -> Symbol:
        """
        The symbol this operator is written with.
        """
        return _OPERATOR_SYMBOLS[self]

    def apply(self, left: int, right: int) -> int:
        """
        Apply the operator. Comparisons yield 1 when they hold and 0 otherwise.
        """
        match self:
            case Operator.SUMMATION:
                return left + right
            case Operator.SUBTRACTION:
                return left - right
            case Operator.MULTIPLICATION:
                return left * right
            case Operator.LESS_THAN_COMPARISON:
                return 1 if left < right else 0
            case Operator.BIGGER_THAN_COMPARISON:
                return 1 if left > right else 0
            case Operator.EQUALITY_COMPARISON:
                return 1 if left == right else 0

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


_SYMBOL_OPERATORS = {
    Symbol.PLUS: Operator.SUMMATION,
    Symbol.MINUS: Operator.SUBTRACTION,
    Symbol.ASTERISK: Operator.MULTIPLICATION,
    Symbol.LESS_THAN: Operator.LESS_THAN_COMPARISON,
    Symbol.BIGGER_THAN: Operator.BIGGER_THAN_COMPARISON,
    Symbol.EQUAL: Operator.EQUALITY_COMPARISON,
}
_OPERATOR_SYMBOLS = {op: sym for sym, op in _SYMBOL_OPERATORS.items()}

# Operator groups by precedence level, lowest binding first.
RELATION_SYMBOLS = frozenset({Symbol.LESS_THAN, Symbol.BIGGER_THAN, Symbol.EQUAL})
TERM_SYMBOLS = frozenset({Symbol.PLUS, Symbol.MINUS})
FACTOR_SYMBOLS = frozenset({Symbol.ASTERISK})


__all__ = [
    "Symbol",
    "Operator",
    "RELATION_SYMBOLS",
    "TERM_SYMBOLS",
    "FACTOR_SYMBOLS",
]
