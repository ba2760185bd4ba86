"""expresser: integer arithmetic and comparison expressions, one per line.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from expresser.exceptions import EvalError, ParseError, ParseErrorKind, TokenizationError
from expresser.interpreter import evaluate
from expresser.lexer import Token, tokenize
from expresser.parser import parse
from expresser.pipeline import evaluate_line

__version__ = "0.1.0"

__all__ = [
    "EvalError",
    "ParseError",
    "ParseErrorKind",
    "TokenizationError",
    "Token",
    "tokenize",
    "parse",
    "evaluate",
    "evaluate_line",
]
