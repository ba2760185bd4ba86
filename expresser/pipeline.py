"""Line-by-line evaluation pipeline.

Each line runs through the lexer, the parser and the interpreter on its own;
nothing is shared between lines. `evaluate_lines` applies a driver policy
for bad lines: abort on the first one, or skip it and keep going.


File: pipeline.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from expresser.exceptions import EvalError
from expresser.interpreter import evaluate
from expresser.lexer import tokenize
from expresser.parser import parse

ON_ERROR_ABORT = "abort"
ON_ERROR_SKIP = "skip"
ON_ERROR_CHOICES = (ON_ERROR_ABORT, ON_ERROR_SKIP)


@dataclass
class LineResult:
    """Outcome of evaluating one input line."""

    line: int
    source: str
    value: Optional[int] = None
    error: Optional[EvalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def split_lines(text: str) -> list[str]:
    r"""
    Split text into lines on "\n" only, dropping one trailing "\r" per line.

    Other line-breaking characters (form feed, vertical tab, U+2028, ...) are
    whitespace inside a line. A final terminator does not start an empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def evaluate_line(line: str) -> int:
    """
    Tokenize, parse and evaluate a single line.

    Raises:
        TokenizationError: If the line contains an invalid character.
        ParseError: If the tokens do not form an expression.
    """
    return evaluate(parse(tokenize(line)))


def evaluate_lines(
    lines: Iterable[str],
    on_error: str = ON_ERROR_ABORT,
    evaluator: Optional[Callable[[str], int]] = None,
) -> list[LineResult]:
    """
    Evaluate every line in order.

    Parameters:
        lines (Iterable[str]): Source lines without line terminators.
        on_error (str): "abort" to re-raise the first error, "skip" to record
            it in the line's result and continue.
        evaluator (Callable | None): Per-line evaluation, `evaluate_line`
            when omitted.

    Returns:
        list[LineResult]: One result per input line, in input order.

    Raises:
        EvalError: Under "abort", the first error, with `line` set to its
            1-based line number.
        ValueError: If `on_error` is not a known policy.
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(f"Unknown error policy '{on_error}'")

    evaluator = evaluator or evaluate_line
    results = []
    for number, source in enumerate(lines, start=1):
        try:
            results.append(LineResult(number, source, value=evaluator(source)))
        except EvalError as e:
            e.line = number
            if on_error == ON_ERROR_ABORT:
                raise
            results.append(LineResult(number, source, error=e))
    return results


def format_results(results: Iterable[LineResult]) -> str:
    """
    Render successful results as newline-terminated decimal integers.
    """
    return "".join(f"{result.value}\n" for result in results if result.ok)
