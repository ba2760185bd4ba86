"""
expresser command line interface.

Workflow:
1. Lines are read from the input file (``in.txt`` by default).
2. The Lexer tokenizes each line.
3. The Parser turns the tokens into an expression tree.
4. The Interpreter reduces the tree to an integer.
5. The results are written to the output file (``out.txt`` by default), one
   per line, in input order.

Setting ``EXPRESSER_DEBUG`` (or passing ``--debug``) prints the tokens and
tree of every line to stderr.


File: cli.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import argparse
import os
import sys

from expresser.exceptions import EvalError
from expresser.interpreter import evaluate, format_expression
from expresser.lexer import tokenize
from expresser.parser import parse
from expresser.pipeline import (
    ON_ERROR_ABORT,
    ON_ERROR_CHOICES,
    evaluate_line,
    evaluate_lines,
    format_results,
    split_lines,
)

DEFAULT_INPUT = "in.txt"
DEFAULT_OUTPUT = "out.txt"
DEBUG_ENV = "EXPRESSER_DEBUG"


def debug_evaluate_line(line: str) -> int:
    """
    Evaluate a line like `evaluate_line`, printing each stage to stderr as it
    completes so a failing line still shows how far it got.
    """
    print(f"\nLine: {line!r}", file=sys.stderr)
    tokens = tokenize(line)
    print(f"Tokens: {tokens}", file=sys.stderr)
    tree = parse(tokens)
    print(f"AST: {format_expression(tree)}", file=sys.stderr)
    value = evaluate(tree)
    print(f"Value: {value}", file=sys.stderr)
    return value


def run_file(input_path: str, output_path: str, on_error: str, debug: bool) -> int:
    """
    Evaluate every line of `input_path` and write the results to `output_path`.

    Returns:
        int: 0 on success, 1 if the run was aborted by a bad line.
    """
    with open(input_path, "r", encoding="utf-8", newline="") as f:
        lines = split_lines(f.read())

    evaluator = debug_evaluate_line if debug else evaluate_line
    try:
        results = evaluate_lines(lines, on_error, evaluator=evaluator)
    except EvalError as e:
        print(f"line {e.line}: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    for result in results:
        if not result.ok:
            print(
                f"line {result.line}: {type(result.error).__name__}: {result.error}",
                file=sys.stderr,
            )

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(format_results(results))
    return 0


def run_repl(debug: bool) -> None:
    """
    Run the interactive REPL
    """
    print("expresser - REPL")
    print("Type `exit` or `quit` to leave.")
    evaluator = debug_evaluate_line if debug else evaluate_line
    while True:
        try:
            line = input(">>> ")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break
        if line.strip() in {"exit", "quit"}:
            break
        if not line.strip():
            continue
        try:
            print(evaluator(line))
        except EvalError as e:
            print(f"{type(e).__name__}: {e}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expresser",
        description="Evaluate integer arithmetic and comparison expressions, one per line.",
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT,
                        help=f"file to read expressions from (default: {DEFAULT_INPUT})")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT,
                        help=f"file to write results to (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--on-error", choices=ON_ERROR_CHOICES, default=ON_ERROR_ABORT,
                        help="abort on the first bad line, or skip bad lines (default: abort)")
    parser.add_argument("--debug", action="store_true",
                        help=f"print tokens and trees to stderr (also enabled by {DEBUG_ENV})")
    parser.add_argument("--repl", action="store_true",
                        help="read expressions interactively instead of from a file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Parameters:
        argv (list[str] | None): Arguments without the program name. Defaults
            to ``sys.argv[1:]``.
    """
    args = build_arg_parser().parse_args(argv)
    debug = args.debug or bool(os.environ.get(DEBUG_ENV))

    if args.repl:
        run_repl(debug)
        return 0

    try:
        return run_file(args.input, args.output, args.on_error, debug)
    except OSError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
