"""Interpreter.

This is a tree-walk evaluator for the expression trees produced by the
parser.

1. Execution Model
Evaluation reduces a tree to a single integer. Children are evaluated left
before right and both are always evaluated; operators have no side effects,
so there is nothing to short-circuit.

2. Explicit Stack
The walk is post-order over an explicit stack rather than Python recursion.
Left-folded chains such as ``1+1+...+1`` produce trees as deep as the line is
long, which would otherwise exhaust the interpreter's recursion limit.

3. Results
Arithmetic operators yield their integer result. Comparisons yield ``1``
when they hold and ``0`` otherwise, so every result is an ``int``.

4. Error Handling
Evaluation of a well-formed tree cannot fail. Anything that is not a
``Const`` or ``Action`` node is a programming error and raises
``RuntimeError``.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from expresser.tree import Action, Const, Expression


def _walk(expr: Expression, leaf, combine):
    """
    Fold a tree bottom-up without recursion.

    Parameters:
        expr: The root node.
        leaf: Called with each Const node, returns its folded value.
        combine: Called with an Action node and the folded values of its
            left and right children.
    """
    results = []
    stack = [(expr, False)]
    while stack:
        node, children_done = stack.pop()
        match node:
            case Const():
                results.append(leaf(node))
            case Action() if children_done:
                right = results.pop()
                left = results.pop()
                results.append(combine(node, left, right))
            case Action():
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
            case _:
                raise RuntimeError(f"Malformed expression node: {node!r}")
    return results.pop()


def evaluate(expr: Expression) -> int:
    """
    Evaluate an expression tree and return its integer value.

    Parameters:
        expr (Expression): The root of the tree.

    Returns:
        int: The computed value.

    Raises:
        RuntimeError: If the tree contains something other than Const or
            Action nodes.
    """
    return _walk(
        expr,
        lambda node: node.value,
        lambda node, left, right: node.operator.apply(left, right),
    )


def format_expression(expr: Expression) -> str:
    """
    Convert a tree back to a fully parenthesised string for debugging.
    """
    return _walk(
        expr,
        lambda node: str(node.value),
        lambda node, left, right: f"({left} {node.operator.symbol.value} {right})",
    )
