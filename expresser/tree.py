"""Expression tree nodes.

An expression is either a :class:`Const` leaf or an :class:`Action` joining
two sub-expressions with an :class:`~expresser.operations.Operator`. Nodes are
frozen once built and each child belongs to exactly one parent.


File: tree.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from expresser.operations import Operator


@dataclass(frozen=True)
class Const:
    """A constant integer leaf."""

    value: int


@dataclass(frozen=True)
class Action:
    """A binary operator applied to two sub-expressions."""

    left: Expression
    operator: Operator
    right: Expression


Expression = Union[Const, Action]


__all__ = ["Const", "Action", "Expression"]
