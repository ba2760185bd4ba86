"""
Utility functions shared across expresser tests.
"""
from expresser.lexer import Token, tokenize
from expresser.operations import Symbol
from expresser.parser import Parser


def parse_source(source: str):
    """
    Tokenize and parse a line, returning the expression tree.
    """
    return Parser(tokenize(source)).parse()


def num(value):
    return Token.number(value)


def op(char):
    return Token.op(Symbol(char))


def ws(char=' '):
    return Token.whitespace(char)
