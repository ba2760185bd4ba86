"""
Tests for the lexer.
"""
import dataclasses

import pytest

from expresser.exceptions import TokenizationError
from expresser.lexer import Token, tokenize
from expresser.operations import Symbol

from expresser.tests.utils import num, op, ws


@pytest.mark.parametrize("source, expected", [
    ("2+2", [num(2), op('+'), num(2)]),
    ("2++2", [num(2), op('+'), op('+'), num(2)]),
    ("", []),
    ("((2+555)+100)0", [
        op('('), op('('), num(2), op('+'), num(555), op(')'),
        op('+'), num(100), op(')'), num(0),
    ]),
    ("2 * 10", [num(2), ws(), op('*'), ws(), num(10)]),
    ("1<2>3=4-5", [
        num(1), op('<'), num(2), op('>'), num(3), op('='), num(4), op('-'), num(5),
    ]),
])
def test_tokenize(source, expected):
    """Each source line converts to the expected token sequence."""
    assert tokenize(source) == expected


def test_one_whitespace_token_per_character():
    assert tokenize(" \t1  ") == [ws(' '), ws('\t'), num(1), ws(' '), ws(' ')]


def test_tokens_record_their_position():
    tokens = tokenize("12 + 3")
    assert [tok.position for tok in tokens] == [0, 2, 3, 4, 5]
    assert tokens[2].value is Symbol.PLUS


def test_single_zero_and_trailing_zeros_are_numbers():
    assert tokenize("0") == [num(0)]
    assert tokenize("100") == [num(100)]


def test_large_numbers_do_not_overflow():
    assert tokenize("123456789012345678901234567890") == [num(123456789012345678901234567890)]


def test_unknown_characters_fail():
    with pytest.raises(TokenizationError) as excinfo:
        tokenize("abc")
    assert excinfo.value.position == 0
    assert excinfo.value.character == 'a'


def test_error_reports_offending_index():
    with pytest.raises(TokenizationError) as excinfo:
        tokenize("1 + 2 / 3")
    assert excinfo.value.position == 6
    assert "position 6" in str(excinfo.value)


def test_leading_zero_is_rejected():
    with pytest.raises(TokenizationError) as excinfo:
        tokenize("0001")
    assert excinfo.value.position == 1


def test_leading_zero_after_operator_is_rejected():
    with pytest.raises(TokenizationError) as excinfo:
        tokenize("1+05")
    assert excinfo.value.position == 3


def test_non_ascii_digits_are_not_numbers():
    with pytest.raises(TokenizationError):
        tokenize("١")


def test_token_equality_ignores_position():
    assert Token.number(7, 0) == Token.number(7, 5)
    assert Token.number(7) != Token.whitespace('7')
    assert len({Token.op(Symbol.PLUS, 1), Token.op(Symbol.PLUS, 3)}) == 1


def test_symbol_classification():
    assert Symbol.from_char('(') is Symbol.LEFT_PARENTHESIS
    assert Symbol.from_char('/') is None


def test_tokens_are_immutable():
    tok = Token.number(1, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.value = 2
    assert tok in {Token.number(1)}
