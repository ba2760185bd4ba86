"""
Tests for the token cursor.
"""
from expresser.cursor import TokenCursor

from expresser.tests.utils import num, op


def test_read_is_idempotent():
    cursor = TokenCursor([num(1), op('+')])
    assert cursor.read() == num(1)
    assert cursor.read() == num(1)
    assert cursor.position == 0


def test_advance_moves_forward_and_past_the_end():
    cursor = TokenCursor([num(1), op('+')])
    cursor.advance()
    assert cursor.read() == op('+')
    cursor.advance()
    assert cursor.read() is None
    cursor.advance()
    assert cursor.read() is None
    assert cursor.position == 3


def test_empty_sequence_reads_none():
    assert TokenCursor([]).read() is None


def test_source_list_is_not_shared():
    tokens = [num(1)]
    cursor = TokenCursor(tokens)
    tokens.append(num(2))
    cursor.advance()
    assert cursor.read() is None
    assert cursor.tokens == (num(1),)
