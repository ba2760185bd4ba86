"""Forward-only cursor over a token sequence.


File: cursor.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable, Optional

from expresser.lexer import Token


class TokenCursor:
    """
    Read-only positional view over a token sequence.

    The sequence is copied into a tuple on construction so the caller's list
    is never touched. The position only ever moves forward and may run past
    the end, at which point `read` reports None.
    """
    def __init__(self, tokens: Iterable[Token]):
        self._tokens = tuple(tokens)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def read(self) -> Optional[Token]:
        """
        Look up the token under the cursor without consuming it.

        Returns:
            Token | None: The current token, or None once the stream is finished.
        """
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def advance(self) -> None:
        """
        Move the cursor one token ahead.
        """
        self._position += 1

    def __repr__(self) -> str:
        return f"TokenCursor(position={self._position}, length={len(self._tokens)})"
