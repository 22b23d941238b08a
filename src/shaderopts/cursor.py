"""Backtracking scanner over a single line of shader source.

Every ``take_*`` method either matches and advances past what it matched,
or fails and leaves the position untouched. Classifiers rely on this to try
alternative grammars without saving and restoring state themselves.

No regex. Each operation is a bounded forward scan from the current position.

Thread Safety:
LineCursor instances are single-use and local to one classification call.

"""

from __future__ import annotations

COMMENT_MARKER = "//"


class LineCursor:
    """Position-index scanner over one line's text.

    Usage:
            >>> cursor = LineCursor("#define SHADOWS // Enable shadows")
            >>> cursor.take_literal("#define")
            True
            >>> cursor.take_some_whitespace()
            True
            >>> cursor.take_word()
            'SHADOWS'

    """

    __slots__ = ("_text", "_text_len", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._text_len = len(text)
        self._pos = 0

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._pos

    @property
    def remainder(self) -> str:
        """Unread text, without consuming it."""
        return self._text[self._pos :]

    def take_literal(self, literal: str) -> bool:
        """Consume ``literal`` if the unread text starts with it."""
        if not self._text.startswith(literal, self._pos):
            return False
        self._pos += len(literal)
        return True

    def take_some_whitespace(self) -> bool:
        """Consume a maximal run of whitespace; fail if there is none."""
        pos = self._pos
        while pos < self._text_len and self._text[pos].isspace():
            pos += 1

        if pos == self._pos:
            return False
        self._pos = pos
        return True

    def take_word(self) -> str | None:
        """Consume an identifier made of letters, digits and underscores.

        The first character must not be a digit.

        Returns:
            The identifier, or None if the unread text doesn't start with one.
        """
        start = self._pos
        if start >= self._text_len or not _is_word_start(self._text[start]):
            return None

        pos = start + 1
        while pos < self._text_len and _is_word_char(self._text[pos]):
            pos += 1

        self._pos = pos
        return self._text[start:pos]

    def take_number(self) -> str | None:
        """Consume a decimal literal such as ``0``, ``0.5``, ``-1`` or ``.25``.

        Grammar: optional sign, digits, at most one ``.``, with at least one
        digit overall. The run stops at the first character that doesn't fit.

        Returns:
            The literal text, or None if no digit was found.
        """
        text = self._text
        pos = self._pos

        if pos < self._text_len and text[pos] in "+-":
            pos += 1

        digits = 0
        seen_point = False
        while pos < self._text_len:
            char = text[pos]
            if "0" <= char <= "9":
                digits += 1
            elif char == "." and not seen_point:
                seen_point = True
            else:
                break
            pos += 1

        if digits == 0:
            return None

        start = self._pos
        self._pos = pos
        return text[start:pos]

    def take_comments(self) -> bool:
        """Consume a ``//`` marker (only the marker, not the comment text)."""
        return self.take_literal(COMMENT_MARKER)

    def take_rest(self) -> str:
        """Consume and return everything left on the line, whitespace included."""
        rest = self._text[self._pos :]
        self._pos = self._text_len
        return rest

    def is_end(self) -> bool:
        """True once no unread text remains."""
        return self._pos >= self._text_len

    def currently_contains(self, literal: str) -> bool:
        """True if ``literal`` occurs anywhere in the unread text. Never consumes."""
        return self._text.find(literal, self._pos) != -1


def _is_word_start(char: str) -> bool:
    return char == "_" or (char.isalnum() and not char.isdigit())


def _is_word_char(char: str) -> bool:
    return char == "_" or char.isalnum()


__all__ = ["COMMENT_MARKER", "LineCursor"]
