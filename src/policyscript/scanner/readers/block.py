"""Heading and paragraph reader mixin."""

from __future__ import annotations

from collections.abc import Callable

from policyscript.location import Position
from policyscript.scanner.charsets import COMMENT_MARKER, HORIZONTAL_WHITESPACE_CHARS
from policyscript.tokens import Token, TokenType


class BlockReaderMixin:
    """Mixin reading headings and paragraphs.

    Both block kinds share one rule: collect physical lines until a double
    line break, end of input, or a line that opens with a comment marker.
    Lines are scanned with the window approach:
    1. Find end of current line (window)
    2. Classify the line (blank, comment start, content)
    3. Commit position (always advances, except at a comment start)

    """

    # These will be set by the Scanner class
    _source: str
    _pos: int
    _text_transformer: Callable[[str], str] | None

    def _at_end(self) -> bool:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _advance_to(self, target: int) -> None:
        raise NotImplementedError

    def _find_line_end(self) -> int:
        raise NotImplementedError

    def _skip_whitespace(self) -> None:
        raise NotImplementedError

    def _position(self) -> Position:
        raise NotImplementedError

    def _make_token(
        self, token_type: TokenType, literal: str, start: Position, end: Position
    ) -> Token:
        raise NotImplementedError

    def _read_heading(self) -> Token:
        return self._read_until_double_break(TokenType.HEADING)

    def _read_paragraph(self) -> Token:
        return self._read_until_double_break(TokenType.PARAGRAPH)

    def _read_until_double_break(self, token_type: TokenType) -> Token:
        """Read one heading or paragraph block.

        The literal is the newline-joined run of non-blank lines. The first
        line loses its leading whitespace; continuation lines keep theirs.
        A blank line is consumed and belongs to no token. A comment marker
        that opens a line is left unconsumed for the next token.

        Args:
            token_type: HEADING or PARAGRAPH

        Returns:
            The finished token.
        """
        self._skip_whitespace()
        start = self._position()
        end = start
        lines: list[str] = []

        while True:
            line_start = self._pos
            line_end = self._find_line_end()
            line = self._source[line_start:line_end]
            content = line.lstrip(HORIZONTAL_WHITESPACE_CHARS)

            if content.startswith(COMMENT_MARKER):
                # Leave the marker for the comment reader
                self._advance_to(line_end - len(content))
                return self._make_token(token_type, "\n".join(lines), start, end)

            self._advance_to(line_end)
            blank = not content

            if not blank:
                if self._text_transformer is not None:
                    line = self._text_transformer(line)
                lines.append(line)
                end = self._position()

            if self._at_end():
                return self._make_token(token_type, "\n".join(lines), start, end)

            self._advance()  # newline
            if blank:
                return self._make_token(token_type, "\n".join(lines), start, end)
