"""Comment reader mixin."""

from __future__ import annotations

from policyscript.location import Position
from policyscript.scanner.charsets import COMMENT_MARKER
from policyscript.tokens import Token, TokenType


class CommentReaderMixin:
    """Mixin reading runs of "#" comment lines into one COMMENT token.

    Consecutive comment lines merge; the marker of each line is dropped and
    everything after it is kept verbatim. Leading whitespace before a
    continuation marker is allowed.

    """

    _source: str
    _pos: int

    def _peek(self) -> str:
        raise NotImplementedError

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

    def _restore(self, position: Position) -> None:
        raise NotImplementedError

    def _make_token(
        self, token_type: TokenType, literal: str, start: Position, end: Position
    ) -> Token:
        raise NotImplementedError

    def _read_comment(self) -> Token:
        """Read a comment block starting at a "#".

        Returns:
            COMMENT token whose range ends after the last segment.
        """
        start = self._position()
        segments: list[str] = []

        while True:
            self._advance()  # "#"
            line_end = self._find_line_end()
            segments.append(self._source[self._pos : line_end])
            self._advance_to(line_end)
            end = self._position()

            if self._at_end():
                break

            self._advance()  # newline
            if self._at_end():
                break

            next_line = self._position()
            self._skip_whitespace()
            if self._peek() != COMMENT_MARKER:
                self._restore(next_line)
                break

        return self._make_token(TokenType.COMMENT, "\n".join(segments), start, end)
