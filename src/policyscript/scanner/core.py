"""Single-pass block scanner with O(n) guaranteed performance.

Turns PolicyScript source into a flat token stream: one leading HEADING,
then HEADING / PARAGRAPH / COMMENT blocks separated by blank lines, then EOF.

Scanning never fails. A block-start character the scanner does not
understand degrades to an ILLEGAL token and scanning continues; rejecting
such streams is left to the parser.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from policyscript.config import ScanConfig, get_scan_config
from policyscript.location import Position, Range
from policyscript.scanner.charsets import (
    BLOCK_KEYWORD_MARKER,
    COMMENT_MARKER,
    HEADING_MARKER,
    HORIZONTAL_WHITESPACE,
    NEWLINE,
    WHITESPACE_AND_BREAKS,
)
from policyscript.scanner.readers import (
    BlockMarkerReaderMixin,
    BlockReaderMixin,
    CommentReaderMixin,
)
from policyscript.tokens import Token, TokenType
from policyscript.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    BlockReaderMixin,
    CommentReaderMixin,
    BlockMarkerReaderMixin,
):
    """Block scanner for PolicyScript documents.

    Usage:
            >>> scanner = Scanner("Title\\n\\nBody")
            >>> for token in scanner.tokenize():
            ...     print(token)
        Token(HEADING, 'Title', 1:0-1:5)
        Token(PARAGRAPH, 'Body', 3:0-3:4)
        Token(EOF, '', 3:4-3:4)

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_line",
        "_col",
        "_source_file",
        "_include_comments",
        "_text_transformer",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: PolicyScript source text
            source_file: Optional source file path recorded in positions
            config: Scan configuration (the active context config if None)
        """
        if config is None:
            config = get_scan_config()

        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._line = 1
        self._col = 0
        self._source_file = source_file
        self._include_comments = config.include_comments
        self._text_transformer = config.text_transformer

    def tokenize(self) -> Iterator[Token]:
        """Scan source into a token stream.

        Yields:
            The leading HEADING, each following block, then EOF.

        Complexity: O(n) where n = len(source)
        """
        logger.debug(
            "scanning %s (%d chars)", self._source_file or "<string>", self._source_len
        )
        emitted = 1

        # The first block is the document title whatever it starts with
        yield self._read_heading()

        while True:
            self._skip_whitespace_and_breaks()
            if self._at_end():
                break
            token = self._dispatch()
            if token.type is TokenType.COMMENT and not self._include_comments:
                continue
            emitted += 1
            yield token

        logger.debug(
            "scanned %s: %d tokens", self._source_file or "<string>", emitted + 1
        )
        yield self._make_token_at_current(TokenType.EOF, "")

    def _dispatch(self) -> Token:
        """Read the block starting at the current character."""
        char = self._peek()
        if char == HEADING_MARKER and self._peek_next() == " ":
            return self._read_heading()
        if char == COMMENT_MARKER:
            return self._read_comment()
        if char == BLOCK_KEYWORD_MARKER:
            return self._read_block_marker()
        return self._read_paragraph()

    # =========================================================================
    # Cursor navigation helpers
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _peek_next(self) -> str:
        """Peek one character past the current one (empty string past end)."""
        idx = self._pos + 1
        if idx >= self._source_len:
            return ""
        return self._source[idx]

    def _at_end(self) -> bool:
        return self._pos >= self._source_len

    def _advance(self) -> str:
        """Advance position by one character.

        Crossing a newline moves to column 0 of the next line.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == NEWLINE:
            self._line += 1
            self._col = 0
        else:
            self._col += 1

        return char

    def _advance_to(self, target: int) -> None:
        """Move forward to target within the current line.

        Args:
            target: Position to move to; no newline may lie before it.
        """
        self._col += target - self._pos
        self._pos = target

    def _find_line_end(self) -> int:
        """Find the end of the current line (position of \\n or EOF).

        Returns:
            Position of newline or end of source.
        """
        idx = self._source.find(NEWLINE, self._pos)
        return idx if idx != -1 else self._source_len

    def _skip_whitespace(self) -> None:
        """Skip horizontal whitespace (not newlines)."""
        while self._peek() in HORIZONTAL_WHITESPACE:
            self._advance()

    def _skip_whitespace_and_breaks(self) -> None:
        """Skip runs of whitespace and blank lines between blocks."""
        while self._peek() in WHITESPACE_AND_BREAKS:
            self._advance()

    def _restore(self, position: Position) -> None:
        """Rewind the cursor to a position saved earlier on this scan."""
        self._pos = position.offset
        self._line = position.line
        self._col = position.column

    # =========================================================================
    # Token construction
    # =========================================================================

    def _position(self) -> Position:
        return Position(
            line=self._line,
            column=self._col,
            offset=self._pos,
            source_file=self._source_file,
        )

    def _make_token(
        self, token_type: TokenType, literal: str, start: Position, end: Position
    ) -> Token:
        return Token(type=token_type, literal=literal, range=Range(start=start, end=end))

    def _make_token_at_current(self, token_type: TokenType, literal: str) -> Token:
        """Create a zero-width Token at the current position (for EOF)."""
        position = self._position()
        return Token(type=token_type, literal=literal, range=Range(start=position, end=position))
