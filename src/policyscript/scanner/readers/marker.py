"""Block keyword marker reader mixin.

Block keywords (@meta, @define, @enum, @inputs, @outputs, @locals, @code)
belong to a parser stage that does not exist yet. Until it does, every "@"
at the start of a block becomes a one-character ILLEGAL token and scanning
carries on with the next character.
"""

from __future__ import annotations

import logging

from policyscript.location import Position
from policyscript.tokens import Token, TokenType, lookup_block_keyword
from policyscript.utils.logger import get_logger

logger = get_logger(__name__)


class BlockMarkerReaderMixin:
    """Mixin handling the "@" block marker path."""

    _source: str
    _pos: int

    def _advance(self) -> str:
        raise NotImplementedError

    def _position(self) -> Position:
        raise NotImplementedError

    def _make_token(
        self, token_type: TokenType, literal: str, start: Position, end: Position
    ) -> Token:
        raise NotImplementedError

    def _marker_word(self, start: int) -> str:
        """Return the "@" at start plus the letters following it.

        Reads the source directly; the cursor is not involved.
        """
        end = start + 1
        source = self._source
        while end < len(source) and source[end].isalpha():
            end += 1
        return source[start:end]

    def _read_block_marker(self) -> Token:
        start = self._position()
        char = self._advance()
        token = self._make_token(TokenType.ILLEGAL, char, start, self._position())

        if logger.isEnabledFor(logging.DEBUG):
            word = self._marker_word(start.offset)
            reserved = lookup_block_keyword(word)
            if reserved is not None:
                logger.debug(
                    "%s: block keyword %s is reserved and not supported yet",
                    token.range,
                    reserved.value,
                )
            else:
                logger.debug("%s: unrecognized block marker %r", token.range, word)
        return token
