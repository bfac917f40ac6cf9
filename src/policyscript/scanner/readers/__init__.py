"""Block readers for the PolicyScript scanner.

Each reader is a mixin that consumes one block kind starting at the
current cursor and returns the finished token.
"""

from __future__ import annotations

from policyscript.scanner.readers.block import BlockReaderMixin
from policyscript.scanner.readers.comment import CommentReaderMixin
from policyscript.scanner.readers.marker import BlockMarkerReaderMixin

__all__ = [
    "BlockMarkerReaderMixin",
    "BlockReaderMixin",
    "CommentReaderMixin",
]
