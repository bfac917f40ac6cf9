"""Exception classes for PolicyScript.

The scanner itself never raises: unrecognized input degrades to ILLEGAL
tokens. These exceptions cover the edges around it, such as decoding
byte input before scanning.
"""

from __future__ import annotations


class PolicyScriptError(Exception):
    """Base exception for all PolicyScript errors.

    Subclass this for specific error categories.
    """

    pass


class SourceDecodeError(PolicyScriptError):
    """Byte input could not be decoded as UTF-8.

    Raised by scan() before any scanning happens.
    """

    def __init__(
        self,
        message: str,
        byte_offset: int,
        line: int,
        column: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize decode error with the location of the bad byte.

        Args:
            message: Error description
            byte_offset: Index of the first undecodable byte
            line: Line of the bad byte (1-indexed)
            column: Column of the bad byte in code points (0-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.byte_offset = byte_offset
        self.line = line
        self.column = column
        self.source_file = source_file

        location = f"{line}:{column}"
        if source_file:
            location = f"{source_file}:{location}"

        super().__init__(f"{location}: {message}")
