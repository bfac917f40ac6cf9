"""Source positions and ranges for tokens.

Provides Position and Range dataclasses used by every token the scanner
produces, and by anything downstream that needs to point at source text.

Conventions:
- line is 1-indexed
- column is 0-indexed within the current line
- offset is the 0-indexed absolute index into the source string

Thread Safety:
Position and Range are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A single point in the source.

    Attributes:
        line: Line number (1-indexed)
        column: Column within the line (0-indexed)
        offset: Absolute index into the source (0-indexed)
        source_file: Source file path (optional)

    Examples:
            >>> pos = Position(line=2, column=4, offset=10)
            >>> str(pos)
            '2:4'

            >>> str(Position(1, 0, 0, "rules/leave.policy"))
            'rules/leave.policy:1:0'

    """

    line: int
    column: int
    offset: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format position for error messages.

        Returns:
            Formatted string like "file.policy:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open span of source between two positions.

    Attributes:
        start: First position covered
        end: Position just past the last character covered

    Raises:
        ValueError: If start lies after end.

    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.start.offset > self.end.offset:
            msg = f"Range start {self.start} lies after end {self.end}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
