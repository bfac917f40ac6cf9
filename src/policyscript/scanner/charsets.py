"""Character sets and block markers for O(1) classification.

All sets are frozensets so membership tests are constant time and the
module-level values are safe to share.
"""

# Horizontal whitespace. "\r" counts as whitespace, never as a line end.
HORIZONTAL_WHITESPACE: frozenset[str] = frozenset(" \t\r")

WHITESPACE_AND_BREAKS: frozenset[str] = HORIZONTAL_WHITESPACE | frozenset("\n")

# Stripping argument matching HORIZONTAL_WHITESPACE
HORIZONTAL_WHITESPACE_CHARS = " \t\r"

NEWLINE = "\n"

# Block markers (checked after leading whitespace is skipped)
HEADING_MARKER = "-"  # "- " starts a secondary heading
COMMENT_MARKER = "#"
BLOCK_KEYWORD_MARKER = "@"  # @meta, @define, ... (reserved)
