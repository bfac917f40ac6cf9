"""Block scanner for PolicyScript documents.

This package turns source text into a flat token stream in one pass,
with at most one character of lookahead.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + cursor + dispatch)
├── charsets.py          # Whitespace sets and block markers
└── readers/             # Block readers
    ├── block.py         # Headings and paragraphs
    ├── comment.py       # "#" comments
    └── marker.py        # "@" block keywords (reserved, ILLEGAL for now)

Usage:
    >>> from policyscript.scanner import Scanner
    >>> for token in Scanner("Title\\n\\n# note").tokenize():
    ...     print(token)
Token(HEADING, 'Title', 1:0-1:5)
Token(COMMENT, ' note', 3:0-3:6)
Token(EOF, '', 3:6-3:6)

"""

from policyscript.scanner.core import Scanner

__all__ = ["Scanner"]
