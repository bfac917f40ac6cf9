"""Token and TokenType definitions for the PolicyScript scanner.

The scanner produces a list of Token objects that a parser consumes.
Each Token has a type, literal text, and a source range.

Only HEADING, PARAGRAPH, COMMENT, EOF and ILLEGAL are emitted today. The
remaining variants are reserved for the expression and block-keyword
grammar of a future parser stage and are never produced by the scanner.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from policyscript.location import Position, Range


class TokenType(Enum):
    """Token types, valued by their canonical spelling.

    Organized by category:
    - Scanner output (ILLEGAL, COMMENT, EOF, HEADING, PARAGRAPH)
    - Reserved: identifiers, literals, operators, delimiters, keywords,
      block keywords and scope controls

    """

    ILLEGAL = "illegal"
    COMMENT = "comment"
    EOF = "EOF"

    # Documentation literals
    HEADING = "heading"
    PARAGRAPH = "paragraph"

    # Identifiers
    IDENT = "identifier"

    # Literals
    INTEGER = "integer"
    DECIMAL = "decimal"
    MONEY = "money"
    PERIOD = "period"  # 3 days, 1 year
    PERCENT = "percent"
    TEXT = "text"
    DATE = "date"
    TIME = "time"

    # Operators
    EQ = "="
    NOT_EQ = "!="
    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    DIV = "/"
    LT = "<"
    GT = ">"
    GT_EQ = ">="
    LT_EQ = "<="

    # Delimiters
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    COLON = ":"

    # Keywords
    IF = "if"
    FOR = "for"
    IN = "in"
    SET = "set"
    TO = "to"
    TRUE = "true"
    FALSE = "false"
    AND = "and"
    OR = "or"
    LIST = "list"

    # Block keywords
    META = "@meta"
    DEFINE = "@define"
    ENUM = "@enum"
    INPUTS = "@inputs"
    OUTPUTS = "@outputs"
    LOCALS = "@locals"
    CODE = "@code"

    # Scope controls
    SCOPE_START = "start"
    SCOPE_END = "end"
    LINE_END = ";"

    @property
    def is_reserved(self) -> bool:
        """True for variants the scanner never emits."""
        return self not in EMITTED_TYPES


EMITTED_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.HEADING,
        TokenType.PARAGRAPH,
        TokenType.COMMENT,
        TokenType.EOF,
        TokenType.ILLEGAL,
    }
)

BLOCK_KEYWORDS: dict[str, TokenType] = {
    "@meta": TokenType.META,
    "@define": TokenType.DEFINE,
    "@enum": TokenType.ENUM,
    "@inputs": TokenType.INPUTS,
    "@outputs": TokenType.OUTPUTS,
    "@locals": TokenType.LOCALS,
    "@code": TokenType.CODE,
}


def lookup_block_keyword(word: str) -> TokenType | None:
    """Return the reserved block keyword type for word, if any.

    Args:
        word: Marker spelling including the leading "@"

    Returns:
        Matching TokenType or None.

    Example:
        >>> lookup_block_keyword("@meta")
        <TokenType.META: '@meta'>
        >>> lookup_block_keyword("@nope") is None
        True
    """
    return BLOCK_KEYWORDS.get(word)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        literal: Token text with block markers and blank lines removed
        range: Source range covered by the token

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    literal: str
    range: Range

    @property
    def start(self) -> Position:
        """Start position (convenience accessor)."""
        return self.range.start

    @property
    def end(self) -> Position:
        """End position (convenience accessor)."""
        return self.range.end

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lit = self.literal
        if len(lit) > 20:
            lit = lit[:17] + "..."
        start, end = self.range.start, self.range.end
        return (
            f"Token({self.type.name}, {lit!r}, "
            f"{start.line}:{start.column}-{end.line}:{end.column})"
        )
