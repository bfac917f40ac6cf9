"""Tests for heading and paragraph block reading.

Headings and paragraphs share one rule: a block is the run of non-blank
lines up to a blank line, end of input, or a line opening with "#".
"""

from __future__ import annotations

import pytest

from policyscript import scan
from policyscript.tokens import TokenType


def literals(source: str) -> list[tuple[TokenType, str]]:
    """Return (type, literal) pairs for all tokens."""
    return [(t.type, t.literal) for t in scan(source)]


class TestInitialHeading:
    """The first block is always a HEADING."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("Title", "Title"),
            ("Title\n", "Title"),
            ("Title\n\n", "Title"),
            ("Title\nnext line", "Title\nnext line"),
            ("Title\nnext line\n", "Title\nnext line"),
            ("Title\nnext line\n\n", "Title\nnext line"),
            ("Title\nnext line\n\nnot involved", "Title\nnext line"),
            ("Title\n\tnext line", "Title\n\tnext line"),
            ("Title\n  next line", "Title\n  next line"),
            ("Title\n\nnext line", "Title"),
            ("  Title", "Title"),
            ("Title  \nnext", "Title  \nnext"),
            ("Title\nB#C", "Title\nB#C"),
            ("Title\n# note", "Title"),
            ("Title\n  # note", "Title"),
            ("Title\n\t# note", "Title"),
        ],
    )
    def test_title_literal(self, source: str, expected: str) -> None:
        token = scan(source)[0]
        assert token.type == TokenType.HEADING
        assert token.literal == expected

    def test_dash_prefixed_title_is_heading(self) -> None:
        """A "- " line at the very top is still the leading heading."""
        assert literals("- Title") == [
            (TokenType.HEADING, "- Title"),
            (TokenType.EOF, ""),
        ]

    def test_empty_source(self) -> None:
        assert literals("") == [(TokenType.HEADING, ""), (TokenType.EOF, "")]

    def test_comment_first_gives_empty_heading(self) -> None:
        """A leading comment leaves the heading empty and is scanned next."""
        assert literals("# note\n\nBody") == [
            (TokenType.HEADING, ""),
            (TokenType.COMMENT, " note"),
            (TokenType.PARAGRAPH, "Body"),
            (TokenType.EOF, ""),
        ]

    def test_leading_blank_line_gives_empty_heading(self) -> None:
        assert literals("\nBody") == [
            (TokenType.HEADING, ""),
            (TokenType.PARAGRAPH, "Body"),
            (TokenType.EOF, ""),
        ]

    def test_carriage_return_is_whitespace(self) -> None:
        """CRLF blank lines still separate blocks; "\\r" stays in the literal."""
        assert literals("Title\r\n\r\nBody") == [
            (TokenType.HEADING, "Title\r"),
            (TokenType.PARAGRAPH, "Body"),
            (TokenType.EOF, ""),
        ]


class TestSecondaryHeading:
    """Blocks opening with "- " are headings."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("Title\n\n- (a) Title 2", "- (a) Title 2"),
            ("Title\n\n- (a) Title 2\n", "- (a) Title 2"),
            ("Title\n\n- (a) Title 2\n\n", "- (a) Title 2"),
            ("Title\n\n- (a) Title 2\nnext line", "- (a) Title 2\nnext line"),
            ("Title\n\n- (a) Title 2\nnext line\n", "- (a) Title 2\nnext line"),
            ("Title\n\n- (a) Title 2\nnext line\n\n", "- (a) Title 2\nnext line"),
            ("Title\n\n- (a) A\nB\n\nC", "- (a) A\nB"),
            ("Title\n\n- (a) Title 2\n\tnext line", "- (a) Title 2\n\tnext line"),
            ("Title\n\n- (a) Title 2\n  next line", "- (a) Title 2\n  next line"),
            ("Title\n\n- - (a) Title 2", "- - (a) Title 2"),
            ("Title\n\n - - (a) Title 2", "- - (a) Title 2"),
            ("Title\n\n- A\n # B", "- A"),
        ],
    )
    def test_heading_literal(self, source: str, expected: str) -> None:
        token = scan(source)[1]
        assert token.type == TokenType.HEADING
        assert token.literal == expected

    def test_dash_without_space_is_paragraph(self) -> None:
        assert literals("Title\n\n-not a heading") == [
            (TokenType.HEADING, "Title"),
            (TokenType.PARAGRAPH, "-not a heading"),
            (TokenType.EOF, ""),
        ]

    def test_lone_dash_at_end_is_paragraph(self) -> None:
        assert literals("Title\n\n-")[1] == (TokenType.PARAGRAPH, "-")


class TestParagraph:
    """Any other block is a PARAGRAPH."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("Title\n\nThis is a paragraph", "This is a paragraph"),
            ("Title\n\nThis is a paragraph\n", "This is a paragraph"),
            ("Title\n\nThis is a paragraph\n\n", "This is a paragraph"),
            ("Title\n\nThis is a paragraph\nsecond line", "This is a paragraph\nsecond line"),
            ("Title\n\nThis is a paragraph\nsecond line\n", "This is a paragraph\nsecond line"),
            ("Title\n\nA\nB\n\nC", "A\nB"),
            ("Title\n\nThis is a paragraph\n\tsecond line", "This is a paragraph\n\tsecond line"),
            ("Title\n\nA\n  B", "A\n  B"),
            ("Title\n\n   Indented start", "Indented start"),
            ("Title\n\nA\n#B", "A"),
        ],
    )
    def test_paragraph_literal(self, source: str, expected: str) -> None:
        token = scan(source)[1]
        assert token.type == TokenType.PARAGRAPH
        assert token.literal == expected

    def test_comment_interrupts_paragraph(self) -> None:
        """A line-initial "#" ends the paragraph and starts a comment."""
        assert literals("Title\n\nA\n#B") == [
            (TokenType.HEADING, "Title"),
            (TokenType.PARAGRAPH, "A"),
            (TokenType.COMMENT, "B"),
            (TokenType.EOF, ""),
        ]

    def test_whitespace_only_line_ends_block(self) -> None:
        assert literals("Title\n\nA\n \t \nB") == [
            (TokenType.HEADING, "Title"),
            (TokenType.PARAGRAPH, "A"),
            (TokenType.PARAGRAPH, "B"),
            (TokenType.EOF, ""),
        ]

    def test_trailing_blank_lines_add_nothing(self) -> None:
        assert literals("Title\n\nBody\n\n\n   \n") == [
            (TokenType.HEADING, "Title"),
            (TokenType.PARAGRAPH, "Body"),
            (TokenType.EOF, ""),
        ]


class TestBlankLineCollapsing:
    """Any run of blank lines is a single block boundary."""

    @pytest.mark.parametrize("gap", ["\n\n", "\n\n\n", "\n\n\n\n", "\n  \n\t\n"])
    def test_gap_collapses(self, gap: str) -> None:
        assert literals(f"A{gap}B") == literals("A\n\nB")

    def test_blocks_in_sequence(self) -> None:
        source = "Leave policy\n\n- Eligibility\nAll staff.\n\nApplies from day one.\n\n- Accrual"
        assert literals(source) == [
            (TokenType.HEADING, "Leave policy"),
            (TokenType.HEADING, "- Eligibility\nAll staff."),
            (TokenType.PARAGRAPH, "Applies from day one."),
            (TokenType.HEADING, "- Accrual"),
            (TokenType.EOF, ""),
        ]
