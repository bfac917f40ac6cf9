"""Tests for the public scan() facade."""

from __future__ import annotations

import pytest

from policyscript import (
    PolicyScriptError,
    Scanner,
    SourceDecodeError,
    Token,
    TokenType,
    scan,
)


class TestScan:
    def test_returns_token_list(self) -> None:
        tokens = scan("Title\n\nBody")
        assert isinstance(tokens, list)
        assert all(isinstance(t, Token) for t in tokens)
        assert [(t.type, t.literal) for t in tokens] == [
            (TokenType.HEADING, "Title"),
            (TokenType.PARAGRAPH, "Body"),
            (TokenType.EOF, ""),
        ]

    def test_matches_scanner(self) -> None:
        source = "Title\n\n- Part\n# note\nBody"
        assert scan(source) == list(Scanner(source).tokenize())

    def test_repeat_scans_are_independent(self) -> None:
        assert scan("A\n\nB") == scan("A\n\nB")

    def test_full_document(self) -> None:
        source = (
            "Annual leave policy\n"
            "\n"
            "# Owner: HR\n"
            "#   reviewed yearly\n"
            "\n"
            "- (a) Eligibility\n"
            "  applies to permanent staff\n"
            "\n"
            "Staff accrue leave monthly.\n"
            "Unused leave carries over.\n"
            "\n"
            "@meta\n"
        )
        assert [(t.type, t.literal) for t in scan(source)] == [
            (TokenType.HEADING, "Annual leave policy"),
            (TokenType.COMMENT, " Owner: HR\n   reviewed yearly"),
            (TokenType.HEADING, "- (a) Eligibility\n  applies to permanent staff"),
            (TokenType.PARAGRAPH, "Staff accrue leave monthly.\nUnused leave carries over."),
            (TokenType.ILLEGAL, "@"),
            (TokenType.PARAGRAPH, "meta"),
            (TokenType.EOF, ""),
        ]


class TestBytesInput:
    def test_utf8_bytes(self) -> None:
        tokens = scan("Título\n\nCafé".encode())
        assert [t.literal for t in tokens] == ["Título", "Café", ""]

    def test_columns_count_characters(self) -> None:
        tokens = scan("Título".encode())
        assert tokens[0].end.column == 6
        assert tokens[0].end.offset == 6

    def test_invalid_utf8(self) -> None:
        with pytest.raises(SourceDecodeError) as exc_info:
            scan(b"Title\n\nab\xff", source_file="doc.policy")

        err = exc_info.value
        assert isinstance(err, PolicyScriptError)
        assert err.byte_offset == 9
        assert (err.line, err.column) == (3, 2)
        assert err.source_file == "doc.policy"
        assert str(err).startswith("doc.policy:3:2: invalid UTF-8 at byte 9")

    def test_invalid_utf8_without_file(self) -> None:
        with pytest.raises(SourceDecodeError, match=r"^1:0: "):
            scan(b"\xff")


class TestBadInput:
    def test_rejects_non_text(self) -> None:
        with pytest.raises(TypeError, match="expects str or bytes"):
            scan(42)  # type: ignore[arg-type]
