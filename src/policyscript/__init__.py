"""
PolicyScript: scanner for a lightweight document-description language.

A PolicyScript document is a leading heading followed by blank-line
separated blocks: secondary headings ("- " lines), paragraphs, and
"#" comments. The scanner turns source text into typed, position-annotated
tokens for a parser stage.

Quick Start:
    >>> from policyscript import scan
    >>> for token in scan("Leave policy\\n\\n- Scope\\nAll staff."):
    ...     print(token)
    Token(HEADING, 'Leave policy', 1:0-1:12)
    Token(HEADING, '- Scope\\nAll staff.', 3:0-4:10)
    Token(EOF, '', 4:10-4:10)

"""

from time import perf_counter

from policyscript.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from policyscript.errors import PolicyScriptError, SourceDecodeError
from policyscript.location import Position, Range
from policyscript.profiling import get_scan_accumulator
from policyscript.scanner import Scanner
from policyscript.serialization import from_json, to_json
from policyscript.tokens import Token, TokenType

__version__ = "0.1.0"


def scan(source: str | bytes, *, source_file: str | None = None) -> list[Token]:
    """Scan PolicyScript source into a token list.

    Args:
        source: Source text, or UTF-8 encoded bytes
        source_file: Optional source file path recorded in positions

    Returns:
        Tokens: a leading HEADING, the following blocks, and a final EOF.

    Raises:
        SourceDecodeError: If bytes input is not valid UTF-8.
        TypeError: If source is neither str nor bytes.

    Example:
        >>> [t.type.name for t in scan("Title\\n\\nBody")]
        ['HEADING', 'PARAGRAPH', 'EOF']
    """
    if isinstance(source, bytes):
        source = _decode(source, source_file)
    elif not isinstance(source, str):
        msg = f"scan() expects str or bytes, got {type(source).__name__}"
        raise TypeError(msg)

    acc = get_scan_accumulator()
    if acc is None:
        return list(Scanner(source, source_file=source_file).tokenize())

    started = perf_counter()
    tokens = list(Scanner(source, source_file=source_file).tokenize())
    acc.record_scan(
        source_length=len(source),
        tokens=tokens,
        elapsed_ms=(perf_counter() - started) * 1000,
        source_file=source_file,
    )

    return tokens


def _decode(data: bytes, source_file: str | None) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        # Locate the bad byte in terms of the text before it
        prefix = data[: e.start].decode("utf-8")
        line = prefix.count("\n") + 1
        column = len(prefix) - (prefix.rfind("\n") + 1)
        raise SourceDecodeError(
            f"invalid UTF-8 at byte {e.start}: {e.reason}",
            byte_offset=e.start,
            line=line,
            column=column,
            source_file=source_file,
        ) from e


__all__ = [
    "PolicyScriptError",
    "Position",
    "Range",
    "ScanConfig",
    "Scanner",
    "SourceDecodeError",
    "Token",
    "TokenType",
    "__version__",
    "from_json",
    "get_scan_config",
    "reset_scan_config",
    "scan",
    "scan_config_context",
    "set_scan_config",
    "to_json",
]
