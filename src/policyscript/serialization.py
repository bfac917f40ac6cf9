"""Token serialization: JSON round-trip for scanner output.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Handing a token stream to tooling written in another process
- Snapshotting scanner output in tests
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from policyscript import scan
    from policyscript.serialization import to_json, from_json

    tokens = scan("Title\\n\\nBody")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Sequence
from typing import Any

from policyscript.location import Position, Range
from policyscript.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The token type is stored by member name (e.g. "HEADING").

    Args:
        token: Token to serialize.

    Returns:
        Dict with type, literal and range.

    """
    return {
        "type": token.type.name,
        "literal": token.literal,
        "range": {
            "start": _position_to_dict(token.range.start),
            "end": _position_to_dict(token.range.end),
        },
    }


def _position_to_dict(position: Position) -> dict[str, Any]:
    return {
        "line": position.line,
        "column": position.column,
        "offset": position.offset,
        "source_file": position.source_file,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Raises:
        ValueError: If a field is missing or the token type is unknown.

    """
    try:
        type_name = data["type"]
        literal = data["literal"]
        raw_range = data["range"]
        start = _position_from_dict(raw_range["start"])
        end = _position_from_dict(raw_range["end"])
    except KeyError as e:
        msg = f"Missing field {e.args[0]!r} in serialized token"
        raise ValueError(msg) from e

    token_type = TokenType.__members__.get(type_name)
    if token_type is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    return Token(type=token_type, literal=literal, range=Range(start=start, end=end))


def _position_from_dict(data: dict[str, Any]) -> Position:
    return Position(
        line=data["line"],
        column=data["column"],
        offset=data["offset"],
        source_file=data.get("source_file"),
    )


def to_json(tokens: Sequence[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(token) for token in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token stream from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]
