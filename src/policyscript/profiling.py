"""Opt-in scan metrics.

While a profiled_scan() block is active, every scan() call records how
long the scanner itself ran, how much source it read, and which token
types it produced. ILLEGAL tokens are the scanner's only error signal, so
the accumulator also tracks which sources contained them.

Outside a profiled_scan() block get_scan_accumulator() returns None and
scan() does no timing at all.

Example:
    from policyscript import scan
    from policyscript.profiling import profiled_scan

    with profiled_scan() as metrics:
        for path in paths:
            scan(path.read_bytes(), source_file=str(path))

    if metrics.illegal_count:
        print("unrecognized block markers in", metrics.sources_with_illegal)

"""

from collections import Counter
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar, Token as ContextToken
from dataclasses import dataclass, field
from typing import Any

from policyscript.tokens import Token, TokenType


@dataclass
class ScanAccumulator:
    """Scan metrics summed over every scan() call in a profiled context.

    Attributes:
        scan_calls: Number of scan() calls recorded.
        source_length: Total characters scanned.
        scan_ms: Time spent inside the scanner, summed over calls.
        slowest_scan_ms: Longest single scan.
        type_counts: Tokens produced, per token type.
        sources_with_illegal: Source file (or "<string>") of each scan that
            produced at least one ILLEGAL token, in call order.

    """

    scan_calls: int = 0
    source_length: int = 0
    scan_ms: float = 0.0
    slowest_scan_ms: float = 0.0
    type_counts: Counter[TokenType] = field(default_factory=Counter)
    sources_with_illegal: list[str] = field(default_factory=list)

    def record_scan(
        self,
        source_length: int,
        tokens: Sequence[Token],
        elapsed_ms: float,
        source_file: str | None = None,
    ) -> None:
        """Record one scan() call.

        Args:
            source_length: Length of the source string scanned.
            tokens: Tokens the scan produced.
            elapsed_ms: Time the scanner ran, in milliseconds.
            source_file: Source file path passed to scan(), if any.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.scan_ms += elapsed_ms
        self.slowest_scan_ms = max(self.slowest_scan_ms, elapsed_ms)

        counts = Counter(token.type for token in tokens)
        self.type_counts.update(counts)
        if counts[TokenType.ILLEGAL]:
            self.sources_with_illegal.append(source_file or "<string>")

    @property
    def token_count(self) -> int:
        """Total tokens produced, EOF included."""
        return sum(self.type_counts.values())

    @property
    def illegal_count(self) -> int:
        """ILLEGAL tokens produced across all scans."""
        return self.type_counts[TokenType.ILLEGAL]

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with call, length, timing and token counts. Per-type
            counts are keyed by token type name.

        """
        return {
            "scan_calls": self.scan_calls,
            "source_length": self.source_length,
            "scan_ms": round(self.scan_ms, 3),
            "slowest_scan_ms": round(self.slowest_scan_ms, 3),
            "token_count": self.token_count,
            "illegal_count": self.illegal_count,
            "tokens_by_type": {
                token_type.name: count
                for token_type, count in sorted(
                    self.type_counts.items(), key=lambda item: item[0].name
                )
            },
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Collect metrics for every scan() call inside the with block.

    Yields:
        ScanAccumulator populated as scan() is called.

    """
    acc = ScanAccumulator()
    reset_token: ContextToken[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(reset_token)
