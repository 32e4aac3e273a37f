"""Data models for strcalc.

ErrorKind, DelimiterSpec, CalcResult — the typed structures that flow through
calculator → report → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from strcalc.errors import CalculatorError


# Comma is the canonical separator every other one is rewritten to.
DEFAULT_SEPARATORS = (",", "\n")


class ErrorKind(str, Enum):
    """Failure categories an addition can end in."""

    NEGATIVE_NUMBERS = "negative-numbers"
    MALFORMED_TOKEN = "malformed-token"
    INVALID_HEADER = "invalid-header"


@dataclass(frozen=True)
class DelimiterSpec:
    """Separators active for a single call.

    `custom` is None for the default comma/newline pair. When a header
    declares a delimiter it is stored here; comma and newline stay active.
    """

    custom: Optional[str] = None

    @property
    def separators(self) -> tuple[str, ...]:
        """Active separators, custom first so it is matched before the defaults."""
        if self.custom is None:
            return DEFAULT_SEPARATORS
        return (self.custom, *DEFAULT_SEPARATORS)


@dataclass(frozen=True)
class CalcResult:
    """Outcome of one addition: either a value or a named error."""

    text: str
    value: Optional[int] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""
    negatives: tuple[int, ...] = field(default_factory=tuple)
    error: Optional[CalculatorError] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, text: str, value: int) -> CalcResult:
        return cls(text=text, value=value)

    @classmethod
    def failure(cls, text: str, exc: CalculatorError) -> CalcResult:
        """Capture a calculator exception as a result.

        Negative-number failures keep their full payload so callers can
        inspect the offending values without parsing the message.
        """
        return cls(
            text=text,
            error_kind=exc.kind,
            message=str(exc),
            negatives=tuple(getattr(exc, "values", ())),
            error=exc,
        )

    def unwrap(self) -> int:
        """Return the value, or re-raise the exception that produced this result."""
        if self.ok:
            return self.value if self.value is not None else 0
        if self.error is not None:
            raise self.error

        # Local import: errors depends on ErrorKind from this module
        from strcalc.errors import CalculatorError

        raise CalculatorError(self.message, kind=self.error_kind)
