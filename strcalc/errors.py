"""Exceptions raised by the calculator pipeline."""

from __future__ import annotations

from typing import Iterable, Optional

from strcalc.models import ErrorKind


class CalculatorError(ValueError):
    """Base class for every input the calculator refuses to sum."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, kind: Optional[ErrorKind] = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class NegativeNumbersFound(CalculatorError):
    """One or more negative numbers in the input.

    `values` holds every negative, in the order it appears in the text.
    """

    kind = ErrorKind.NEGATIVE_NUMBERS

    def __init__(self, values: Iterable[int]) -> None:
        self.values = tuple(values)
        listed = ", ".join(str(v) for v in self.values)
        super().__init__(f"negatives not allowed: {listed}")


class MalformedToken(CalculatorError):
    """A token that is not a plain signed integer literal."""

    kind = ErrorKind.MALFORMED_TOKEN

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(f"malformed token at position {position}: {token!r}")


class InvalidDelimiterHeader(CalculatorError):
    """A `//` header that declares no usable delimiter."""

    kind = ErrorKind.INVALID_HEADER

    def __init__(self, header: str, reason: str) -> None:
        self.header = header
        self.reason = reason
        super().__init__(f"invalid delimiter header {header!r}: {reason}")
