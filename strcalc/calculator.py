"""String calculator — parse, validate and sum a delimited list of integers.

Data flow per call:
1. Empty input short-circuits to 0
2. Resolve the delimiters from an optional `//` header
3. Rewrite every active delimiter to comma
4. Split on comma and parse each token as an integer
5. Reject negatives, then sum everything up to MAX_VALUE

Input mini-language:
    ""                       -> 0
    "1,2\\n3"                 -> 6      comma and newline both separate
    "//;\\n1;2"               -> 3      single-character custom delimiter
    "//[***]\\n1***2***3"     -> 6      bracketed delimiter, any length
"""

from __future__ import annotations

import re

from strcalc.errors import (
    CalculatorError,
    InvalidDelimiterHeader,
    MalformedToken,
    NegativeNumbersFound,
)
from strcalc.models import DEFAULT_SEPARATORS, CalcResult, DelimiterSpec

HEADER_MARKER = "//"

# Numbers above this still get validated but add nothing to the total.
MAX_VALUE = 1000
_MAX_VALUE_DIGITS = len(str(MAX_VALUE))

# int() alone would also accept whitespace, underscores and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _split_header(text: str) -> tuple[DelimiterSpec, str]:
    """Separate an optional `//<delimiter>\\n` header from the numeric text.

    Returns (delimiters, numbers_text).
    """
    if not text.startswith(HEADER_MARKER):
        return DelimiterSpec(), text

    newline = text.find("\n", len(HEADER_MARKER))
    if newline == -1:
        raise InvalidDelimiterHeader(text, "missing newline after header")

    body = text[len(HEADER_MARKER):newline]
    return DelimiterSpec(custom=_parse_header_body(body)), text[newline + 1:]


def _parse_header_body(body: str) -> str:
    """Extract the literal delimiter from a header body.

    `[...]` allows any non-empty delimiter; a bare body must be one character.
    """
    if len(body) >= 2 and body.startswith("[") and body.endswith("]"):
        delimiter = body[1:-1]
        if not delimiter:
            raise InvalidDelimiterHeader(body, "empty bracketed delimiter")
        return delimiter
    if len(body) != 1:
        raise InvalidDelimiterHeader(
            body, "bare delimiter must be a single character; use [...] for longer ones"
        )
    return body


def _tokenize(numbers: str, delimiters: DelimiterSpec) -> list[str]:
    """Split on every active separator, keeping left-to-right order.

    Separators are rewritten to comma with a literal replace, never as a pattern.
    """
    canonical = DEFAULT_SEPARATORS[0]
    for separator in delimiters.separators:
        if separator != canonical:
            numbers = numbers.replace(separator, canonical)
    return numbers.split(canonical)


def _parse_numbers(tokens: list[str]) -> list[int]:
    numbers = []
    for position, token in enumerate(tokens):
        if not _INTEGER_RE.fullmatch(token):
            raise MalformedToken(token, position)
        if token[0] != "-" and len(token.lstrip("+").lstrip("0")) > _MAX_VALUE_DIGITS:
            # Over the limit whatever its exact value; skips int() on huge literals
            numbers.append(MAX_VALUE + 1)
            continue
        try:
            numbers.append(int(token))
        except ValueError:
            # Negative literal past the interpreter's int string limit
            raise MalformedToken(token, position) from None
    return numbers


def _validate(numbers: list[int]) -> None:
    negatives = [n for n in numbers if n < 0]
    if negatives:
        raise NegativeNumbersFound(negatives)


def _sum_filtered(numbers: list[int]) -> int:
    return sum(n for n in numbers if n <= MAX_VALUE)


def add(text: str) -> int:
    """Sum the integers encoded in `text`.

    Args:
        text: Numbers separated by comma or newline, optionally preceded by a
            `//<d>\\n` or `//[<d>]\\n` header declaring an extra delimiter.

    Returns:
        Sum of all numbers not greater than MAX_VALUE. 0 for empty input.

    Raises:
        NegativeNumbersFound: any number is negative (all of them are listed).
        MalformedToken: a token is not a plain signed integer.
        InvalidDelimiterHeader: the `//` header declares no usable delimiter.
    """
    if not text:
        return 0

    delimiters, numbers_text = _split_header(text)
    # A header with nothing after it behaves like empty input
    if not numbers_text:
        return 0

    tokens = _tokenize(numbers_text, delimiters)
    numbers = _parse_numbers(tokens)
    _validate(numbers)
    return _sum_filtered(numbers)


def evaluate(text: str) -> CalcResult:
    """Run `add` and capture the outcome as a CalcResult instead of raising."""
    try:
        return CalcResult.success(text, add(text))
    except CalculatorError as e:
        return CalcResult.failure(text, e)
