"""strcalc — sum the integers in a delimited string.

Comma and newline separate numbers by default; a `//` header declares an
extra delimiter. Negatives are rejected and numbers above 1000 are ignored.

Usage:
    from strcalc import add
    add("1,2\\n3")                  # 6
    add("//[***]\\n1***2***1001")   # 3

    python -m strcalc add "1,2,3"   # CLI
"""

from strcalc.calculator import add, evaluate
from strcalc.errors import (
    CalculatorError,
    InvalidDelimiterHeader,
    MalformedToken,
    NegativeNumbersFound,
)
from strcalc.models import CalcResult, DelimiterSpec, ErrorKind

__all__ = [
    "add",
    "evaluate",
    "CalcResult",
    "DelimiterSpec",
    "ErrorKind",
    "CalculatorError",
    "InvalidDelimiterHeader",
    "MalformedToken",
    "NegativeNumbersFound",
]
