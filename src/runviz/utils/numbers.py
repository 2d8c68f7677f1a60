"""Numeric conversion helpers.

Conversion follows JavaScript ``Number(text)`` and ``String(number)`` so that
tables render the same way in every presentation layer.
"""

import math
import re
from decimal import Decimal

from runviz.config import NumericPolicy
from runviz.exceptions import InvalidNumberError

__all__ = ["format_step", "parse_number"]

# Decimal literal with ASCII digits: optional sign, digits with optional fraction, optional exponent
_DECIMAL_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")

# Unsigned integer literals with a radix prefix
_RADIX_PATTERN = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")

_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def parse_number(text: str, policy: NumericPolicy = "permissive", *, field: str = "number", line: int | None = None) -> float:
    """Convert text to a float.

    Surrounding whitespace is ignored and empty text converts to 0.0.

    Args:
        text: Text to convert
        policy: "permissive" returns NaN for unparsable text, "strict" raises
        field: Field name used in error messages
        line: Source line used in error messages

    Returns:
        Parsed value

    Raises:
        InvalidNumberError: If text is not numeric and policy is "strict"

    Examples:
        >>> parse_number(" 2.5 ")
        2.5
        >>> parse_number("0x10")
        16.0
        >>> parse_number("abc")
        nan
    """
    stripped = text.strip()
    if not stripped:
        return 0.0

    if _DECIMAL_PATTERN.match(stripped):
        return float(stripped)

    if stripped in _INFINITIES:
        return _INFINITIES[stripped]

    if _RADIX_PATTERN.match(stripped):
        return float(int(stripped, 0))

    if policy == "strict":
        raise InvalidNumberError(text, field, line)
    return math.nan


def format_step(step: float) -> str:
    """Render a step as text for chart labels.

    Uses the shortest round-trip digits, written out in positional notation
    for decimal exponents in (-7, 21] and in exponent form otherwise.

    Examples:
        >>> format_step(1.0)
        '1'
        >>> format_step(0.00005)
        '0.00005'
        >>> format_step(1e-7)
        '1e-7'
        >>> format_step(float("nan"))
        'NaN'
    """
    if math.isnan(step):
        return "NaN"
    if math.isinf(step):
        return "Infinity" if step > 0 else "-Infinity"
    if step == 0:
        return "0"

    sign = "-" if step < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(step))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    # Value is 0.<digits> * 10**point
    point = len(digits) + exponent

    if len(digits) <= point <= 21:
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    mantissa = digits[0] if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    power = point - 1
    return f"{sign}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
