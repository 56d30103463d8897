"""
Operand text and number <-> text conversions.

Operands are kept as the literal text the user typed (so "1.20" is not
renormalized to "1.2") and only parsed when an operation needs a number.
"""

import math
import re
from decimal import Decimal

# Longest numeric prefix: optional sign, then Infinity or a decimal literal
_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(text):
    """
    Parses the numeric prefix of a text.

    Args:
        text (str): Operand text, possibly with trailing garbage

    Returns:
        float: Parsed value, or nan when the text has no numeric prefix

    Examples:
        "12.5" -> 12.5, "3(" -> 3.0, ".5" -> 0.5, "" -> nan, "(" -> nan
    """
    match = _NUMBER_PREFIX.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group(0))


def _shortest_digits(value):
    """
    Returns (digits, point) for a finite positive float.

    digits is the shortest round-trip digit string without trailing zeros;
    point is the position of the decimal point relative to its first digit.
    """
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, exponent + len(stripped)


def _exponent_suffix(exponent):
    return "e%s%d" % ("+" if exponent >= 0 else "-", abs(exponent))


def number_to_text(value):
    """
    Serializes a number the way the calculator displays results.

    Args:
        value (float): Any float, including nan and infinities

    Returns:
        str: Shortest text that parses back to the same value

    Format:
        - Integers without fraction: 42.0 -> "42"
        - Plain notation while the decimal exponent is in [-7, 20]
        - Exponent notation outside it: 1e21 -> "1e+21", 1.5e-7 -> "1.5e-7"
        - nan -> "NaN", inf -> "Infinity", -0.0 -> "0"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    count = len(digits)

    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * (-point) + digits

    mantissa = digits[0] if count == 1 else digits[0] + "." + digits[1:]
    return sign + mantissa + _exponent_suffix(point - 1)


def to_exponential(value, fraction_digits=None):
    """
    Renders a number in exponent notation ("1.5e+3").

    Args:
        value (float): Number to render
        fraction_digits (int): Digits after the point, or None for as many
            as needed to represent the value exactly

    Returns:
        str: Exponent notation text; nan and infinities as in number_to_text
    """
    if math.isnan(value) or math.isinf(value):
        return number_to_text(value)
    if value == 0:
        value = 0.0

    if fraction_digits is None:
        if value == 0:
            return "0e+0"
        sign = "-" if value < 0 else ""
        digits, point = _shortest_digits(abs(value))
        mantissa = digits[0] if len(digits) == 1 else digits[0] + "." + digits[1:]
        return sign + mantissa + _exponent_suffix(point - 1)

    mantissa, exponent = ("%.*e" % (fraction_digits, value)).split("e")
    return mantissa + _exponent_suffix(int(exponent))


class OperandText(str):
    """
    Literal operand text as typed, kept apart from its evaluated number.

    Behaves as a plain str; .value gives the parsed float and
    from_number() builds the text of an evaluated result.
    """

    @classmethod
    def from_number(cls, value):
        """Builds the operand text of an evaluated number."""
        return cls(number_to_text(value))

    @property
    def value(self):
        """Parsed numeric value (nan when not numeric)."""
        return parse_number(self)

    @property
    def is_empty(self):
        return len(self) == 0

    @property
    def has_decimal_point(self):
        return "." in self

    def append(self, text):
        """Returns a new operand with text appended."""
        return OperandText(str(self) + text)

    def drop_last(self):
        """Returns a new operand without its last character ("" if one or none)."""
        if len(self) > 1:
            return OperandText(self[:-1])
        return OperandText()
