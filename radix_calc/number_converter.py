import math
from decimal import Decimal
from enum import Enum
from typing import Optional

from .exceptions import InvalidNumeral, InvalidSystem

DIGITS = "0123456789ABCDEF"
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class NumberSystem(Enum):
    DECIMAL = "decimal"
    BINARY = "binary"
    OCTAL = "octal"
    HEXADECIMAL = "hexadecimal"

    @property
    def base(self) -> int:
        return _BASES[self]

    @property
    def is_based(self) -> bool:
        return self is not NumberSystem.DECIMAL


_BASES = {
    NumberSystem.DECIMAL: 10,
    NumberSystem.BINARY: 2,
    NumberSystem.OCTAL: 8,
    NumberSystem.HEXADECIMAL: 16,
}


def resolve_system(tag: Optional[str]) -> NumberSystem:
    """Map a request's system tag to a NumberSystem, defaulting to decimal."""
    if tag is None:
        return NumberSystem.DECIMAL
    try:
        return NumberSystem(tag)
    except ValueError:
        raise InvalidSystem("invalid system")


def _based(system) -> NumberSystem:
    if isinstance(system, str):
        system = resolve_system(system)
    if not isinstance(system, NumberSystem) or not system.is_based:
        raise InvalidSystem("invalid system")
    return system


def decode(text: str, system) -> float:
    """Parse a signed integer numeral written in a based system.

    Only integral numerals are supported; the value must fit in a signed
    64-bit integer. Returns the value as a float.
    """
    base = _based(system).base
    if not text:
        raise InvalidNumeral("Input cannot be empty.")
    cleaned_str = text.upper()
    sign = 1
    if cleaned_str[0] in "+-":
        if cleaned_str[0] == "-":
            sign = -1
        cleaned_str = cleaned_str[1:]
    if not cleaned_str:
        raise InvalidNumeral(f"Could not parse '{text}' as a valid base {base} number.")
    allowed_chars = DIGITS[:base]
    for char in cleaned_str:
        if char not in allowed_chars:
            raise InvalidNumeral(f"Invalid character '{char}' for base {base}.")
    value = sign * int(cleaned_str, base)
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidNumeral(f"Value '{text}' is out of range for base {base}.")
    return float(value)


def encode(value: float, system) -> str:
    """Render a non-negative value as an uppercase numeral in a based system.

    Negative values produce no digits and therefore come out as "0".
    """
    base = _based(system).base
    digits = []
    while value > 0:
        remainder = math.fmod(value, base)
        value = math.floor(value / base)
        digits.append(DIGITS[int(remainder)])
    if not digits:
        return "0"
    return "".join(reversed(digits))


def format_decimal(value: float) -> str:
    """Shortest decimal text for a float, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
