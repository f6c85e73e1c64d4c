import math

from .exceptions import DivisionByZero


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero("division by zero")
    return a / b


def modulus(a: float, b: float) -> float:
    """Floating-point remainder with the sign of ``a``, like C's fmod."""
    if b == 0:
        raise DivisionByZero("division by zero")
    return math.fmod(a, b)


OPERATIONS = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
    "modulus": modulus,
}
