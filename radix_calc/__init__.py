"""Arithmetic over decimal, binary, octal and hexadecimal numbers."""

from .arithmetic import OPERATIONS, add, divide, modulus, multiply, subtract
from .dispatcher import OperationRequest, OperationResult, calculate, parse_request
from .exceptions import (
    CalculatorError,
    ChartRenderError,
    DivisionByZero,
    InputDecodeError,
    InvalidNumeral,
    InvalidSystem,
    UnknownOperation,
)
from .number_converter import NumberSystem, decode, encode, format_decimal, resolve_system
from .usage_log import UsageLog, UsageRecord

__version__ = "0.1.0"
