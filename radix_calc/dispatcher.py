"""
Operation dispatch.

Validates calculation requests, routes them through the decimal or based
number path and reports successful calculations to a usage recorder.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from .arithmetic import OPERATIONS
from .exceptions import InputDecodeError, UnknownOperation
from .number_converter import decode, encode, format_decimal, resolve_system
from .usage_log import UsageRecord


@dataclass(frozen=True)
class OperationRequest:
    num1: float
    num2: float
    system: Optional[str] = None


@dataclass(frozen=True)
class OperationResult:
    result: str

    def to_dict(self) -> dict:
        return {"result": self.result}


def _parse_number(payload: dict, key: str) -> float:
    value = payload.get(key)
    if value is None:
        return 0.0
    # bool is an int subclass but JSON true/false is not a number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputDecodeError(f"'{key}' must be a number")
    try:
        number = float(value)
    except OverflowError:
        raise InputDecodeError(f"'{key}' is out of range")
    # json accepts NaN, Infinity and overflowing literals like 1e400
    if not math.isfinite(number):
        raise InputDecodeError(f"'{key}' is out of range")
    return number


def parse_request(payload) -> OperationRequest:
    """Build an OperationRequest from a decoded JSON body.

    A JSON ``null`` body is treated as an object with every field absent.

    Raises:
        InputDecodeError: If the body is not an object or a field has the
            wrong type.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InputDecodeError("request body must be a JSON object")
    system = payload.get("system")
    if system is not None and not isinstance(system, str):
        raise InputDecodeError("'system' must be a string or null")
    return OperationRequest(
        num1=_parse_number(payload, "num1"),
        num2=_parse_number(payload, "num2"),
        system=system,
    )


def calculate(
    operation: str,
    request: OperationRequest,
    record: Optional[Callable[[UsageRecord], None]] = None,
) -> OperationResult:
    """Run ``operation`` on the request's operands in the requested system.

    Based systems reinterpret each operand's decimal digits as digits of the
    target base: ``10`` in hexadecimal is sixteen, and ``9`` is not a valid
    octal numeral. The result is written back in the same base.

    Raises:
        InvalidSystem: If the system tag is not recognized.
        UnknownOperation: If ``operation`` is not one of OPERATIONS.
        InvalidNumeral: If an operand's digits are invalid in the base.
        DivisionByZero: If divide or modulus gets a zero divisor.
    """
    system = resolve_system(request.system)
    func = OPERATIONS.get(operation)
    if func is None:
        raise UnknownOperation(f"unknown operation '{operation}'")

    if system.is_based:
        num1 = decode(format_decimal(request.num1), system)
        num2 = decode(format_decimal(request.num2), system)
        result = OperationResult(encode(func(num1, num2), system))
    else:
        result = OperationResult(format_decimal(func(request.num1, request.num2)))

    logging.debug(
        f"{operation}({request.num1}, {request.num2}) in {system.value} = {result.result}"
    )
    if record is not None:
        record(UsageRecord(num1=request.num1, num2=request.num2, system=system.value))
    return result
