class CalculatorError(Exception):
    """Base class for errors reported back to the client."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputDecodeError(CalculatorError):
    """Request body is not a valid operation request."""


class InvalidSystem(CalculatorError):
    """Number system tag is not one of the recognized systems."""


class InvalidNumeral(CalculatorError):
    """Text is not a valid integer numeral in the requested base."""


class DivisionByZero(CalculatorError):
    """Second operand of divide or modulus is zero."""


class UnknownOperation(CalculatorError):
    status_code = 404


class ChartRenderError(CalculatorError):
    status_code = 500
