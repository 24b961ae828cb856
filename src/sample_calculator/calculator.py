"""Arithmetic helpers used as a fixture for linters and test runners.

Results follow fixed-width two's complement semantics so the module behaves
like the ``int`` arithmetic of the sample projects it mirrors. The width is
taken from :class:`~sample_calculator.utils.settings.CalculatorSettings`
unless given explicitly, and ``0`` means unbounded Python integers.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Final

from sample_calculator.base import BaseComponent
from sample_calculator.utils.settings import check_int_bits, get_calculator_settings

if TYPE_CHECKING:
    from typing import TextIO

POSITIVE_MESSAGE: Final = "Positive"
NON_POSITIVE_MESSAGE: Final = "Non-positive"
UNKNOWN_STATUS: Final = "Unknown"

STATUS_LABELS: Final[dict[int, str]] = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


class CalculatorError(ArithmeticError):
    """Base class for errors raised by the calculator."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when a division is requested with a zero divisor."""

    def __init__(self, dividend: int) -> None:
        """Initialise the error with the rejected dividend."""
        super().__init__("division by zero")
        self.dividend = dividend


class NegativeExponentError(CalculatorError, ValueError):
    """Raised when :meth:`Calculator.power` receives a negative exponent."""

    def __init__(self, exponent: int) -> None:
        """Initialise the error with the rejected exponent."""
        super().__init__(f"exponent must be non-negative, got {exponent}")
        self.exponent = exponent


class Calculator(BaseComponent):
    """Stateless integer calculator."""

    def __init__(self, *, int_bits: int | None = None) -> None:
        """Initialise the calculator.

        Args:
            int_bits: Width of the signed integers results wrap to. Defaults
                to ``CalculatorSettings.int_bits``; ``0`` disables wrapping.

        Raises:
            ValueError: If ``int_bits`` is neither 0 nor between 8 and 128.

        """
        super().__init__()
        if int_bits is None:
            self._int_bits = get_calculator_settings().int_bits
        else:
            self._int_bits = check_int_bits(int_bits)

    @property
    def int_bits(self) -> int:
        """Return the configured integer width (0 when unbounded)."""
        return self._int_bits

    @property
    def min_value(self) -> int | None:
        """Return the smallest representable value, or None when unbounded."""
        if not self._int_bits:
            return None
        return -(1 << (self._int_bits - 1))

    @property
    def max_value(self) -> int | None:
        """Return the largest representable value, or None when unbounded."""
        if not self._int_bits:
            return None
        return (1 << (self._int_bits - 1)) - 1

    def _wrap(self, value: int) -> int:
        if not self._int_bits:
            return value
        modulus = 1 << self._int_bits
        value &= modulus - 1
        if value >= modulus >> 1:
            value -= modulus
        return value

    def complex_method(
        self,
        a: int,
        b: int,
        c: int,
        d: int,
        e: int,
        f: int,
        g: int,
        h: int,
    ) -> int:
        """Return the sum of eight integers."""
        return self._wrap(a + b + c + d + e + f + g + h)

    def add(self, a: int, b: int) -> int:
        """Return ``a + b``."""
        return self._wrap(a + b)

    def subtract(self, a: int, b: int) -> int:
        """Return ``a - b``."""
        return self._wrap(a - b)

    def multiply(self, a: int, b: int) -> int:
        """Return ``a * b``."""
        return self._wrap(a * b)

    def divide(self, a: int, b: int) -> int:
        """Return ``a / b`` truncated toward zero.

        Raises:
            DivisionByZeroError: If ``b`` is zero.

        """
        if b == 0:
            self.logger.debug("Rejected division by zero", dividend=a)
            raise DivisionByZeroError(a)

        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return self._wrap(quotient)

    def power(self, base: int, exponent: int) -> int:
        """Raise ``base`` to a non-negative ``exponent`` by repeated multiplication.

        Raises:
            NegativeExponentError: If ``exponent`` is negative.

        """
        if exponent < 0:
            self.logger.debug("Rejected negative exponent", exponent=exponent)
            raise NegativeExponentError(exponent)

        result = 1
        for _ in range(exponent):
            result = self._wrap(result * base)
        return result

    def classify_and_report(self, value: int, *, stream: TextIO | None = None) -> None:
        """Write ``Positive`` or ``Non-positive`` for ``value`` to ``stream``.

        Zero is non-positive. The message goes to standard output by default.
        """
        message = POSITIVE_MESSAGE if value > 0 else NON_POSITIVE_MESSAGE
        print(message, file=stream or sys.stdout)

    def status_label(self, code: int) -> str:
        """Return the label of a known HTTP-like status code, else ``Unknown``."""
        return STATUS_LABELS.get(code, UNKNOWN_STATUS)
