"""Sample calculator: an arithmetic fixture for linters and test runners."""

from sample_calculator.calculator import (
    NON_POSITIVE_MESSAGE,
    POSITIVE_MESSAGE,
    STATUS_LABELS,
    Calculator,
    CalculatorError,
    DivisionByZeroError,
    NegativeExponentError,
)

__all__ = [
    "NON_POSITIVE_MESSAGE",
    "POSITIVE_MESSAGE",
    "STATUS_LABELS",
    "Calculator",
    "CalculatorError",
    "DivisionByZeroError",
    "NegativeExponentError",
]
