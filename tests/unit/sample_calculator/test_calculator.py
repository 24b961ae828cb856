"""Tests for the arithmetic fixture."""

import io

import pytest

from sample_calculator.calculator import (
    NON_POSITIVE_MESSAGE,
    POSITIVE_MESSAGE,
    STATUS_LABELS,
    Calculator,
    CalculatorError,
    DivisionByZeroError,
    NegativeExponentError,
)

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


@pytest.fixture
def calc() -> Calculator:
    """Return a calculator using 32-bit integers."""
    return Calculator(int_bits=32)


class TestSeedScenarios:
    """The scenarios every consumer of the fixture relies on."""

    def test_addition(self, calc: Calculator) -> None:
        """Test adding two positive numbers."""
        assert calc.add(2, 2) == 4

    def test_subtraction(self, calc: Calculator) -> None:
        """Test subtracting a number from itself."""
        assert calc.subtract(5, 5) == 0

    def test_multiplication(self, calc: Calculator) -> None:
        """Test multiplying two numbers."""
        assert calc.multiply(2, 3) == 6

    def test_division(self, calc: Calculator) -> None:
        """Test an exact division."""
        assert calc.divide(4, 2) == 2

    def test_addition_negatives(self, calc: Calculator) -> None:
        """Test adding a negative number."""
        assert calc.add(-5, 3) == -2

    def test_multiplication_by_zero(self, calc: Calculator) -> None:
        """Test multiplying by zero."""
        assert calc.multiply(100, 0) == 0

    def test_division_of_ten_by_two(self, calc: Calculator) -> None:
        """Test that 10 / 2 is exactly 5 under truncation."""
        assert calc.divide(10, 2) == 5

    @pytest.mark.fixture_defect
    @pytest.mark.xfail(
        strict=True,
        reason="Deliberately wrong expectation kept for test-report tooling",
    )
    def test_division_fails(self, calc: Calculator) -> None:
        """Assert a mismatched quotient so runners record a failing test."""
        assert calc.divide(10, 2) == 4

    @pytest.mark.fixture_defect
    @pytest.mark.skip(reason="Not yet implemented")
    def test_power(self, calc: Calculator) -> None:
        """Pending test kept so runners record a skipped test."""
        assert calc.power(2, 3) == 8


@pytest.mark.parametrize(
    ("a", "b"),
    [(0, 0), (1, 2), (-7, 3), (123456, -654321), (INT32_MAX, 1), (INT32_MIN, -1)],
)
def test_add_is_commutative(calc: Calculator, a: int, b: int) -> None:
    """Addition gives the same result regardless of operand order."""
    assert calc.add(a, b) == calc.add(b, a)


@pytest.mark.parametrize(("a", "b"), [(0, 0), (9, 4), (-3, 8), (1000, -1000)])
def test_subtract_is_anti_commutative(calc: Calculator, a: int, b: int) -> None:
    """Swapping the operands of a subtraction negates the result."""
    assert calc.subtract(a, b) == -calc.subtract(b, a)


@pytest.mark.parametrize("a", [0, 1, -1, INT32_MAX, INT32_MIN])
def test_multiply_by_zero_is_zero(calc: Calculator, a: int) -> None:
    """Any value times zero is zero."""
    assert calc.multiply(a, 0) == 0


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (1, 3, 0), (-1, 3, 0)],
)
def test_divide_truncates_toward_zero(
    calc: Calculator,
    a: int,
    b: int,
    expected: int,
) -> None:
    """Quotients are truncated toward zero and the remainder keeps a's sign."""
    quotient = calc.divide(a, b)
    assert quotient == expected
    remainder = a - quotient * b
    assert quotient * b + remainder == a
    assert abs(remainder) < abs(b)
    assert remainder == 0 or (remainder < 0) == (a < 0)


def test_divide_by_zero_raises_typed_error(calc: Calculator) -> None:
    """Dividing by zero raises DivisionByZeroError."""
    with pytest.raises(DivisionByZeroError, match="division by zero") as exc_info:
        calc.divide(10, 0)

    assert exc_info.value.dividend == 10
    assert isinstance(exc_info.value, ZeroDivisionError)
    assert isinstance(exc_info.value, CalculatorError)


@pytest.mark.parametrize("base", [-3, 0, 1, 5, INT32_MAX])
def test_power_of_zero_exponent_is_one(calc: Calculator, base: int) -> None:
    """Any base, including zero, raised to zero is one."""
    assert calc.power(base, 0) == 1


@pytest.mark.parametrize(
    ("base", "exponent", "expected"),
    [(2, 3, 8), (5, 0, 1), (0, 5, 0), (-2, 3, -8), (3, 4, 81)],
)
def test_power_values(calc: Calculator, base: int, exponent: int, expected: int) -> None:
    """Power multiplies the base exponent times."""
    assert calc.power(base, exponent) == expected


def test_power_rejects_negative_exponent(calc: Calculator) -> None:
    """A negative exponent is a precondition violation."""
    with pytest.raises(NegativeExponentError) as exc_info:
        calc.power(2, -1)

    assert exc_info.value.exponent == -1
    assert isinstance(exc_info.value, ValueError)


def test_complex_method_sums_all_arguments(calc: Calculator) -> None:
    """The eight-parameter helper returns the sum of its inputs."""
    assert calc.complex_method(1, 2, 3, 4, 5, 6, 7, 8) == 36


@pytest.mark.parametrize(("code", "label"), sorted(STATUS_LABELS.items()))
def test_status_label_known_codes(calc: Calculator, code: int, label: str) -> None:
    """Known status codes map to their labels."""
    assert calc.status_label(code) == label


def test_status_label_examples(calc: Calculator) -> None:
    """Spot-check the label lookup and its fallback."""
    assert calc.status_label(200) == "OK"
    assert calc.status_label(503) == "Service Unavailable"
    assert calc.status_label(999) == "Unknown"
    assert calc.status_label(-1) == "Unknown"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, POSITIVE_MESSAGE),
        (42, POSITIVE_MESSAGE),
        (0, NON_POSITIVE_MESSAGE),
        (-1, NON_POSITIVE_MESSAGE),
    ],
)
def test_classify_and_report_prints_to_stdout(
    calc: Calculator,
    capsys: pytest.CaptureFixture[str],
    value: int,
    expected: str,
) -> None:
    """The classifier writes a single line to standard output."""
    assert calc.classify_and_report(value) is None

    captured = capsys.readouterr()
    assert captured.out == f"{expected}\n"


def test_classify_and_report_accepts_stream(calc: Calculator) -> None:
    """The classifier can write to an explicit text stream."""
    stream = io.StringIO()

    calc.classify_and_report(0, stream=stream)
    calc.classify_and_report(3, stream=stream)

    assert stream.getvalue().splitlines() == ["Non-positive", "Positive"]


class TestIntegerWidth:
    """Fixed-width wrapping of results."""

    def test_add_overflow_wraps(self, calc: Calculator) -> None:
        """Overflowing the maximum wraps to the minimum."""
        assert calc.add(INT32_MAX, 1) == INT32_MIN

    def test_subtract_underflow_wraps(self, calc: Calculator) -> None:
        """Underflowing the minimum wraps to the maximum."""
        assert calc.subtract(INT32_MIN, 1) == INT32_MAX

    def test_multiply_wraps(self, calc: Calculator) -> None:
        """Products keep only the low 32 bits."""
        assert calc.multiply(65536, 65536) == 0

    def test_min_divided_by_minus_one_wraps(self, calc: Calculator) -> None:
        """The one overflowing quotient wraps back to the minimum."""
        assert calc.divide(INT32_MIN, -1) == INT32_MIN

    def test_power_wraps(self, calc: Calculator) -> None:
        """Repeated multiplication wraps at every step."""
        assert calc.power(2, 31) == INT32_MIN
        assert calc.power(2, 32) == 0

    def test_bounds(self, calc: Calculator) -> None:
        """The bounds reflect the configured width."""
        assert calc.int_bits == 32
        assert calc.min_value == INT32_MIN
        assert calc.max_value == INT32_MAX

    def test_eight_bit_width(self) -> None:
        """Narrower widths wrap sooner."""
        narrow = Calculator(int_bits=8)
        assert narrow.add(127, 1) == -128
        assert narrow.multiply(16, 16) == 0

    def test_unbounded_width(self) -> None:
        """A width of zero disables wrapping."""
        unbounded = Calculator(int_bits=0)
        assert unbounded.add(INT32_MAX, 1) == 2**31
        assert unbounded.power(2, 100) == 2**100
        assert unbounded.min_value is None
        assert unbounded.max_value is None

    def test_width_defaults_to_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without an explicit width the settings value is used."""
        monkeypatch.setenv("CALCULATOR_INT_BITS", "16")

        calc = Calculator()

        assert calc.int_bits == 16
        assert calc.add(32767, 1) == -32768

    @pytest.mark.parametrize("bits", [-1, 1, 7, 129])
    def test_unsupported_width_is_rejected(self, bits: int) -> None:
        """Only 0 or a width between 8 and 128 bits is accepted."""
        with pytest.raises(ValueError, match="Invalid integer width"):
            Calculator(int_bits=bits)

    @pytest.mark.parametrize("bits", [8, 64, 128])
    def test_supported_width_boundaries(self, bits: int) -> None:
        """The smallest and largest widths are accepted."""
        assert Calculator(int_bits=bits).max_value == (1 << (bits - 1)) - 1
