# tests/test_arithmetic_operations.py
"""
Tests for the digit-by-digit arithmetic algorithms (component_4).

Covers:
- Addition/subtraction with carry, borrow and all sign combinations
- Long multiplication and integer factors
- Long division with truncation at the fraction bound
- Integer division with remainder, modulo
- Increment/decrement, negation
"""

import pytest

from component_1_number_parser import parse
from component_1_number_value import one, zero
from component_4_arithmetic_operations import (
    add,
    decrement,
    div_rem,
    divide,
    increment,
    modulo,
    multiply,
    multiply_int,
    negate,
    subtract,
)
from sfloat_exceptions import DivisionByZeroError, InvalidOperationError


class TestAddition:
    """Tests for add()"""

    @pytest.mark.parametrize(
        "a,b,radix,expected",
        [
            ("12.93", "5.7", 10, "18.63"),
            ("8", "8", 16, "10"),
            ("999", "1", 10, "1000"),
            ("0.1", "0.9", 10, "1"),
            ("-5", "3", 10, "-2"),
            ("5", "-3", 10, "2"),
            ("-5", "-3", 10, "-8"),
            ("-2.5", "2.5", 10, "0"),
            ("111", "1", 2, "1000"),
        ],
    )
    def test_add(self, a, b, radix, expected):
        assert str(add(parse(a, radix), parse(b, radix))) == expected

    def test_zero_operand_returns_other(self):
        value = parse("42.5")

        assert add(value, zero()) is value
        assert add(zero(), value) is value

    def test_right_operand_converted_to_left_radix(self):
        result = add(parse("F", 16), parse("1"))

        assert result.radix == 16
        assert str(result) == "10"

    def test_bound_is_maximum(self):
        result = add(parse("1", 10, 2), parse("1", 10, 5))

        assert result.max_fraction_length == 5

    @pytest.mark.parametrize("a,b", [("3.25", "-7"), ("FF.8", "0.01"), ("0", "9")])
    def test_commutative(self, a, b):
        radix = 16 if "F" in a else 10
        x, y = parse(a, radix), parse(b, radix)

        assert add(x, y) == add(y, x)


class TestSubtraction:
    """Tests for subtract()"""

    @pytest.mark.parametrize(
        "a,b,radix,expected",
        [
            ("1000", "1", 10, "999"),
            ("5.5", "0.75", 10, "4.75"),
            ("3", "5", 10, "-2"),
            ("-3", "5", 10, "-8"),
            ("3", "-5", 10, "8"),
            ("-3", "-5", 10, "2"),
            ("-5", "-3", 10, "-2"),
            ("10", "1", 16, "F"),
            ("100", "1", 2, "11"),
            ("0", "5", 10, "-5"),
        ],
    )
    def test_subtract(self, a, b, radix, expected):
        assert str(subtract(parse(a, radix), parse(b, radix))) == expected

    def test_self_subtraction_is_non_negative_zero(self):
        value = parse("-12.5")
        result = subtract(value, value)

        assert result.is_zero
        assert result.is_negative is False

    def test_zero_subtrahend_returns_minuend(self):
        value = parse("7")

        assert subtract(value, zero()) is value

    def test_mixed_radix(self):
        result = subtract(parse("100", 2), parse("1", 16))

        assert result.radix == 2
        assert str(result) == "11"


class TestMultiplication:
    """Tests for multiply() and multiply_int()"""

    @pytest.mark.parametrize(
        "a,b,radix,expected",
        [
            ("25", "41", 10, "1025"),
            ("1.5", "1.5", 10, "2.25"),
            ("-2", "3", 10, "-6"),
            ("-2", "-3", 10, "6"),
            ("0.1", "0.1", 10, "0.01"),
            ("F", "F", 16, "E1"),
            ("123", "0", 10, "0"),
            ("101", "11", 2, "1111"),
        ],
    )
    def test_multiply(self, a, b, radix, expected):
        assert str(multiply(parse(a, radix), parse(b, radix))) == expected

    def test_multiply_by_one(self):
        value = parse("-3.75")

        assert multiply(value, one()) == value

    def test_product_fraction_truncated_to_bound(self):
        result = multiply(parse("0.11", 10, 2), parse("0.11", 10, 2))

        assert str(result) == "0.01"

    @pytest.mark.parametrize(
        "text,radix,factor,expected",
        [
            ("2.5", 10, 2, "5"),
            ("F", 16, 2, "1E"),
            ("7", 10, 0, "0"),
            ("-4", 10, 3, "-12"),
        ],
    )
    def test_multiply_int(self, text, radix, factor, expected):
        assert str(multiply_int(parse(text, radix), factor)) == expected

    def test_multiply_int_identity(self):
        value = parse("9.99")

        assert multiply_int(value, 1) is value

    def test_multiply_int_rejects_non_int(self):
        with pytest.raises(TypeError):
            multiply_int(parse("1"), 1.5)


class TestDivision:
    """Tests for divide()"""

    @pytest.mark.parametrize(
        "a,b,radix,expected",
        [
            ("10", "4", 10, "2.5"),
            ("1", "8", 10, "0.125"),
            ("-7", "2", 10, "-3.5"),
            ("7.5", "2.5", 10, "3"),
            ("1", "2", 16, "0.8"),
            ("144", "12", 10, "12"),
            ("0.5", "0.25", 10, "2"),
        ],
    )
    def test_divide(self, a, b, radix, expected):
        assert str(divide(parse(a, radix), parse(b, radix))) == expected

    def test_one_third_truncated(self):
        result = divide(parse("1", 10, 10), parse("3", 10, 10))

        assert str(result) == "0.3333333333"

    def test_quotient_bounded_by_dividend(self):
        """Test: Quotient fraction digits never exceed the dividend's bound"""
        result = divide(parse("2", 10, 7), parse("3"))

        assert str(result) == "0.6666666"
        assert result.fraction_length <= 7

    def test_zero_bound(self):
        assert str(divide(parse("1", 10, 0), parse("3", 10, 0))) == "0"

    def test_zero_dividend(self):
        value = parse("0")

        assert divide(value, parse("5")) is value

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            divide(parse("1"), parse("0.000"))

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            divide(parse("1"), zero(16))


class TestIntegerDivision:
    """Tests for div_rem() and modulo()"""

    @pytest.mark.parametrize(
        "a,b,radix,quotient,remainder",
        [
            ("17", "5", 10, "3", "2"),
            ("-17", "5", 10, "-3", "-2"),
            ("17", "-5", 10, "-3", "2"),
            ("4", "7", 10, "0", "4"),
            ("FF", "10", 16, "F", "F"),
        ],
    )
    def test_div_rem(self, a, b, radix, quotient, remainder):
        q, r = div_rem(parse(a, radix), parse(b, radix))

        assert str(q) == quotient
        assert str(r) == remainder

    def test_quotient_keeps_bound(self):
        q, _ = div_rem(parse("17", 10, 4), parse("5", 10, 6))

        assert q.max_fraction_length == 6

    def test_fractional_operand_rejected(self):
        with pytest.raises(InvalidOperationError):
            div_rem(parse("7.5"), parse("2"))
        with pytest.raises(InvalidOperationError):
            modulo(parse("7"), parse("0.5"))

    def test_remainder_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            modulo(parse("7"), parse("0"))

    def test_modulo(self):
        assert str(modulo(parse("17"), parse("5"))) == "2"
        assert str(modulo(parse("10"), parse("5"))) == "0"


class TestIncrementDecrement:
    """Tests for increment(), decrement() and negate()"""

    @pytest.mark.parametrize(
        "text,radix,expected",
        [("9", 10, "10"), ("-1", 10, "0"), ("F", 16, "10"), ("0.5", 10, "1.5")],
    )
    def test_increment(self, text, radix, expected):
        assert str(increment(parse(text, radix))) == expected

    @pytest.mark.parametrize(
        "text,radix,expected",
        [("0", 10, "-1"), ("10", 2, "1"), ("1", 10, "0")],
    )
    def test_decrement(self, text, radix, expected):
        assert str(decrement(parse(text, radix))) == expected

    def test_negate(self):
        value = parse("4.2")

        assert str(negate(value)) == "-4.2"
        assert negate(negate(value)) == value

    def test_negate_zero(self):
        assert negate(parse("0")).is_negative is False
