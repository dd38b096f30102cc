"""
Arithmetic Operations for SFloat
Digit-by-digit algorithms on NumberValues

- Addition with carry propagation
- Subtraction with borrow propagation through an offset buffer
- Long multiplication (single-digit partial products, shifted and summed)
- Long division with truncation at the dividend's fraction bound
- Integer division with remainder, modulo, increment/decrement

All functions are pure: operands are never modified, results are canonical.
When operand radices differ, the right operand is converted to the radix of
the left one. Results carry the larger of both fraction bounds.
"""

from dataclasses import replace
from typing import List, Tuple

from component_1_number_value import (
    NumberValue,
    digit_char,
    digit_value,
    normalize,
    one,
    zero,
)
from component_2_digit_accessor import (
    absolute,
    digit_at,
    fraction_digits,
    integer_digits,
    move_float_point,
)
from component_3_comparison_engine import compare_magnitudes, equals
from component_7_logging_config import get_logger
from sfloat_exceptions import DivisionByZeroError, InvalidOperationError

logger = get_logger(__name__)


# ============================================================================
# Helpers
# ============================================================================


def _bound(a: NumberValue, b: NumberValue) -> int:
    return max(a.max_fraction_length, b.max_fraction_length)


def _align(a: NumberValue, b: NumberValue) -> NumberValue:
    """b expressed in the radix of a."""
    if b.radix == a.radix:
        return b

    # Import here to avoid circular dependency
    from component_5_radix_converter import to_radix

    logger.debug("Aligning radix %d -> %d", b.radix, a.radix)
    return to_radix(b, a.radix)


def _add_magnitudes(a: NumberValue, b: NumberValue, bound: int) -> NumberValue:
    radix = a.radix
    fraction_len = max(a.fraction_length, b.fraction_length)
    integer_len = max(a.integer_length, b.integer_length)

    out: List[str] = []
    carry = 0
    for index in range(-fraction_len, integer_len):
        total = digit_value(digit_at(a, index)) + digit_value(digit_at(b, index)) + carry
        carry, digit = divmod(total, radix)
        out.append(digit_char(digit))

    if carry:
        out.append(digit_char(carry))
        integer_len += 1

    return normalize("".join(reversed(out)), integer_len, radix, False, bound)


def _subtract_magnitudes(a: NumberValue, b: NumberValue, bound: int) -> NumberValue:
    """|a| - |b| for |a| >= |b|."""
    radix = a.radix
    fraction_len = max(a.fraction_length, b.fraction_length)
    integer_len = max(a.integer_length, b.integer_length)

    # Minuend digits, least significant first, slot = index + fraction_len
    buffer = [
        digit_value(digit_at(a, index)) for index in range(-fraction_len, integer_len)
    ]

    out: List[str] = []
    for index in range(-fraction_len, integer_len):
        slot = index + fraction_len
        digit = buffer[slot] - digit_value(digit_at(b, index))
        if digit < 0:
            digit += radix
            buffer[slot + 1] -= 1
        out.append(digit_char(digit))

    return normalize("".join(reversed(out)), integer_len, radix, False, bound)


def _multiply_by_digit(run: str, factor: int, radix: int) -> str:
    """Digit string run * factor (single digit), most significant first."""
    out: List[str] = []
    carry = 0
    for char in reversed(run):
        carry, digit = divmod(digit_value(char) * factor + carry, radix)
        out.append(digit_char(digit))
    if carry:
        out.append(digit_char(carry))
    return "".join(reversed(out))


# ============================================================================
# Operations
# ============================================================================


def negate(value: NumberValue) -> NumberValue:
    """Flip the sign; zero stays non-negative."""
    if value.is_zero:
        return value
    return replace(value, is_negative=not value.is_negative)


def add(a: NumberValue, b: NumberValue) -> NumberValue:
    if a.is_zero:
        return b
    if b.is_zero:
        return a

    b = _align(a, b)

    if a.is_negative and not b.is_negative:
        return subtract(b, negate(a))
    if not a.is_negative and b.is_negative:
        return subtract(a, negate(b))
    if a.is_negative and b.is_negative:
        return negate(add(negate(a), negate(b)))

    return _add_magnitudes(a, b, _bound(a, b))


def subtract(a: NumberValue, b: NumberValue) -> NumberValue:
    if a.is_zero:
        return negate(b)
    if b.is_zero:
        return a

    b = _align(a, b)
    bound = _bound(a, b)

    if equals(a, b):
        return zero(a.radix, bound)

    if a.is_negative and not b.is_negative:
        return negate(add(negate(a), b))
    if not a.is_negative and b.is_negative:
        return add(a, negate(b))
    if a.is_negative and b.is_negative:
        return subtract(negate(b), negate(a))

    if compare_magnitudes(a, b) < 0:
        return negate(_subtract_magnitudes(b, a, bound))
    return _subtract_magnitudes(a, b, bound)


def multiply(a: NumberValue, b: NumberValue) -> NumberValue:
    bound = _bound(a, b)
    if a.is_zero or b.is_zero:
        return zero(a.radix, bound)

    b = _align(a, b)
    radix = a.radix

    a_run = integer_digits(a) + fraction_digits(a)
    b_run = integer_digits(b) + fraction_digits(b)
    if len(a_run) < len(b_run):
        multiplicand, multiplier = b_run, a_run
    else:
        multiplicand, multiplier = a_run, b_run

    total = zero(radix, bound)
    for shift, char in enumerate(reversed(multiplier)):
        factor = digit_value(char)
        if factor == 0:
            continue
        partial = _multiply_by_digit(multiplicand, factor, radix) + "0" * shift
        total = add(total, normalize(partial, len(partial), radix, False, bound))

    result = move_float_point(total, -(a.fraction_length + b.fraction_length))
    if a.is_negative != b.is_negative:
        result = negate(result)
    return result


def multiply_int(value: NumberValue, factor: int) -> NumberValue:
    """Multiply by a Python integer."""
    if isinstance(factor, bool) or not isinstance(factor, int):
        raise TypeError(f"multiply_int() expects int, got {type(factor).__name__}")
    if factor == 0:
        return zero(value.radix, value.max_fraction_length)
    if factor == 1:
        return value

    # Import here to avoid circular dependency
    from component_1_number_parser import parse

    return multiply(value, parse(str(factor), 10, value.max_fraction_length))


def divide(dividend: NumberValue, divisor: NumberValue) -> NumberValue:
    """
    Long division.

    Both operands are scaled to integers, then one dividend digit at a time
    (followed by zeros once the dividend is exhausted) is brought down into
    the working remainder. Each quotient digit counts the whole divisors
    removed by repeated subtraction.

    Terminates when the dividend is exhausted and the remainder is zero, or
    when the quotient has max_fraction_length (of the dividend) digits after
    the point.

    Raises:
        DivisionByZeroError: divisor is zero
    """
    if divisor.is_zero:
        logger.warning("Division by zero", extra={"dividend": str(dividend)})
        raise DivisionByZeroError(
            "Division by zero.",
            context={"dividend": str(dividend), "radix": dividend.radix},
        )
    if dividend.is_zero:
        return dividend

    divisor = _align(dividend, divisor)
    radix = dividend.radix
    limit = dividend.max_fraction_length
    bound = _bound(dividend, divisor)

    scale = max(dividend.fraction_length, divisor.fraction_length)
    scaled_dividend = integer_digits(move_float_point(absolute(dividend), scale))
    scaled_divisor = move_float_point(absolute(divisor), scale)
    integer_len = len(scaled_dividend)

    remainder = zero(radix, limit)
    quotient: List[str] = []
    position = 0

    while True:
        brought_down = (
            scaled_dividend[position] if position < integer_len else "0"
        )
        remainder = normalize(
            remainder.digits + brought_down,
            remainder.point_position + 1,
            radix,
            False,
            limit,
        )

        count = 0
        while compare_magnitudes(remainder, scaled_divisor) >= 0:
            remainder = _subtract_magnitudes(remainder, scaled_divisor, limit)
            count += 1
        quotient.append(digit_char(count))
        position += 1

        if position >= integer_len and remainder.is_zero:
            reason = "exact"
            break
        if position - integer_len >= limit:
            reason = "fraction bound reached"
            break

    logger.debug(
        "Division finished",
        extra={"reason": reason, "quotient_digits": len(quotient), "radix": radix},
    )

    return normalize(
        "".join(quotient),
        integer_len,
        radix,
        dividend.is_negative != divisor.is_negative,
        bound,
    )


def div_rem(a: NumberValue, b: NumberValue) -> Tuple[NumberValue, NumberValue]:
    """
    Truncating integer division.

    Returns:
        (quotient, remainder) with a == quotient * b + remainder, the
        remainder taking the sign of a

    Raises:
        InvalidOperationError: an operand has fractional digits
        DivisionByZeroError: b is zero
    """
    if a.is_fractional or b.is_fractional:
        logger.warning(
            "Integer division on fractional operands",
            extra={"dividend": str(a), "divisor": str(b)},
        )
        raise InvalidOperationError(
            "Division with remainder is only defined for integer values.",
            operation="div_rem",
            context={"dividend": str(a), "divisor": str(b)},
        )

    bound = _bound(a, b)
    raw = divide(replace(a, max_fraction_length=0), b)
    quotient = normalize(
        integer_digits(raw), raw.point_position, raw.radix, raw.is_negative, bound
    )
    remainder = subtract(a, multiply(quotient, b))
    return quotient, remainder


def modulo(a: NumberValue, b: NumberValue) -> NumberValue:
    """Remainder of truncating integer division (sign of a)."""
    return div_rem(a, b)[1]


def increment(value: NumberValue) -> NumberValue:
    return add(value, one(value.radix, value.max_fraction_length))


def decrement(value: NumberValue) -> NumberValue:
    return subtract(value, one(value.radix, value.max_fraction_length))
