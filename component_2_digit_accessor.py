"""
Digit Accessor for SFloat
Positional digit read/write and digit-run extraction

Positions are relative to the radix point: index 0 is the units digit,
positive indices move toward more significant digits and negative indices
address fractional digits (-1 is the first digit after the point).

    value 5734.2 (radix 10)
    index   3 2 1 0 . -1
    digit   5 7 3 4 .  2
"""

from dataclasses import replace

from component_1_number_value import NumberValue, digit_char, normalize
from sfloat_exceptions import InvalidDigitError


def _buffer_index(value: NumberValue, index: int) -> int:
    # Same formula for integer and fraction positions
    return value.point_position - 1 - index


def integer_digits(value: NumberValue) -> str:
    return value.digits[: value.point_position]


def fraction_digits(value: NumberValue) -> str:
    start = value.point_position
    return value.digits[start : start + value.fraction_length]


def digit_at_abs(value: NumberValue, position: int) -> str:
    """Digit at an absolute index into the digit string, '0' outside of it."""
    if 0 <= position < value.point_position + value.fraction_length:
        return value.digits[position]
    return "0"


def digit_at(value: NumberValue, index: int) -> str:
    """
    Digit character at a point-relative index.

    Positions outside the stored representation read as '0'.
    """
    return digit_at_abs(value, _buffer_index(value, index))


def with_digit_at(value: NumberValue, index: int, digit: int) -> NumberValue:
    """
    Return a copy of value with the digit at index replaced.

    The digit buffer grows with zeros when index lies outside the current
    representation; the result is re-normalized.

    Raises:
        InvalidDigitError: digit is not a value in [0, radix)
    """
    if isinstance(digit, bool) or not isinstance(digit, int) or not (
        0 <= digit < value.radix
    ):
        raise InvalidDigitError(
            f"Digit value {digit!r} is out of range for radix {value.radix}.",
            character=digit,
            position=index,
            context={"radix": value.radix},
        )

    digits = integer_digits(value) + fraction_digits(value)
    point_position = value.point_position
    position = _buffer_index(value, index)

    if position < 0:
        digits = "0" * -position + digits
        point_position += -position
        position = 0
    elif position >= len(digits):
        digits += "0" * (position - len(digits) + 1)

    digits = digits[:position] + digit_char(digit) + digits[position + 1 :]
    return normalize(
        digits, point_position, value.radix, value.is_negative, value.max_fraction_length
    )


def extract_digit_at(value: NumberValue, index: int) -> NumberValue:
    """
    Value contributed by a single position: digit_at(index) * radix**index.

    Always non-negative.

    Example:
        13, 1      -> 10
        13.089, -2 -> 0.08
    """
    digit = digit_at(value, index)
    if index >= 0:
        digits = digit + "0" * index
        point_position = len(digits)
    else:
        digits = "0" * (-index - 1) + digit
        point_position = 0
    return normalize(digits, point_position, value.radix, False, value.max_fraction_length)


def move_float_point(value: NumberValue, shift: int) -> NumberValue:
    """
    Multiply by radix**shift by relocating the radix point.

    Example:
        13, 1        -> 130
        -13.089, -2  -> -0.13089
    """
    return normalize(
        value.digits,
        value.point_position + shift,
        value.radix,
        value.is_negative,
        value.max_fraction_length,
    )


def integer_part(value: NumberValue) -> NumberValue:
    """Integer part, truncated toward zero (sign kept)."""
    return normalize(
        integer_digits(value),
        value.point_position,
        value.radix,
        value.is_negative,
        value.max_fraction_length,
    )


def fraction_part(value: NumberValue) -> NumberValue:
    """Fractional digits as a non-negative value in [0, 1)."""
    return normalize(
        fraction_digits(value), 0, value.radix, False, value.max_fraction_length
    )


def absolute(value: NumberValue) -> NumberValue:
    if not value.is_negative:
        return value
    return replace(value, is_negative=False)
