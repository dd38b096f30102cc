"""
Radix Converter for SFloat
Conversion between numeral bases 2-36

Paths:
- to_decimal: Horner's method for the integer digits and for the fraction
  digits, the latter divided once by radix**n
- decimal_to_radix: repeated division for the integer part, repeated
  multiplication for the fraction part (bounded by max_fraction_length)
- power-of-two radices (2, 4, 8, 16, 32): direct regrouping of bits

Example:
    -127.35 (8) -> bits 001 010 111 . 011 101 -> -57.74 (16)
"""

from common.constants import DECIMAL_RADIX, POWER_OF_TWO_RADICES
from component_1_number_parser import parse
from component_1_number_value import (
    NumberValue,
    digit_char,
    digit_value,
    normalize,
    validate_radix,
    zero,
)
from component_2_digit_accessor import (
    absolute,
    fraction_digits,
    fraction_part,
    integer_digits,
    integer_part,
)
from component_4_arithmetic_operations import add, div_rem, divide, multiply, negate
from component_7_logging_config import get_logger

logger = get_logger(__name__)


def _small_int(value: NumberValue) -> int:
    """Integer part of a value known to be small (a single target digit)."""
    return int(integer_digits(value), value.radix)


def _decimal(number: int, bound: int) -> NumberValue:
    return parse(str(number), DECIMAL_RADIX, bound)


def _horner(digits: str, radix: NumberValue, bound: int) -> NumberValue:
    acc = zero(DECIMAL_RADIX, bound)
    for char in digits:
        acc = add(multiply(acc, radix), _decimal(digit_value(char), bound))
    return acc


def to_decimal(value: NumberValue) -> NumberValue:
    """
    Convert to radix 10 (identity for decimal values).

    The fraction digits d1..dn are read as one integer and divided once by
    radix**n, the closed form of the nested (d + acc) / radix evaluation.
    """
    if value.radix == DECIMAL_RADIX:
        return value

    bound = value.max_fraction_length
    radix = _decimal(value.radix, bound)

    result = _horner(integer_digits(value), radix, bound)

    digits = fraction_digits(value)
    if digits:
        numerator = _horner(digits, radix, bound)
        denominator = _decimal(value.radix ** len(digits), bound)
        result = add(result, divide(numerator, denominator))

    return negate(result) if value.is_negative else result


def decimal_to_radix(value: NumberValue, target: int) -> NumberValue:
    """
    Convert a decimal value to the target radix.

    Integer digits come from repeated division by the target (least
    significant first), fraction digits from repeated multiplication of the
    fractional remainder, stopping at zero or after max_fraction_length digits.
    """
    validate_radix(target)
    if value.radix != DECIMAL_RADIX:
        value = to_decimal(value)
    if target == DECIMAL_RADIX:
        return value

    bound = value.max_fraction_length
    base = _decimal(target, bound)

    quotient = integer_part(absolute(value))
    integer_out = []
    while True:
        quotient, remainder = div_rem(quotient, base)
        integer_out.append(digit_char(_small_int(remainder)))
        if quotient.is_zero:
            break
    integer_out.reverse()

    fraction = fraction_part(value)
    fraction_out = []
    while not fraction.is_zero and len(fraction_out) < bound:
        product = multiply(fraction, base)
        fraction_out.append(digit_char(_small_int(integer_part(product))))
        fraction = fraction_part(product)

    return normalize(
        "".join(integer_out) + "".join(fraction_out),
        len(integer_out),
        target,
        value.is_negative,
        bound,
    )


def _regroup_bits(value: NumberValue, target: int) -> NumberValue:
    source_width = value.radix.bit_length() - 1
    target_width = target.bit_length() - 1

    integer_bits = "".join(
        format(digit_value(char), f"0{source_width}b") for char in integer_digits(value)
    )
    fraction_bits = "".join(
        format(digit_value(char), f"0{source_width}b") for char in fraction_digits(value)
    )

    # Integer bits pad on the left, fraction bits on the right
    integer_bits = "0" * (-len(integer_bits) % target_width) + integer_bits
    fraction_bits += "0" * (-len(fraction_bits) % target_width)

    integer_out = "".join(
        digit_char(int(integer_bits[i : i + target_width], 2))
        for i in range(0, len(integer_bits), target_width)
    )
    fraction_out = "".join(
        digit_char(int(fraction_bits[i : i + target_width], 2))
        for i in range(0, len(fraction_bits), target_width)
    )

    return normalize(
        integer_out + fraction_out,
        len(integer_out),
        target,
        value.is_negative,
        value.max_fraction_length,
    )


def to_radix(value: NumberValue, target: int) -> NumberValue:
    """
    Convert to any radix in [2, 36].

    Raises:
        RadixOutOfRangeError: target outside [2, 36]
    """
    validate_radix(target)

    if value.radix == target:
        return value
    if value.is_zero:
        return zero(target, value.max_fraction_length)

    if value.radix in POWER_OF_TWO_RADICES and target in POWER_OF_TWO_RADICES:
        logger.debug("Bit regrouping %d -> %d", value.radix, target)
        return _regroup_bits(value, target)

    logger.debug("Conversion via decimal %d -> %d", value.radix, target)
    return decimal_to_radix(to_decimal(value), target)


def to_binary(value: NumberValue) -> NumberValue:
    return to_radix(value, 2)


def to_octal(value: NumberValue) -> NumberValue:
    return to_radix(value, 8)


def to_hexadecimal(value: NumberValue) -> NumberValue:
    return to_radix(value, 16)
