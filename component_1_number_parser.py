"""
Number Parser for SFloat
Builds canonical NumberValues from text and coerces Python operands

Accepted text:
    [-]digits[.digits]   e.g. "-127.35" (radix 8), "ff.33" (radix 16), ".5"

Letters are case-insensitive, surrounding whitespace is ignored.
"""

from decimal import Decimal
from typing import Optional

from component_1_number_value import (
    NumberValue,
    digit_value,
    normalize,
    resolve_fraction_length,
    validate_radix,
)
from component_7_logging_config import get_logger
from sfloat_exceptions import InvalidDigitError, MultipleRadixPointsError

logger = get_logger(__name__)

RADIX_POINT = "."
MINUS_SIGN = "-"


def parse(
    text: str, radix: int = 10, max_fraction_length: Optional[int] = None
) -> NumberValue:
    """
    Parse text into a canonical NumberValue.

    Args:
        text: Number text, optional leading '-', at most one '.'
        radix: Radix of the digits (2-36)
        max_fraction_length: Fraction bound, None for the configured default

    Returns:
        Normalized NumberValue

    Raises:
        RadixOutOfRangeError: radix outside [2, 36]
        FractionLengthOutOfRangeError: bound outside the allowed range
        MultipleRadixPointsError: more than one '.'
        InvalidDigitError: unrecognized digit, digit >= radix, or no digits at all
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")

    validate_radix(radix)
    bound = resolve_fraction_length(max_fraction_length)

    body = text.strip()
    is_negative = body.startswith(MINUS_SIGN)
    offset = 1 if is_negative else 0

    integer_digits = []
    fraction_digits = []
    seen_point = False
    digit_count = 0

    for position in range(offset, len(body)):
        char = body[position]

        if char == RADIX_POINT:
            if seen_point:
                logger.warning(
                    "Second radix point rejected",
                    extra={"text": text, "position": position},
                )
                raise MultipleRadixPointsError(
                    "The number contains more than one radix point.",
                    context={"text": text, "position": position},
                )
            seen_point = True
            continue

        value = digit_value(char)
        if value < 0 or value >= radix:
            logger.warning(
                "Invalid digit rejected",
                extra={"character": char, "position": position, "radix": radix},
            )
            raise InvalidDigitError(
                f"'{char}' is not a valid digit in radix {radix}.",
                character=char,
                position=position,
                context={"radix": radix, "text": text},
            )

        digit_count += 1
        if not seen_point:
            integer_digits.append(char)
        elif len(fraction_digits) < bound:
            fraction_digits.append(char)

    if digit_count == 0:
        raise InvalidDigitError(
            "The text contains no digits.",
            context={"radix": radix, "text": text},
        )

    return normalize(
        "".join(integer_digits) + "".join(fraction_digits),
        len(integer_digits),
        radix,
        is_negative,
        bound,
    )


from_text = parse


def coerce(
    value, like: NumberValue, allow_text: bool = True
) -> Optional[NumberValue]:
    """
    Convert an operator operand into a NumberValue.

    int, Decimal and (optionally) str are read as radix 10 with the fraction
    bound of `like`. Returns None for unsupported types so that operators can
    answer NotImplemented.
    """
    if isinstance(value, NumberValue):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return parse(str(value), 10, like.max_fraction_length)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidDigitError(
                "Only finite decimals can be converted.",
                context={"value": str(value)},
            )
        return parse(format(value, "f"), 10, like.max_fraction_length)
    if allow_text and isinstance(value, str):
        return parse(value, 10, like.max_fraction_length)
    return None
