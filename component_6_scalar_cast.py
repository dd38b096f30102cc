"""
Scalar Cast for SFloat
Interop with fixed-width signed machine integers

The width comes from SFloatConfig.machine_int_bits (32 by default) unless
given explicitly. Range for n bits: [-2**(n-1), 2**(n-1) - 1].
"""

from typing import Optional

from component_1_number_parser import parse
from component_1_number_value import NumberValue, digit_value
from component_2_digit_accessor import integer_digits
from component_5_radix_converter import to_radix
from component_7_logging_config import get_logger
from sfloat_config import get_config
from sfloat_exceptions import IntegerOverflowError

logger = get_logger(__name__)


def _resolve_bits(bits: Optional[int]) -> int:
    if bits is None:
        return get_config().machine_int_bits
    if isinstance(bits, bool) or not isinstance(bits, int) or bits < 2:
        raise ValueError(f"bits must be an integer >= 2, got {bits!r}")
    return bits


def to_machine_int(value: NumberValue, bits: Optional[int] = None) -> int:
    """
    Integer part of value as a signed machine integer (fraction dropped).

    Raises:
        IntegerOverflowError: the integer part does not fit into `bits` bits
    """
    bits = _resolve_bits(bits)
    # One more unit of magnitude is available below zero
    limit = 2 ** (bits - 1) - (0 if value.is_negative else 1)

    result = 0
    for char in integer_digits(value):
        result = result * value.radix + digit_value(char)
        if result > limit:
            logger.warning(
                "Machine integer overflow",
                extra={"value": str(value), "radix": value.radix, "bits": bits},
            )
            raise IntegerOverflowError(
                f"{value} (radix {value.radix}) does not fit into a {bits}-bit integer.",
                bits=bits,
                context={"value": str(value), "radix": value.radix},
            )

    return -result if value.is_negative else result


def from_machine_int(
    number: int,
    radix: int = 10,
    max_fraction_length: Optional[int] = None,
    bits: Optional[int] = None,
) -> NumberValue:
    """
    NumberValue for a machine integer, expressed in `radix`.

    Raises:
        TypeError: number is not an int
        IntegerOverflowError: number is outside the signed `bits` range
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"from_machine_int() expects int, got {type(number).__name__}")

    bits = _resolve_bits(bits)
    if not -(2 ** (bits - 1)) <= number <= 2 ** (bits - 1) - 1:
        raise IntegerOverflowError(
            f"{number} does not fit into a {bits}-bit integer.",
            bits=bits,
            context={"value": number},
        )

    return to_radix(parse(str(number), 10, max_fraction_length), radix)
