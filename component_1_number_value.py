"""
NumberValue for SFloat
Immutable, radix-parameterized digit-string number with canonical normalization

A value is a magnitude digit string (most significant first), the number of
digits belonging to the integer part, a sign and a per-value bound on the
number of retained fractional digits. Every operation returns a new value;
nothing is mutated in place.

Example:
    digits="57342", point_position=4  ->  5734.2
"""

import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from common.constants import (
    CACHE_NAME_RADIX_CONSTANTS,
    DEFAULT_MAX_FRACTION_LENGTH,
    DIGIT_ALPHABET,
    MAX_FRACTION_LENGTH_CEILING,
    MAX_RADIX,
    MIN_RADIX,
)
from component_7_logging_config import get_logger
from infrastructure.cache_manager import get_cache_manager
from sfloat_config import get_config
from sfloat_exceptions import (
    FractionLengthOutOfRangeError,
    InvalidDigitError,
    RadixOutOfRangeError,
)

logger = get_logger(__name__)

_constants_lock = threading.Lock()


# ============================================================================
# Digit alphabet
# ============================================================================


def digit_value(char: str) -> int:
    """Value of a digit character (case-insensitive), -1 if unrecognized."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    return -1


def digit_char(value: int) -> str:
    """Uppercase digit character for a value in [0, 35]."""
    if not 0 <= value < len(DIGIT_ALPHABET):
        raise ValueError(f"Digit value out of range: {value}")
    return DIGIT_ALPHABET[value]


def validate_radix(radix) -> int:
    """Raise RadixOutOfRangeError unless radix is an int in [2, 36]."""
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise RadixOutOfRangeError("The radix must be an integer.", radix=radix)
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise RadixOutOfRangeError(
            f"The radix must be in the range of {MIN_RADIX} to {MAX_RADIX}.",
            radix=radix,
        )
    return radix


def resolve_fraction_length(max_fraction_length: Optional[int]) -> int:
    """Configured default for None, validated bound otherwise."""
    if max_fraction_length is None:
        return get_config().default_max_fraction_length
    if isinstance(max_fraction_length, bool) or not isinstance(
        max_fraction_length, int
    ):
        raise FractionLengthOutOfRangeError(
            "The fraction length bound must be an integer.",
            context={"max_fraction_length": max_fraction_length},
        )
    if not 0 <= max_fraction_length <= MAX_FRACTION_LENGTH_CEILING:
        raise FractionLengthOutOfRangeError(
            f"The fraction length bound must be in [0, {MAX_FRACTION_LENGTH_CEILING}].",
            context={"max_fraction_length": max_fraction_length},
        )
    return max_fraction_length


# ============================================================================
# NumberValue
# ============================================================================


@dataclass(frozen=True, eq=False)
class NumberValue:
    """
    Signed number in a fixed radix.

    Attributes:
        radix: Base of the digits (2-36)
        digits: Magnitude digits, most significant first, uppercase
        point_position: Number of digits belonging to the integer part
        is_negative: Sign (always False for zero)
        max_fraction_length: Bound on retained fractional digits
    """

    radix: int
    digits: str
    point_position: int
    is_negative: bool = False
    max_fraction_length: int = DEFAULT_MAX_FRACTION_LENGTH

    def __post_init__(self):
        validate_radix(self.radix)
        resolve_fraction_length(self.max_fraction_length)
        self._validate_canonical()

    def _validate_canonical(self):
        """
        Reject digit buffers that normalize() would never produce.

        Raises:
            InvalidDigitError: non-canonical digits, point or sign
        """
        context = {"radix": self.radix, "digits": self.digits}

        if not isinstance(self.digits, str) or not self.digits:
            raise InvalidDigitError("The digit string must not be empty.", context=context)

        for position, char in enumerate(self.digits):
            value = digit_value(char)
            if not 0 <= value < self.radix or char != DIGIT_ALPHABET[value]:
                raise InvalidDigitError(
                    f"'{char}' is not an uppercase digit of radix {self.radix}.",
                    character=char,
                    position=position,
                    context=context,
                )

        if not 1 <= self.point_position <= len(self.digits):
            raise InvalidDigitError(
                "The point must lie after at least one integer digit.",
                position=self.point_position,
                context=context,
            )
        if self.point_position > 1 and self.digits[0] == "0":
            raise InvalidDigitError(
                "The integer part has leading zeros.", position=0, context=context
            )
        if len(self.digits) > self.point_position and self.digits[-1] == "0":
            raise InvalidDigitError(
                "The fraction part has trailing zeros.",
                position=len(self.digits) - 1,
                context=context,
            )
        if len(self.digits) - self.point_position > self.max_fraction_length:
            raise InvalidDigitError(
                "The fraction part exceeds max_fraction_length.",
                position=self.point_position + self.max_fraction_length,
                context={**context, "max_fraction_length": self.max_fraction_length},
            )
        if self.is_negative and self.is_zero:
            raise InvalidDigitError("Zero cannot be negative.", context=context)

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------

    @property
    def integer_length(self) -> int:
        return self.point_position

    @property
    def fraction_length(self) -> int:
        return min(len(self.digits) - self.point_position, self.max_fraction_length)

    @property
    def is_zero(self) -> bool:
        return not self.digits.strip("0")

    @property
    def is_fractional(self) -> bool:
        return self.fraction_length > 0

    @property
    def is_integer(self) -> bool:
        return not self.is_fractional

    @property
    def integer_part(self) -> "NumberValue":
        """Integer part, truncated toward zero."""
        from component_2_digit_accessor import integer_part

        return integer_part(self)

    @property
    def fraction_part(self) -> "NumberValue":
        """Fractional digits as a non-negative value below one."""
        from component_2_digit_accessor import fraction_part

        return fraction_part(self)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        """Canonical text: [-]<integer digits>[.<fraction digits>]"""
        sign = "-" if self.is_negative else ""
        integer = self.digits[: self.point_position]
        fraction = self.digits[
            self.point_position : self.point_position + self.fraction_length
        ]
        if not fraction:
            return f"{sign}{integer}"
        return f"{sign}{integer}.{fraction}"

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"SFloat('{self.to_text()}', radix={self.radix})"

    # ------------------------------------------------------------------
    # Digit access (see component_2_digit_accessor)
    # ------------------------------------------------------------------

    def digit_at(self, index: int) -> str:
        from component_2_digit_accessor import digit_at

        return digit_at(self, index)

    def with_digit_at(self, index: int, value: int) -> "NumberValue":
        from component_2_digit_accessor import with_digit_at

        return with_digit_at(self, index, value)

    def extract_digit_at(self, index: int) -> "NumberValue":
        from component_2_digit_accessor import extract_digit_at

        return extract_digit_at(self, index)

    def move_float_point(self, shift: int) -> "NumberValue":
        from component_2_digit_accessor import move_float_point

        return move_float_point(self, shift)

    # ------------------------------------------------------------------
    # Conversion (see component_5_radix_converter, component_6_scalar_cast)
    # ------------------------------------------------------------------

    def to_decimal(self) -> "NumberValue":
        from component_5_radix_converter import to_decimal

        return to_decimal(self)

    def to_radix(self, radix: int) -> "NumberValue":
        from component_5_radix_converter import to_radix

        return to_radix(self, radix)

    def to_binary(self) -> "NumberValue":
        return self.to_radix(2)

    def to_octal(self) -> "NumberValue":
        return self.to_radix(8)

    def to_hexadecimal(self) -> "NumberValue":
        return self.to_radix(16)

    def to_machine_int(self, bits: Optional[int] = None) -> int:
        from component_6_scalar_cast import to_machine_int

        return to_machine_int(self, bits)

    def __int__(self) -> int:
        return self.to_machine_int()

    def __bool__(self) -> bool:
        return not self.is_zero

    # ------------------------------------------------------------------
    # Arithmetic operators (see component_4_arithmetic_operations)
    # ------------------------------------------------------------------

    def _coerce(self, other) -> Optional["NumberValue"]:
        from component_1_number_parser import coerce

        return coerce(other, self)

    def __neg__(self) -> "NumberValue":
        from component_4_arithmetic_operations import negate

        return negate(self)

    def __pos__(self) -> "NumberValue":
        return self

    def __abs__(self) -> "NumberValue":
        from component_2_digit_accessor import absolute

        return absolute(self)

    def __add__(self, other):
        from component_4_arithmetic_operations import add

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        from component_4_arithmetic_operations import add

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        from component_4_arithmetic_operations import subtract

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        from component_4_arithmetic_operations import subtract

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        from component_4_arithmetic_operations import multiply, multiply_int

        if isinstance(other, int) and not isinstance(other, bool):
            return multiply_int(self, other)
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        from component_4_arithmetic_operations import multiply, multiply_int

        if isinstance(other, int) and not isinstance(other, bool):
            return multiply_int(self, other)
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other):
        from component_4_arithmetic_operations import divide

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        from component_4_arithmetic_operations import divide

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return divide(other, self)

    def __floordiv__(self, other):
        result = self.__divmod__(other)
        if result is NotImplemented:
            return result
        return result[0]

    def __rfloordiv__(self, other):
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return result
        return result[0]

    def __mod__(self, other):
        from component_4_arithmetic_operations import modulo

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return modulo(self, other)

    def __rmod__(self, other):
        from component_4_arithmetic_operations import modulo

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return modulo(other, self)

    def __divmod__(self, other) -> Tuple["NumberValue", "NumberValue"]:
        from component_4_arithmetic_operations import div_rem

        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return div_rem(self, coerced)

    def __rdivmod__(self, other):
        from component_4_arithmetic_operations import div_rem

        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return div_rem(other, self)

    # ------------------------------------------------------------------
    # Comparison operators (see component_3_comparison_engine)
    # ------------------------------------------------------------------

    def _comparable(self, other) -> Optional["NumberValue"]:
        # Only NumberValue and int hash consistently with equality
        if isinstance(other, bool) or not isinstance(other, (NumberValue, int)):
            return None
        return self._coerce(other)

    def __eq__(self, other):
        from component_3_comparison_engine import equals

        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return equals(self, other)

    def __lt__(self, other):
        from component_3_comparison_engine import less_than

        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return less_than(self, other)

    def __le__(self, other):
        from component_3_comparison_engine import less_equal

        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return less_equal(self, other)

    def __gt__(self, other):
        from component_3_comparison_engine import greater_than

        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return greater_than(self, other)

    def __ge__(self, other):
        from component_3_comparison_engine import greater_equal

        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return greater_equal(self, other)

    def __hash__(self) -> int:
        # Equal values share sign and integer magnitude in every radix
        magnitude = int(self.digits[: self.point_position] or "0", self.radix)
        signed = -magnitude if self.is_negative else magnitude
        if self.is_fractional:
            return hash((signed, self.is_negative, "fractional"))
        return hash(signed)


SFloat = NumberValue


# ============================================================================
# Factory
# ============================================================================


def normalize(
    digits: str,
    point_position: int,
    radix: int,
    is_negative: bool = False,
    max_fraction_length: Optional[int] = None,
) -> NumberValue:
    """
    Assemble a canonical value from a raw digit buffer.

    The point may lie outside the buffer; the missing side is zero-padded.
    Leading integer zeros and trailing fraction zeros are stripped, the
    fraction is truncated to the bound and zero is made non-negative.
    """
    bound = resolve_fraction_length(max_fraction_length)
    digits = digits.upper()

    if point_position < 0:
        digits = "0" * -point_position + digits
        point_position = 0
    elif point_position > len(digits):
        digits += "0" * (point_position - len(digits))

    integer = digits[:point_position].lstrip("0") or "0"
    fraction = digits[point_position : point_position + bound].rstrip("0")

    if integer == "0" and not fraction:
        is_negative = False

    return NumberValue(
        radix=radix,
        digits=integer + fraction,
        point_position=len(integer),
        is_negative=is_negative,
        max_fraction_length=bound,
    )


def _constants_cache():
    cache_mgr = get_cache_manager()
    with _constants_lock:
        if not cache_mgr.is_registered(CACHE_NAME_RADIX_CONSTANTS):
            cache_mgr.register_cache(
                CACHE_NAME_RADIX_CONSTANTS,
                maxsize=get_config().constants_cache_size,
            )
    return cache_mgr


def _radix_constant(
    digit: str, radix: int, max_fraction_length: Optional[int]
) -> NumberValue:
    validate_radix(radix)
    bound = resolve_fraction_length(max_fraction_length)
    key = (digit, radix, bound)

    cache_mgr = _constants_cache()
    value = cache_mgr.get(CACHE_NAME_RADIX_CONSTANTS, key)
    if value is None:
        value = normalize(digit, 1, radix, False, bound)
        cache_mgr.set(CACHE_NAME_RADIX_CONSTANTS, key, value)
        logger.debug("Radix constant created", extra={"digit": digit, "radix": radix})
    return value


def zero(radix: int = 10, max_fraction_length: Optional[int] = None) -> NumberValue:
    """Zero in the given radix."""
    return _radix_constant("0", radix, max_fraction_length)


def one(radix: int = 10, max_fraction_length: Optional[int] = None) -> NumberValue:
    """One in the given radix."""
    return _radix_constant("1", radix, max_fraction_length)
