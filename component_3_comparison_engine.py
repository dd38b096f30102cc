"""
Comparison Engine for SFloat
Numeric equality and ordering across radices (<, >, =, !=, <=, >=)
"""

from functools import cmp_to_key
from typing import Iterable, List

from component_1_number_value import NumberValue, digit_value
from component_2_digit_accessor import digit_at
from component_7_logging_config import get_logger
from sfloat_exceptions import InvalidOperationError

logger = get_logger(__name__)


def _decimal_images(a: NumberValue, b: NumberValue):
    from component_5_radix_converter import to_decimal

    return to_decimal(a), to_decimal(b)


def equals(a: NumberValue, b: NumberValue) -> bool:
    """
    Numeric equality.

    Zero equals zero regardless of radix or sign; values in different radices
    are compared through their decimal images.
    """
    if a.is_zero or b.is_zero:
        return a.is_zero and b.is_zero

    if a.is_negative != b.is_negative:
        return False

    if a.radix != b.radix:
        return equals(*_decimal_images(a, b))

    if (
        a.integer_length != b.integer_length
        or a.fraction_length != b.fraction_length
    ):
        return False

    return all(
        digit_at(a, index) == digit_at(b, index)
        for index in range(-a.fraction_length, a.integer_length)
    )


def not_equals(a: NumberValue, b: NumberValue) -> bool:
    return not equals(a, b)


def compare_magnitudes(a: NumberValue, b: NumberValue) -> int:
    """
    Compare absolute values.

    Walks from the most significant integer position down to the least
    significant fraction position; the first differing digit decides.

    Returns:
        -1 if |a| < |b|, 0 if equal, 1 if |a| > |b|
    """
    if a.radix != b.radix:
        a, b = _decimal_images(a, b)

    top = max(a.integer_length, b.integer_length) - 1
    bottom = -max(a.fraction_length, b.fraction_length)

    for index in range(top, bottom - 1, -1):
        left = digit_value(digit_at(a, index))
        right = digit_value(digit_at(b, index))
        if left != right:
            return -1 if left < right else 1
    return 0


def compare_values(a: NumberValue, b: NumberValue) -> int:
    """
    Signed three-way comparison.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if a.is_zero and b.is_zero:
        return 0
    if a.is_zero:
        return 1 if b.is_negative else -1
    if b.is_zero:
        return -1 if a.is_negative else 1

    if a.is_negative != b.is_negative:
        return -1 if a.is_negative else 1

    if a.radix != b.radix:
        return compare_values(*_decimal_images(a, b))

    result = compare_magnitudes(a, b)
    # Larger magnitude means smaller value below zero
    return -result if a.is_negative else result


def less_than(a: NumberValue, b: NumberValue) -> bool:
    return compare_values(a, b) < 0


def greater_than(a: NumberValue, b: NumberValue) -> bool:
    return compare_values(a, b) > 0


def less_equal(a: NumberValue, b: NumberValue) -> bool:
    return compare_values(a, b) <= 0


def greater_equal(a: NumberValue, b: NumberValue) -> bool:
    return compare_values(a, b) >= 0


class ComparisonEngine:
    """Engine for comparison operations on NumberValues"""

    def __init__(self):
        self._comparison_ops = {
            "<": less_than,
            ">": greater_than,
            "=": equals,
            "==": equals,
            "!=": not_equals,
            "<=": less_equal,
            ">=": greater_equal,
        }
        self._op_names = {
            "<": "less than",
            ">": "greater than",
            "=": "equal",
            "==": "equal",
            "!=": "not equal",
            "<=": "less or equal",
            ">=": "greater or equal",
        }

    @property
    def operators(self) -> List[str]:
        return list(self._comparison_ops)

    def compare(self, a: NumberValue, b: NumberValue, operator: str):
        """
        Compare two numbers

        Args:
            a, b: Numbers to compare
            operator: "<", ">", "=", "==", "!=", "<=", ">="

        Returns:
            ArithmeticResult with bool value
        """
        if operator not in self._comparison_ops:
            logger.warning("Unknown comparison operator", extra={"operator": operator})
            raise InvalidOperationError(
                f"Unknown comparison operator: {operator}", operation=operator
            )

        result_value = self._comparison_ops[operator](a, b)
        op_name = self._op_names[operator]

        logger.debug(
            "Comparison %s %s %s -> %s", a, operator, b, result_value
        )

        # Import here to avoid circular dependency
        from component_4_arithmetic_engine import ArithmeticResult

        return ArithmeticResult(
            value=result_value,
            operation="comparison",
            metadata={
                "operator": operator,
                "op_name": op_name,
                "operands": [str(a), str(b)],
            },
        )

    def sort_values(
        self, values: Iterable[NumberValue], reverse: bool = False
    ) -> List[NumberValue]:
        """Sort values of any radix by numeric value (stable)."""
        return sorted(values, key=cmp_to_key(compare_values), reverse=reverse)

    def max_value(self, *values: NumberValue) -> NumberValue:
        if not values:
            raise InvalidOperationError("max_value() needs at least one value", operation="max")
        largest = values[0]
        for value in values[1:]:
            if compare_values(value, largest) > 0:
                largest = value
        return largest

    def min_value(self, *values: NumberValue) -> NumberValue:
        if not values:
            raise InvalidOperationError("min_value() needs at least one value", operation="min")
        smallest = values[0]
        for value in values[1:]:
            if compare_values(value, smallest) < 0:
                smallest = value
        return smallest
