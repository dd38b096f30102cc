"""
sfloat.py

Public API of the SFloat library: arbitrary-precision numbers in any radix
from 2 to 36.

Usage:
    from sfloat import parse

    value = parse("FF.33", 16)
    print(value.to_decimal())          # 255.19921875
    print(parse("1") / parse("3"))     # 0.333... (128 fraction digits)
"""

from component_1_number_parser import coerce, from_text, parse
from component_1_number_value import NumberValue, SFloat, normalize, one, zero
from component_2_digit_accessor import (
    absolute,
    digit_at,
    digit_at_abs,
    extract_digit_at,
    fraction_digits,
    fraction_part,
    integer_digits,
    integer_part,
    move_float_point,
    with_digit_at,
)
from component_3_comparison_engine import (
    ComparisonEngine,
    compare_magnitudes,
    compare_values,
    equals,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    not_equals,
)
from component_4_arithmetic_engine import ArithmeticEngine, ArithmeticResult
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
from component_5_radix_converter import (
    decimal_to_radix,
    to_binary,
    to_decimal,
    to_hexadecimal,
    to_octal,
    to_radix,
)
from component_6_scalar_cast import from_machine_int, to_machine_int
from component_7_logging_config import get_logger, setup_logging
from sfloat_config import SFloatConfig, get_config, reset_config, set_config
from sfloat_exceptions import (
    ArithmeticException,
    ConfigurationException,
    DivisionByZeroError,
    FractionLengthOutOfRangeError,
    IntegerOverflowError,
    InvalidConfigError,
    InvalidDigitError,
    InvalidOperationError,
    MultipleRadixPointsError,
    NumberFormatException,
    RadixOutOfRangeError,
    SFloatException,
    get_user_friendly_message,
)

__version__ = "0.1.0"

__all__ = [
    # Values
    "SFloat",
    "NumberValue",
    "parse",
    "from_text",
    "coerce",
    "normalize",
    "zero",
    "one",
    # Digit access
    "digit_at",
    "digit_at_abs",
    "with_digit_at",
    "extract_digit_at",
    "move_float_point",
    "integer_digits",
    "fraction_digits",
    "integer_part",
    "fraction_part",
    "absolute",
    # Comparison
    "ComparisonEngine",
    "equals",
    "not_equals",
    "compare_magnitudes",
    "compare_values",
    "less_than",
    "greater_than",
    "less_equal",
    "greater_equal",
    # Arithmetic
    "ArithmeticEngine",
    "ArithmeticResult",
    "negate",
    "add",
    "subtract",
    "multiply",
    "multiply_int",
    "divide",
    "div_rem",
    "modulo",
    "increment",
    "decrement",
    # Conversion
    "to_decimal",
    "to_radix",
    "decimal_to_radix",
    "to_binary",
    "to_octal",
    "to_hexadecimal",
    "to_machine_int",
    "from_machine_int",
    # Configuration and logging
    "SFloatConfig",
    "get_config",
    "set_config",
    "reset_config",
    "get_logger",
    "setup_logging",
    # Exceptions
    "SFloatException",
    "NumberFormatException",
    "RadixOutOfRangeError",
    "MultipleRadixPointsError",
    "InvalidDigitError",
    "FractionLengthOutOfRangeError",
    "ArithmeticException",
    "DivisionByZeroError",
    "InvalidOperationError",
    "IntegerOverflowError",
    "ConfigurationException",
    "InvalidConfigError",
    "get_user_friendly_message",
]
