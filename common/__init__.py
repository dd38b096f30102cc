"""
Common constants for the SFloat project.

This package provides centralized limits, defaults and digit tables used
throughout the SFloat codebase.
"""

from common.constants import *

__all__ = [
    # Radix Limits
    "MIN_RADIX",
    "MAX_RADIX",
    "DECIMAL_RADIX",
    "DIGIT_ALPHABET",
    "POWER_OF_TWO_RADICES",
    # Fraction Bounds
    "DEFAULT_MAX_FRACTION_LENGTH",
    "MAX_FRACTION_LENGTH_CEILING",
    # Machine Integers
    "DEFAULT_MACHINE_INT_BITS",
    # Cache Configuration
    "CACHE_NAME_RADIX_CONSTANTS",
    "CACHE_MAXSIZE_CONSTANTS",
]
