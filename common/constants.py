"""
Centralized constants for the SFloat number library.

This module provides a single source of truth for the limits, defaults and
digit tables used throughout the SFloat codebase. Some values can be
overridden at runtime through SFloatConfig (see sfloat_config.py).

Organization:
    - Radix Limits: Supported numeral bases and the digit alphabet
    - Fraction Bounds: Default and ceiling for retained fractional digits
    - Machine Integers: Default width for scalar casts
    - Cache Configuration: Size of the per-radix constants cache

Usage:
    from common.constants import MIN_RADIX, MAX_RADIX, DEFAULT_MAX_FRACTION_LENGTH
"""

# =============================================================================
# Radix Limits
# =============================================================================

MIN_RADIX: int = 2
"""Smallest supported radix (binary)."""

MAX_RADIX: int = 36
"""
Largest supported radix.

Rationale:
    The digit alphabet is 0-9 followed by A-Z, which gives 36 distinct digit
    characters.
"""

DECIMAL_RADIX: int = 10
"""Radix used as the intermediate representation for general conversions."""

DIGIT_ALPHABET: str = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""
Digit characters in value order. The character at index n has value n.

Letters are always rendered in uppercase; parsing is case-insensitive.
"""

POWER_OF_TWO_RADICES: frozenset = frozenset({2, 4, 8, 16, 32})
"""
Radices that can be converted between each other by regrouping bits.

Used by:
    - component_5_radix_converter.py: Bit-grouping fast path
"""

# =============================================================================
# Fraction Bounds
# =============================================================================

DEFAULT_MAX_FRACTION_LENGTH: int = 128
"""
Default number of fractional digits a value may retain.

- Parsing drops fractional digits beyond this bound (truncation)
- Division stops after producing this many fractional quotient digits
- Decimal-to-radix conversion stops after this many fractional digits

Tuning:
    - Lower values: faster division and conversion, less precision
    - Higher values: more precision, division cost grows linearly
"""

MAX_FRACTION_LENGTH_CEILING: int = 10_000
"""
Upper limit accepted for any fraction bound.

Rationale:
    Division and conversion iterate once per fractional digit; the ceiling
    keeps a single operation from running for an unreasonable amount of time.
"""

# =============================================================================
# Machine Integers
# =============================================================================

DEFAULT_MACHINE_INT_BITS: int = 32
"""
Default signed width for scalar casts (range -2^31 .. 2^31-1).

Used by:
    - component_6_scalar_cast.py: to_machine_int / from_machine_int
"""

# =============================================================================
# Cache Configuration
# =============================================================================

CACHE_NAME_RADIX_CONSTANTS: str = "radix_constants"
"""Name of the cache holding the per-radix zero and one values."""

CACHE_MAXSIZE_CONSTANTS: int = 256
"""
Size of the radix constants cache.

Two constants (zero, one) per (radix, fraction bound) pair; 35 radices with a
handful of distinct bounds fit comfortably.
"""
