"""
sfloat_exceptions.py

Central exception hierarchy for the SFloat number library.
Defines specialized exception classes for the different failure scenarios.

Exception hierarchy:
    SFloatException (base)
    ├── NumberFormatException (also ValueError)
    │   ├── RadixOutOfRangeError
    │   ├── MultipleRadixPointsError
    │   ├── InvalidDigitError
    │   └── FractionLengthOutOfRangeError
    ├── ArithmeticException (also ArithmeticError)
    │   ├── DivisionByZeroError (also ZeroDivisionError)
    │   ├── InvalidOperationError
    │   └── IntegerOverflowError (also OverflowError)
    └── ConfigurationException
        └── InvalidConfigError

Usage:
    from sfloat_exceptions import InvalidDigitError, NumberFormatException

    try:
        value = parse("1G", 16)
    except InvalidDigitError as e:
        logger.error(f"Parsing failed: {e}")
        logger.error(f"Context: {e.context}")
"""

from typing import Any, Dict, Optional


class SFloatException(Exception):
    """
    Base exception for all SFloat-specific errors.

    All SFloat exceptions support:
    - Detailed error messages
    - Contextual information (dict)
    - Original exception chaining (via 'from')
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        base_msg = self.message

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# ============================================================================
# FORMAT EXCEPTIONS
# ============================================================================


class NumberFormatException(SFloatException, ValueError):
    """Base exception for malformed number text and construction arguments."""


class RadixOutOfRangeError(NumberFormatException):
    """
    Radix argument outside the supported range.

    Causes:
    - Radix below 2 or above 36
    - Radix that is not an integer
    """

    def __init__(self, message: str, radix: Any = None, **kwargs):
        context = kwargs.get("context", {})
        context["radix"] = radix
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class MultipleRadixPointsError(NumberFormatException):
    """The input text contains more than one radix point."""


class InvalidDigitError(NumberFormatException):
    """
    A character could not be read as a digit of the radix.

    Causes:
    - Digit value >= radix (e.g. '9' in octal)
    - Unrecognized character (e.g. '+', whitespace inside the number)
    - Text without any digit characters
    - Digit value out of range when writing a single digit
    """

    def __init__(
        self,
        message: str,
        character: Optional[str] = None,
        position: Optional[int] = None,
        **kwargs,
    ):
        context = kwargs.get("context", {})
        context["character"] = character
        context["position"] = position
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class FractionLengthOutOfRangeError(NumberFormatException):
    """The fraction bound is negative or above the supported ceiling."""


# ============================================================================
# ARITHMETIC EXCEPTIONS
# ============================================================================


class ArithmeticException(SFloatException, ArithmeticError):
    """Base exception for failures inside the arithmetic operations."""


class DivisionByZeroError(ArithmeticException, ZeroDivisionError):
    """The divisor's magnitude is zero."""


class InvalidOperationError(ArithmeticException):
    """
    Operation not defined for the given operands.

    Causes:
    - Modulo / div-rem with a fractional operand
    - Unknown operation or comparison operator
    - Operands of the wrong type or count
    """

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        context = kwargs.get("context", {})
        context["operation"] = operation
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class IntegerOverflowError(ArithmeticException, OverflowError):
    """
    Machine integer cast out of range.

    Causes:
    - Value does not fit into the signed integer width
    """

    def __init__(self, message: str, bits: Optional[int] = None, **kwargs):
        context = kwargs.get("context", {})
        context["bits"] = bits
        kwargs["context"] = context
        super().__init__(message, **kwargs)


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================


class ConfigurationException(SFloatException):
    """Base exception for configuration errors."""


class InvalidConfigError(ConfigurationException):
    """
    Invalid configuration.

    Causes:
    - Out-of-range values
    - Environment variables that are not integers
    """


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def wrap_exception(
    exc: Exception, sfloat_exception_class: type[SFloatException], message: str, **context
) -> SFloatException:
    """
    Converts a generic exception into an SFloat-specific exception.

    Args:
        exc: Original exception
        sfloat_exception_class: Target exception class (e.g. InvalidConfigError)
        message: Custom error message
        **context: Additional context information

    Returns:
        SFloat-specific exception chained to the original exception

    Example:
        try:
            bits = int(raw)
        except ValueError as e:
            raise wrap_exception(e, InvalidConfigError, "Invalid bit width", raw=raw) from e
    """
    return sfloat_exception_class(
        message=message, context=context, original_exception=exc
    )


def get_user_friendly_message(exc: Exception, include_details: bool = False) -> str:
    """
    Generates a short, user-facing error message from an exception.

    Args:
        exc: Exception object
        include_details: Whether technical details should be appended (debug mode)

    Returns:
        Human readable error message
    """
    friendly_messages = {
        RadixOutOfRangeError: "[ERROR] The radix must be between 2 and 36.",
        MultipleRadixPointsError: "[ERROR] A number may contain only one radix point.",
        InvalidDigitError: "[ERROR] The number contains a digit that is not valid for its radix.",
        FractionLengthOutOfRangeError: "[ERROR] The fraction length bound is out of range.",
        DivisionByZeroError: "[ERROR] Division by zero is not allowed.",
        InvalidOperationError: "[ERROR] This operation is not defined for the given numbers.",
        IntegerOverflowError: "[ERROR] The number does not fit into a machine integer.",
        InvalidConfigError: "[ERROR] Invalid configuration. Please check the settings.",
    }

    default_message = "[ERROR] An unexpected error occurred."

    user_message = friendly_messages.get(type(exc), default_message)

    if isinstance(exc, InvalidDigitError) and exc.context.get("character"):
        user_message = (
            f"[ERROR] '{exc.context['character']}' is not a valid digit"
            f" for radix {exc.context.get('radix', '?')}."
        )

    elif isinstance(exc, IntegerOverflowError) and exc.context.get("bits"):
        user_message = (
            f"[ERROR] The number does not fit into a {exc.context['bits']}-bit integer."
        )

    if include_details and isinstance(exc, SFloatException):
        user_message += f"\n\nTechnical details: {exc.message}"
        if exc.context:
            user_message += f"\n   Context: {exc.context}"

    return user_message
