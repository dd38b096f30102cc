"""
Arithmetic Engine for SFloat
Dispatches arithmetic by operation symbol or name through an operation registry
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from component_1_number_value import NumberValue
from component_3_comparison_engine import ComparisonEngine
from component_4_arithmetic_operations import (
    add,
    div_rem,
    divide,
    modulo,
    multiply,
    subtract,
)
from component_5_radix_converter import to_radix
from component_7_logging_config import PerformanceLogger, get_logger
from sfloat_exceptions import InvalidOperationError

logger = get_logger(__name__)


@dataclass
class ArithmeticResult:
    """Result of an arithmetic or comparison operation"""

    value: Any  # NumberValue or bool for comparisons
    operation: str
    metadata: Dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Operations
# ============================================================================


class BaseOperation(ABC):
    """Abstract base class for binary operations on NumberValues"""

    def __init__(self, symbol: str, name: str, arity: int):
        self.symbol = symbol
        self.name = name
        self.arity = arity

    @property
    @abstractmethod
    def function(self) -> Callable[[NumberValue, NumberValue], NumberValue]:
        """Pure function implementing the operation"""

    def validate(self, *operands) -> Tuple[bool, Optional[str]]:
        """Validate operand count and types"""
        if len(operands) != self.arity:
            return (
                False,
                f"{self.name} needs {self.arity} operands, {len(operands)} given",
            )

        for i, op in enumerate(operands):
            if not isinstance(op, NumberValue):
                return False, f"Operand {i+1} is not a NumberValue: {type(op).__name__}"

        return True, None

    def execute(self, *operands) -> ArithmeticResult:
        a, b = operands
        result = self.function(a, b)
        return ArithmeticResult(
            value=result,
            operation=self.name,
            metadata={
                "symbol": self.symbol,
                "operands": [str(a), str(b)],
                "radix": result.radix,
            },
        )


class Addition(BaseOperation):
    def __init__(self):
        super().__init__("+", "addition", 2)

    @property
    def function(self):
        return add


class Subtraction(BaseOperation):
    def __init__(self):
        super().__init__("-", "subtraction", 2)

    @property
    def function(self):
        return subtract


class Multiplication(BaseOperation):
    def __init__(self):
        super().__init__("*", "multiplication", 2)

    @property
    def function(self):
        return multiply


class Division(BaseOperation):
    """Division truncated at the dividend's fraction bound"""

    def __init__(self):
        super().__init__("/", "division", 2)

    @property
    def function(self):
        return divide


class Modulo(BaseOperation):
    """Remainder of integer division (integer operands only)"""

    def __init__(self):
        super().__init__("%", "modulo", 2)

    @property
    def function(self):
        return modulo

    def validate(self, *operands) -> Tuple[bool, Optional[str]]:
        valid, error = super().validate(*operands)
        if not valid:
            return valid, error

        for i, op in enumerate(operands):
            if op.is_fractional:
                return False, f"Operand {i+1} is not an integer: {op}"

        return True, None


class OperationRegistry:
    """Registry for all available operations (thread-safe)"""

    def __init__(self):
        self._operations: Dict[str, BaseOperation] = {}
        self._lock = threading.RLock()

    def register(self, operation: BaseOperation):
        """Register an operation under its symbol and its name"""
        with self._lock:
            self._operations[operation.symbol] = operation
            self._operations[operation.name] = operation

    def get(self, key: str) -> Optional[BaseOperation]:
        """Get operation by symbol or name"""
        with self._lock:
            return self._operations.get(key)

    def list_operations(self) -> List[str]:
        """List all registered keys (symbols and names)"""
        with self._lock:
            return sorted(self._operations.keys())


# ============================================================================
# Engine
# ============================================================================


class ArithmeticEngine:
    """Main engine for arithmetic on NumberValues (thread-safe)"""

    def __init__(self):
        self.registry = OperationRegistry()
        self.comparison_engine = ComparisonEngine()
        self._register_operations()

        logger.debug(
            "ArithmeticEngine initialized with operations: %s",
            self.registry.list_operations(),
        )

    def _register_operations(self):
        """Register all standard operations"""
        self.registry.register(Addition())
        self.registry.register(Subtraction())
        self.registry.register(Multiplication())
        self.registry.register(Division())
        self.registry.register(Modulo())

    def calculate(self, operation: str, *operands) -> ArithmeticResult:
        """
        Execute calculation

        Args:
            operation: Operation (symbol or name, e.g. "+" or "addition")
            operands: NumberValue operands

        Returns:
            ArithmeticResult with the resulting NumberValue

        Raises:
            InvalidOperationError: unknown operation or invalid operands
            DivisionByZeroError: division or modulo by zero
        """
        logger.debug(
            "calculate() called: operation=%s, operands=%s",
            operation,
            [str(op) for op in operands],
        )

        op = self.registry.get(operation)
        if not op:
            logger.error("Unknown operation requested: %s", operation)
            raise InvalidOperationError(
                f"Unknown operation: {operation}", operation=operation
            )

        valid, error = op.validate(*operands)
        if not valid:
            logger.warning(
                "Validation failed for %s: %s", operation, error
            )
            raise InvalidOperationError(
                f"Validation failed: {error}", operation=op.name
            )

        with PerformanceLogger(logger.logger, op.name, symbol=op.symbol) as perf:
            result = op.execute(*operands)

        result.metadata["duration_ms"] = perf.duration_ms
        logger.debug("Operation %s completed: result=%s", op.name, result.value)
        return result

    def compare(self, a: NumberValue, b: NumberValue, operator: str) -> ArithmeticResult:
        """
        Compare two numbers (delegates to ComparisonEngine)

        Args:
            a, b: Numbers
            operator: "<", ">", "=", "==", "!=", "<=", ">="

        Returns:
            ArithmeticResult with bool value
        """
        return self.comparison_engine.compare(a, b, operator)

    def convert(self, value: NumberValue, radix: int) -> ArithmeticResult:
        """Convert value to another radix (delegates to the radix converter)"""
        with PerformanceLogger(
            logger.logger, "conversion", source_radix=value.radix, target_radix=radix
        ) as perf:
            result = to_radix(value, radix)

        return ArithmeticResult(
            value=result,
            operation="conversion",
            metadata={
                "source_radix": value.radix,
                "target_radix": radix,
                "duration_ms": perf.duration_ms,
            },
        )

    def div_rem(self, a: NumberValue, b: NumberValue) -> Tuple[NumberValue, NumberValue]:
        """Quotient and remainder of integer division"""
        return div_rem(a, b)
