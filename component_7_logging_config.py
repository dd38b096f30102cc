"""
component_7_logging_config.py

Central logging system for SFloat.
Provides structured logging with different log levels and formats.

Features:
- Console and file based logging
- Different log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Structured formatting with timestamps and component names
- Performance tracking for expensive operations (division, conversion)
- Contextual logging information

The library never configures logging on import. Applications call
setup_logging() once; until then records go to whatever handlers the
application installed.

Usage:
    from component_7_logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Division finished", extra={"quotient_digits": 12})
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import Any, Dict, Literal, MutableMapping, Optional, Tuple, Type

# Global logging configuration
LOG_DIR: Path = Path("logs")

DEFAULT_LOG_FILE: Path = LOG_DIR / "sfloat.log"
ERROR_LOG_FILE: Path = LOG_DIR / "sfloat_errors.log"
PERFORMANCE_LOG_FILE: Path = LOG_DIR / "sfloat_performance.log"

PERFORMANCE_LOGGER_NAME: str = "sfloat.performance"

CONSOLE_LOG_LEVEL: int = logging.INFO
FILE_LOG_LEVEL: int = logging.DEBUG


class SFloatLogFormatter(logging.Formatter):
    """
    Custom formatter for structured log output.
    Adds colors for console output (optional).
    """

    # ANSI color codes for console output
    COLORS: Dict[str, str] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, use_colors: bool = False, include_extra: bool = True) -> None:
        self.use_colors: bool = use_colors
        self.include_extra: bool = include_extra

        # Format: [TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE
        fmt = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        log_message = super().format(record)

        if self.include_extra and hasattr(record, "extra_info"):
            extra_str = " | ".join(f"{k}={v}" for k, v in record.extra_info.items())
            log_message += f" | {extra_str}"

        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            reset = self.COLORS["RESET"]
            log_message = f"{color}{log_message}{reset}"

        return log_message


class PerformanceLogger:
    """
    Context manager for timing expensive operations.

    Usage:
        with PerformanceLogger(logger.logger, "Division", radix=16):
            quotient = divide(a, b)
    """

    def __init__(
        self, logger: logging.Logger, operation_name: str, **context: Any
    ) -> None:
        self.logger: logging.Logger = logger
        self.operation_name: str = operation_name
        self.context: Dict[str, Any] = context
        self.start_time: Optional[datetime] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> "PerformanceLogger":
        self.start_time = datetime.now()
        self.logger.debug(
            f"START: {self.operation_name}", extra={"extra_info": self.context}
        )
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> Literal[False]:
        assert (
            self.start_time is not None
        ), "PerformanceLogger was not initialized correctly"
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        self.duration_ms = duration_ms

        if exc_type is None:
            self.logger.debug(
                f"END: {self.operation_name} (duration: {duration_ms:.2f}ms)",
                extra={"extra_info": {**self.context, "duration_ms": duration_ms}},
            )

            perf_logger = logging.getLogger(PERFORMANCE_LOGGER_NAME)
            perf_logger.info(
                f"{self.operation_name}: {duration_ms:.2f}ms",
                extra={"extra_info": {**self.context, "duration_ms": duration_ms}},
            )
        else:
            self.logger.error(
                f"FAILED: {self.operation_name} (duration: {duration_ms:.2f}ms)",
                extra={
                    "extra_info": {
                        **self.context,
                        "duration_ms": duration_ms,
                        "error": str(exc_val),
                    }
                },
            )

        # Propagate the exception
        return False


class StructuredLogger(logging.LoggerAdapter):
    """
    Logger adapter that supports structured extra information.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        # Store the 'extra' dict as 'extra_info' on the LogRecord
        extra = kwargs.get("extra", {})
        if extra:
            kwargs["extra"] = {"extra_info": extra}
        return msg, kwargs


def _rotating_handler(
    path: Path, level: int, max_bytes: int, backup_count: int
) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(SFloatLogFormatter(use_colors=False, include_extra=True))
    return handler


def setup_logging(
    console_level: int = CONSOLE_LOG_LEVEL,
    file_level: int = FILE_LOG_LEVEL,
    log_file: Optional[Path] = None,
    enable_file_logging: bool = True,
    enable_performance_logging: bool = True,
) -> None:
    """
    Configures the global logging system.

    Args:
        console_level: Log level for console output
        file_level: Log level for file output
        log_file: Path of the main log file (default: logs/sfloat.log)
        enable_file_logging: Writes main and error-only log files
        enable_performance_logging: Enables a separate performance log file
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter per handler

    # Remove existing handlers (prevents duplicates on repeated setup)
    root_logger.handlers.clear()

    # === Console handler ===
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(SFloatLogFormatter(use_colors=True, include_extra=True))
    root_logger.addHandler(console_handler)

    file_path = log_file or DEFAULT_LOG_FILE

    if enable_file_logging:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        LOG_DIR.mkdir(exist_ok=True)

        # === Main log file ===
        root_logger.addHandler(
            _rotating_handler(file_path, file_level, 10 * 1024 * 1024, 5)  # 10 MB
        )

        # === Error-only log file ===
        root_logger.addHandler(
            _rotating_handler(ERROR_LOG_FILE, logging.ERROR, 5 * 1024 * 1024, 3)
        )

    # === Performance logger ===
    perf_logger = logging.getLogger(PERFORMANCE_LOGGER_NAME)
    perf_logger.handlers.clear()
    if enable_performance_logging and enable_file_logging:
        perf_logger.setLevel(logging.INFO)
        perf_logger.propagate = False  # Prevent duplicates in the root logger
        perf_logger.addHandler(
            _rotating_handler(PERFORMANCE_LOG_FILE, logging.INFO, 5 * 1024 * 1024, 3)
        )
    else:
        perf_logger.propagate = True

    logger = logging.getLogger("sfloat.logging_config")
    logger.info(
        "Logging system initialized",
        extra={
            "extra_info": {
                "console_level": logging.getLevelName(console_level),
                "file_level": logging.getLevelName(file_level),
                "log_file": str(file_path) if enable_file_logging else None,
                "performance_logging": enable_performance_logging,
            }
        },
    )


def get_logger(name: str) -> StructuredLogger:
    """
    Creates a structured logger for a component.

    Args:
        name: Name of the component (usually __name__)

    Returns:
        StructuredLogger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Conversion done", extra={"source_radix": 8, "target_radix": 16})
    """
    base_logger = logging.getLogger(name)
    return StructuredLogger(base_logger, {})


if __name__ == "__main__":
    setup_logging(console_level=logging.DEBUG, enable_file_logging=False)

    logger = get_logger("test_component")

    logger.debug("Debug message", extra={"radix": 16})
    logger.info("Info message", extra={"digits": "FF"})
    logger.warning("Warning", extra={"max_fraction_length": 128})

    with PerformanceLogger(logger.logger, "Test operation", param1="value1"):
        import time

        time.sleep(0.1)
