"""
sfloat_config.py

Runtime configuration for SFloat.

Defaults come from common/constants.py and can be overridden through
environment variables or by installing a new configuration object:

    SFLOAT_MAX_FRACTION_LENGTH   default fraction bound for new values
    SFLOAT_MACHINE_INT_BITS      signed width used by scalar casts
    SFLOAT_CONSTANTS_CACHE_SIZE  size of the per-radix constants cache

Usage:
    from sfloat_config import get_config

    bound = get_config().default_max_fraction_length
"""

import os
import threading
from dataclasses import dataclass
from typing import Mapping, Optional

from common.constants import (
    CACHE_MAXSIZE_CONSTANTS,
    DEFAULT_MACHINE_INT_BITS,
    DEFAULT_MAX_FRACTION_LENGTH,
    MAX_FRACTION_LENGTH_CEILING,
)
from component_7_logging_config import get_logger
from sfloat_exceptions import InvalidConfigError, wrap_exception

logger = get_logger(__name__)

ENV_MAX_FRACTION_LENGTH = "SFLOAT_MAX_FRACTION_LENGTH"
ENV_MACHINE_INT_BITS = "SFLOAT_MACHINE_INT_BITS"
ENV_CONSTANTS_CACHE_SIZE = "SFLOAT_CONSTANTS_CACHE_SIZE"


@dataclass(frozen=True)
class SFloatConfig:
    """Configuration for parsing, arithmetic and scalar casts"""

    # Fraction bound for values created without an explicit bound
    default_max_fraction_length: int = DEFAULT_MAX_FRACTION_LENGTH

    # Signed integer width for to_machine_int / from_machine_int
    machine_int_bits: int = DEFAULT_MACHINE_INT_BITS

    # Entries in the zero/one constants cache
    constants_cache_size: int = CACHE_MAXSIZE_CONSTANTS

    def __post_init__(self):
        """Validate configuration"""
        if not 0 <= self.default_max_fraction_length <= MAX_FRACTION_LENGTH_CEILING:
            raise InvalidConfigError(
                "default_max_fraction_length must be in "
                f"[0, {MAX_FRACTION_LENGTH_CEILING}]",
                context={"value": self.default_max_fraction_length},
            )
        if self.machine_int_bits < 2:
            raise InvalidConfigError(
                "machine_int_bits must be >= 2",
                context={"value": self.machine_int_bits},
            )
        if self.constants_cache_size < 1:
            raise InvalidConfigError(
                "constants_cache_size must be >= 1",
                context={"value": self.constants_cache_size},
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SFloatConfig":
        """
        Build a configuration from environment variables.

        Unset variables keep their defaults.

        Raises:
            InvalidConfigError: If a variable is not an integer or out of range
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for env_name, field_name in (
            (ENV_MAX_FRACTION_LENGTH, "default_max_fraction_length"),
            (ENV_MACHINE_INT_BITS, "machine_int_bits"),
            (ENV_CONSTANTS_CACHE_SIZE, "constants_cache_size"),
        ):
            raw = environ.get(env_name)
            if raw is None or not raw.strip():
                continue
            try:
                overrides[field_name] = int(raw)
            except ValueError as e:
                raise wrap_exception(
                    e,
                    InvalidConfigError,
                    f"{env_name} must be an integer",
                    variable=env_name,
                    raw=raw,
                ) from e

        if overrides:
            logger.info("Configuration overrides from environment", extra=overrides)
        return cls(**overrides)


_config_instance: Optional[SFloatConfig] = None
_config_lock = threading.RLock()


def get_config() -> SFloatConfig:
    """Return the active configuration (created from the environment on first use)."""
    global _config_instance

    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = SFloatConfig.from_env()

    return _config_instance


def set_config(config: SFloatConfig) -> None:
    """Install a new active configuration."""
    global _config_instance

    if not isinstance(config, SFloatConfig):
        raise InvalidConfigError(
            "set_config expects an SFloatConfig",
            context={"type": type(config).__name__},
        )
    with _config_lock:
        _config_instance = config
    logger.debug("Configuration replaced", extra={"config": config})


def reset_config() -> None:
    """Drop the active configuration. Only use for testing."""
    global _config_instance

    with _config_lock:
        _config_instance = None
