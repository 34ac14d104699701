"""Shared utility functions."""

from .config_validator import (
    ConfigurationError,
    get_env_or_default,
    validate_float_env,
    validate_int_env,
)
from .env import load_env
from .logging import get_logger, setup_logging

__all__ = [
    "ConfigurationError",
    "get_env_or_default",
    "get_logger",
    "load_env",
    "setup_logging",
    "validate_float_env",
    "validate_int_env",
]
