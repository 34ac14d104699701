"""
Configuration validation utilities.

Provides utilities for reading typed environment variables with clear error messages.
"""

import os
from typing import Optional


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def get_env_or_default(name: str, default: str, description: Optional[str] = None) -> str:
    """
    Get an environment variable with a default value.

    Args:
        name: Environment variable name
        default: Default value if not set
        description: Optional description for documentation

    Returns:
        The value of the environment variable or the default
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def validate_int_env(name: str, default: Optional[int] = None, min_value: Optional[int] = None,
                     max_value: Optional[int] = None) -> int:
    """
    Validate an integer environment variable.

    Args:
        name: Environment variable name
        default: Default value if not set
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        The validated integer value

    Raises:
        ConfigurationError: If the value is invalid
    """
    value_str = os.getenv(name)

    if not value_str:
        if default is None:
            raise ConfigurationError(f"Missing required integer environment variable: {name}")
        return default

    try:
        value = int(value_str)
    except ValueError:
        raise ConfigurationError(
            f"Invalid integer value for {name}: '{value_str}'\n"
            f"Expected an integer value."
        )

    _check_bounds(name, value, min_value, max_value)
    return value


def validate_float_env(name: str, default: Optional[float] = None,
                       min_value: Optional[float] = None,
                       max_value: Optional[float] = None) -> float:
    """
    Validate a floating point environment variable.

    Args:
        name: Environment variable name
        default: Default value if not set
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        The validated float value

    Raises:
        ConfigurationError: If the value is invalid
    """
    value_str = os.getenv(name)

    if not value_str:
        if default is None:
            raise ConfigurationError(f"Missing required numeric environment variable: {name}")
        return default

    try:
        value = float(value_str)
    except ValueError:
        raise ConfigurationError(
            f"Invalid numeric value for {name}: '{value_str}'\n"
            f"Expected a number (e.g. 1.5)."
        )

    _check_bounds(name, value, min_value, max_value)
    return value


def _check_bounds(name: str, value: float, min_value: Optional[float],
                  max_value: Optional[float]) -> None:
    if min_value is not None and value < min_value:
        raise ConfigurationError(
            f"Value for {name} ({value}) is below minimum allowed value ({min_value})"
        )

    if max_value is not None and value > max_value:
        raise ConfigurationError(
            f"Value for {name} ({value}) exceeds maximum allowed value ({max_value})"
        )
