import os
import sys
from common.constants import WAITING_APPEAR_TIMEOUT, DEFAULT_WAITING_APPEAR_TIMEOUT


def get_effective_config_value(name: str, config: dict) -> str | None:
    """
    Returns the effective configuration value for a given name, following priority:
        1. Command-line parameter (--name=value)
        2. Config file value (case-insensitive)
        3. System environment variable (case-insensitive)

    Args:
        name (str): Variable name (case-insensitive, e.g. "WAITING_APPEAR_TIMEOUT")
        config (dict): Configuration dictionary loaded from config.json

    Returns:
        str | None: Effective value or None if not found
    """
    name_lower = name.lower()

    for arg in sys.argv:
        if arg.startswith("--") and "=" in arg:
            arg_name, arg_val = arg[2:].split("=", 1)
            if arg_name.lower() == name_lower:
                return arg_val.strip()

    for key, value in (config or {}).items():
        if key.lower() == name_lower and value is not None:
            return str(value)

    for key, value in os.environ.items():
        if key.lower() == name_lower:
            return str(value)

    return None


def get_int_config_value(name: str, config: dict, default: int) -> int:
    """
    Same lookup as get_effective_config_value(), converted to int.
    Falls back to default when the value is missing.
    Raises ValueError for a value that is not a number.
    """
    value = get_effective_config_value(name, config)

    if value is None or not value.strip():
        return default

    try:
        return int(float(value))
    except ValueError:
        raise ValueError(f"Config value '{name}' must be a number, got '{value}'")


def get_waiting_appear_timeout(config: dict) -> int:
    """Element appear/disappear timeout in milliseconds."""
    return get_int_config_value(WAITING_APPEAR_TIMEOUT, config, DEFAULT_WAITING_APPEAR_TIMEOUT)


def is_config_flag_on(name: str, config: dict) -> bool:
    value = get_effective_config_value(name, config)
    return value is not None and value.strip().lower() in ("true", "1", "yes")
