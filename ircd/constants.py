"""
Configuration constants for the ircd server

Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Source prefix stamped on every numeric reply; not configurable
SERVER_PREFIX = "localhost"

# Listener defaults (used when the config file omits [listen])
DEFAULT_LISTEN_HOST = os.getenv("DEFAULT_LISTEN_HOST", "127.0.0.1")
DEFAULT_LISTEN_PORT = _get_env_int("DEFAULT_LISTEN_PORT", 6667)

# Config file location when neither --config nor IRCD_CONF_FILE is given
DEFAULT_CONF_FILE = "ircd.toml"

# Stream reader buffer limit; lines longer than this close the client
LINE_READ_LIMIT = _get_env_int(
    "LINE_READ_LIMIT", 1024
)  # 512 per RFC 2812, doubled since implementations vary
CLIENT_READ_TIMEOUT = _get_env_float(
    "CLIENT_READ_TIMEOUT", 300.0
)  # Seconds of silence before a client is dropped

# Modes advertised in RPL_MYINFO
SUPPORTED_USER_MODES = os.getenv("SUPPORTED_USER_MODES", "iow")
SUPPORTED_CHANNEL_MODES = os.getenv("SUPPORTED_CHANNEL_MODES", "ov")
