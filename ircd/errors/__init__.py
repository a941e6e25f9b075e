from .handling import classify_error, log_error
from .internal import ConfigError, InternalError, NetworkError

__all__ = [
    "ConfigError",
    "InternalError",
    "NetworkError",
    "classify_error",
    "log_error",
]
