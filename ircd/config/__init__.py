from .loader import ConfigLoader, get_configuration, resolve_config_path
from .model import IrcSettings, ListenSettings, ServerConfig

__all__ = [
    "ConfigLoader",
    "IrcSettings",
    "ListenSettings",
    "ServerConfig",
    "get_configuration",
    "resolve_config_path",
]
