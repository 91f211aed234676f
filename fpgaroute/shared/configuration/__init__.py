"""Configuration management."""
from .config_manager import ConfigManager, get_config, initialize_config
from .settings import RouterSettings, LoggingSettings, ApplicationSettings

__all__ = [
    'ConfigManager', 'get_config', 'initialize_config',
    'RouterSettings', 'LoggingSettings', 'ApplicationSettings'
]
