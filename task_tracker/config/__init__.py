"""
Configuration module - Settings and configuration management
"""

from .config_properties import ConfigProperties
from .server_config import ServerConfig

# EnvConfig is an alias for ConfigProperties
EnvConfig = ConfigProperties

__all__ = [
    'ServerConfig',
    'EnvConfig',
    'ConfigProperties',
]
