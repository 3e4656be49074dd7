"""
Server configuration - Settings for the task tracker HTTP service
"""

from dataclasses import dataclass
from typing import Dict, Any
import os

from task_tracker.utils.exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    """
    Configuration for the HTTP listener.

    Attributes:
        host: Interface to bind
        port: TCP port to listen on (1-65535)
        log_level: Log level passed to uvicorn and the service loggers
        reload: Enable uvicorn auto-reload (development only)
    """

    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    reload: bool = False

    def __post_init__(self):
        """Validate server configuration."""
        if not isinstance(self.port, int) or not 1 <= self.port <= 65535:
            raise ConfigurationError("port", "must be an integer between 1 and 65535", self.port)

        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                "log_level", f"must be one of {list(VALID_LOG_LEVELS)}", self.log_level
            )

        if not self.host:
            raise ConfigurationError("host", "cannot be empty")

    @classmethod
    def from_env(cls, prefix: str = "TRACKER_") -> "ServerConfig":
        """Create server config from environment variables."""
        raw_port = os.getenv(f"{prefix}PORT", "8080")
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(f"{prefix}PORT", "must be an integer", raw_port)

        return cls(
            host=os.getenv(f"{prefix}HOST", "127.0.0.1"),
            port=port,
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "INFO"),
            reload=os.getenv(f"{prefix}RELOAD", "false").lower() in ("true", "1", "yes", "on"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "reload": self.reload,
        }
