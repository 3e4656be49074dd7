"""
Configuration Properties - bootstrap of service settings into the environment.

Settings are read from the process environment. A .env file and a
config.properties file, when present, fill in whatever the environment does
not already define. EnvConfig is exported as an alias for this class from
task_tracker/config/__init__.py.
"""

import os
import re
from pathlib import Path
from typing import Optional, Dict, Any

from dotenv import load_dotenv

_SEPARATOR = re.compile(r"[=:]")


class ConfigProperties:
    """
    Loads .env and config.properties into os.environ.

    Quick usage::

        ConfigProperties.load_env_file()           # once, at process start
        ServerConfig.from_env()                    # TRACKER_HOST / TRACKER_PORT
        ConfigProperties.get_logging_config()      # TRACKER_LOG_* settings
    """

    _properties: Dict[str, str] = {}
    _loaded: bool = False

    @classmethod
    def load(cls, path: Optional[str] = None) -> None:
        """
        Parse config.properties once.

        Args:
            path: Explicit path to config.properties; auto-discovered if omitted.
        """
        if cls._loaded:
            return

        cls._properties = {}
        config_path = Path(path) if path else cls._find_file("config.properties")
        if config_path and config_path.exists():
            cls._parse_file(config_path)
        cls._loaded = True

    @classmethod
    def reload(cls, path: Optional[str] = None) -> None:
        """Force a fresh re-parse of config.properties."""
        cls._loaded = False
        cls.load(path)

    @classmethod
    def load_env_file(cls, path: Optional[str] = None) -> bool:
        """
        Load a .env file (if any) and config.properties into os.environ.

        Returns:
            True if either source contributed settings.
        """
        env_path = cls._find_file(".env")
        loaded_env = bool(env_path) and load_dotenv(env_path, override=False)

        cls.load(path)
        cls.load_to_env()
        return loaded_env or bool(cls._properties)

    @classmethod
    def load_to_env(cls) -> None:
        """
        Populate os.environ from config.properties.

        Variables already set are never overwritten. Dot-notation keys are
        not valid env-var names and are skipped.
        """
        cls.load()
        for key, value in cls._properties.items():
            if "." in key:
                continue
            if key not in os.environ:
                os.environ[key] = value

    @staticmethod
    def get_int_env(key: str, default: int = 0) -> int:
        """Get an integer from an environment variable."""
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    @staticmethod
    def get_logging_config() -> Dict[str, Any]:
        """
        Return a ``ComprehensiveLogger.initialize()``-compatible dict
        built from the current environment.
        """
        return {
            "log_folder":     os.getenv("TRACKER_LOG_FOLDER", "./logs"),
            "log_level":      os.getenv("TRACKER_LOG_LEVEL", "INFO"),
            "enable_console": os.getenv("TRACKER_ENABLE_CONSOLE_LOGGING", "true").lower() in ("true", "1", "yes"),
            "enable_file":    os.getenv("TRACKER_ENABLE_FILE_LOGGING", "false").lower() in ("true", "1", "yes"),
            "max_bytes":      ConfigProperties.get_int_env("TRACKER_LOG_MAX_BYTES", 10485760),
            "backup_count":   ConfigProperties.get_int_env("TRACKER_LOG_BACKUP_COUNT", 5),
        }

    @classmethod
    def _find_file(cls, name: str) -> Optional[Path]:
        """Search for *name* at the project root, then the CWD and up to three parents."""
        fixed = Path(__file__).parent.parent.parent / name
        if fixed.exists():
            return fixed

        current = Path.cwd()
        for _ in range(4):
            candidate = current / name
            if candidate.exists():
                return candidate
            if current.parent == current:
                break
            current = current.parent

        return None

    @classmethod
    def _parse_file(cls, path: Path) -> None:
        """Parse a Java-style .properties file (``key=value`` or ``key: value``)."""
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith(("#", "!")):
                    continue
                parts = _SEPARATOR.split(line, maxsplit=1)
                if len(parts) == 2:
                    cls._properties[parts[0].strip()] = parts[1].strip()
