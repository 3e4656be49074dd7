"""
Logging System with File and Console Output

Features:
- Configurable log folder (via .env / config.properties)
- Console and rotating file logging
- Structured extras appended to messages as JSON
"""

import logging
import logging.handlers
import sys
import os
import json
from pathlib import Path
from typing import Optional, Dict, Any


class ComprehensiveLogger:
    """
    Centralized logging system with file and console support.

    Usage:
        ComprehensiveLogger.initialize(log_level="DEBUG", enable_file=False)
        logger = ComprehensiveLogger.get_logger("my_module")
        logger.info("Task created", extra={"task_id": 1})
    """

    _loggers: Dict[str, "TaskLogger"] = {}
    _log_folder: Optional[str] = None
    _config: Dict[str, Any] = {}

    @classmethod
    def initialize(
        cls,
        log_folder: Optional[str] = None,
        log_level: str = "INFO",
        enable_console: bool = True,
        enable_file: bool = False,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ) -> None:
        """
        Initialize the logging system.

        Args:
            log_folder: Folder for log files (default: ./logs)
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            enable_console: Enable console logging
            enable_file: Enable rotating file logging
            max_bytes: Max file size before rotation (default: 10MB)
            backup_count: Number of backup files to keep
        """
        cls._log_folder = log_folder or "./logs"
        cls._config = {
            "log_level": log_level.upper(),
            "enable_console": enable_console,
            "enable_file": enable_file,
            "max_bytes": max_bytes,
            "backup_count": backup_count,
        }

        if enable_file:
            Path(cls._log_folder).mkdir(parents=True, exist_ok=True)

        # Loggers created before (re)initialization pick up the new settings
        for name in list(cls._loggers):
            cls._loggers[name] = TaskLogger(name, cls._log_folder, cls._config)

    @classmethod
    def get_logger(cls, name: str) -> "TaskLogger":
        """
        Get or create a logger instance.

        Args:
            name: Logger name (typically __name__)

        Returns:
            TaskLogger instance
        """
        if name not in cls._loggers:
            cls._loggers[name] = TaskLogger(name, cls._log_folder, cls._config)

        return cls._loggers[name]

    @classmethod
    def flush(cls):
        """Flush all loggers."""
        for logger in cls._loggers.values():
            logger.flush()


class TaskLogger:
    """
    Individual logger instance with file and console support.
    """

    def __init__(
        self,
        name: str,
        log_folder: Optional[str],
        config: Dict[str, Any]
    ):
        self.name = name
        self.log_folder = log_folder or "./logs"
        self.config = config
        self.logger = logging.getLogger(name)
        self.logger.setLevel(config.get("log_level", "INFO"))
        self.logger.propagate = True

        # Clear existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if config.get("enable_console", True):
            self._add_console_handler()

        if config.get("enable_file"):
            self._add_file_handler()

    def _add_console_handler(self) -> None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(self.config.get("log_level", "INFO"))

        formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

    def _add_file_handler(self) -> None:
        """Add rotating file handler with UTF-8 encoding."""
        Path(self.log_folder).mkdir(parents=True, exist_ok=True)

        log_file = os.path.join(self.log_folder, f"{self.name}.log")

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=self.config.get("max_bytes", 10 * 1024 * 1024),
            backupCount=self.config.get("backup_count", 5),
            encoding='utf-8'
        )
        handler.setLevel(self.config.get("log_level", "INFO"))

        formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

    def debug(self, message: str, extra: Optional[Dict] = None):
        """Log debug message."""
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict] = None):
        """Log info message."""
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict] = None):
        """Log warning message."""
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, extra: Optional[Dict] = None):
        """Log error message."""
        self._log(logging.ERROR, message, extra)

    def critical(self, message: str, extra: Optional[Dict] = None):
        """Log critical message."""
        self._log(logging.CRITICAL, message, extra)

    def _log(self, level: int, message: str, extra: Optional[Dict] = None) -> None:
        if extra:
            message = f"{message} | {json.dumps(extra, default=str)}"
        # stacklevel points funcName/lineno at the caller of info()/error()
        self.logger.log(level, message, stacklevel=3)

    def flush(self) -> None:
        for handler in self.logger.handlers:
            handler.flush()
