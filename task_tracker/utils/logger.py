"""
Logger module - Logging configuration and utilities

This module provides logging configuration with support for:
- File and console logging
- Configuration from .env / config.properties
- Structured logging with context
"""

import logging
import os
from typing import Optional, Any

# Flag to track if ComprehensiveLogger has been initialized
_comprehensive_logger_initialized = False


def _ensure_comprehensive_logger_initialized():
    """
    Initialize ComprehensiveLogger with environment configuration on first use.
    This is called automatically by get_logger().
    """
    global _comprehensive_logger_initialized

    if _comprehensive_logger_initialized:
        return

    _comprehensive_logger_initialized = True

    try:
        from .comprehensive_logger import ComprehensiveLogger
        from task_tracker.config import ConfigProperties

        ConfigProperties.load_env_file()
        ComprehensiveLogger.initialize(**ConfigProperties.get_logging_config())

    except Exception as e:
        # Fallback to basic logging if ComprehensiveLogger initialization fails
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        logging.getLogger(__name__).warning(
            f"Failed to initialize ComprehensiveLogger: {e}. Using basic logging."
        )


def get_logger(name: str, level: Optional[str] = None) -> Any:
    """
    Get or create a logger with standard formatting and environment configuration.

    Args:
        name: Logger name (typically __name__)
        level: Optional logging level override (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        TaskLogger instance, or a basic Logger if the logging system failed to start
    """
    _ensure_comprehensive_logger_initialized()

    try:
        from .comprehensive_logger import ComprehensiveLogger as CL
        logger = CL.get_logger(name)
        if level:
            logger.logger.setLevel(level.upper())
        return logger
    except Exception:
        logger = logging.getLogger(name)
        logger.setLevel((level or os.getenv("TRACKER_LOG_LEVEL", "INFO")).upper())
        return logger
