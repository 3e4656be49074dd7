"""
Task Tracker Launcher

Starts the task tracker HTTP service.

Usage:
    python start_server.py
    python start_server.py --port 8080
    python start_server.py --host 0.0.0.0 --port 9000
"""

import argparse
import sys
from dataclasses import replace

from task_tracker.config import ConfigProperties, ServerConfig
from task_tracker.utils.exceptions import ConfigurationError


def build_config(argv=None) -> ServerConfig:
    """Merge command-line flags over settings from the environment."""
    ConfigProperties.load_env_file()
    config = ServerConfig.from_env()

    parser = argparse.ArgumentParser(description="Task Tracker HTTP service")
    parser.add_argument("--host", default=config.host, help=f"Host to bind (default: {config.host})")
    parser.add_argument("--port", type=int, default=config.port, help=f"Port to bind (default: {config.port})")
    parser.add_argument("--reload", action="store_true", default=config.reload,
                        help="Enable auto-reload for development")
    args = parser.parse_args(argv)

    return replace(config, host=args.host, port=args.port, reload=args.reload)


def main(argv=None):
    try:
        config = build_config(argv)
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(2)

    from api.server import start_server
    start_server(config)


if __name__ == "__main__":
    main()
