"""
Logging configuration for cowchat.

This module provides centralized logging configuration with support for:
- Rotating file logs (the terminal belongs to the TUI)
- Optional console output, silenced by default
- Configurable log levels
"""

import logging
import logging.handlers
from pathlib import Path

from config_manager import ConfigManager, get_config


def setup_logging(config: ConfigManager | None = None):
    """
    Initialize logging configuration for the application.

    Configuration is read from the 'logging' section of config.json:
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - file: Path to log file
    - maxBytes: Maximum log file size before rotation
    - backupCount: Number of backup files to keep
    - console: Whether to enable console output
    - consoleLevel: Console threshold (CRITICAL keeps the TUI clean)
    """
    config = config or get_config()
    log_level_str = config.get_logging_setting("level", "INFO")
    log_file = config.get_logging_setting("file", "logs/cowchat.log")
    max_bytes = config.get_logging_setting("maxBytes", 1048576)
    backup_count = config.get_logging_setting("backupCount", 3)
    console_enabled = config.get_logging_setting("console", True)
    console_level_str = config.get_logging_setting("consoleLevel", "CRITICAL")

    log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    console_level = getattr(logging, console_level_str.upper(), logging.CRITICAL)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    log_path = Path(log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        root_logger.info("=" * 70)
        root_logger.info("cowchat started")
        root_logger.info("=" * 70)
        root_logger.info("Logging initialized - Level: %s, File: %s", log_level_str, log_file)

    except OSError as e:
        # Keep running without a log file
        print(f"Warning: Could not initialize file logging: {e}")

    # Request logging from httpx would flood the file on every message
    for logger_name in ('httpx', 'httpcore'):
        logging.getLogger(logger_name).setLevel(logging.WARNING)

