import json
import os
import pathlib
import sys
import logging
from typing import Any

from dotenv import load_dotenv

from custom_types import ApiConfig, LoggingConfig, SessionConfig

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_NAME = "User"
DEFAULT_SOURCE = "cowui"


class ConfigManager:
    """Manages application configuration: API endpoint, session identity, UI and logging"""

    api: ApiConfig
    session: SessionConfig
    ui: dict[str, Any]
    logging: LoggingConfig
    exit_on_error: bool
    _cfg: dict[str, Any]
    cfg_path: str | pathlib.Path

    def __init__(
        self,
        cfg_path: str | pathlib.Path | None = None,
        exit_on_error: bool = True,
        load_env: bool = True
    ) -> None:
        """Initialize the ConfigManager with an optional custom path.

        Args:
            cfg_path: Path to the config.json file (defaults to COWCHAT_CONFIG or
                the standard location if None)
            exit_on_error: Whether to exit the program on configuration errors
            load_env: Whether to read a project .env file before resolving overrides
        """
        self.api = {}
        self.session = {}
        self.ui = {}
        self.logging = {}
        self.exit_on_error = exit_on_error
        self._cfg = {}

        if load_env:
            env_path = self._project_root() / ".env"
            if env_path.exists():
                load_dotenv(env_path, override=False)

        if cfg_path is None:
            cfg_path = os.getenv("COWCHAT_CONFIG") or self._default_config_path()
        self.cfg_path = cfg_path

        self.load_config()

    @staticmethod
    def _project_root() -> pathlib.Path:
        return pathlib.Path(__file__).parent.parent.parent

    def _default_config_path(self) -> pathlib.Path:
        """Get the default path to the config.json file."""
        return self._project_root() / "config" / "config.json"

    def _fail(self, message: str) -> None:
        logger.error(message)
        if self.exit_on_error:
            sys.exit(1)
        raise RuntimeError(message)

    def load_config(self) -> None:
        """Load configuration from the configured path."""
        try:
            with open(self.cfg_path, 'r', encoding='utf-8') as f:
                self._cfg = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self._fail(f"Critical error loading configuration '{self.cfg_path}': {e}")

        if not isinstance(self._cfg, dict):
            self._fail(f"Configuration root must be an object: {self.cfg_path}")

        self.api = self._cfg.get("api", {})
        self.session = self._cfg.get("session", {})
        self.ui = self._cfg.get("ui", {})
        self.logging = self._cfg.get("logging", {})
        logger.debug("Loaded configuration from %s", self.cfg_path)

    def get_setting(self, section: str, key: str, default: Any = None) -> Any:
        """Get a generic setting from the master config"""
        value = self._cfg.get(section, {})
        if not isinstance(value, dict):
            return default
        return value.get(key, default)

    def set_setting(self, section: str, key: str, value: Any) -> None:
        """Set a setting in memory (does not persist to file).

        Args:
            section: Configuration section (e.g., 'api', 'session')
            key: Setting key within the section
            value: Value to set
        """
        if section not in self._cfg:
            self._cfg[section] = {}
        self._cfg[section][key] = value

    def get_logging_setting(self, key: str, default: Any = None) -> Any:
        """Get a logging configuration setting"""
        return self.get_setting("logging", key, default)

    # ============================================================================
    # API and session accessors (environment overrides file)
    # ============================================================================

    def get_base_url(self) -> str:
        """Base URL of the agent API, without trailing slash."""
        url = os.getenv("COWCHAT_API_URL") or self.get_setting("api", "baseUrl", DEFAULT_BASE_URL)
        return url.rstrip("/")

    def get_timeout(self) -> float:
        """HTTP timeout in seconds for both directory lookup and message send."""
        return float(self.get_setting("api", "timeout", DEFAULT_TIMEOUT))

    def get_user_name(self) -> str:
        return os.getenv("COWCHAT_USER_NAME") or self.get_setting("session", "userName", DEFAULT_USER_NAME)

    def get_source(self) -> str:
        """Literal sent as `source` on every outgoing message."""
        return self.get_setting("session", "source", DEFAULT_SOURCE)

    def get_character(self, default: str = "bender") -> str:
        """Name of the talking-head art."""
        return self.ui.get("character", default)


_config: ConfigManager | None = None


def get_config() -> ConfigManager:
    """Get the global ConfigManager instance, loading it on first use."""
    global _config
    if _config is None:
        _config = ConfigManager()
    return _config


def set_config(manager: ConfigManager) -> None:
    """Replace the global ConfigManager (used by the CLI --config flag)."""
    global _config
    _config = manager
