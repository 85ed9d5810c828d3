"""
Configuration settings for the launcher.
"""

import os
from typing import Optional

from irongen.exceptions import ConfigurationError, ExitCode
from irongen.ports.environment.environment_port import EnvironmentPort

DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"
DEFAULT_SELECTOR = "fzf"
DEFAULT_LOG_LEVEL = "WARNING"
CONFIG_DIR_NAME = "irongen"
CONFIG_FILE_NAME = "config"

_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings:
    """Launcher settings derived from environment variables."""

    def __init__(self, environment: EnvironmentPort):
        self._environment = environment

        self.home: str = self._get_required_env("HOME")
        self.data_dirs: str = self._get_env("XDG_DATA_DIRS", DEFAULT_DATA_DIRS)
        self.data_home: str = self._get_env(
            "XDG_DATA_HOME", f"{self.home}/.local/share"
        )
        self.config_home: str = self._get_env("XDG_CONFIG_HOME", f"{self.home}/.config")
        self.selector_command: str = self._get_env("IRONGEN_SELECTOR", DEFAULT_SELECTOR)
        self.quote_output: bool = (
            self._get_env("IRONGEN_QUOTE_OUTPUT", "1").strip().lower()
            not in _FALSE_VALUES
        )
        self.log_level: str = self._get_env(
            "IRONGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL
        ).upper()

    @property
    def config_dir(self) -> str:
        """Directory holding the selector theme file."""
        return os.path.join(self.config_home.rstrip("/") or "/", CONFIG_DIR_NAME)

    @property
    def config_file(self) -> str:
        """Path of the selector theme file."""
        return os.path.join(self.config_dir, CONFIG_FILE_NAME)

    def _get_required_env(self, key: str) -> str:
        """Get a required environment variable, raise error if missing."""
        value = self._lookup(key)
        if not value:
            raise ConfigurationError(
                "Home directory not found"
                if key == "HOME"
                else f"Required environment variable {key} is not set",
                ExitCode.HOME_NOT_FOUND,
            )
        return value

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return self._lookup(key) or default

    def _lookup(self, key: str) -> Optional[str]:
        return self._environment.get(key)
