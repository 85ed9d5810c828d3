"""
Use case for creating the (empty) selector theme file.
"""

import logging
import os
from typing import Optional

from irongen.config.settings import Settings
from irongen.exceptions import ConfigurationError, ExitCode


class InitConfigUseCase:
    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None):
        self._settings = settings
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> str:
        """
        Make sure the config directory and file exist.

        An existing file is left as is.

        Returns:
            Path of the config file

        Raises:
            ConfigurationError: If the directory or file cannot be created
        """
        config_dir = self._settings.config_dir
        config_file = self._settings.config_file
        try:
            os.makedirs(config_dir, exist_ok=True)
            with open(config_file, "a", encoding="utf-8"):
                pass
        except OSError as e:
            self._logger.error(f"Failed to create config file {config_file}: {e}")
            raise ConfigurationError(
                f"Could not create config file: {config_file}",
                ExitCode.CONFIG_INIT_FAILED,
            )
        self._logger.info(f"Config file ready at {config_file}")
        return config_file
