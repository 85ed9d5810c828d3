"""
Use case for computing the directories that hold desktop entries.
"""

import logging
from typing import Optional

from irongen.config.settings import Settings

APPLICATIONS_SUBDIR = "/applications"


class ResolveDirectoriesUseCase:
    """Build the ordered search path from the XDG data directories."""

    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None):
        self._settings = settings
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> list[str]:
        """
        Compute the application directories to scan.

        Returns:
            ``<dir>/applications`` for every system data dir, then the user data dir
        """
        joined = f"{self._settings.data_dirs}:{self._settings.data_home}"
        directories = [
            entry.rstrip("/") + APPLICATIONS_SUBDIR for entry in joined.split(":")
        ]
        self._logger.debug(f"Application directories: {directories}")
        return directories
