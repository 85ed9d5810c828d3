"""
Use case for loading desktop entries into Application entities.
"""

import logging
from itertools import groupby
from typing import Optional

from irongen.entities.Application import DEFAULT_DESCRIPTION, Application
from irongen.exceptions import DescriptorError
from irongen.ports.descriptors.descriptor_repository_port import (
    DescriptorRepositoryPort,
)

NAME_PREFIX = "Name="
DESCRIPTION_PREFIX = "Comment="
EXEC_PREFIX = "Exec="


def parse_descriptor(raw: str) -> Optional[Application]:
    """
    Extract name, comment and exec from a desktop entry.

    The first occurrence of each key wins, wherever it appears in the file.
    Section headers are not taken into account, so a ``Name=`` line of a
    ``[Desktop Action ...]`` group placed before the main group is picked up.

    Args:
        raw: Content of the descriptor file

    Returns:
        The Application, or None when the name or exec is missing
    """
    name: Optional[str] = None
    description: Optional[str] = None
    exec_: Optional[str] = None

    for line in raw.split("\n"):
        if name is not None and description is not None and exec_ is not None:
            break
        line = line.removesuffix("\r")
        if name is None and line.startswith(NAME_PREFIX):
            name = line[len(NAME_PREFIX):]
        if description is None and line.startswith(DESCRIPTION_PREFIX):
            description = line[len(DESCRIPTION_PREFIX):]
        if exec_ is None and line.startswith(EXEC_PREFIX):
            exec_ = line[len(EXEC_PREFIX):]

    if not name or not exec_:
        return None
    return Application(
        name=name,
        exec=exec_,
        description=description if description is not None else DEFAULT_DESCRIPTION,
    )


def sort_and_dedup(applications: list[Application]) -> list[Application]:
    """Sort by name and keep the first application of every name."""
    ordered = sorted(applications, key=lambda app: app.name)
    return [next(group) for _, group in groupby(ordered, key=lambda app: app.name)]


class LoadApplicationsUseCase:
    """Use case for discovering the installed applications."""

    def __init__(
        self,
        repository: DescriptorRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            repository: Repository giving access to descriptor files
            logger: Logger instance to use for logging
        """
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directories: list[str]) -> list[Application]:
        """
        Load every valid descriptor found in the given directories.

        Unreadable directories and files, and descriptors without a name or
        exec line, are skipped.

        Args:
            directories: Directories to scan, in order

        Returns:
            Applications sorted by name, one per name
        """
        applications: list[Application] = []
        for directory in directories:
            try:
                paths = self._repository.list_descriptors(directory)
            except DescriptorError as e:
                self._logger.debug(f"Skipping directory: {e}")
                continue

            for path in paths:
                app = self._load_one(path)
                if app is not None:
                    applications.append(app)

        result = sort_and_dedup(applications)
        self._logger.info(
            f"Loaded {len(result)} applications from {len(directories)} directories"
        )
        return result

    def _load_one(self, path: str) -> Optional[Application]:
        try:
            raw = self._repository.read_descriptor(path)
        except DescriptorError as e:
            self._logger.debug(f"Skipping descriptor: {e}")
            return None

        app = parse_descriptor(raw)
        if app is None:
            self._logger.debug(f"Skipping descriptor without Name or Exec: {path}")
        return app
