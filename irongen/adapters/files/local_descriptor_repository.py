"""
Local file system adapter for desktop entry files.
"""

import logging
import os

from typing_extensions import override

from irongen.exceptions import DescriptorError
from irongen.ports.descriptors.descriptor_repository_port import (
    DescriptorRepositoryPort,
)

DESCRIPTOR_EXTENSION = ".desktop"


class LocalDescriptorRepository(DescriptorRepositoryPort):
    """Local file system implementation of the descriptor repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def list_descriptors(self, directory: str) -> list[str]:
        """
        List the ``*.desktop`` entries of a directory, without recursing.

        Args:
            directory: Path to the directory to scan

        Returns:
            Paths of the matching entries, in the order the OS returns them

        Raises:
            DescriptorError: If the directory is missing or unreadable
        """
        try:
            entries = os.listdir(directory)
        except OSError as e:
            raise DescriptorError(f"Cannot list directory {directory}: {e}")

        paths = [os.path.join(directory, entry) for entry in entries]
        return [path for path in paths if path.endswith(DESCRIPTOR_EXTENSION)]

    @override
    def read_descriptor(self, path: str) -> str:
        """
        Read a descriptor file as UTF-8 text.

        Args:
            path: Path to the descriptor

        Returns:
            The file content

        Raises:
            DescriptorError: If the file cannot be opened or is not valid UTF-8
        """
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DescriptorError(f"Cannot read descriptor {path}: {e}")
