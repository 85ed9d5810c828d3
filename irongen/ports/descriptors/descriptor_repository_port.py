"""
Descriptor repository port interface defining access to desktop entry files.
"""

from abc import ABC, abstractmethod


class DescriptorRepositoryPort(ABC):
    """Port interface for locating and reading application descriptor files."""

    @abstractmethod
    def list_descriptors(self, directory: str) -> list[str]:
        """
        List descriptor files directly inside a directory.

        Args:
            directory: Path of the directory to scan

        Returns:
            Paths of the entries ending with the descriptor extension

        Raises:
            DescriptorError: If the directory cannot be listed
        """
        pass

    @abstractmethod
    def read_descriptor(self, path: str) -> str:
        """
        Read a descriptor file as text.

        Args:
            path: Path of the descriptor file

        Returns:
            The whole file content

        Raises:
            DescriptorError: If the file cannot be opened or decoded
        """
        pass
