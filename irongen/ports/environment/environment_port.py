"""
Environment port interface giving read access to process configuration.
"""

from abc import ABC, abstractmethod
from typing import Optional


class EnvironmentPort(ABC):
    """Port interface for reading environment variables."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read a single environment variable.

        Args:
            key: Name of the variable

        Returns:
            The value, or None when the variable is not set
        """
        pass
