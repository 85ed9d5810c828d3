"""
Selector port interfaces for driving an external interactive chooser.
"""

from abc import ABC, abstractmethod


class SelectorHandle(ABC):
    """A running selector process."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """
        Write the whole input payload and close the input stream.

        Raises:
            SelectorError: If the input cannot be written
        """
        pass

    @abstractmethod
    def wait(self) -> bytes:
        """
        Wait for the selector to finish.

        Returns:
            Everything the selector wrote to its output

        Raises:
            SelectorError: If waiting on the process fails
        """
        pass


class SelectorPort(ABC):
    """Port interface for spawning the selector."""

    @abstractmethod
    def spawn(self, args: list[str]) -> SelectorHandle:
        """
        Start the selector with the given arguments.

        Args:
            args: Command line flags passed to the selector

        Returns:
            A handle on the running selector

        Raises:
            SelectorError: If the selector cannot be started
        """
        pass
