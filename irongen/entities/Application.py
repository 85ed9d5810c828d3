"""
Application domain entity.
"""

from dataclasses import dataclass, field

DEFAULT_DESCRIPTION = "No description available"


@dataclass(frozen=True)
class Application:
    """
    A launchable application discovered from a desktop entry.

    Attributes:
        name: Display name, also the sort and deduplication key
        exec: Launch command template, may contain placeholder tokens like %u
        description: Human readable comment shown in the preview
    """

    name: str
    exec: str
    description: str = field(default=DEFAULT_DESCRIPTION)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Application name must be a non-empty string")
        if not self.exec:
            raise ValueError("Application exec must be a non-empty string")

    def to_record(self) -> str:
        """
        Serialize the application for the selector's null-delimited input.

        Returns:
            ``exec``, ``name`` and ``description`` on separate lines, null terminated
        """
        return f"{self.exec}\n{self.name}\n{self.description}\0"

    @classmethod
    def from_record(cls, record: str) -> "Application":
        """
        Rebuild an application from one selector record.

        Args:
            record: A record as produced by ``to_record``, with or without the trailing null

        Returns:
            The decoded Application

        Raises:
            ValueError: If the record does not hold the three fields
        """
        parts = record.rstrip("\0").split("\n", 2)
        if len(parts) != 3:
            raise ValueError(f"Malformed selector record: {record!r}")
        exec_, name, description = parts
        return cls(name=name, exec=exec_, description=description)

    def get_details(self) -> dict[str, str]:
        """
        Get comprehensive application information.

        Returns:
            A dictionary containing application info.
        """
        return {
            "name": self.name,
            "description": self.description,
            "exec": self.exec,
        }

    def __str__(self) -> str:
        return f"Application(name='{self.name}', exec='{self.exec}')"
