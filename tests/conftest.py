"""
Pytest configuration and shared fixtures.
"""

import threading
from pathlib import Path
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from irongen.adapters.environment.os_environment_adapter import OsEnvironmentAdapter
from irongen.container import DependencyContainer
from irongen.exceptions import ExitCode, SelectorError
from irongen.ports.selector.selector_port import SelectorHandle, SelectorPort


class FakeSelectorHandle(SelectorHandle):
    """In-memory selector: answers once the whole input has been written."""

    def __init__(self, respond: Callable[[bytes], bytes], fail_write: bool = False):
        self._respond = respond
        self._fail_write = fail_write
        self._written = threading.Event()
        self.received: Optional[bytes] = None

    def write(self, data: bytes) -> None:
        try:
            if self._fail_write:
                raise SelectorError("failed to write to stdin", ExitCode.WRITE_FAILED)
            self.received = data
        finally:
            self._written.set()

    def wait(self) -> bytes:
        assert self._written.wait(timeout=5)
        return self._respond(self.received or b"")


class FakeSelector(SelectorPort):
    def __init__(self, respond: Callable[[bytes], bytes], fail_write: bool = False):
        self._respond = respond
        self._fail_write = fail_write
        self.args: Optional[list[str]] = None
        self.handle: Optional[FakeSelectorHandle] = None

    def spawn(self, args: list[str]) -> SelectorHandle:
        self.args = args
        self.handle = FakeSelectorHandle(self._respond, self._fail_write)
        return self.handle


def pick_record(index: int, query: str = "") -> Callable[[bytes], bytes]:
    """Responder returning the printed query and the record at ``index``."""

    def respond(data: bytes) -> bytes:
        records = data.decode("utf-8").rstrip("\0").split("\0")
        return f"{query}\0{records[index]}\0".encode("utf-8")

    return respond


def write_desktop(directory: Path, filename: str, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def environment(tmp_path: Path, home_dir: Path) -> OsEnvironmentAdapter:
    """
    Environment pointing every XDG directory inside the temporary directory.

    Returns:
        Environment adapter over a fixed mapping
    """
    return OsEnvironmentAdapter(
        {
            "HOME": str(home_dir),
            "XDG_DATA_DIRS": str(tmp_path / "system"),
            "XDG_DATA_HOME": str(tmp_path / "user"),
            "XDG_CONFIG_HOME": str(tmp_path / "config"),
        }
    )


@pytest.fixture
def dependency_container(environment, mock_logger):
    """
    Create a dependency container with a fixed environment for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(environment=environment)
    container._logger = mock_logger
    return container
