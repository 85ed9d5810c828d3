"""
Selector adapter running fzf as a child process.
"""

import logging
import subprocess
from typing import IO, Optional

from typing_extensions import override

from irongen.exceptions import ExitCode, SelectorError
from irongen.ports.selector.selector_port import SelectorHandle, SelectorPort


class FzfProcessHandle(SelectorHandle):
    """Handle on a running fzf process with piped input and output."""

    def __init__(
        self, process: subprocess.Popen[bytes], logger: Optional[logging.Logger] = None
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._process = process
        if process.stdin is None:
            raise SelectorError("failed to get stdin", ExitCode.STDIN_UNAVAILABLE)
        self._stdin: IO[bytes] = process.stdin

    @override
    def write(self, data: bytes) -> None:
        try:
            with self._stdin:
                self._stdin.write(data)
        except OSError as e:
            self._logger.error(f"Writing to selector failed: {e}")
            raise SelectorError("failed to write to stdin", ExitCode.WRITE_FAILED)

    @override
    def wait(self) -> bytes:
        try:
            output = self._process.stdout.read() if self._process.stdout else b""
            returncode = self._process.wait()
        except OSError as e:
            self._logger.error(f"Waiting on selector failed: {e}")
            raise SelectorError("failed to wait on child", ExitCode.WAIT_FAILED)
        self._logger.debug(f"Selector exited with status {returncode}")
        return output


class FzfSelectorAdapter(SelectorPort):
    """Spawn the fzf binary found on PATH (or another compatible command)."""

    def __init__(
        self, command: str = "fzf", logger: Optional[logging.Logger] = None
    ) -> None:
        self._command = command
        self._logger = logger or logging.getLogger(__name__)

    @override
    def spawn(self, args: list[str]) -> SelectorHandle:
        cmd = [self._command, *args]
        try:
            # stderr and the controlling terminal stay attached for the UI
            process = subprocess.Popen(
                cmd, stdin=subprocess.PIPE, stdout=subprocess.PIPE
            )
        except OSError as e:
            self._logger.error(f"Failed to start {self._command}: {e}")
            raise SelectorError(
                f"{self._command} could not be executed", ExitCode.SPAWN_FAILED
            )
        self._logger.info(f"Started selector: {self._command} (pid={process.pid})")
        return FzfProcessHandle(process, self._logger)
