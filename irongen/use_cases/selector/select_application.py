"""
Use case for letting the user pick an application through the selector.
"""

import logging
import re
import threading
from typing import Optional

from irongen.config.theme import SelectorTheme
from irongen.entities.Application import Application
from irongen.exceptions import (
    ExitCode,
    SelectionCancelled,
    SelectorError,
)
from irongen.ports.selector.selector_port import SelectorHandle, SelectorPort

# Records are "exec\nname\ndescription"; only the name is listed, the rest
# is shown in the preview pane.
SELECTOR_FLAGS = [
    "--no-info",
    "--no-bold",
    "--print-query",
    "--bind=ctrl-space:print-query,tab:replace-query",
    "--with-nth=2",
    "--delimiter=\n",
    "--preview=echo {2..3}",
    "--preview-window=border-left",
    "--read0",
    "--print0",
]

_TOKEN = re.compile(r"\S*\s*")


def serialize_applications(applications: list[Application]) -> bytes:
    """Concatenate the null-terminated records of all applications."""
    return "".join(app.to_record() for app in applications).encode("utf-8")


def decode_selection(output: bytes) -> str:
    """
    Extract the chosen exec line from the selector output.

    The output holds the printed query, then the selected record, each null
    terminated. Whatever segment comes last is taken as the answer.

    Args:
        output: Raw selector output

    Returns:
        The first line of the last segment

    Raises:
        SelectorError: If the output is not valid UTF-8
        SelectionCancelled: If there is nothing to pick from the output
    """
    try:
        text = output.decode("utf-8")
    except UnicodeDecodeError:
        raise SelectorError(
            "fzf output isnt utf-8 encoded string", ExitCode.INVALID_OUTPUT
        )

    last = text.strip("\0").split("\0")[-1]
    if not last:
        raise SelectionCancelled()
    return last.split("\n", 1)[0].removesuffix("\r")


def strip_placeholders(command: str) -> str:
    """
    Drop field codes such as ``%u`` or ``%F`` from an exec line.

    Every whitespace separated token containing ``%`` is removed, the other
    tokens keep their original spacing.
    """
    tokens = _TOKEN.findall(command)
    return "".join(token for token in tokens if "%" not in token).strip()


class SelectApplicationUseCase:
    """Run the selector over the applications and return the command to launch."""

    def __init__(
        self,
        selector: SelectorPort,
        theme: Optional[SelectorTheme] = None,
        logger: Optional[logging.Logger] = None,
        quote_output: bool = True,
    ) -> None:
        """
        Initialize the use case.

        Args:
            selector: Port used to spawn the interactive selector
            theme: Appearance flags, defaults when None
            logger: Logger instance to use for logging
            quote_output: Wrap the returned command in single quotes
        """
        self._selector = selector
        self._theme = theme or SelectorTheme()
        self._logger = logger or logging.getLogger(__name__)
        self._quote_output = quote_output

    def build_args(self) -> list[str]:
        return [*self._theme.to_args(), *SELECTOR_FLAGS]

    def execute(self, applications: list[Application]) -> str:
        """
        Let the user choose one application.

        Args:
            applications: Sorted applications to present

        Returns:
            The exec line of the choice without placeholders, single quoted
            unless quoting is disabled

        Raises:
            SelectorError: If the selector round-trip fails
            SelectionCancelled: If the user made no choice
        """
        handle = self._selector.spawn(self.build_args())
        payload = serialize_applications(applications)
        self._logger.info(f"Sending {len(applications)} applications to the selector")

        writer_errors: list[SelectorError] = []
        writer = threading.Thread(
            target=self._write, args=(handle, payload, writer_errors), daemon=True
        )
        writer.start()

        output = handle.wait()
        writer.join()
        if writer_errors:
            raise writer_errors[0]

        command = strip_placeholders(decode_selection(output))
        self._logger.info(f"Selected command: {command}")
        if self._quote_output:
            return f"'{command}'"
        return command

    def _write(
        self, handle: SelectorHandle, payload: bytes, errors: list[SelectorError]
    ) -> None:
        try:
            handle.write(payload)
        except SelectorError as e:
            errors.append(e)
        except Exception as e:
            self._logger.error(f"Unexpected error writing to the selector: {e}")
            errors.append(SelectorError(str(e), ExitCode.WRITE_FAILED))
