"""
Tests for the SelectApplicationUseCase and its helpers.
"""

import shutil

import pytest
from conftest import FakeSelector, pick_record

from irongen.adapters.selector.fzf_selector_adapter import FzfSelectorAdapter
from irongen.config.theme import SelectorTheme
from irongen.entities.Application import Application
from irongen.exceptions import ExitCode, SelectionCancelled, SelectorError
from irongen.use_cases.selector.select_application import (
    SELECTOR_FLAGS,
    SelectApplicationUseCase,
    decode_selection,
    serialize_applications,
    strip_placeholders,
)

APPS = [
    Application(name="Files", exec="nautilus --new-window %U", description="Browse"),
    Application(name="Firefox", exec="firefox %u --new-window"),
    Application(name="Terminal", exec="kitty"),
]


class TestStripPlaceholders:
    """Test cases for strip_placeholders."""

    def test_removes_middle_token(self):
        assert strip_placeholders("firefox %u --new-window") == "firefox --new-window"

    def test_removes_trailing_tokens(self):
        assert strip_placeholders("gimp %F %i") == "gimp"

    def test_removes_tokens_containing_percent(self):
        assert strip_placeholders("app --file=%f --flag") == "app --flag"

    def test_without_placeholders(self):
        assert strip_placeholders("  kitty -e htop  ") == "kitty -e htop"

    def test_keeps_inner_spacing(self):
        assert strip_placeholders("a  b %u\tc") == "a  b c"


class TestDecodeSelection:
    """Test cases for decode_selection."""

    def test_last_segment_wins(self):
        output = b"fire\0firefox %u\nFirefox\nNo description available\0"

        assert decode_selection(output) == "firefox %u"

    def test_query_only(self):
        assert decode_selection(b"htop\0") == "htop"

    def test_empty_output_is_cancellation(self):
        with pytest.raises(SelectionCancelled) as exc:
            decode_selection(b"")

        assert exc.value.exit_code == ExitCode.CANCELLED == 130

    def test_only_nulls_is_cancellation(self):
        with pytest.raises(SelectionCancelled):
            decode_selection(b"\0\0")

    def test_not_utf8(self):
        with pytest.raises(SelectorError) as exc:
            decode_selection(b"\xff\xfe\0")

        assert exc.value.exit_code == ExitCode.INVALID_OUTPUT


class TestSerializeApplications:
    """Test cases for the selector wire format."""

    def test_format(self):
        assert serialize_applications(APPS[2:]) == b"kitty\nTerminal\nNo description available\0"

    def test_round_trip(self):
        payload = serialize_applications(APPS).decode("utf-8")
        records = payload.rstrip("\0").split("\0")

        assert [Application.from_record(r) for r in records] == APPS

    def test_empty_collection(self):
        assert serialize_applications([]) == b""


class TestSelectApplicationUseCase:
    """Test cases for the SelectApplicationUseCase."""

    def test_returns_quoted_command(self, mock_logger):
        selector = FakeSelector(pick_record(1, query="fire"))
        use_case = SelectApplicationUseCase(selector, SelectorTheme(), mock_logger)

        assert use_case.execute(APPS) == "'firefox --new-window'"
        assert selector.handle.received == serialize_applications(APPS)

    def test_unquoted_policy(self, mock_logger):
        selector = FakeSelector(pick_record(0))
        use_case = SelectApplicationUseCase(
            selector, SelectorTheme(), mock_logger, quote_output=False
        )

        assert use_case.execute(APPS) == "nautilus --new-window"

    def test_arguments(self, mock_logger):
        selector = FakeSelector(pick_record(2))
        theme = SelectorTheme(border="sharp")
        use_case = SelectApplicationUseCase(selector, theme, mock_logger)

        use_case.execute(APPS)

        assert selector.args == [*theme.to_args(), *SELECTOR_FLAGS]
        assert "--read0" in selector.args
        assert "--print0" in selector.args
        assert "--with-nth=2" in selector.args
        assert "--border=sharp" in selector.args

    def test_cancellation(self, mock_logger):
        selector = FakeSelector(lambda data: b"")
        use_case = SelectApplicationUseCase(selector, SelectorTheme(), mock_logger)

        with pytest.raises(SelectionCancelled) as exc:
            use_case.execute(APPS)

        assert exc.value.exit_code == 130

    def test_printed_query_returned(self, mock_logger):
        selector = FakeSelector(lambda data: b"htop -d 5\0")
        use_case = SelectApplicationUseCase(
            selector, SelectorTheme(), mock_logger, quote_output=False
        )

        assert use_case.execute(APPS) == "htop -d 5"

    def test_malformed_output(self, mock_logger):
        selector = FakeSelector(lambda data: b"\x80\0")
        use_case = SelectApplicationUseCase(selector, SelectorTheme(), mock_logger)

        with pytest.raises(SelectorError) as exc:
            use_case.execute(APPS)

        assert exc.value.exit_code == ExitCode.INVALID_OUTPUT

    def test_write_failure_is_fatal(self, mock_logger):
        selector = FakeSelector(pick_record(0), fail_write=True)
        use_case = SelectApplicationUseCase(selector, SelectorTheme(), mock_logger)

        with pytest.raises(SelectorError) as exc:
            use_case.execute(APPS)

        assert exc.value.exit_code == ExitCode.WRITE_FAILED

    def test_default_theme(self, mock_logger):
        use_case = SelectApplicationUseCase(FakeSelector(pick_record(0)))

        assert use_case.build_args()[:4] == SelectorTheme().to_args()


class TestSelectApplicationThroughChildProcess:
    """Drive the use case through a real child process echoing its input."""

    @pytest.mark.skipif(shutil.which("cat") is None, reason="cat not found")
    def test_payload_larger_than_pipe_buffer(self, tmp_path, mock_logger):
        script = tmp_path / "echo-selector"
        script.write_text("#!/bin/sh\nexec cat\n", encoding="utf-8")
        script.chmod(0o755)
        apps = [
            Application(
                name=f"app{i:05d}",
                exec=f"cmd{i} %u --x",
                description="x" * 40,
            )
            for i in range(20000)
        ]
        assert len(serialize_applications(apps)) > 1024 * 1024

        use_case = SelectApplicationUseCase(
            FzfSelectorAdapter(str(script), mock_logger),
            SelectorTheme(),
            mock_logger,
            quote_output=False,
        )

        assert use_case.execute(apps) == "cmd19999 --x"
