"""
Selector theme: border, spacing and colors passed to fzf.

The theme file is a list of ``key: value`` lines. Lines starting with ``#``
are comments and unknown keys are ignored.
"""

import logging
from dataclasses import dataclass, fields
from typing import Optional

DEFAULT_MARGIN = "10,20"
DEFAULT_PADDING = "1"
DEFAULT_BORDER = "rounded"

# (config key, fzf color attribute, default), in the order fzf receives them
COLOR_ATTRIBUTES: list[tuple[str, str, Optional[str]]] = [
    ("color_fg", "fg", "#636363"),
    ("color_bg", "bg", None),
    ("color_fg_plus", "fg+", None),
    ("color_bg_plus", "bg+", "-1"),
    ("color_preview_fg", "preview-fg", None),
    ("color_preview_bg", "preview-bg", None),
    ("color_hl", "hl", "#cccccc"),
    ("color_hl_plus", "hl+", "#ff0055"),
    ("color_gutter", "gutter", "-1"),
    ("color_query", "query", "#00ff6e"),
    ("color_disabled", "disabled", None),
    ("color_info", "info", None),
    ("color_border", "border", None),
    ("color_prompt", "prompt", "#00ff6e"),
    ("color_pointer", "pointer", "#ff0055"),
    ("color_marker", "marker", None),
    ("color_spinner", "spinner", None),
    ("color_header", "header", None),
]


@dataclass(frozen=True)
class SelectorTheme:
    """Theme values read from the config file. ``None`` means use the default."""

    border: Optional[str] = None
    padding: Optional[str] = None
    margin: Optional[str] = None
    color_fg: Optional[str] = None
    color_bg: Optional[str] = None
    color_preview_fg: Optional[str] = None
    color_preview_bg: Optional[str] = None
    color_hl: Optional[str] = None
    color_fg_plus: Optional[str] = None
    color_bg_plus: Optional[str] = None
    color_gutter: Optional[str] = None
    color_hl_plus: Optional[str] = None
    color_query: Optional[str] = None
    color_disabled: Optional[str] = None
    color_info: Optional[str] = None
    color_border: Optional[str] = None
    color_prompt: Optional[str] = None
    color_pointer: Optional[str] = None
    color_marker: Optional[str] = None
    color_spinner: Optional[str] = None
    color_header: Optional[str] = None

    @classmethod
    def parse(cls, raw: str) -> "SelectorTheme":
        """
        Parse the content of a theme file.

        Args:
            raw: File content

        Returns:
            A theme holding every recognized key; later lines override earlier ones
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for line in raw.splitlines():
            if line.strip().startswith("#"):
                continue
            key, sep, value = line.partition(":")
            if not sep:
                continue
            key = key.strip()
            if key in known:
                values[key] = value.strip()
        return cls(**values)

    @classmethod
    def load(cls, path: str, logger: Optional[logging.Logger] = None) -> "SelectorTheme":
        """
        Load the theme file, falling back to defaults when it is unusable.

        Args:
            path: Path of the theme file
            logger: Logger receiving the fallback diagnostic

        Returns:
            The parsed theme, or the default theme
        """
        logger = logger or logging.getLogger(__name__)
        try:
            with open(path, encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            logger.warning(f"Could not open the config file {path}, using default config")
            return cls()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read the config file {path}, using default config: {e}")
            return cls()
        return cls.parse(raw)

    def color_arg(self) -> str:
        pairs = []
        for key, attribute, default in COLOR_ATTRIBUTES:
            value = getattr(self, key)
            if value is None:
                value = default
            if value is not None:
                pairs.append(f"{attribute}:{value}")
        return "--color=" + ",".join(pairs)

    def to_args(self) -> list[str]:
        """
        Render the theme as fzf command line flags.

        Returns:
            ``--color``, ``--margin``, ``--padding`` and ``--border`` flags
        """
        return [
            self.color_arg(),
            f"--margin={self.margin if self.margin is not None else DEFAULT_MARGIN}",
            f"--padding={self.padding if self.padding is not None else DEFAULT_PADDING}",
            f"--border={self.border if self.border is not None else DEFAULT_BORDER}",
        ]
