"""Desktop application launcher built on fzf."""

__version__ = "0.1.0"
