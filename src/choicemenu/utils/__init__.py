"""Utilities for choicemenu."""

from choicemenu.utils.config import Config, get_choicemenu_dir
from choicemenu.utils.exceptions import ChoiceMenuError, EmptyChoicesError, TerminalError

__all__ = [
    "Config",
    "get_choicemenu_dir",
    "ChoiceMenuError",
    "EmptyChoicesError",
    "TerminalError",
]
