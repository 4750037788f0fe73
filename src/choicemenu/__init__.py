"""choicemenu - A minimal full-screen terminal menu."""

from importlib.metadata import version

__version__ = version("choice-menu")

from choicemenu.core import Choice, KeyPress, LoopState, SelectionState, handle_key

__all__ = [
    "Choice",
    "KeyPress",
    "LoopState",
    "SelectionState",
    "handle_key",
]
