"""Core modules for choicemenu.

This package provides:
- SelectionState: the highlighted/confirmed choice state
- KeyPress and handle_key: key dispatch for the interaction loop
"""

from choicemenu.core.input import KeyKind, KeyPress, LoopState, handle_key
from choicemenu.core.state import Choice, SelectionState, default_choices

__all__ = [
    "Choice",
    "KeyKind",
    "KeyPress",
    "LoopState",
    "SelectionState",
    "default_choices",
    "handle_key",
]
