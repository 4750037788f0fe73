"""Key dispatch for the interaction loop."""

from dataclasses import dataclass
from enum import Enum

import readchar

from choicemenu.core.state import SelectionState
from choicemenu.utils.debug import debug_key

ENTER_KEYS = (readchar.key.ENTER, readchar.key.CR, readchar.key.LF)


class LoopState(Enum):
    """Interaction loop states."""

    RUNNING = "running"
    EXITING = "exiting"


class KeyKind(Enum):
    """Kind of key event. Only presses act on the menu."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyPress:
    """A single key event.

    ``key`` holds the decoded key string, compared against readchar.key
    constants (e.g. readchar.key.UP is the ``ESC [ A`` sequence).
    """

    key: str
    kind: KeyKind = KeyKind.PRESS


def handle_key(state: SelectionState, event: KeyPress) -> LoopState:
    """Apply one key event to the selection state.

    Returns LoopState.EXITING for Escape, LoopState.RUNNING otherwise.
    """
    if event.kind is not KeyKind.PRESS:
        return LoopState.RUNNING

    key = event.key
    debug_key("key press", key=key)

    if key == readchar.key.ESC:
        return LoopState.EXITING
    elif key == readchar.key.DOWN:
        state.select_next()
    elif key == readchar.key.UP:
        state.select_previous()
    elif key in ENTER_KEYS:
        state.confirm_selection()
    return LoopState.RUNNING
