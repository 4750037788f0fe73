"""Interactive menu loop."""

from typing import Optional, Protocol

from rich.console import RenderableType

from choicemenu.cli.ui.panels import build_layout, console
from choicemenu.cli.ui.terminal import TerminalSession
from choicemenu.core.input import KeyPress, LoopState, handle_key
from choicemenu.core.state import SelectionState, default_choices
from choicemenu.utils.config import Config
from choicemenu.utils.debug import debug_state


class Screen(Protocol):
    """What the loop needs from the terminal.

    TerminalSession implements it; tests pass a scripted fake.
    """

    def draw(self, renderable: RenderableType) -> None:
        """Replace the screen contents."""
        ...

    def read_key(self, timeout: float) -> Optional[KeyPress]:
        """Wait up to timeout seconds for a key, None on timeout."""
        ...


def run_menu(state: SelectionState, screen: Screen, timeout: float) -> SelectionState:
    """Render, wait for a key, apply it; repeat until Escape.

    Returns the final state.
    """
    loop_state = LoopState.RUNNING
    while loop_state is LoopState.RUNNING:
        screen.draw(build_layout(state))

        event = screen.read_key(timeout)
        if event is None:
            continue
        loop_state = handle_key(state, event)

    debug_state(
        "menu exited",
        index=state.selected_index,
        item=state.selected_item,
    )
    return state


def interactive_menu(config: Optional[Config] = None) -> SelectionState:
    """Run the menu on the real terminal with the default choices."""
    config = config or Config()
    state = SelectionState(default_choices())

    with TerminalSession(console=console) as session:
        return run_menu(state, session, config.poll_timeout)
