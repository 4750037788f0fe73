"""Screen layout for the menu."""

from rich.console import Console
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from choicemenu.core.state import SelectionState
from choicemenu.utils.constants import (
    BORDER_STYLE,
    CHOICES_RATIO,
    HIGHLIGHT_STYLE,
    MESSAGE_RATIO,
    SELECTED_RATIO,
)

LEGEND = "[dim]↑↓ navigate • Enter select • Esc quit[/dim]"

console = Console()
err_console = Console(stderr=True)


def render_choices(state: SelectionState) -> Text:
    """One line per choice, the highlighted one styled."""
    text = Text()
    for i, label in enumerate(state.labels):
        if i:
            text.append("\n")
        style = HIGHLIGHT_STYLE if i == state.selected_index else None
        text.append(label, style=style)
    return text


def build_layout(state: SelectionState) -> Layout:
    """Split the screen into choices (60%), selected item and message (20% each)."""
    layout = Layout(name="root")
    layout.split_column(
        Layout(name="choices", ratio=CHOICES_RATIO),
        Layout(name="selected", ratio=SELECTED_RATIO),
        Layout(name="message", ratio=MESSAGE_RATIO),
    )

    layout["choices"].update(
        Panel(
            render_choices(state),
            title="Choices",
            subtitle=LEGEND,
            border_style=BORDER_STYLE,
        )
    )
    layout["selected"].update(
        Panel(Text(f"Selected: {state.selected_item}"), title="Selected Item")
    )
    layout["message"].update(Panel(Text(state.selected_message), title="Message"))
    return layout
