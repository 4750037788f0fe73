"""UI components for the interactive menu."""

from choicemenu.cli.ui.panels import (
    LEGEND,
    build_layout,
    console,
    err_console,
    render_choices,
)

__all__ = [
    "LEGEND",
    "build_layout",
    "console",
    "err_console",
    "render_choices",
]
