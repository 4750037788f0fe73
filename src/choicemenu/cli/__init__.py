"""CLI entry point for choicemenu.

Uses Typer for option parsing; running without a subcommand opens the menu.
"""

from typing import Optional

import typer

from choicemenu.utils.constants import (
    EXIT_INTERRUPTED,
    EXIT_TERMINAL_ERROR,
    MAX_POLL_TIMEOUT_MS,
    MIN_POLL_TIMEOUT_MS,
)

__all__ = ["app", "main"]

app = typer.Typer(
    name="choicemenu",
    help="Pick one of a fixed list of choices in a full-screen terminal menu",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    timeout_ms: Optional[int] = typer.Option(
        None,
        "--timeout-ms",
        min=MIN_POLL_TIMEOUT_MS,
        max=MAX_POLL_TIMEOUT_MS,
        help="How long each loop iteration waits for a key, in milliseconds.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Write debug log lines to $CHOICEMENU_DIR/debug.log.",
    ),
) -> None:
    """Launch the menu if no command given."""
    if ctx.invoked_subcommand is not None:
        return

    from choicemenu.cli.ui import err_console
    from choicemenu.cli.ui.interactive import interactive_menu
    from choicemenu.utils.config import Config
    from choicemenu.utils.debug import log_error, use_config
    from choicemenu.utils.exceptions import TerminalError

    config = Config()
    if timeout_ms is not None:
        config.poll_timeout_ms = timeout_ms
    if debug:
        config.debug = True
    use_config(config)

    try:
        interactive_menu(config)
    except TerminalError as e:
        log_error("terminal", str(e), e, echo=False)
        err_console.print(f"[bold red]error:[/bold red] {e}")
        raise typer.Exit(code=EXIT_TERMINAL_ERROR)
    except KeyboardInterrupt:
        raise typer.Exit(code=EXIT_INTERRUPTED)


@app.command()
def version() -> None:
    """Show the installed version."""
    from choicemenu import __version__
    from choicemenu.cli.ui import console

    console.print(f"choicemenu {__version__}")


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
