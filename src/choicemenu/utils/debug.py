"""Debug logging utility.

The menu owns the screen while it runs, so debug lines only go to the log
file. Errors are also printed to stderr once the terminal is restored.
"""

import sys
import traceback
from datetime import datetime
from typing import Optional

from choicemenu.utils.config import Config

_config: Optional[Config] = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def use_config(config: Config):
    """Use an explicit config (e.g. one with CLI overrides applied)."""
    global _config
    _config = config


def reload_config():
    """Drop the cached config so the next call re-reads the environment."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = _get_config().log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'key', 'state', 'terminal'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    if not _get_config().debug:
        return

    extras = " ".join(f"{k}={v!r}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[choicemenu:{category}] {_timestamp()} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def debug_key(message: str, **kwargs):
    """Log key-handling debug message."""
    debug("key", message, **kwargs)


def debug_state(message: str, **kwargs):
    """Log selection-state debug message."""
    debug("state", message, **kwargs)


def debug_terminal(message: str, **kwargs):
    """Log terminal debug message."""
    debug("terminal", message, **kwargs)


def log_error(
    category: str,
    message: str,
    exc: Optional[BaseException] = None,
    echo: bool = True,
):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'terminal', 'cli'
        message: Error message
        exc: Optional exception to include traceback
        echo: Also print the entry to stderr
    """
    line = f"[choicemenu:{category}] {_timestamp()} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

    if not echo:
        return
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr
