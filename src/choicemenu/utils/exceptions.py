"""Custom exceptions for choicemenu."""


class ChoiceMenuError(Exception):
    """Base exception for all choicemenu errors.

    All choicemenu-specific exceptions inherit from this class, allowing
    callers to catch all choicemenu errors with a single except clause.
    """

    pass


class EmptyChoicesError(ChoiceMenuError, ValueError):
    """Raised when a menu is built without any choices."""

    pass


class TerminalError(ChoiceMenuError):
    """Terminal setup, teardown, polling or drawing failed.

    These are fatal: the CLI restores the terminal and exits non-zero.
    """

    pass
