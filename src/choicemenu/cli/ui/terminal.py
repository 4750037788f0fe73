"""Scoped ownership of the terminal.

TerminalSession puts stdin in cbreak mode and shows a full-screen rich
Live display on the alternate screen. Both are undone on exit, whatever
the exit path.
"""

import codecs
import os
import select
import sys
import termios
import time
import tty
from collections import deque
from typing import Optional, TextIO

import readchar
from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

from choicemenu.core.input import KeyPress
from choicemenu.utils.constants import ESCAPE_SEQUENCE_DELAY, READ_CHUNK_SIZE
from choicemenu.utils.debug import debug_terminal, log_error
from choicemenu.utils.exceptions import TerminalError

# Application cursor mode sends ESC O A / ESC O B for the arrow keys
_KEY_ALIASES = {
    "\x1bOA": readchar.key.UP,
    "\x1bOB": readchar.key.DOWN,
}


def split_escape_tail(text: str) -> tuple[str, str]:
    """Separate an unfinished escape sequence from the end of text.

    Returns (complete, tail). The tail is a trailing ESC, ``ESC O`` or
    ``ESC [`` plus parameter bytes with no final byte yet; it is empty
    when text ends on a whole key.
    """
    start = text.rfind(readchar.key.ESC)
    if start == -1:
        return text, ""
    tail = text[start:]
    if len(tail) == 1 or tail == "\x1bO":
        return text[:start], tail
    if tail[1] == "[" and not any(_is_final_byte(ch) for ch in tail[2:]):
        return text[:start], tail
    return text, ""


def _is_final_byte(ch: str) -> bool:
    return "\x40" <= ch <= "\x7e"


def split_keys(text: str) -> list[str]:
    """Split decoded terminal input into individual keys.

    CSI (``ESC [``) and SS3 (``ESC O``) sequences become one key each.
    An ESC followed by anything else, or by an unfinished sequence, is a
    lone Escape.
    """
    keys = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != readchar.key.ESC or i + 1 >= len(text):
            keys.append(ch)
            i += 1
            continue

        intro = text[i + 1]
        if intro == "O" and i + 2 < len(text):
            end = i + 3
        elif intro == "[":
            end = i + 2
            # Parameter bytes until a final byte in 0x40-0x7E
            while end < len(text) and not _is_final_byte(text[end]):
                end += 1
            if end >= len(text):
                keys.append(ch)
                i += 1
                continue
            end += 1
        else:
            keys.append(ch)
            i += 1
            continue

        seq = text[i:end]
        keys.append(_KEY_ALIASES.get(seq, seq))
        i = end
    return keys


class TerminalSession:
    """Context manager owning the terminal for one menu run."""

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.console = console or Console()
        self._stdin = stdin or sys.stdin
        self._fd: Optional[int] = None
        self._saved_attrs = None
        self._live: Optional[Live] = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending: deque[str] = deque()

    def __enter__(self) -> "TerminalSession":
        try:
            fd = self._stdin.fileno()
        except (AttributeError, OSError, ValueError) as e:
            raise TerminalError("stdin is not a terminal") from e
        if not os.isatty(fd):
            raise TerminalError("stdin is not a terminal")

        try:
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except termios.error as e:
            raise TerminalError(f"cannot switch terminal to cbreak mode: {e}") from e
        self._fd = fd

        try:
            self._live = Live(
                Text(""),
                console=self.console,
                screen=True,
                auto_refresh=False,
                transient=True,
            )
            self._live.start()
        except BaseException as e:
            self._live = None
            try:
                self._restore_mode()
            except TerminalError as restore_error:
                log_error("terminal", "cannot restore terminal", restore_error, echo=False)
            if isinstance(e, OSError):
                raise TerminalError(f"cannot enter alternate screen: {e}") from e
            raise

        debug_terminal("session started", fd=fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        errors = []
        if self._live is not None:
            try:
                self._live.stop()
            except OSError as e:
                errors.append(e)
            self._live = None
        try:
            self._restore_mode()
        except TerminalError as e:
            errors.append(e)

        debug_terminal("session closed", errors=len(errors))
        if not errors:
            return
        if exc is None:
            raise TerminalError(f"cannot restore terminal: {errors[0]}") from errors[0]
        # Already failing; record the teardown error without masking the original
        log_error("terminal", "cannot restore terminal", errors[0], echo=False)

    def _restore_mode(self) -> None:
        if self._fd is None or self._saved_attrs is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
        except termios.error as e:
            raise TerminalError(f"cannot restore terminal mode: {e}") from e
        finally:
            self._fd = None
            self._saved_attrs = None

    def draw(self, renderable: RenderableType) -> None:
        """Replace the screen contents with renderable."""
        if self._live is None:
            raise TerminalError("terminal session is not active")
        try:
            self._live.update(renderable, refresh=True)
        except OSError as e:
            raise TerminalError(f"cannot draw frame: {e}") from e

    def read_key(self, timeout: float) -> Optional[KeyPress]:
        """Wait up to timeout seconds for one key press.

        Returns None if no key arrived in time.
        """
        if self._pending:
            return KeyPress(self._pending.popleft())
        if self._fd is None:
            raise TerminalError("terminal session is not active")

        data = self._read(timeout)
        if not data:
            return None
        complete, tail = split_escape_tail(self._decoder.decode(data))
        # An unfinished sequence may still be in flight; a tail that stays
        # unfinished past the delay is a lone Escape
        while tail:
            more = self._read(ESCAPE_SEQUENCE_DELAY)
            if not more:
                break
            complete, tail = split_escape_tail(
                complete + tail + self._decoder.decode(more)
            )

        self._pending.extend(split_keys(complete + tail))
        if not self._pending:
            return None
        return KeyPress(self._pending.popleft())

    def _read(self, timeout: float) -> bytes:
        deadline = time.monotonic() + timeout
        while True:
            remaining = max(0.0, deadline - time.monotonic())
            try:
                ready, _, _ = select.select([self._fd], [], [], remaining)
            except InterruptedError:
                continue
            except (OSError, ValueError) as e:
                raise TerminalError(f"cannot poll terminal input: {e}") from e
            if not ready:
                return b""
            try:
                data = os.read(self._fd, READ_CHUNK_SIZE)
            except BlockingIOError:
                continue
            except OSError as e:
                raise TerminalError(f"cannot read terminal input: {e}") from e
            if not data:
                raise TerminalError("terminal input closed")
            return data
