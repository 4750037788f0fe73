"""Tests for the interactive menu loop."""

from collections import deque

import pytest
import readchar
from rich.layout import Layout

from choicemenu.cli.ui.interactive import run_menu
from choicemenu.core.input import KeyPress
from choicemenu.core.state import SelectionState, default_choices


class FakeScreen:
    """Scripted screen: returns queued keys, None meaning a poll timeout."""

    def __init__(self, keys, state=None):
        self.keys = deque(keys)
        self.state = state
        self.frames = []
        self.indices = []
        self.timeouts = []

    def draw(self, renderable):
        self.frames.append(renderable)
        if self.state is not None:
            self.indices.append(self.state.selected_index)

    def read_key(self, timeout):
        self.timeouts.append(timeout)
        if not self.keys:
            pytest.fail("menu kept polling after the script ran out")
        key = self.keys.popleft()
        return None if key is None else KeyPress(key)


@pytest.fixture
def state():
    return SelectionState(default_choices())


def test_walkthrough(state):
    """Down, Down, Down wraps to 0; Up wraps to 2; Enter confirms; Esc exits."""
    screen = FakeScreen(
        [
            readchar.key.DOWN,
            readchar.key.DOWN,
            readchar.key.DOWN,
            readchar.key.UP,
            readchar.key.ENTER,
            readchar.key.ESC,
        ],
        state=state,
    )

    final = run_menu(state, screen, timeout=0.25)

    assert final is state
    assert screen.indices == [0, 1, 2, 0, 2, 2]
    assert state.selected_index == 2
    assert state.selected_item == "Choice 3"
    assert state.selected_message == "You selected Choice 3!"


def test_first_down_message(state):
    screen = FakeScreen([readchar.key.DOWN, readchar.key.ESC])
    run_menu(state, screen, timeout=0.25)
    assert state.selected_index == 1
    assert state.selected_message == "You selected Choice 2!"


def test_escape_stops_reading_keys(state):
    """Keys after Escape are never consumed or applied."""
    screen = FakeScreen([readchar.key.ESC, readchar.key.DOWN, readchar.key.ENTER])
    run_menu(state, screen, timeout=0.25)

    assert list(screen.keys) == [readchar.key.DOWN, readchar.key.ENTER]
    assert state.selected_index == 0
    assert state.selected_item == ""


def test_timeouts_redraw_without_mutation(state):
    screen = FakeScreen([None, None, None, readchar.key.ESC])
    run_menu(state, screen, timeout=0.2)

    assert len(screen.frames) == 4
    assert all(isinstance(frame, Layout) for frame in screen.frames)
    assert screen.timeouts == [0.2] * 4
    assert (state.selected_index, state.selected_item, state.selected_message) == (
        0,
        "",
        "",
    )


def test_renders_before_each_key(state):
    screen = FakeScreen(["x", readchar.key.DOWN, readchar.key.ESC])
    run_menu(state, screen, timeout=0.25)
    assert len(screen.frames) == 3
