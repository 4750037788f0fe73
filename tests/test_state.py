"""Tests for selection state."""

import random

import pytest

from choicemenu.core.state import Choice, SelectionState, default_choices
from choicemenu.utils.exceptions import ChoiceMenuError, EmptyChoicesError


@pytest.fixture
def state():
    return SelectionState(default_choices())


def test_default_choices():
    """Startup list is Choice 1..3 with derived messages."""
    choices = default_choices()
    assert [c.label for c in choices] == ["Choice 1", "Choice 2", "Choice 3"]
    assert choices[1].message == "You selected Choice 2!"


def test_choice_keeps_explicit_message():
    assert Choice("Tea", "Brewing").message == "Brewing"


def test_initial_state(state):
    assert state.selected_index == 0
    assert state.selected_item == ""
    assert state.selected_message == ""


def test_accepts_plain_strings():
    state = SelectionState(["a", "b"])
    assert state.labels == ["a", "b"]
    assert state.current == Choice("a")


def test_empty_choices_rejected():
    """Empty list fails at construction, not on first key press."""
    with pytest.raises(EmptyChoicesError):
        SelectionState([])

    with pytest.raises(ChoiceMenuError):
        SelectionState(iter(()))


def test_select_next_updates_message(state):
    state.select_next()
    assert state.selected_index == 1
    assert state.selected_message == "You selected Choice 2!"
    assert state.selected_item == ""


def test_select_next_wraps(state):
    for _ in range(3):
        state.select_next()
    assert state.selected_index == 0
    assert state.selected_message == "You selected Choice 1!"


def test_select_previous_wraps(state):
    state.select_previous()
    assert state.selected_index == 2
    assert state.selected_message == "You selected Choice 3!"


def test_confirm_selection(state):
    state.select_next()
    state.confirm_selection()
    assert state.selected_item == "Choice 2"
    assert state.selected_message == "You selected Choice 2!"


def test_confirmed_item_persists_while_moving(state):
    state.confirm_selection()
    state.select_next()
    state.select_next()
    assert state.selected_item == "Choice 1"
    assert state.selected_message == "You selected Choice 3!"


def test_single_choice_stays_put():
    state = SelectionState(["only"])
    state.select_next()
    assert state.selected_index == 0
    state.select_previous()
    assert state.selected_index == 0
    assert state.selected_message == "You selected only!"


@pytest.mark.parametrize("size", [1, 2, 3, 7])
def test_index_stays_in_range(size):
    """Any mix of next/previous keeps the index inside the list."""
    rng = random.Random(size)
    state = SelectionState([f"item {i}" for i in range(size)])
    for _ in range(200):
        rng.choice([state.select_next, state.select_previous])()
        assert 0 <= state.selected_index < size


@pytest.mark.parametrize("size", [1, 2, 5])
def test_next_and_previous_are_inverse(size):
    state = SelectionState([f"item {i}" for i in range(size)])
    for start in range(size):
        state.selected_index = start
        state.select_next()
        state.select_previous()
        assert state.selected_index == start
        state.select_previous()
        state.select_next()
        assert state.selected_index == start


def test_confirm_matches_label_exactly():
    labels = ["  spaced  ", "ünïcödé", "tab\there"]
    state = SelectionState(labels)
    for i, label in enumerate(labels):
        state.selected_index = i
        state.confirm_selection()
        assert state.selected_item == label
        assert state.selected_message == f"You selected {label}!"
