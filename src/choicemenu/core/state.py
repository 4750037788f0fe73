"""Selection state for the menu."""

from dataclasses import dataclass
from typing import Iterable, Union

from choicemenu.utils.constants import DEFAULT_CHOICES
from choicemenu.utils.debug import debug_state
from choicemenu.utils.exceptions import EmptyChoicesError


@dataclass(frozen=True)
class Choice:
    """A selectable entry and the message shown while it is selected."""

    label: str
    message: str = ""

    def __post_init__(self):
        if not self.message:
            object.__setattr__(self, "message", f"You selected {self.label}!")


def default_choices() -> list[Choice]:
    """Choices shown when the menu starts."""
    return [Choice(label) for label in DEFAULT_CHOICES]


class SelectionState:
    """Highlighted index, confirmed item and derived message.

    Labels and messages travel together as Choice pairs, so the message
    for an index always exists.
    """

    def __init__(self, choices: Iterable[Union[Choice, str]]):
        self.choices = tuple(
            c if isinstance(c, Choice) else Choice(c) for c in choices
        )
        if not self.choices:
            raise EmptyChoicesError("menu needs at least one choice")
        self._size = len(self.choices)
        self.selected_index = 0
        self.selected_item = ""
        self.selected_message = ""

    @property
    def labels(self) -> list[str]:
        """Choice labels in display order."""
        return [c.label for c in self.choices]

    @property
    def current(self) -> Choice:
        """The highlighted choice."""
        return self.choices[self.selected_index]

    def _update_message(self):
        self.selected_message = self.current.message

    def select_next(self):
        """Move the highlight down, wrapping to the top."""
        self.selected_index = (self.selected_index + 1) % self._size
        self._update_message()
        debug_state("select_next", index=self.selected_index)

    def select_previous(self):
        """Move the highlight up, wrapping to the bottom."""
        self.selected_index = (self.selected_index - 1 + self._size) % self._size
        self._update_message()
        debug_state("select_previous", index=self.selected_index)

    def confirm_selection(self):
        """Confirm the highlighted choice."""
        self.selected_item = self.current.label
        self._update_message()
        debug_state("confirm_selection", item=self.selected_item)
