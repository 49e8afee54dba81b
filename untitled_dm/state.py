# untitled-dm — session launcher menu — MIT Licensed
"""
Cursor, selection and last-run output of the menu.

`SelectionState` holds everything the view shows and applies the menu's
transitions. It is only ever mutated by the menu loop, one event at a time.

Invariants:
- `cursor` is a valid index whenever there is at least one choice.
- `selected` is -1 (nothing chosen) or a valid index.
- a successful run clears `last_error`.
"""
from __future__ import annotations

from typing import Sequence

from untitled_dm.logger import logger

NO_SELECTION = -1


class SelectionState:
    """
    Args:
        choices (Sequence[str]): Ordered choice labels.
        selected (int): Default selection, -1 for none. It does not have to
            match the cursor, which always starts on the first choice.
        quit_on_error (bool): Whether a failed run ends the session.
    """

    def __init__(
        self,
        choices: Sequence[str],
        *,
        selected: int = NO_SELECTION,
        quit_on_error: bool = False,
    ) -> None:
        self.choices: tuple[str, ...] = tuple(choices)
        self.cursor: int = 0
        self.selected: int = self._validate_selection(selected)
        self.last_output: str = ""
        self.last_error: str | None = None
        self._quit_on_error = quit_on_error

    def _validate_selection(self, selected: int) -> int:
        if selected == NO_SELECTION or 0 <= selected < len(self.choices):
            return selected
        if selected >= 0:
            logger.warning(
                "Default selection %d is out of range for %d choice(s), ignoring it.",
                selected,
                len(self.choices),
            )
        return NO_SELECTION

    @property
    def quit_on_error(self) -> bool:
        return self._quit_on_error

    def __len__(self) -> int:
        return len(self.choices)

    def move_up(self) -> None:
        if self.choices:
            self.cursor = (self.cursor - 1 + len(self.choices)) % len(self.choices)

    def move_down(self) -> None:
        if self.choices:
            self.cursor = (self.cursor + 1) % len(self.choices)

    def toggle_select(self) -> None:
        """Select the choice under the cursor, or deselect it if already selected."""
        if not self.choices:
            return
        if self.selected == self.cursor:
            self.selected = NO_SELECTION
        else:
            self.selected = self.cursor

    def run_completed(self, output: str) -> None:
        self.last_error = None
        self.last_output = output

    def run_failed(self, output: str, error: str) -> bool:
        """Record a failed run. Returns True when the failure ends the session."""
        self.last_error = error
        self.last_output = output
        return self._quit_on_error
