"""Single-selection cursor over a bounded list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ListCursor:
    """Track one highlighted index inside a list of ``length`` items.

    Every operation clamps instead of raising.  When ``length`` is 0 the
    index stays at 0, which callers must read as "nothing selected".
    """

    selected_index: int = 0
    length: int = 0

    def __post_init__(self) -> None:
        self.resize(self.length)

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def up(self) -> None:
        """Move one step toward index 0."""
        if self.selected_index > 0:
            self.selected_index -= 1

    def down(self) -> None:
        """Move one step toward the last index."""
        if self.length == 0:
            return
        if self.selected_index < self.length - 1:
            self.selected_index += 1

    def page_up(self, step: int) -> None:
        """Move ``step`` entries up, stopping at 0."""
        step = max(step, 0)
        if self.selected_index > step:
            self.selected_index -= step
        elif self.selected_index > 0:
            self.selected_index = 0

    def page_down(self, step: int) -> None:
        """Move ``step`` entries down, stopping at the last index."""
        if self.length == 0:
            return
        step = max(step, 0)
        last = self.length - 1
        if self.selected_index < last - step:
            self.selected_index += step
        elif self.selected_index < last:
            self.selected_index = last

    def reset(self) -> None:
        self.selected_index = 0

    def resize(self, new_length: int) -> None:
        """Adopt a new list length and pull the index back into range."""
        self.length = max(new_length, 0)
        if self.length == 0:
            self.selected_index = 0
        elif self.selected_index >= self.length:
            self.selected_index = self.length - 1
        elif self.selected_index < 0:
            self.selected_index = 0


__all__ = ["ListCursor"]
