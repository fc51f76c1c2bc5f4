"""Circular list selection shared by the task list and the music list."""

from typing import Optional


class ListNavigator:
    """Selection index paired with a scrollbar position.

    The two never diverge: every successful move writes the same value to
    both. An empty list keeps the selection unset and ignores navigation.
    """

    def __init__(self, count: int = 0):
        self.count = max(0, count)
        self.selected: Optional[int] = 0 if self.count else None
        self.scroll_position: int = 0

    def next(self) -> Optional[int]:
        if not self.count:
            return None
        if self.selected is None or self.selected >= self.count - 1:
            return self.select(0)
        return self.select(self.selected + 1)

    def previous(self) -> Optional[int]:
        if not self.count:
            return None
        if self.selected is None:
            return self.select(0)
        if self.selected == 0:
            return self.select(self.count - 1)
        return self.select(self.selected - 1)

    def select(self, index: Optional[int]) -> Optional[int]:
        if index is None or not 0 <= index < self.count:
            return self.selected
        self.selected = index
        self.scroll_position = index
        return index

    def set_count(self, count: int) -> None:
        self.count = max(0, count)
        if not self.count:
            self.selected = None
            self.scroll_position = 0
        elif self.selected is None:
            self.select(0)
        elif self.selected >= self.count:
            self.select(self.count - 1)


def move_vertical_selection(navigator: ListNavigator, delta: int) -> Optional[int]:
    """Step `navigator` by `delta` rows, wrapping at both ends."""
    step = navigator.next if delta > 0 else navigator.previous
    for _ in range(abs(delta)):
        step()
    return navigator.selected


__all__ = ["ListNavigator", "move_vertical_selection"]
