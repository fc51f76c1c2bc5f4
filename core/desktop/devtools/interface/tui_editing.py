"""Single-buffer text editing shared by every text field in every window."""

from typing import NamedTuple

from core.desktop.devtools.interface.tui_keys import (
    BACKSPACE,
    DELETE,
    END,
    HOME,
    LEFT,
    RIGHT,
    is_printable,
)


class EditResult(NamedTuple):
    text: str
    cursor: int
    handled: bool


def clamp_cursor(text: str, cursor: int) -> int:
    return max(0, min(cursor, len(text)))


def cursor_at_end(text: str) -> int:
    """Cursor position used whenever a field becomes active."""
    return len(text)


def edit_text(text: str, cursor: int, key: str) -> EditResult:
    """Apply one key to `text` at `cursor`.

    Left/Right/Home/End move, printable characters insert, Backspace and
    Delete remove. Keys that are not editing keys come back unhandled with the
    buffer untouched.
    """
    cursor = clamp_cursor(text, cursor)
    if key == LEFT:
        return EditResult(text, max(0, cursor - 1), True)
    if key == RIGHT:
        return EditResult(text, min(len(text), cursor + 1), True)
    if key == HOME:
        return EditResult(text, 0, True)
    if key == END:
        return EditResult(text, len(text), True)
    if key == BACKSPACE:
        if cursor == 0:
            return EditResult(text, cursor, True)
        return EditResult(text[: cursor - 1] + text[cursor:], cursor - 1, True)
    if key == DELETE:
        if cursor >= len(text):
            return EditResult(text, cursor, True)
        return EditResult(text[:cursor] + text[cursor + 1 :], cursor, True)
    if is_printable(key):
        return EditResult(text[:cursor] + key + text[cursor:], cursor + 1, True)
    return EditResult(text, cursor, False)


__all__ = ["EditResult", "clamp_cursor", "cursor_at_end", "edit_text"]
