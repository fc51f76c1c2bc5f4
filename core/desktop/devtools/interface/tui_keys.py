"""Key names understood by the router, and the prompt_toolkit translation."""

from typing import Optional

from prompt_toolkit.keys import Keys

ESCAPE = "escape"
ENTER = "enter"
TAB = "tab"
LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"
HOME = "home"
END = "end"
BACKSPACE = "backspace"
DELETE = "delete"
SPACE = " "

_NAMED = {
    Keys.Escape: ESCAPE,
    Keys.ControlM: ENTER,
    Keys.ControlJ: ENTER,
    Keys.ControlI: TAB,
    Keys.Left: LEFT,
    Keys.Right: RIGHT,
    Keys.Up: UP,
    Keys.Down: DOWN,
    Keys.Home: HOME,
    Keys.End: END,
    Keys.ControlH: BACKSPACE,
    Keys.Delete: DELETE,
}


def is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def normalize_key(key, data: str = "") -> Optional[str]:
    """Translate a prompt_toolkit key press into a router key name.

    Returns None for keys the application does not handle (mouse, function
    keys, control chords).
    """
    named = _NAMED.get(key)
    if named:
        return named
    if isinstance(key, str) and is_printable(key):
        return key
    if data and is_printable(data):
        return data
    return None


__all__ = [
    "ESCAPE",
    "ENTER",
    "TAB",
    "LEFT",
    "RIGHT",
    "UP",
    "DOWN",
    "HOME",
    "END",
    "BACKSPACE",
    "DELETE",
    "SPACE",
    "is_printable",
    "normalize_key",
]
