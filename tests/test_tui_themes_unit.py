from prompt_toolkit.styles import Style

from core import TaskStatus
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, THEMES, build_style, get_theme_palette

REQUIRED_KEYS = {
    "",
    "text",
    "text.dim",
    "selected",
    "header",
    "border",
    "border.active",
    "window",
    "field.active",
    "cursor",
    "footer",
    "message",
} | {status.style for status in TaskStatus} | {f"art.{i}" for i in range(5)}


def test_all_themes_have_required_keys():
    for name, palette in THEMES.items():
        missing = REQUIRED_KEYS - set(palette)
        assert not missing, f"{name} is missing {sorted(missing)}"


def test_unknown_theme_falls_back_to_default():
    assert get_theme_palette("no-such-theme") == THEMES[DEFAULT_THEME]


def test_palette_is_a_copy():
    palette = get_theme_palette("mono")
    palette["text"] = "#000000"
    assert THEMES["mono"]["text"] != "#000000"


def test_build_style_for_every_theme():
    for name in THEMES:
        assert isinstance(build_style(name), Style)
