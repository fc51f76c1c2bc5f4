#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "tokyo-night": {
        "": "#c0caf5",
        "status.ok": "#9ece6a bold",
        "status.todo": "#7aa2f7",
        "status.warn": "#e0af68 bold",
        "status.fail": "#f7768e bold",
        "text": "#c0caf5",
        "text.dim": "#565f89",
        "selected": "bg:#283457 #c0caf5 bold",
        "header": "#ff9e64 bold",
        "border": "#565f89",
        "border.active": "#7dcfff bold",
        "window": "bg:#1a1b26 #c0caf5",
        "window.title": "#bb9af7 bold",
        "field": "bg:#24283b #c0caf5",
        "field.active": "bg:#2f3549 #7dcfff",
        "cursor": "reverse",
        "music.playing": "#9ece6a bold",
        "music.paused": "#e0af68",
        "art.0": "#7dcfff",
        "art.1": "#bb9af7",
        "art.2": "#ff9e64",
        "art.3": "#f7768e",
        "art.4": "#565f89",
        "footer": "#565f89",
        "message": "#e0af68",
    },
    "mono": {
        "": "#d0d0d0",
        "status.ok": "bold",
        "status.todo": "",
        "status.warn": "bold",
        "status.fail": "bold underline",
        "text": "#d0d0d0",
        "text.dim": "#808080",
        "selected": "reverse",
        "header": "bold",
        "border": "#808080",
        "border.active": "bold",
        "window": "",
        "window.title": "bold",
        "field": "",
        "field.active": "underline",
        "cursor": "reverse",
        "music.playing": "bold",
        "music.paused": "",
        "art.0": "bold",
        "art.1": "",
        "art.2": "bold",
        "art.3": "",
        "art.4": "#808080",
        "footer": "#808080",
        "message": "bold",
    },
}

DEFAULT_THEME = "tokyo-night"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
