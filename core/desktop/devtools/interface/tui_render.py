"""Formatted-text builders for the main screen, the dashboard and the modal windows.

Renderers only read AppState. Widths are measured with wcwidth so CJK titles line up.
"""

from typing import List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText
from wcwidth import wcwidth

from core import (
    DURATION_PRESETS,
    MUSIC_REGION,
    ActiveWindow,
    CreateTaskPayload,
    PlaybackState,
    PomodoroPayload,
    SearchPayload,
    SettingsPayload,
    Task,
    TaskStatus,
    WindowKind,
)
from core.desktop.devtools.interface.constants import DASHBOARD_ART, TIMESTAMP_FORMAT
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_state import AppState
from core.desktop.devtools.interface.tui_windows import window_title

Fragments = List[Tuple[str, str]]

PLAYBACK_ICONS = {
    PlaybackState.PLAYING: "▶",
    PlaybackState.PAUSED: "⏸",
    PlaybackState.STOPPED: "■",
}


def display_width(text: str) -> int:
    return sum(max(0, wcwidth(ch)) for ch in text)


def fit(text: str, width: int) -> str:
    """Truncate `text` to `width` display cells (with an ellipsis) and pad it."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text + " " * (width - display_width(text))
    out: List[str] = []
    used = 0
    for ch in text:
        w = max(0, wcwidth(ch))
        if used + w > width - 1:
            break
        out.append(ch)
        used += w
    return "".join(out) + "…" + " " * (width - used - 1)


def visible_range(total: int, anchor: int, rows: int) -> Tuple[int, int]:
    """Window of `rows` items that keeps `anchor` visible."""
    rows = max(1, rows)
    if total <= rows:
        return 0, total
    start = min(max(0, anchor - rows // 2), total - rows)
    return start, start + rows


def _format_date(value) -> str:
    return value.astimezone().strftime(TIMESTAMP_FORMAT) if value else ""


def _due_text(task: Task) -> str:
    if task.status is TaskStatus.COMPLETED and task.finish_date:
        return translate("FINISHED_LABEL", date=_format_date(task.finish_date))
    if task.due_date:
        return translate("DUE_LABEL", date=_format_date(task.due_date))
    return translate("NO_DUE")


# -------------------- main screen --------------------
def render_status_bar(state: AppState, width: int) -> FormattedText:
    counts = state.store.counts()
    summary = "  ".join(f"{status.icon} {counts[status]}" for status in TaskStatus)
    music = state.music
    icon = PLAYBACK_ICONS[music.playback]
    track = ""
    if music.current_index is not None and music.current_index < len(state.audio_files):
        track = state.audio_files[music.current_index].name
    if track and music.position is not None:
        seconds = int(music.position)
        track += f" {seconds // 60:02d}:{seconds % 60:02d}"
    playback = translate(f"PLAYBACK_{music.playback.name}")
    right = f"{icon} {playback} {track}".rstrip()
    left = f" {translate('APP_TITLE')}  {summary}"
    gap = max(1, width - display_width(left) - display_width(right) - 1)
    return FormattedText([
        ("class:header", left),
        ("", " " * gap),
        ("class:music." + music.playback.value if music.playback is not PlaybackState.STOPPED else "class:text.dim", right),
    ])


def render_task_list(state: AppState, width: int, height: int) -> FormattedText:
    fragments: Fragments = [("class:header", fit(f" {translate('TASK_LIST_TITLE')}", width) + "\n")]
    tasks = state.store.tasks
    if not tasks:
        fragments.append(("class:text.dim", fit(f"  {translate('TASK_LIST_EMPTY')}", width)))
        return FormattedText(fragments)
    rows = max(1, height - 1)
    start, end = visible_range(len(tasks), state.task_nav.scroll_position, rows)
    due_width = max(12, min(28, width // 3))
    title_width = max(4, width - due_width - 6)
    for idx in range(start, end):
        task = tasks[idx]
        selected = idx == state.task_nav.selected
        style = "class:selected" if selected else "class:text"
        pointer = "▸" if selected else " "
        fragments.append((style, f"{pointer} "))
        fragments.append((f"class:{task.status.style}", f"{task.status.icon} "))
        fragments.append((style, fit(task.title, title_width) + " "))
        fragments.append(("class:text.dim", fit(_due_text(task), due_width)))
        if idx < end - 1:
            fragments.append(("", "\n"))
    return FormattedText(fragments)


def render_footer(state: AppState, width: int) -> FormattedText:
    message = state.current_status_message()
    kind = state.window.kind if state.window else None
    hints = translate(f"HINTS_{kind.name}") if kind else translate("HINTS_MAIN")
    fragments: Fragments = []
    if message:
        fragments.append(("class:message", fit(f" {message}", width) + "\n"))
    fragments.append(("class:footer", fit(f" {hints}", width)))
    return FormattedText(fragments)


def render_dashboard(width: int, height: int, version: str) -> FormattedText:
    art_width = max(display_width(line) for line in DASHBOARD_ART)
    pad = " " * max(0, (width - art_width) // 2)
    top = max(0, (height - len(DASHBOARD_ART) - 4) // 2)
    fragments: Fragments = [("", "\n" * top)]
    for idx, line in enumerate(DASHBOARD_ART):
        fragments.append((f"class:art.{idx % 5}", pad + line + "\n"))
    fragments.append(("", "\n"))
    for key, text in (("DASHBOARD_VERSION", translate("DASHBOARD_VERSION", version=version)), ("DASHBOARD_HINT", translate("DASHBOARD_HINT"))):
        style = "class:text.dim" if key == "DASHBOARD_VERSION" else "class:text"
        fragments.append((style, text.center(width).rstrip() + "\n"))
    return FormattedText(fragments)


# -------------------- modal windows --------------------
def _field(label: str, text: str, cursor: Optional[int], width: int, active: bool) -> Fragments:
    """Labelled single-line field; the cursor cell is drawn when `active`."""
    border = "class:border.active" if active else "class:border"
    inner = max(4, width - 4)
    fragments: Fragments = [(border, f"┌ {label} " + "─" * max(0, inner - display_width(label) - 1) + "┐\n")]
    fragments.append((border, "│ "))
    shown = text
    if active and cursor is not None:
        cursor = max(0, min(cursor, len(text)))
        before, at, after = text[:cursor], text[cursor : cursor + 1] or " ", text[cursor + 1 :]
        fragments.append(("class:field.active", before))
        fragments.append(("class:cursor", at))
        used = display_width(before) + display_width(at)
        fragments.append(("class:field.active", fit(after, max(0, inner - used))))
    else:
        fragments.append(("class:field", fit(shown, inner)))
    fragments.append((border, " │\n"))
    fragments.append((border, "└" + "─" * (inner + 2) + "┘\n"))
    return fragments


def _music_list(state: AppState, width: int, rows: int, active: bool) -> Fragments:
    border = "class:border.active" if active else "class:border"
    fragments: Fragments = [(border, fit(f"── {translate('MUSIC_LIST_TITLE')} ", width) + "\n")]
    files = state.audio_files
    if not files:
        fragments.append(("class:text.dim", fit(f"  {translate('MUSIC_LIST_EMPTY')}", width) + "\n"))
        return fragments
    start, end = visible_range(len(files), state.music_nav.scroll_position, rows)
    music = state.music
    for idx in range(start, end):
        selected = idx == state.music_nav.selected
        icon = PLAYBACK_ICONS[music.playback] if idx == music.current_index else " "
        style = "class:selected" if (selected and active) else "class:text"
        fragments.append((style, fit(f"{'▸' if selected else ' '} {icon} {files[idx].name}", width) + "\n"))
    return fragments


def _render_create_task(payload: CreateTaskPayload, width: int) -> Fragments:
    fragments: Fragments = []
    fragments += _field(translate("FIELD_TITLE"), payload.title, payload.cursor, width, payload.active_field == 0)
    fragments += _field(translate("FIELD_DESCRIPTION"), payload.description, payload.cursor, width, payload.active_field == 1)
    return fragments


def _render_search(payload: SearchPayload, width: int) -> Fragments:
    return _field(translate("FIELD_QUERY"), payload.query, payload.cursor, width, True)


def _render_pomodoro(state: AppState, payload: PomodoroPayload, width: int, height: int) -> Fragments:
    border = "class:border.active" if payload.focus == 0 else "class:border"
    fragments: Fragments = [(border, fit(f"── {translate('POMODORO_PRESETS')} ", width) + "\n")]
    for idx, minutes in enumerate(DURATION_PRESETS):
        marker = "(•)" if idx == payload.selected_duration else "( )"
        style = "class:selected" if (payload.focus == 0 and idx == payload.selected_duration) else "class:text"
        fragments.append((style, fit(f"  {marker} {minutes} min", width) + "\n"))
    fragments += _field(translate("POMODORO_CUSTOM"), payload.custom_duration, payload.cursor, width, payload.focus == 1)
    fragments.append(("class:text.dim", fit(translate("POMODORO_CURRENT", minutes=payload.minutes), width) + "\n"))
    rows = max(1, height - len(DURATION_PRESETS) - 8)
    fragments += _music_list(state, width, rows, payload.focus == MUSIC_REGION)
    return fragments


def _render_settings(state: AppState, payload: SettingsPayload, width: int, height: int) -> Fragments:
    fragments: Fragments = []
    options = (
        (translate("SETTINGS_PLAY_DURING"), payload.play_during_pomodoro),
        (translate("SETTINGS_PLAY_ON_FINISH"), payload.play_on_finish),
    )
    for idx, (label, value) in enumerate(options):
        style = "class:selected" if payload.focus == idx else "class:text"
        fragments.append((style, fit(f"  [{'x' if value else ' '}] {label}", width) + "\n"))
    volume = int(round(state.music.volume * 100))
    fragments.append(("class:text.dim", fit(f"  {translate('SETTINGS_VOLUME', volume=volume)}", width) + "\n\n"))
    fragments += _music_list(state, width, max(1, height - 6), payload.focus == MUSIC_REGION)
    return fragments


def _render_task_detail(task: Optional[Task], width: int) -> Fragments:
    if task is None:
        return []
    tags = ", ".join(task.tag_names()) or "—"
    lines = [
        ("class:header", f"{task.status.icon} {task.title}"),
        ("class:text", task.description or "—"),
        ("", ""),
        (f"class:{task.status.style}", task.status.label),
        ("class:text.dim", f"{translate('TAGS_LABEL')}: {tags}"),
        ("class:text.dim", translate("CREATED_LABEL", date=_format_date(task.created_at))),
        ("class:text.dim", _due_text(task)),
    ]
    return [(style, fit(text, width) + "\n") for style, text in lines]


def render_window(state: AppState, window: ActiveWindow) -> FormattedText:
    width = max(10, window.layout.width - 4)
    height = max(3, window.layout.height - 2)
    payload = window.payload
    if isinstance(payload, CreateTaskPayload):
        body = _render_create_task(payload, width)
    elif isinstance(payload, PomodoroPayload):
        body = _render_pomodoro(state, payload, width, height)
    elif isinstance(payload, SettingsPayload):
        body = _render_settings(state, payload, width, height)
    elif isinstance(payload, SearchPayload):
        body = _render_search(payload, width)
    elif window.kind is WindowKind.TASK_DETAIL:
        body = _render_task_detail(state.selected_task, width)
    else:
        body = []
    return FormattedText(body)


def render_window_title(window: Optional[ActiveWindow]) -> str:
    return window_title(window.kind) if window else ""


__all__ = [
    "display_width",
    "fit",
    "visible_range",
    "render_dashboard",
    "render_footer",
    "render_status_bar",
    "render_task_list",
    "render_window",
    "render_window_title",
]
