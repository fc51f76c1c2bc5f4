"""Interface-level constants for the tomatodo TUI."""

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

LANG_PACK = {
    "en": {
        "APP_TITLE": "tomatodo",
        "DASHBOARD_HINT": "press any key to continue",
        "DASHBOARD_VERSION": "version {version}",
        "TASK_LIST_TITLE": "Todo List",
        "TASK_LIST_EMPTY": "No tasks yet. Press 'a' to create one.",
        "DUE_LABEL": "due {date}",
        "NO_DUE": "no due date",
        "FINISHED_LABEL": "done {date}",
        "CREATED_LABEL": "created {date}",
        "TAGS_LABEL": "tags",
        "WINDOW_CREATE_TASK": "New todo",
        "WINDOW_POMODORO_SETTINGS": "Pomodoro settings",
        "WINDOW_SETTINGS": "Settings",
        "WINDOW_SEARCH": "Search",
        "WINDOW_TASK_DETAIL": "Task",
        "FIELD_TITLE": "Title",
        "FIELD_DESCRIPTION": "Description",
        "FIELD_QUERY": "Query",
        "POMODORO_PRESETS": "Common durations",
        "POMODORO_CUSTOM": "Custom minutes",
        "POMODORO_CURRENT": "Current: {minutes} min",
        "SETTINGS_PLAY_DURING": "Play music during pomodoro",
        "SETTINGS_PLAY_ON_FINISH": "Play music when finished",
        "SETTINGS_VOLUME": "Volume: {volume}%  (+/-)",
        "MUSIC_LIST_TITLE": "Playlist",
        "MUSIC_LIST_EMPTY": "No mp3/wav files found",
        "PLAYBACK_STOPPED": "stopped",
        "PLAYBACK_PLAYING": "playing",
        "PLAYBACK_PAUSED": "paused",
        "STATUS_TASK_CREATED": "Created: {title}",
        "STATUS_TASK_COMPLETED": "Task completed",
        "STATUS_SEARCH_NO_MATCH": "No task matches '{query}'",
        "STATUS_POMODORO_SAVED": "Pomodoro set to {minutes} min",
        "STATUS_SETTINGS_SAVED": "Settings saved",
        "STATUS_VOLUME": "Volume {volume}% (applies to next track)",
        "STATUS_PLAYBACK_ERROR": "Playback failed: {error}",
        "HINTS_MAIN": "j/k move · a new · s search · enter open · x done · p pomodoro · o settings · space play/pause · q quit",
        "HINTS_CREATE_TASK": "tab switch field · enter create · esc cancel",
        "HINTS_SEARCH": "enter find · esc cancel",
        "HINTS_TASK_DETAIL": "x complete · enter/esc close",
        "HINTS_POMODORO_SETTINGS": "tab focus · ↑/↓ choose · enter save/play · space play/pause · s stop · esc close",
        "HINTS_SETTINGS": "tab focus · space toggle · enter save/play · +/- volume · s stop · esc close",
    },
    "zh": {
        "DASHBOARD_HINT": "按任意键继续",
        "DASHBOARD_VERSION": "版本: {version}",
        "TASK_LIST_TITLE": "待办列表",
        "TASK_LIST_EMPTY": "还没有任务，按 'a' 新建",
        "DUE_LABEL": "截止 {date}",
        "NO_DUE": "无截止日期",
        "FINISHED_LABEL": "完成于 {date}",
        "CREATED_LABEL": "创建于 {date}",
        "TAGS_LABEL": "标签",
        "WINDOW_CREATE_TASK": "创建一个新的todo",
        "WINDOW_POMODORO_SETTINGS": "番茄钟设置",
        "WINDOW_SETTINGS": "设置",
        "WINDOW_SEARCH": "搜索",
        "WINDOW_TASK_DETAIL": "任务详情",
        "FIELD_TITLE": "标题",
        "FIELD_DESCRIPTION": "详细信息",
        "FIELD_QUERY": "关键词",
        "POMODORO_PRESETS": "常用番茄钟时间",
        "POMODORO_CUSTOM": "自定义时间(分钟)",
        "POMODORO_CURRENT": "当前: {minutes} 分钟",
        "SETTINGS_PLAY_DURING": "番茄钟期间播放音乐",
        "SETTINGS_PLAY_ON_FINISH": "结束时播放音乐",
        "SETTINGS_VOLUME": "音量: {volume}%  (+/-)",
        "MUSIC_LIST_TITLE": "音乐播放列表",
        "MUSIC_LIST_EMPTY": "没有找到 mp3/wav 文件",
        "PLAYBACK_STOPPED": "已停止",
        "PLAYBACK_PLAYING": "播放中",
        "PLAYBACK_PAUSED": "已暂停",
        "STATUS_TASK_CREATED": "已创建: {title}",
        "STATUS_TASK_COMPLETED": "任务已完成",
        "STATUS_SEARCH_NO_MATCH": "没有匹配 '{query}' 的任务",
        "STATUS_POMODORO_SAVED": "番茄钟设为 {minutes} 分钟",
        "STATUS_SETTINGS_SAVED": "设置已保存",
        "STATUS_VOLUME": "音量 {volume}%（下一首生效）",
        "STATUS_PLAYBACK_ERROR": "播放失败: {error}",
        "HINTS_MAIN": "j/k 上下移动 · a 新建任务 · s 搜索 · enter 详情 · x 完成 · p 番茄钟 · o 设置 · space 播放/暂停 · q 退出",
    },
}

DASHBOARD_ART = (
    r" _                        _            _       ",
    r"| |_ ___  _ __ ___   __ _| |_ ___   __| | ___  ",
    r"| __/ _ \| '_ ` _ \ / _` | __/ _ \ / _` |/ _ \ ",
    r"| || (_) | | | | | | (_| | || (_) | (_| | (_) |",
    r" \__\___/|_| |_| |_|\__,_|\__\___/ \__,_|\___/ ",
)
