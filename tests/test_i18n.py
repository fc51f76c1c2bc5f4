from core.desktop.devtools.interface.constants import LANG_PACK
from core.desktop.devtools.interface.i18n import effective_lang, translate


def test_english_is_forced_under_pytest():
    assert effective_lang() == "en"
    assert translate("WINDOW_SETTINGS") == "Settings"


def test_env_language_wins(monkeypatch):
    monkeypatch.setenv("TOMATODO_LANG", "zh")
    assert translate("WINDOW_SETTINGS") == "设置"


def test_missing_translations_are_backfilled():
    assert set(LANG_PACK["en"]) <= set(LANG_PACK["zh"])


def test_format_arguments_and_fallbacks():
    assert translate("STATUS_TASK_CREATED", title="Buy milk") == "Created: Buy milk"
    assert translate("STATUS_TASK_CREATED") == "Created: {title}"
    assert translate("NO_SUCH_KEY") == "NO_SUCH_KEY"


def test_explicit_language_argument():
    assert translate("WINDOW_SEARCH", lang="zh") == "搜索"
    assert effective_lang("xx") == "en"


def test_unknown_forced_language_falls_back(monkeypatch):
    monkeypatch.setenv("TOMATODO_LANG", "klingon")
    assert effective_lang() == "en"
