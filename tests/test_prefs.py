"""本地偏好与主题测试。"""
import json
import tempfile
from pathlib import Path

from kaiten.config import ONBOARDING_KEY, THEME_KEY
from kaiten.prefs.store import PreferenceStore
from kaiten.prefs.theme import THEMES, ThemeName, get_theme, resolve, stylesheet
from kaiten.storage import KeyValueFile


def test_defaults_on_first_run() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        prefs = PreferenceStore(KeyValueFile(Path(tmp) / "prefs.json"))
        assert prefs.selected_theme == ThemeName.LIGHT
        assert prefs.did_complete_onboarding is False


def test_unknown_theme_falls_back_to_light() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        prefs = PreferenceStore(KeyValueFile(Path(tmp) / "prefs.json"))
        prefs.set_theme("dark")
        assert prefs.selected_theme == ThemeName.DARK
        assert prefs.set_theme("purple") == ThemeName.LIGHT
        assert prefs.selected_theme == ThemeName.LIGHT
        assert prefs.current_theme == THEMES[ThemeName.LIGHT]


def test_theme_persists_across_restarts() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "prefs.json"
        PreferenceStore(KeyValueFile(path)).set_theme("blue")
        assert PreferenceStore(KeyValueFile(path)).selected_theme == ThemeName.BLUE


def test_unknown_stored_theme_is_rewritten() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "prefs.json"
        path.write_text(json.dumps({THEME_KEY: "neon"}), encoding="utf-8")
        prefs = PreferenceStore(KeyValueFile(path))
        assert prefs.selected_theme == ThemeName.LIGHT
        assert json.loads(path.read_text(encoding="utf-8"))[THEME_KEY] == "light"


def test_onboarding_flag_is_monotonic() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "prefs.json"
        prefs = PreferenceStore(KeyValueFile(path))
        seen = []
        prefs.subscribe(lambda p: seen.append(p.did_complete_onboarding))
        prefs.complete_onboarding()
        prefs.complete_onboarding()
        assert seen == [True]
        assert PreferenceStore(KeyValueFile(path)).did_complete_onboarding is True
        assert json.loads(path.read_text(encoding="utf-8"))[ONBOARDING_KEY] is True


def test_corrupt_file_reads_as_defaults() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "prefs.json"
        path.write_text("{not json", encoding="utf-8")
        prefs = PreferenceStore(KeyValueFile(path))
        assert prefs.selected_theme == ThemeName.LIGHT
        assert prefs.did_complete_onboarding is False


def test_resolve_theme_names() -> None:
    assert resolve("dark") == ThemeName.DARK
    assert resolve(ThemeName.BLUE) == ThemeName.BLUE
    assert resolve("Dark") == ThemeName.LIGHT
    assert resolve(None) == ThemeName.LIGHT
    assert get_theme("blue").button_text_color == "#ffffff"
    assert THEMES[ThemeName.DARK].background_color in stylesheet(THEMES[ThemeName.DARK])
