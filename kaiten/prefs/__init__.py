"""本地偏好与主题。"""
from kaiten.prefs.theme import THEMES, Theme, ThemeName, get_theme, resolve
from kaiten.prefs.store import PreferenceStore

__all__ = ["THEMES", "Theme", "ThemeName", "get_theme", "resolve", "PreferenceStore"]
