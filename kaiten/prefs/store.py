"""本地偏好：所选主题、是否已完成引导。读取在构造时同步完成，写入立即落盘。"""
import sys
from typing import Callable, Optional

from kaiten.config import ONBOARDING_KEY, THEME_KEY
from kaiten.events import Subscribers
from kaiten.prefs.theme import Theme, ThemeName, get_theme, resolve
from kaiten.storage import KeyValueFile


class PreferenceStore:
    """主题与引导标记。"""

    def __init__(self, storage: Optional[KeyValueFile] = None):
        self._storage = storage or KeyValueFile()
        self._subscribers: Subscribers["PreferenceStore"] = Subscribers()
        raw = self._storage.get(THEME_KEY, ThemeName.LIGHT.value)
        theme = resolve(raw)
        if raw != theme.value:
            print(f"[kaiten-prefs] 未知主题 {raw!r}，回退到 light", file=sys.stderr, flush=True)
            self._storage.set(THEME_KEY, theme.value)

    def subscribe(self, callback: Callable[["PreferenceStore"], None]) -> Callable[[], None]:
        return self._subscribers.subscribe(callback)

    @property
    def selected_theme(self) -> ThemeName:
        return resolve(self._storage.get(THEME_KEY, ThemeName.LIGHT.value))

    @property
    def current_theme(self) -> Theme:
        return get_theme(self.selected_theme)

    def set_theme(self, name: object) -> ThemeName:
        """设置主题；无法识别的名称按 light 保存。"""
        theme = resolve(name)
        self._storage.set(THEME_KEY, theme.value)
        print(f"[kaiten-prefs] 当前主题: {theme.value}", file=sys.stderr, flush=True)
        self._subscribers.notify(self)
        return theme

    @property
    def did_complete_onboarding(self) -> bool:
        return self._storage.get_bool(ONBOARDING_KEY)

    def complete_onboarding(self) -> None:
        """标记引导已完成；只会置为 True。"""
        if self.did_complete_onboarding:
            return
        self._storage.set(ONBOARDING_KEY, True)
        self._subscribers.notify(self)
