"""根据偏好与会话状态决定显示哪个顶层界面。"""
from enum import Enum

from kaiten.auth.session import SessionStore
from kaiten.prefs.store import PreferenceStore


class Screen(str, Enum):
    ONBOARDING = "onboarding"
    AUTH = "auth"
    MAIN = "main"


def choose_screen(prefs: PreferenceStore, session: SessionStore) -> Screen:
    if not prefs.did_complete_onboarding:
        return Screen.ONBOARDING
    if not session.is_authorized:
        return Screen.AUTH
    return Screen.MAIN
