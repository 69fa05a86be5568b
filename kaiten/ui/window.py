"""主窗口：按引导标记与登录状态在「引导 / 登录入口 / 主标签页」之间切换。"""
import sys
from typing import Optional

from PyQt6.QtWidgets import QStackedWidget, QTabWidget, QWidget

from kaiten.app.router import Screen, choose_screen
from kaiten.auth.models import AuthResult
from kaiten.auth.session import SessionStore
from kaiten.cards.board import CardBoard
from kaiten.config import APP_TITLE, WINDOW_HEIGHT, WINDOW_WIDTH
from kaiten.prefs.store import PreferenceStore
from kaiten.prefs.theme import stylesheet
from kaiten.ui.cards import CardsTab
from kaiten.ui.onboarding import OnboardingWidget
from kaiten.ui.profile import ProfileTab
from kaiten.ui.settings import SettingsTab
from kaiten.ui.welcome import WelcomeWidget
from kaiten.ui.workers import AuthActions


class MainTabs(QTabWidget):
    """登录后的主界面：Cards / Profile / Settings。"""

    def __init__(self, prefs: PreferenceStore, session: SessionStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.addTab(CardsTab(CardBoard()), "Cards")
        self.addTab(ProfileTab(session), "Profile")
        self.addTab(SettingsTab(prefs, session), "Settings")


class AppWindow(QStackedWidget):
    def __init__(self, prefs: PreferenceStore, session: SessionStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._prefs = prefs
        self._session = session
        self._actions = AuthActions(self)
        self.setWindowTitle(APP_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self._pages = {
            Screen.ONBOARDING: OnboardingWidget(prefs),
            Screen.AUTH: WelcomeWidget(session, self._actions),
            Screen.MAIN: MainTabs(prefs, session),
        }
        for page in self._pages.values():
            self.addWidget(page)

        prefs.subscribe(lambda _: self._apply_prefs())
        session.subscribe(lambda _: self._route())
        self._apply_prefs()

    def _apply_prefs(self) -> None:
        self.setStyleSheet(stylesheet(self._prefs.current_theme))
        self._route()

    def _route(self) -> None:
        self.setCurrentWidget(self._pages[choose_screen(self._prefs, self._session)])

    def restore_session(self) -> None:
        """启动时后台恢复会话；无本地令牌则不发请求。"""
        token = self._session.token
        if not token:
            return
        client = self._session.client
        self._actions.run(
            "restore",
            lambda: client.validate(token),
            lambda result: self._on_restored(token, result),
        )

    def _on_restored(self, token: str, result: AuthResult) -> None:
        if self._session.apply_restore(token, result):
            user = self._session.current_user
            print(f"[kaiten-ui] 会话已恢复: {user.login if user else ''}", file=sys.stderr, flush=True)
