"""未登录时的入口：Log In / Sign Up。"""
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QVBoxLayout,
    QLabel,
    QPushButton,
    QWidget,
)

from kaiten.auth.session import SessionStore
from kaiten.config import APP_TITLE, ASSETS_DIR
from kaiten.ui.login import LoginDialog
from kaiten.ui.register import RegisterDialog
from kaiten.ui.workers import AuthActions

LOGO_PATH = ASSETS_DIR / "app_logo.png"


class WelcomeWidget(QWidget):
    """登录/注册入口；成功后由会话通知切换到主界面。"""

    def __init__(self, session: SessionStore, actions: AuthActions, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._session = session
        self._actions = actions
        self.setup_ui()

    def setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(24)
        layout.addStretch()

        if LOGO_PATH.exists():
            logo = QLabel()
            pixmap = QPixmap(str(LOGO_PATH))
            logo.setPixmap(pixmap.scaledToHeight(120, Qt.TransformationMode.SmoothTransformation))
            logo.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(logo)

        title = QLabel(APP_TITLE)
        title.setStyleSheet("font-size: 26px; font-weight: bold;")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        btn_login = QPushButton("Log In")
        btn_login.setMinimumHeight(40)
        btn_login.clicked.connect(self._on_login)
        layout.addWidget(btn_login)

        btn_register = QPushButton("Sign Up")
        btn_register.setMinimumHeight(40)
        btn_register.clicked.connect(self._on_register)
        layout.addWidget(btn_register)
        layout.addStretch()

    def _on_login(self) -> None:
        LoginDialog(self._session, self._actions, self).exec()

    def _on_register(self) -> None:
        RegisterDialog(self._session, self._actions, self).exec()
