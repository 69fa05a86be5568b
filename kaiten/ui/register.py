"""注册对话框：账号、密码、邮箱。"""
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QFormLayout,
    QWidget,
)

from kaiten.auth.models import AuthResult
from kaiten.auth.session import SessionStore
from kaiten.ui.workers import AuthActions


class RegisterDialog(QDialog):
    """注册：后台请求 /api/auth/signup，成功即视为已登录。"""

    def __init__(self, session: SessionStore, actions: AuthActions, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._session = session
        self._actions = actions
        self.setup_ui()

    def setup_ui(self) -> None:
        self.setWindowTitle("Sign Up")
        self.setFixedSize(340, 280)
        layout = QVBoxLayout(self)

        title = QLabel("Sign Up")
        title.setStyleSheet("font-size: 22px; font-weight: bold;")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        form = QFormLayout()
        self._login = QLineEdit()
        self._login.setPlaceholderText("Username")
        form.addRow(self._login)
        self._password = QLineEdit()
        self._password.setEchoMode(QLineEdit.EchoMode.Password)
        self._password.setPlaceholderText("Password")
        form.addRow(self._password)
        self._email = QLineEdit()
        self._email.setPlaceholderText("Email")
        form.addRow(self._email)
        layout.addLayout(form)

        self._error = QLabel("")
        self._error.setStyleSheet("color: red;")
        self._error.setWordWrap(True)
        self._error.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._error.setVisible(False)
        layout.addWidget(self._error)

        self._btn_register = QPushButton("Create Account")
        self._btn_register.clicked.connect(self._do_register)
        layout.addWidget(self._btn_register)
        btn_back = QPushButton("Back")
        btn_back.clicked.connect(self.reject)
        layout.addWidget(btn_back)

    def _show_error(self, msg: str) -> None:
        self._error.setText(msg)
        self._error.setVisible(bool(msg))

    def _do_register(self) -> None:
        login = self._login.text().strip()
        password = self._password.text()
        email = self._email.text().strip()
        client = self._session.client
        started = self._actions.run("signup", lambda: client.sign_up(login, password, email), self._on_result)
        if started:
            self._btn_register.setEnabled(False)
            self._show_error("")

    def _on_result(self, result: AuthResult) -> None:
        self._btn_register.setEnabled(True)
        applied = self._session.apply_auth(result)
        if not applied.success:
            self._show_error(applied.message)
            return
        self.accept()
