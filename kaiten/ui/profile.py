"""个人资料页与编辑对话框（编辑只改本地会话，不提交后端）。"""
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kaiten.auth.session import SessionStore


class EditProfileDialog(QDialog):
    def __init__(self, session: SessionStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._session = session
        self.setWindowTitle("Edit Profile")
        self.setMinimumWidth(320)
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self._login = QLineEdit()
        form.addRow("Login:", self._login)
        self._email = QLineEdit()
        form.addRow("Email:", self._email)
        layout.addLayout(form)

        user = session.current_user
        if user:
            self._login.setText(user.login)
            self._email.setText(user.email)

        buttons = QDialogButtonBox()
        buttons.addButton("Save", QDialogButtonBox.ButtonRole.AcceptRole)
        buttons.addButton("Cancel", QDialogButtonBox.ButtonRole.RejectRole)
        buttons.accepted.connect(self._save)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _save(self) -> None:
        self._session.update_profile(self._login.text(), self._email.text())
        self.accept()


class ProfileTab(QWidget):
    def __init__(self, session: SessionStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._session = session
        self.setup_ui()
        session.subscribe(lambda _: self._refresh())
        self._refresh()

    def setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(20)

        self._greeting = QLabel()
        self._greeting.setStyleSheet("font-size: 26px; font-weight: bold;")
        self._greeting.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._greeting)

        self._email = QLabel()
        self._email.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._email)

        btn_edit = QPushButton("Edit Profile")
        btn_edit.clicked.connect(lambda: EditProfileDialog(self._session, self).exec())
        layout.addWidget(btn_edit)
        layout.addStretch()

    def _refresh(self) -> None:
        user = self._session.current_user
        if user is None:
            self._greeting.setText("No user data")
            self._email.setText("")
            return
        self._greeting.setText(f"Hello, {user.login}")
        self._email.setText(f"Email: {user.email}")
