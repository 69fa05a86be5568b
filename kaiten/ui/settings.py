"""设置页：主题选择、反馈、关于、退出登录。"""
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QGroupBox,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from kaiten.auth.session import SessionStore
from kaiten.prefs.store import PreferenceStore
from kaiten.prefs.theme import THEME_CHOICES

_LABELS = {name.value: label for name, label in THEME_CHOICES}


class FeedbackDialog(QDialog):
    """反馈输入框；暂无反馈接口，提交即关闭。"""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle("Feedback")
        self.setMinimumSize(360, 320)
        layout = QVBoxLayout(self)
        title = QLabel("We value your feedback!")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(title)
        hint = QLabel("Please let us know your thoughts and suggestions to improve the app.")
        hint.setWordWrap(True)
        layout.addWidget(hint)
        self._text = QTextEdit()
        layout.addWidget(self._text)
        btn_submit = QPushButton("Submit")
        btn_submit.clicked.connect(self.accept)
        layout.addWidget(btn_submit)
        btn_close = QPushButton("Close")
        btn_close.clicked.connect(self.reject)
        layout.addWidget(btn_close)


class AboutDialog(QDialog):
    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle("About")
        self.setMinimumWidth(320)
        layout = QVBoxLayout(self)
        title = QLabel("About This App")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(title)
        text = QLabel("This is a sample app to demonstrate token auth and theming.")
        text.setWordWrap(True)
        layout.addWidget(text)
        btn_close = QPushButton("Close")
        btn_close.clicked.connect(self.accept)
        layout.addWidget(btn_close)


class SettingsTab(QWidget):
    def __init__(self, prefs: PreferenceStore, session: SessionStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._prefs = prefs
        self._session = session
        self.setup_ui()
        prefs.subscribe(lambda _: self._refresh())
        self._refresh()

    def setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        theme_box = QGroupBox("Select Theme")
        theme_layout = QVBoxLayout(theme_box)
        self._themes = QListWidget()
        for name, label in THEME_CHOICES:
            item = QListWidgetItem(label)
            item.setData(Qt.ItemDataRole.UserRole, name.value)
            self._themes.addItem(item)
        self._themes.itemClicked.connect(self._on_theme_clicked)
        theme_layout.addWidget(self._themes)
        layout.addWidget(theme_box)

        info_box = QGroupBox("Information")
        info_layout = QVBoxLayout(info_box)
        btn_feedback = QPushButton("Feedback")
        btn_feedback.clicked.connect(lambda: FeedbackDialog(self).exec())
        info_layout.addWidget(btn_feedback)
        btn_about = QPushButton("About")
        btn_about.clicked.connect(lambda: AboutDialog(self).exec())
        info_layout.addWidget(btn_about)
        layout.addWidget(info_box)

        btn_logout = QPushButton("Logout")
        btn_logout.setStyleSheet("color: red;")
        btn_logout.clicked.connect(self._on_logout)
        layout.addWidget(btn_logout)
        layout.addStretch()

    def _refresh(self) -> None:
        """当前主题行加勾。"""
        selected = self._prefs.selected_theme.value
        for i in range(self._themes.count()):
            item = self._themes.item(i)
            name = item.data(Qt.ItemDataRole.UserRole)
            label = _LABELS[name]
            item.setText(f"{label}  ✓" if name == selected else label)

    def _on_theme_clicked(self, item: QListWidgetItem) -> None:
        self._prefs.set_theme(item.data(Qt.ItemDataRole.UserRole))

    def _on_logout(self) -> None:
        answer = QMessageBox.question(
            self,
            "Logout",
            "Are you sure you want to log out?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.Cancel,
        )
        if answer == QMessageBox.StandardButton.Yes:
            self._session.logout()
