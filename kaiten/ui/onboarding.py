"""首次启动引导：三页介绍，Back / Next / Finish。"""
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QPushButton,
    QWidget,
)

from kaiten.app.onboarding import OnboardingPager
from kaiten.config import ASSETS_DIR
from kaiten.prefs.store import PreferenceStore


class OnboardingWidget(QWidget):
    """点击 Finish 后写入引导完成标记，由偏好通知切换界面。"""

    def __init__(self, prefs: PreferenceStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._pager = OnboardingPager(prefs)
        self.setup_ui()
        self._refresh()

    def setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(30)
        layout.addStretch()

        self._image = QLabel()
        self._image.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._image)

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 28px; font-weight: bold;")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title)

        self._description = QLabel()
        self._description.setWordWrap(True)
        self._description.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._description)

        self._indicator = QLabel()
        self._indicator.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._indicator)
        layout.addStretch()

        buttons = QHBoxLayout()
        self._btn_back = QPushButton("Back")
        self._btn_back.clicked.connect(self._on_back)
        buttons.addWidget(self._btn_back)
        buttons.addStretch()
        self._btn_next = QPushButton("Next")
        self._btn_next.clicked.connect(self._on_next)
        buttons.addWidget(self._btn_next)
        layout.addLayout(buttons)

    def _refresh(self) -> None:
        page = self._pager.page
        path = ASSETS_DIR / page.image
        pixmap = QPixmap(str(path)) if path.exists() else None
        if pixmap is not None and not pixmap.isNull():
            self._image.setPixmap(pixmap.scaledToHeight(200, Qt.TransformationMode.SmoothTransformation))
            self._image.setVisible(True)
        else:
            self._image.setVisible(False)
        self._title.setText(page.title)
        self._description.setText(page.description)
        self._indicator.setText(
            " ".join("●" if i == self._pager.index else "○" for i in range(len(self._pager.pages)))
        )
        self._btn_back.setVisible(self._pager.can_go_back)
        self._btn_next.setText("Finish" if self._pager.is_last else "Next")

    def _on_back(self) -> None:
        self._pager.back()
        self._refresh()

    def _on_next(self) -> None:
        if self._pager.is_last:
            self._pager.finish()
            return
        self._pager.next()
        self._refresh()
