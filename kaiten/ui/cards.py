"""卡片页：标签筛选、搜索、添加卡片。"""
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kaiten.cards.board import ALL_TAGS, CardBoard
from kaiten.cards.models import Card


class AddCardDialog(QDialog):
    """新卡片：标题、描述、逗号分隔的标签。"""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle("Add Card")
        self.setMinimumWidth(340)
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self._title = QLineEdit()
        form.addRow("Title:", self._title)
        self._description = QLineEdit()
        form.addRow("Description:", self._description)
        self._tags = QLineEdit()
        self._tags.setPlaceholderText("Tags (comma separated)")
        form.addRow("Tags:", self._tags)
        layout.addLayout(form)

        buttons = QDialogButtonBox()
        buttons.addButton("Add Card", QDialogButtonBox.ButtonRole.AcceptRole)
        buttons.addButton("Close", QDialogButtonBox.ButtonRole.RejectRole)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def values(self) -> tuple[str, str, str]:
        return self._title.text(), self._description.text(), self._tags.text()


class CardItem(QFrame):
    """列表中的单张卡片。"""

    def __init__(self, card: Card, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setFrameStyle(QFrame.Shape.StyledPanel)
        layout = QVBoxLayout(self)
        layout.setSpacing(8)

        title = QLabel(card.title)
        title.setStyleSheet("font-weight: bold;")
        layout.addWidget(title)

        description = QLabel(card.description)
        description.setWordWrap(True)
        description.setStyleSheet("color: gray;")
        layout.addWidget(description)

        tags = QHBoxLayout()
        for tag in card.tags:
            label = QLabel(tag)
            label.setStyleSheet("background: rgba(0, 122, 255, 0.2); border-radius: 5px; padding: 4px;")
            tags.addWidget(label)
        tags.addStretch()
        layout.addLayout(tags)


class CardsTab(QWidget):
    def __init__(self, board: Optional[CardBoard] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._board = board or CardBoard()
        self.setup_ui()
        self._reload_tags()
        self._refresh()

    def setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        title = QLabel("Cards")
        title.setStyleSheet("font-size: 22px; font-weight: bold;")
        header.addWidget(title)
        header.addStretch()
        btn_add = QPushButton("+")
        btn_add.setFixedWidth(40)
        btn_add.clicked.connect(self._on_add)
        header.addWidget(btn_add)
        layout.addLayout(header)

        self._tag_filter = QComboBox()
        self._tag_filter.currentTextChanged.connect(lambda _: self._refresh())
        layout.addWidget(self._tag_filter)

        self._search = QLineEdit()
        self._search.setPlaceholderText("Search")
        self._search.textChanged.connect(lambda _: self._refresh())
        layout.addWidget(self._search)

        self._list = QListWidget()
        self._list.setVerticalScrollMode(QListWidget.ScrollMode.ScrollPerPixel)
        layout.addWidget(self._list)

    def _reload_tags(self) -> None:
        current = self._tag_filter.currentText() or ALL_TAGS
        self._tag_filter.blockSignals(True)
        self._tag_filter.clear()
        self._tag_filter.addItem(ALL_TAGS)
        self._tag_filter.addItems(self._board.all_tags())
        index = self._tag_filter.findText(current, Qt.MatchFlag.MatchExactly)
        self._tag_filter.setCurrentIndex(max(index, 0))
        self._tag_filter.blockSignals(False)

    def _refresh(self) -> None:
        """按当前标签与搜索词重建列表。"""
        self._list.clear()
        tag = self._tag_filter.currentText() or ALL_TAGS
        for card in self._board.filter(tag, self._search.text()):
            item = QListWidgetItem(self._list)
            widget = CardItem(card)
            item.setSizeHint(widget.sizeHint())
            self._list.setItemWidget(item, widget)

    def _on_add(self) -> None:
        dlg = AddCardDialog(self)
        if dlg.exec() != QDialog.DialogCode.Accepted:
            return
        title, description, tags = dlg.values()
        self._board.add(title, description, tags)
        self._reload_tags()
        self._refresh()
