"""卡片列表（进程内，不持久化）：添加、按标签筛选、按关键字搜索。"""
from typing import Iterable, List, Optional

from kaiten.cards.models import Card

ALL_TAGS = "All"


def parse_tags(text: str) -> List[str]:
    """逗号分隔的标签文本 → 标签列表（去空白，丢弃空项）。"""
    return [t.strip() for t in text.split(",") if t.strip()]


def _default_cards() -> List[Card]:
    return [
        Card(title="Card 1", description="Details for card 1", tags=["Tag1", "Tag2"]),
        Card(title="Card 2", description="Details for card 2", tags=["Tag3"]),
    ]


class CardBoard:
    """卡片页背后的数据。"""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: List[Card] = list(cards) if cards is not None else _default_cards()

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def add(self, title: str, description: str = "", tags_text: str = "") -> Card:
        card = Card(title=title.strip(), description=description.strip(), tags=parse_tags(tags_text))
        self._cards.append(card)
        return card

    def all_tags(self) -> List[str]:
        """所有标签，去重，按首次出现顺序。"""
        seen: List[str] = []
        for card in self._cards:
            for tag in card.tags:
                if tag not in seen:
                    seen.append(tag)
        return seen

    def filter(self, tag: str = ALL_TAGS, search: str = "") -> List[Card]:
        """先按标签（All 表示不限），再按标题或描述做不区分大小写的包含匹配。"""
        if tag == ALL_TAGS:
            by_tag = list(self._cards)
        else:
            by_tag = [c for c in self._cards if tag in c.tags]
        if not search:
            return by_tag
        needle = search.casefold()
        return [c for c in by_tag if needle in c.title.casefold() or needle in c.description.casefold()]
