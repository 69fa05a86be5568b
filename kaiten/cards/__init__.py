"""卡片列表。"""
from kaiten.cards.models import Card
from kaiten.cards.board import ALL_TAGS, CardBoard, parse_tags

__all__ = ["Card", "ALL_TAGS", "CardBoard", "parse_tags"]
