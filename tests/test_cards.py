"""卡片列表筛选与添加测试。"""
from kaiten.cards.board import ALL_TAGS, CardBoard, parse_tags
from kaiten.cards.models import Card


def _board() -> CardBoard:
    return CardBoard([
        Card(title="Groceries", description="Buy milk", tags=["home", "todo"]),
        Card(title="Release", description="Tag the MILESTONE", tags=["work"]),
        Card(title="Gym", description="Leg day", tags=["home"]),
    ])


def test_default_board_has_sample_cards() -> None:
    board = CardBoard()
    assert [c.title for c in board.cards] == ["Card 1", "Card 2"]
    assert board.all_tags() == ["Tag1", "Tag2", "Tag3"]


def test_parse_tags() -> None:
    assert parse_tags(" a, b ,,c ,") == ["a", "b", "c"]
    assert parse_tags("") == []


def test_all_tags_unique_first_seen_order() -> None:
    assert _board().all_tags() == ["home", "todo", "work"]


def test_filter_by_tag_and_search() -> None:
    board = _board()
    assert len(board.filter()) == 3
    assert [c.title for c in board.filter(tag="home")] == ["Groceries", "Gym"]
    assert [c.title for c in board.filter(search="milk")] == ["Groceries"]
    # 描述也参与匹配，不区分大小写
    assert [c.title for c in board.filter(search="milestone")] == ["Release"]
    assert board.filter(tag="work", search="milk") == []
    assert board.filter(tag="missing") == []
    assert len(board.filter(tag=ALL_TAGS, search="")) == 3


def test_add_card() -> None:
    board = _board()
    card = board.add(" Notes ", "Read later", "reading, home")
    assert card.title == "Notes"
    assert card.tags == ["reading", "home"]
    assert board.cards[-1].id == card.id
    assert "reading" in board.all_tags()
    assert [c.title for c in board.filter(tag="home")] == ["Groceries", "Gym", "Notes"]


def test_whitespace_search_is_matched_literally() -> None:
    board = _board()
    # 空白也参与匹配：只有标题或描述含空格的卡片
    assert [c.title for c in board.filter(search=" ")] == ["Groceries", "Release", "Gym"]
    assert board.filter(search="   ") == []
    assert [c.title for c in board.filter(search="leg ")] == ["Gym"]
