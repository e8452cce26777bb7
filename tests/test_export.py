from sim_server.card_utils.card import Card
from sim_server.card_utils.export import (
    base_card_id,
    build_decklist,
    decklist_counts,
    image_fallback_url,
    image_path,
    is_shiny,
    sanitize_card_id,
    sort_for_display,
)


def test_sanitize_card_id():
    assert sanitize_card_id("OP14-001_p1") == "OP14-001_p1"
    assert sanitize_card_id("OP14-090*") == "OP14-090_"
    assert sanitize_card_id("EB04 013/b") == "EB04_013_b"


def test_image_path_and_fallback():
    card = Card("OP14-090*", "SR", imageUrl="https://example.com/OP14-090.png")
    assert image_path(card) == "/cards/OP14-090_.png"
    assert image_fallback_url(card) == "https://example.com/OP14-090.png"

    assert image_fallback_url(Card("OP14-1", "C", imageUrl="/static/OP14-1.png")) is None
    assert image_fallback_url(Card("OP14-1", "C")) is None


def test_base_card_id():
    assert base_card_id("OP14-001_p1") == "OP14-001"
    assert base_card_id("OP14-001_P12") == "OP14-001"
    assert base_card_id("OP14-001_p") == "OP14-001_p"
    assert base_card_id("OP14-090*") == "OP14-090*"


def test_decklist_groups_parallels_with_base_card():
    cards = [
        Card("OP14-002", "C"),
        Card("OP14-001", "L"),
        Card("OP14-002", "C"),
        Card("OP14-001_p1", "L"),
        Card("OP14-090*", "SR"),
    ]

    assert decklist_counts(cards) == {"OP14-002": 2, "OP14-001": 2, "OP14-090*": 1}
    assert build_decklist(cards) == "2xOP14-002\n2xOP14-001\n1xOP14-090*"


def test_empty_decklist():
    assert build_decklist([]) == ""


def test_is_shiny():
    assert is_shiny(Card("OP14-1", "SR"))
    assert is_shiny(Card("OP14-2", "TR"))
    assert is_shiny(Card("OP14-3_p1", "C"))
    assert not is_shiny(Card("OP14-4", "R"))


def test_sort_for_display_returns_new_list():
    cards = [Card("OP14-003", "C"), Card("EB04-001", "C"), Card("OP14-001", "L")]
    ordered = sort_for_display(cards)

    assert [c.id for c in ordered] == ["EB04-001", "OP14-001", "OP14-003"]
    assert cards[0].id == "OP14-003"
