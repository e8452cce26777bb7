from sim_server.card_utils.card import Card
from sim_server.card_utils.stats import GenerationStats, calculate_stats

from conftest import make_cards


def test_known_result():
    cards = (
        [Card("OP14-001_p1", "L"), Card("OP14-090*", "SR")]
        + [Card("OP14-119", "SEC")]
        + make_cards("OP14-S", "SR", 3)
        + make_cards("OP14-C", "C", 6)
    )
    stats = calculate_stats(cards)

    assert stats.hits == 3
    assert stats.srs == 3


def test_treasure_and_special_rares_are_hits():
    stats = calculate_stats([Card("OP14-120", "TR"), Card("OP14-121", "SP"), Card("OP14-050", "R")])
    assert stats == GenerationStats(hits=2, srs=0)


def test_empty_result():
    assert calculate_stats([]).to_dict() == {"hits": 0, "srs": 0}
