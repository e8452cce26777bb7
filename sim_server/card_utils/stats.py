from dataclasses import dataclass, asdict
from typing import Iterable

from sim_server.card_utils.card import Card
from sim_server.card_utils.pool import is_hit_candidate


@dataclass
class GenerationStats:
    hits: int = 0
    srs: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_stats(cards: Iterable[Card]) -> GenerationStats:
    """Count hits (alternate art, SEC, TR, SP) and the plain SRs left over."""
    stats = GenerationStats()
    for card in cards:
        if is_hit_candidate(card):
            stats.hits += 1
        elif card.rarity == "SR":
            stats.srs += 1
    return stats
