# card pool filtering and rarity tiers.
# The catalog is narrowed to the simulated sets and then split into the tiers
# the pack templates draw from. Tiers are recomputed on every call.
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from sim_server.card_utils.card import Card

SET_TAGS = ("OP14", "EB04")

# rarities that always count as a hit, on top of every alternate-art print
HIT_RARITIES = ("SEC", "TR", "SP")


def filter_cards_by_set(catalog: Optional[Iterable[Card]]) -> List[Card]:
    """Keep the cards whose id starts with, or whose set label contains, a set tag.

    :param catalog: full card catalog, may be None.
    :return: matching cards in catalog order (empty list for no catalog).
    """
    if not catalog:
        return []
    return [
        card for card in catalog
        if any(card.id.startswith(tag) or tag in card.card_set for tag in SET_TAGS)
    ]


def is_alternate_art(card: Card) -> bool:
    # the id decides, not the rarity field: "OP14-001_p1" and "OP14-001*" are parallels
    return "_p" in card.id or card.id.endswith("*")


def is_common(card: Card) -> bool:
    r = card.rarity
    return "C" in r and "SEC" not in r and "UC" not in r and not is_alternate_art(card)


def is_uncommon(card: Card) -> bool:
    return "UC" in card.rarity and not is_alternate_art(card)


def _is_exact(card: Card, rarity: str) -> bool:
    return card.rarity == rarity and not is_alternate_art(card)


def is_hit_candidate(card: Card) -> bool:
    return is_alternate_art(card) or card.rarity in HIT_RARITIES


@dataclass(frozen=True)
class TierPools:
    """Disjoint rarity tiers of a filtered pool plus the hit/upgrade pool."""

    commons: List[Card] = field(default_factory=list)
    uncommons: List[Card] = field(default_factory=list)
    rares: List[Card] = field(default_factory=list)
    super_rares: List[Card] = field(default_factory=list)
    secret_rares: List[Card] = field(default_factory=list)
    leaders: List[Card] = field(default_factory=list)
    hit_pool: List[Card] = field(default_factory=list)

    @property
    def upgrade_pool(self) -> List[Card]:
        # prerelease packs call the same pool the "upgrade" pool
        return self.hit_pool

    def candidates(self, names: Sequence[str]) -> List[List[Card]]:
        """Resolve a fallback chain of tier names into the pools, in order."""
        return [getattr(self, name) for name in names]

    def counts(self) -> dict:
        return {
            "commons": len(self.commons),
            "uncommons": len(self.uncommons),
            "rares": len(self.rares),
            "super_rares": len(self.super_rares),
            "secret_rares": len(self.secret_rares),
            "leaders": len(self.leaders),
            "hit_pool": len(self.hit_pool),
        }


def classify(pool: Iterable[Card]) -> TierPools:
    cards = list(pool)
    return TierPools(
        commons=[c for c in cards if is_common(c)],
        uncommons=[c for c in cards if is_uncommon(c)],
        rares=[c for c in cards if _is_exact(c, "R")],
        super_rares=[c for c in cards if _is_exact(c, "SR")],
        secret_rares=[c for c in cards if _is_exact(c, "SEC")],
        leaders=[c for c in cards if _is_exact(c, "L")],
        hit_pool=[c for c in cards if is_hit_candidate(c)],
    )
