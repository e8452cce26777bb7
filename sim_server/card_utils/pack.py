# pack templates.
# A PackAssembler holds the tiers of one filtered pool and builds packs slot by
# slot. Slots that may hit an empty tier name an ordered fallback chain of tiers;
# a slot whose whole chain is empty is left out, so the pack comes up short.
from typing import List, Optional, Sequence

from sim_server.card_utils.card import Card
from sim_server.card_utils.pool import TierPools
from sim_server.card_utils.sampler import Sampler

PACK_SIZE = 12
COMMONS_PER_PACK = 7

# box: slots 11 and 12 of every pack come from two pre-allocated pools
SLOT_POOL_SIZE = 24
BOX_SUPER_RARES = 7
BOX_LEADERS = 7

# prerelease odds
POSSIBLE_HIT_CHANCE = 0.05
POSSIBLE_HIT_UPGRADE_RATE = 0.3
WEIGHTED_HIT_UPGRADE_RATE = 0.33

# fallback chains, tried left to right
SECONDARY_HIT_CHAIN = ("hit_pool", "super_rares")
LEADER_SLOT_CHAIN = ("leaders", "commons")
UPGRADE_CHAIN = ("super_rares", "rares")


def _slots(*cards: Optional[Card]) -> List[Card]:
    return [card for card in cards if card is not None]


class PackAssembler:
    """Builds box and prerelease packs from one set of tiers.

    Every method draws fresh; nothing is remembered between packs except the
    two box slot pools, which the caller builds once per box.
    """

    def __init__(self, tiers: TierPools, sampler: Sampler):
        self.tiers = tiers
        self.sampler = sampler

    def draw_chain(self, chain: Sequence[str]) -> Optional[Card]:
        return self.sampler.draw_first(*self.tiers.candidates(chain))

    def base_slots(self, uncommons: int) -> List[Card]:
        """Seven commons followed by `uncommons` uncommons."""
        return (
            self.sampler.draw_many(self.tiers.commons, COMMONS_PER_PACK)
            + self.sampler.draw_many(self.tiers.uncommons, uncommons)
        )

    # ------------------------------------------------------------------
    # box
    # ------------------------------------------------------------------

    def secondary_rare_pool(self) -> List[Card]:
        """Slot 12 of a box: 1 SEC, 7 SR, 1 hit, rares for the rest, shuffled."""
        t = self.tiers
        pool = []
        if t.secret_rares:
            pool.append(self.sampler.draw_one(t.secret_rares))
        pool.extend(self.sampler.draw_many(t.super_rares, BOX_SUPER_RARES))
        pool.extend(_slots(self.draw_chain(SECONDARY_HIT_CHAIN)))
        pool.extend(self.sampler.draw_many(t.rares, SLOT_POOL_SIZE - len(pool)))
        return self.sampler.shuffle(pool)

    def leader_slot_pool(self) -> List[Card]:
        """Slot 11 of a box: 7 leaders, rares for the rest, shuffled.

        The rares are drawn independently of the secondary pool, so the same
        rare can show up in both.
        """
        pool = self.sampler.draw_many(self.tiers.leaders, BOX_LEADERS)
        pool.extend(self.sampler.draw_many(self.tiers.rares, SLOT_POOL_SIZE - len(pool)))
        return self.sampler.shuffle(pool)

    def box_pack(self, leader_slot: Optional[Card], secondary_slot: Optional[Card]) -> List[Card]:
        return self.base_slots(3) + _slots(leader_slot, secondary_slot)

    # ------------------------------------------------------------------
    # prerelease
    # ------------------------------------------------------------------

    def possible_hit_slot(self, upgrade_chance: float = POSSIBLE_HIT_CHANCE) -> Optional[Card]:
        """A rare that upgrades with probability `upgrade_chance`.

        An upgrade is a hit 30% of the time and a super rare otherwise.
        """
        t = self.tiers
        if self.sampler.roll() < upgrade_chance and (t.upgrade_pool or t.super_rares):
            if self.sampler.roll() < POSSIBLE_HIT_UPGRADE_RATE and t.upgrade_pool:
                return self.sampler.draw_one(t.upgrade_pool)
            return self.draw_chain(UPGRADE_CHAIN)
        return self.sampler.draw_one(t.rares)

    def weighted_hit_slot(self) -> Optional[Card]:
        if self.sampler.roll() < WEIGHTED_HIT_UPGRADE_RATE and self.tiers.upgrade_pool:
            return self.sampler.draw_one(self.tiers.upgrade_pool)
        return self.draw_chain(UPGRADE_CHAIN)

    def leader_pack(self) -> List[Card]:
        # 7 C, 2 UC, 1 L, 1 R, 1 R with a small upgrade chance
        return self.base_slots(2) + _slots(
            self.draw_chain(LEADER_SLOT_CHAIN),
            self.sampler.draw_one(self.tiers.rares),
            self.possible_hit_slot(),
        )

    def double_rare_pack(self) -> List[Card]:
        return self.base_slots(3) + _slots(
            self.sampler.draw_one(self.tiers.rares),
            self.possible_hit_slot(),
        )

    def hit_pack(self) -> List[Card]:
        return self.base_slots(3) + _slots(
            self.sampler.draw_one(self.tiers.rares),
            self.weighted_hit_slot(),
        )
