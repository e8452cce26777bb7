"""Box and prerelease openings.

Both entry points take the raw catalog, filter and classify it on every call,
and return one flat list of the drawn ``Card`` objects (references into the
catalog, never copies). Packs are built through :class:`PackAssembler`.
"""
from typing import Callable, Dict, Iterable, List, Optional

from sim_server.card_utils.card import Card
from sim_server.card_utils.pack import PACK_SIZE, PackAssembler
from sim_server.card_utils.pool import classify, filter_cards_by_set
from sim_server.card_utils.sampler import Sampler
from sim_logs.loggers import generation_logger

PACKS_PER_BOX = 24
PRERELEASE_PACKS = 6

# (archetype, number of packs), in opening order
PRERELEASE_LAYOUT = (
    ("leader", 2),
    ("double_rare", 2),
    ("hit", 2),
)


def _assembler(catalog: Optional[Iterable[Card]], sampler: Optional[Sampler]) -> PackAssembler:
    tiers = classify(filter_cards_by_set(catalog))
    return PackAssembler(tiers, sampler or Sampler())


def _slot(pool: List[Card], i: int) -> Optional[Card]:
    return pool[i] if i < len(pool) else None


def _report_short_packs(archetype: str, packs: List[List[Card]]):
    short = [i for i, pack in enumerate(packs) if len(pack) < PACK_SIZE]
    if short:
        generation_logger.warning(
            "short_packs_generated",
            archetype=archetype,
            short_packs=len(short),
            smallest=min(len(packs[i]) for i in short),
        )


def flatten(packs: List[List[Card]]) -> List[Card]:
    return [card for pack in packs for card in pack]


def open_box(catalog: Optional[Iterable[Card]], sampler: Optional[Sampler] = None) -> List[List[Card]]:
    """Open a 24-pack box and return the packs.

    Slots 11 and 12 of each pack come from two 24-card pools built once per
    box; commons and uncommons are drawn fresh for every pack.
    """
    assembler = _assembler(catalog, sampler)
    secondary = assembler.secondary_rare_pool()
    leader = assembler.leader_slot_pool()

    packs = [
        assembler.box_pack(_slot(leader, i), _slot(secondary, i))
        for i in range(PACKS_PER_BOX)
    ]
    _report_short_packs("box", packs)
    return packs


def open_prerelease(catalog: Optional[Iterable[Card]], sampler: Optional[Sampler] = None) -> List[List[Card]]:
    """Open the six prerelease packs: two leader, two double rare, two hit."""
    assembler = _assembler(catalog, sampler)
    builders = {
        "leader": assembler.leader_pack,
        "double_rare": assembler.double_rare_pack,
        "hit": assembler.hit_pack,
    }

    packs = []
    for archetype, count in PRERELEASE_LAYOUT:
        for _ in range(count):
            packs.append(builders[archetype]())
    _report_short_packs("prerelease", packs)
    return packs


def generate_box(catalog: Optional[Iterable[Card]], sampler: Optional[Sampler] = None) -> List[Card]:
    return flatten(open_box(catalog, sampler))


def generate_prerelease(catalog: Optional[Iterable[Card]], sampler: Optional[Sampler] = None) -> List[Card]:
    return flatten(open_prerelease(catalog, sampler))


GENERATORS: Dict[str, Callable[..., List[Card]]] = {
    "BOX": generate_box,
    "PRERELEASE": generate_prerelease,
}
