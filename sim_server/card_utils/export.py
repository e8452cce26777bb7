# helpers for whoever shows or exports an opening: image keys, highlight
# flags, display order and the decklist text.
import re
from collections import Counter
from typing import Dict, Iterable, List, Optional

from sim_server.card_utils.card import Card
from sim_server.card_utils.pool import is_alternate_art

IMAGE_DIR = "/cards"
SHINY_RARITIES = ("SR", "SEC", "SP", "TR")

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9_-]")
_PARALLEL_SUFFIX = re.compile(r"_p\d+$", re.IGNORECASE)


def sanitize_card_id(card_id: str) -> str:
    return _UNSAFE_ID_CHARS.sub("_", card_id)


def image_path(card: Card) -> str:
    return f"{IMAGE_DIR}/{sanitize_card_id(card.id)}.png"


def image_fallback_url(card: Card) -> Optional[str]:
    """Remote image to use when the local file is missing, if it is absolute."""
    url = card.image_url
    if isinstance(url, str) and url.startswith("http"):
        return url
    return None


def is_shiny(card: Card) -> bool:
    return card.rarity in SHINY_RARITIES or is_alternate_art(card)


def sort_for_display(cards: Iterable[Card]) -> List[Card]:
    return sorted(cards, key=lambda c: c.id)


def base_card_id(card_id: str) -> str:
    """OP14-001_p1 -> OP14-001. Trailing `*` parallels keep their id."""
    return _PARALLEL_SUFFIX.sub("", card_id)


def decklist_counts(cards: Iterable[Card]) -> Dict[str, int]:
    # Counter keeps first-seen order
    return dict(Counter(base_card_id(card.id) for card in cards))


def build_decklist(cards: Iterable[Card]) -> str:
    return "\n".join(f"{count}x{card_id}" for card_id, count in decklist_counts(cards).items())
