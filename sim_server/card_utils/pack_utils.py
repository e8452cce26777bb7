import json
import os
from pathlib import Path
from typing import List, Optional, Union

from .card import Card

DEFAULT_CARD_DATA = Path(__file__).parent.parent / "card_data" / "one_piece_cards.json"
CARD_DATA_PATH = Path(os.getenv("CARD_DATA_PATH", str(DEFAULT_CARD_DATA)))


def load_catalog(path: Optional[Union[str, Path]] = None) -> List[Card]:
    """
    Load the card catalog from a JSON file holding a list of card objects.

    :param path: catalog file; defaults to CARD_DATA_PATH.
    :raises FileNotFoundError: the file does not exist.
    :raises OSError: the path cannot be read (a directory, no permission).
    :raises ValueError: the document is not a list of objects (json errors included).
    """
    full_path = Path(path) if path else CARD_DATA_PATH

    with open(full_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict) and "cards" in data:
        data = data["cards"]
    if not isinstance(data, list):
        raise ValueError(f"{full_path}: expected a list of cards, got {type(data).__name__}")

    return [Card.from_dict(entry) for entry in data if isinstance(entry, dict)]
