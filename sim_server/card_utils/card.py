# card data class.
# Record for one catalog entry. `id`, `rarity` and `card_set` drive pack
# generation; everything else (name, color, effect text, imageUrl, ...) is
# carried along untouched so the result can be shown and exported.
from typing import Any, Dict


class Card:
    def __init__(self, card_id: str, rarity: str, card_set: str = "", **attributes: Any):
        self.id = card_id
        self.rarity = rarity
        self.card_set = card_set
        self.attributes = attributes

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Card":
        """Build a Card from a catalog JSON entry (camelCase keys).

        `id`, `rarity` and `cardSet` are always stored as strings. Every other
        key, whatever its name, ends up in `attributes`.
        """
        card = cls(
            str(data.get("id") or ""),
            str(data.get("rarity") or ""),
            str(data.get("cardSet") or ""),
        )
        card.attributes = {k: v for k, v in data.items() if k not in ("id", "rarity", "cardSet")}
        return card

    @property
    def name(self) -> str:
        return self.attributes.get("name", "")

    @property
    def image_url(self):
        return self.attributes.get("imageUrl")

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "rarity": self.rarity, "cardSet": self.card_set, **self.attributes}

    def __repr__(self):
        return f"<Card {self.id} ({self.rarity})>"
