from pydantic import BaseModel
from typing import List


class DecklistRequest(BaseModel):
    card_ids: List[str]


class StatsOut(BaseModel):
    hits: int
    srs: int


class GenerationOut(BaseModel):
    mode: str
    title: str
    total: int
    stats: StatsOut
    cards: List[dict]


class DecklistOut(BaseModel):
    decklist: str
    lines: int
