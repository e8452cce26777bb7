import pytest

from sim_server.card_utils.card import Card
from sim_server.card_utils.sampler import Sampler

OP14_SET = "-THE AZURE SEA'S SEVEN- [OP14]"


class ScriptedRandom:
    """Uniform source that replays queued values, then keeps returning 0.0."""

    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0) if self.values else 0.0


def make_cards(prefix, rarity, count, suffix="", card_set=OP14_SET):
    return [
        Card(f"{prefix}{i:03d}{suffix}", rarity, card_set, name=f"{rarity} card {i}")
        for i in range(1, count + 1)
    ]


@pytest.fixture
def scripted_sampler():
    def build(*values):
        return Sampler(ScriptedRandom(*values))
    return build


@pytest.fixture
def abundant_catalog():
    """Enough of every tier for full-size boxes and prereleases, plus off-set noise."""
    return (
        make_cards("OP14-C", "C", 170)
        + make_cards("OP14-U", "UC", 75)
        + make_cards("OP14-R", "R", 40)
        + make_cards("OP14-S", "SR", 10)
        + make_cards("OP14-X", "SEC", 3)
        + make_cards("OP14-L", "L", 8)
        + make_cards("OP14-S", "SR", 5, suffix="_p1")
        + [Card("OP14-T001", "TR", OP14_SET), Card("OP14-P001", "SP", OP14_SET)]
        + make_cards("EB04-C", "C", 10, card_set="EXTRA BOOSTER [EB04]")
        + make_cards("OP13-C", "C", 20, card_set="[OP13]")
    )
