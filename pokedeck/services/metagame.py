"""
Metagame share per archetype.

Shares are computed over a sample of public decks, each tagged with at most
one archetype name. Decks tagged with an archetype that isn't listed still
count toward the total.
"""

import math
from collections import Counter
from collections.abc import Iterable

from pokedeck.models.metagame import Archetype, MetagameShare


def calculate_metagame_share(
    archetypes: Iterable[Archetype],
    deck_archetypes: list[str | None],
) -> list[MetagameShare]:
    """
    Share of the public deck pool held by each archetype.

    Args:
        archetypes: Archetypes to report on
        deck_archetypes: Archetype tag of every public deck in the sample

    Returns:
        One MetagameShare per archetype, largest share first. Ties keep
        the order the archetypes were given in.
    """
    total_decks = len(deck_archetypes)
    counts = Counter(tag for tag in deck_archetypes if tag is not None)

    shares = [
        MetagameShare(
            name=archetype.name,
            tier=archetype.tier,
            meta_share=_one_decimal(counts[archetype.name], total_decks),
            win_rate=archetype.win_rate,
            total_decks=counts[archetype.name],
        )
        for archetype in archetypes
    ]
    shares.sort(key=lambda s: s.meta_share, reverse=True)
    return shares


def _one_decimal(part: int, whole: int) -> float:
    """Percentage rounded half-up to one decimal place."""
    if whole == 0:
        return 0.0
    return math.floor(part / whole * 1000 + 0.5) / 10
