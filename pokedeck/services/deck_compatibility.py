"""
Deck vs. collection comparison.

Answers "can I build this deck from what I own?" by checking every deck
entry against the owned quantity of the same card name.
"""

from collections.abc import Iterable

from pokedeck.models.card import DeckCardEntry
from pokedeck.models.deck import DeckCompatibility, MissingCard


def check_deck_compatibility(
    cards: Iterable[DeckCardEntry],
    collection: dict[str, int],
) -> DeckCompatibility:
    """
    Check which deck entries the collection cannot cover.

    Args:
        cards: Deck entries, in deck order
        collection: Owned cards {name: quantity}

    Returns:
        DeckCompatibility listing each short entry with needed and available
        counts. Entries are checked independently, so two printings of the
        same name are each compared against the full owned count.
    """
    missing: list[MissingCard] = []

    for card in cards:
        available = collection.get(card.name, 0)
        if available < card.quantity:
            missing.append(MissingCard(name=card.name, needed=card.quantity, available=available))

    return DeckCompatibility(can_build=not missing, missing_cards=missing)
