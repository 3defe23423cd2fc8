"""
Deck Formatter.

Renders a deck as TCG Live JSON or as categorized deck list text.

The text format groups cards under "Pokémon", "Trainer" and "Energy"
headers. Decks may come from anywhere (not only the text importer), so the
grouping is recomputed from card names by a CardClassifier.
"""

import json

from pokedeck.models.card import DeckCardEntry
from pokedeck.models.deck import DeckDraft, DeckSection
from pokedeck.models.export import TCGExportCard, TCGExportFormat
from pokedeck.services.card_classifier import DEFAULT_CLASSIFIER, CardClassifier


def build_tcg_export(deck: DeckDraft) -> TCGExportFormat:
    """Map a deck to the export structure. Set codes and numbers are dropped."""
    return TCGExportFormat(
        name=deck.name,
        format=deck.format,
        cards=[TCGExportCard(name=card.name, count=card.quantity) for card in deck.cards],
    )


def export_to_json(deck: DeckDraft) -> str:
    """
    Format a deck as TCG Live export JSON.

    Returns:
        Indented JSON with keys in name, format, cards order
    """
    export = build_tcg_export(deck)
    return json.dumps(export.model_dump(), indent=2, ensure_ascii=False)


def export_to_text(deck: DeckDraft, classifier: CardClassifier = DEFAULT_CLASSIFIER) -> str:
    """
    Format a deck as categorized deck list text.

    Args:
        deck: Deck to render
        classifier: Keyword configuration used to sort cards into sections

    Returns:
        Sections in Pokémon, Trainer, Energy order, each with a total header.
        Empty sections are left out.
    """
    buckets: dict[DeckSection, list[DeckCardEntry]] = {section: [] for section in DeckSection}
    for card in deck.cards:
        buckets[classifier.classify(card)].append(card)

    blocks: list[str] = []
    for section in DeckSection:
        cards = buckets[section]
        if not cards:
            continue
        total = sum(card.quantity for card in cards)
        lines = [f"{section.label}: {total}"]
        lines.extend(_format_card_line(card) for card in cards)
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks).strip()


def _format_card_line(card: DeckCardEntry) -> str:
    """Format a single card line: quantity, name, set, number."""
    return f"{card.quantity} {card.name} {_set_label(card)} {card.code}".strip()


def _set_label(card: DeckCardEntry) -> str:
    """Set code, or the set prefix of an API-style code like "sv1-26"."""
    if card.set_code is not None:
        return card.set_code
    return card.code.split("-")[0]
