"""
Deck composition analysis.

Counts cards per section (Pokémon / Trainer / Energy, decided by card name)
and turns the counts into deck-building suggestions and a 0-100 score.
The thresholds are rules of thumb for 60-card decks.
"""

import math

from pokedeck.config import MAX_COPIES_PER_CARD, STANDARD_DECK_SIZE
from pokedeck.models.deck import (
    DeckAnalysis,
    DeckDraft,
    DeckSection,
    DeckStats,
    DeckSuggestion,
    TypeCount,
)
from pokedeck.services.card_classifier import DEFAULT_CLASSIFIER, CardClassifier

# Energy cards
MIN_ENERGY_CARDS = 8
MAX_ENERGY_CARDS = 20

# Trainer and Pokémon minimums
MIN_TRAINER_CARDS = 10
MIN_POKEMON_CARDS = 10

# Recommendation thresholds, as percentages of the deck itself
RECOMMEND_MIN_POKEMON_SHARE = 20
RECOMMEND_MIN_ENERGY_SHARE = 15
RECOMMEND_MIN_TRAINER_SHARE = 10

# Score penalties, as percentages of a 60-card deck
LOW_ENERGY_SHARE = 15
HIGH_ENERGY_SHARE = 25
LOW_TRAINER_SHARE = 15


def calculate_deck_stats(
    deck: DeckDraft,
    classifier: CardClassifier = DEFAULT_CLASSIFIER,
) -> DeckStats:
    """Total cards, distinct entries, and copies per section label."""
    distribution: dict[str, int] = {}
    for card in deck.cards:
        label = classifier.classify(card).label
        distribution[label] = distribution.get(label, 0) + card.quantity

    # Section order, empty sections omitted
    ordered = {
        section.label: distribution[section.label]
        for section in DeckSection
        if section.label in distribution
    }

    return DeckStats(
        total_cards=deck.total_cards(),
        unique_cards=len(deck.cards),
        type_distribution=ordered,
    )


def analyze_deck(
    deck: DeckDraft,
    classifier: CardClassifier = DEFAULT_CLASSIFIER,
) -> DeckAnalysis:
    """
    Analyze deck composition.

    Returns:
        DeckAnalysis with per-section counts (largest first), the dominant
        section, suggestions and an overall score
    """
    stats = calculate_deck_stats(deck, classifier)
    total = stats.total_cards

    type_counts = [
        TypeCount(type=label, count=count, percentage=_percent(count, total))
        for label, count in stats.type_distribution.items()
    ]
    type_counts.sort(key=lambda t: t.count, reverse=True)
    dominant_type = type_counts[0].type if type_counts else "Unknown"

    pokemon = stats.type_distribution.get(DeckSection.POKEMON.label, 0)
    trainers = stats.type_distribution.get(DeckSection.TRAINER.label, 0)
    energy = stats.type_distribution.get(DeckSection.ENERGY.label, 0)

    suggestions = _build_suggestions(deck, total, pokemon, trainers, energy, classifier)

    return DeckAnalysis(
        stats=stats,
        type_counts=type_counts,
        dominant_type=dominant_type,
        suggestions=suggestions,
        overall_score=_overall_score(trainers, energy),
        recommendation=_recommendation(total, pokemon, trainers, energy),
    )


def _build_suggestions(
    deck: DeckDraft,
    total: int,
    pokemon: int,
    trainers: int,
    energy: int,
    classifier: CardClassifier,
) -> list[DeckSuggestion]:
    suggestions: list[DeckSuggestion] = []

    if total != STANDARD_DECK_SIZE:
        suggestions.append(
            DeckSuggestion(
                type="warning",
                title="Incorrect card count",
                description=(
                    f"The deck has {total} cards, but must have exactly "
                    f"{STANDARD_DECK_SIZE} cards"
                ),
                priority="high",
            )
        )

    if energy < MIN_ENERGY_CARDS:
        suggestions.append(
            DeckSuggestion(
                type="warning",
                title="Low energy",
                description=(
                    f"Only {energy} energy cards. Consider adding more (recommended: 10-15)"
                ),
                priority="high",
            )
        )
    elif energy > MAX_ENERGY_CARDS:
        suggestions.append(
            DeckSuggestion(
                type="info",
                title="Too much energy",
                description=(
                    f"{energy} energy cards may be excessive. Consider cutting to 10-15"
                ),
                priority="medium",
            )
        )

    if trainers < MIN_TRAINER_CARDS:
        suggestions.append(
            DeckSuggestion(
                type="info",
                title="Few trainers",
                description=(
                    f"Only {trainers} trainers. Consider adding more supporters and items"
                ),
                priority="medium",
            )
        )

    if pokemon < MIN_POKEMON_CARDS:
        suggestions.append(
            DeckSuggestion(
                type="warning",
                title="Few Pokémon",
                description=f"Only {pokemon} Pokémon. A deck needs more Pokémon to function",
                priority="high",
            )
        )

    over_limit = [
        card.name
        for card in deck.cards
        if card.quantity > MAX_COPIES_PER_CARD and not classifier.is_basic_energy(card.name)
    ]
    if over_limit:
        suggestions.append(
            DeckSuggestion(
                type="warning",
                title="Duplicate cards",
                description=(
                    f"Some cards have more than {MAX_COPIES_PER_CARD} copies: "
                    f"{', '.join(over_limit)}"
                ),
                priority="high",
            )
        )

    return suggestions


def _recommendation(total: int, pokemon: int, trainers: int, energy: int) -> str:
    """
    One-line verdict on the section mix, first problem wins.

    An empty deck counts as having no Pokémon.
    """
    if _share(pokemon, total) < RECOMMEND_MIN_POKEMON_SHARE:
        return "Few Pokémon in the deck. Consider adding more"
    if _share(energy, total) < RECOMMEND_MIN_ENERGY_SHARE:
        return "Little energy in the deck. Consider adding more energy cards"
    if _share(trainers, total) < RECOMMEND_MIN_TRAINER_SHARE:
        return "Few trainers in the deck. Consider adding more supporters and items"
    return "Good distribution of card types"


def _overall_score(trainers: int, energy: int) -> int:
    """Start from 100 and subtract for lopsided energy and trainer shares."""
    score = 100

    energy_share = energy / STANDARD_DECK_SIZE * 100
    if energy_share < LOW_ENERGY_SHARE:
        score -= 15
    elif energy_share > HIGH_ENERGY_SHARE:
        score -= 10

    trainer_share = trainers / STANDARD_DECK_SIZE * 100
    if trainer_share < LOW_TRAINER_SHARE:
        score -= 10

    return max(0, min(100, score))


def _share(part: int, whole: int) -> float:
    return part / whole * 100 if whole else 0.0


def _percent(part: int, whole: int) -> int:
    """Integer percentage, halves rounded up."""
    if whole == 0:
        return 0
    return math.floor(part / whole * 100 + 0.5)
