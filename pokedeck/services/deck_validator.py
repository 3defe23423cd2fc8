"""
Format legality checks for decks.

Rules:
- Standard and Expanded decks have exactly 60 cards
- Limited decks have at least 40 cards
- No more than 4 copies of any card name, across all printings,
  except basic energy

Importing never enforces these rules. Only paths that save or submit a deck
should call ensure_deck_is_legal.
"""

import logging

from pokedeck.config import LIMITED_MIN_DECK_SIZE, MAX_COPIES_PER_CARD, STANDARD_DECK_SIZE
from pokedeck.models.deck import DeckDraft, ValidationResult
from pokedeck.models.failure import DeckRuleViolationError
from pokedeck.services.card_classifier import DEFAULT_CLASSIFIER, CardClassifier

logger = logging.getLogger(__name__)

EXACT_SIZE_FORMATS = frozenset({"standard", "expanded"})
MINIMUM_SIZE_FORMATS = frozenset({"limited"})


def validate_deck_format(
    deck: DeckDraft,
    classifier: CardClassifier = DEFAULT_CLASSIFIER,
) -> ValidationResult:
    """
    Check a deck against the rules of its format.

    All violations are reported, not just the first.

    Args:
        deck: Deck with format and cards
        classifier: Decides which names count as basic energy

    Returns:
        ValidationResult with one message per violation
    """
    errors: list[str] = []
    total_cards = deck.total_cards()
    format_name = deck.format.lower()

    if format_name in EXACT_SIZE_FORMATS and total_cards != STANDARD_DECK_SIZE:
        errors.append(
            f"Deck must have exactly {STANDARD_DECK_SIZE} cards (current: {total_cards})"
        )
    elif format_name in MINIMUM_SIZE_FORMATS and total_cards < LIMITED_MIN_DECK_SIZE:
        errors.append(
            f"Limited deck must have at least {LIMITED_MIN_DECK_SIZE} cards "
            f"(current: {total_cards})"
        )

    # Same name in different sets counts toward one limit
    copies: dict[str, int] = {}
    for card in deck.cards:
        copies[card.name] = copies.get(card.name, 0) + card.quantity

    for name, count in copies.items():
        if count > MAX_COPIES_PER_CARD and not classifier.is_basic_energy(name):
            errors.append(
                f'Card "{name}" appears {count} times '
                f"(maximum {MAX_COPIES_PER_CARD} copies per card)"
            )

    return ValidationResult(is_valid=not errors, errors=errors)


def ensure_deck_is_legal(
    deck: DeckDraft,
    classifier: CardClassifier = DEFAULT_CLASSIFIER,
) -> ValidationResult:
    """
    Validate a deck and fail if it is not legal.

    Raises:
        DeckRuleViolationError: If any rule is violated
    """
    result = validate_deck_format(deck, classifier)
    if not result.is_valid:
        logger.info(
            "Deck %r rejected for format %s: %d violation(s)",
            deck.name,
            deck.format,
            len(result.errors),
        )
        raise DeckRuleViolationError(result.errors)
    return result
