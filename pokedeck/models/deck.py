from dataclasses import dataclass, field
from enum import Enum

from pokedeck.models.card import DeckCardEntry


class DeckSection(str, Enum):
    """The three blocks a Pokémon TCG deck list is organized into."""

    POKEMON = "pokemon"
    TRAINER = "trainer"
    ENERGY = "energy"

    @property
    def label(self) -> str:
        """Header label used in deck list text."""
        return _SECTION_LABELS[self]


_SECTION_LABELS: dict[DeckSection, str] = {
    DeckSection.POKEMON: "Pokémon",
    DeckSection.TRAINER: "Trainer",
    DeckSection.ENERGY: "Energy",
}


@dataclass
class DeckDraft:
    """
    A deck as produced by the importers, before persistence.

    Attributes:
        name: Deck name ("Imported Deck" when the source carries none)
        format: Play format (e.g., "Standard", "Expanded", "Limited", "Unknown")
        cards: Distinct card entries in first-seen order
    """

    name: str
    format: str
    cards: list[DeckCardEntry] = field(default_factory=list)

    def total_cards(self) -> int:
        """Total number of physical cards."""
        return sum(card.quantity for card in self.cards)


@dataclass
class ValidationResult:
    """Outcome of checking a deck against its format rules."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass
class DeckStats:
    """Basic counts for a deck."""

    total_cards: int
    unique_cards: int
    type_distribution: dict[str, int] = field(default_factory=dict)


@dataclass
class TypeCount:
    """Copies of one card category and its share of the deck."""

    type: str
    count: int
    percentage: int


@dataclass
class DeckSuggestion:
    """A piece of deck-building advice."""

    type: str  # warning, info, success
    title: str
    description: str
    priority: str  # high, medium, low


@dataclass
class DeckAnalysis:
    """Composition breakdown and suggestions for a deck."""

    stats: DeckStats
    type_counts: list[TypeCount]
    dominant_type: str
    suggestions: list[DeckSuggestion]
    overall_score: int
    recommendation: str


@dataclass
class MissingCard:
    """A deck entry the collection cannot cover."""

    name: str
    needed: int
    available: int


@dataclass
class DeckCompatibility:
    """Whether a collection can build a deck."""

    can_build: bool
    missing_cards: list[MissingCard] = field(default_factory=list)
