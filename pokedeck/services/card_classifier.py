"""
Name-based card classification.

Deck records assembled outside the text importer carry no section tag, so
exporters and analysis sort cards into Pokémon / Trainer / Energy from the
card name alone (plus resolved subtypes when present).

The keyword lists are plain configuration. Swap in another CardClassifier
to extend them or to support another language.

Substring matching is approximate: a Pokémon whose name happens to contain
"item" is filed as a Trainer.
"""

from dataclasses import dataclass
from functools import cached_property

from pokedeck.models.card import DeckCardEntry
from pokedeck.models.deck import DeckSection

BASIC_ENERGY_NAMES: frozenset[str] = frozenset(
    {
        "Grass Energy",
        "Fire Energy",
        "Water Energy",
        "Lightning Energy",
        "Psychic Energy",
        "Fighting Energy",
        "Darkness Energy",
        "Metal Energy",
        "Fairy Energy",
        "Dragon Energy",
        # Portuguese printings
        "Energia Grama",
        "Energia Fogo",
        "Energia Água",
        "Energia Elétrica",
        "Energia Psíquica",
        "Energia Luta",
        "Energia Escuridão",
        "Energia Metal",
        "Energia Fada",
        "Energia Dragão",
    }
)


@dataclass(frozen=True)
class CardClassifier:
    """
    Keyword configuration for sorting cards into deck sections.

    Attributes:
        basic_energy_names: Exact names (any case) of basic energy cards
        energy_keywords: Name substrings that mark an energy card
        energy_subtypes: Resolved subtypes that mark an energy card
        trainer_keywords: Name substrings that mark a trainer card
    """

    basic_energy_names: frozenset[str] = BASIC_ENERGY_NAMES
    energy_keywords: tuple[str, ...] = ("energy",)
    energy_subtypes: tuple[str, ...] = ("Energy",)
    trainer_keywords: tuple[str, ...] = ("trainer", "supporter", "item", "stadium", "ball")

    @cached_property
    def _basic_energy_lower(self) -> frozenset[str]:
        return frozenset(name.lower() for name in self.basic_energy_names)

    def is_basic_energy(self, name: str) -> bool:
        """True if the name is a basic energy (unlimited copies allowed)."""
        return name.strip().lower() in self._basic_energy_lower

    def is_energy(self, card: DeckCardEntry) -> bool:
        name_lower = card.name.lower()
        if self.is_basic_energy(card.name):
            return True
        if any(keyword in name_lower for keyword in self.energy_keywords):
            return True
        return any(subtype in self.energy_subtypes for subtype in card.subtypes or ())

    def is_trainer(self, card: DeckCardEntry) -> bool:
        name_lower = card.name.lower()
        return any(keyword in name_lower for keyword in self.trainer_keywords)

    def classify(self, card: DeckCardEntry) -> DeckSection:
        """
        Decide which section a card belongs to.

        Energy wins over Trainer, and anything unmatched is a Pokémon.
        """
        if self.is_energy(card):
            return DeckSection.ENERGY
        if self.is_trainer(card):
            return DeckSection.TRAINER
        return DeckSection.POKEMON


DEFAULT_CLASSIFIER = CardClassifier()
