from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeckCardEntry:
    """
    One distinct card line within a deck.

    Attributes:
        name: Card name exactly as printed (e.g., "Charizard ex", "N's Zorua")
        quantity: Number of copies (1-4 for most cards, unlimited for basic energy)
        image_url: Card image, empty until resolved by the card search service
        code: Collector number within its set (e.g., "26"), empty if unknown
        set_code: Set code of 2-5 uppercase letters (e.g., "PAR", "SSP")
        types: Energy types, populated only after card resolution
        subtypes: Card subtypes (e.g., "Basic", "Supporter", "Energy")
    """

    name: str
    quantity: int
    image_url: str = ""
    code: str = ""
    set_code: str | None = None
    types: tuple[str, ...] | None = None
    subtypes: tuple[str, ...] | None = None

    def merge_key(self) -> str:
        """Identity of this printing within a deck: name (any case) + set + number."""
        return f"{self.name.lower()}|{self.set_code or ''}|{self.code or ''}"
