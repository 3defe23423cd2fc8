from dataclasses import dataclass


@dataclass
class Archetype:
    """
    A known deck archetype.

    Attributes:
        name: Archetype name as tagged on public decks (e.g., "Charizard ex")
        tier: Tier label, S through D
        win_rate: Reported win rate in percent, if known
    """

    name: str
    tier: str
    win_rate: float | None = None


@dataclass
class MetagameShare:
    """How much of the public deck pool one archetype takes up."""

    name: str
    tier: str
    meta_share: float  # percent, one decimal
    win_rate: float | None
    total_decks: int
