from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MatchResult(str, Enum):
    """Outcome of a single match from the deck owner's side."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class EventType(str, Enum):
    """Kind of event a match was played at."""

    TREINO = "treino"
    LIGA = "liga"
    CHALLENGE = "challenge"
    CUP = "cup"
    REGIONAL = "regional"
    INTERCONTINENTAL = "intercontinental"


@dataclass
class Match:
    """
    A recorded match result.

    Attributes:
        deck_id: Deck the owner played
        result: Win, lose or draw
        played_at: When the match was played
        event_type: Event category, if recorded
        opponent_deck: Opponent's archetype, free text
        ended_by_time: True if the match was decided at time
        notes: Free-form notes
    """

    deck_id: str
    result: MatchResult
    played_at: datetime
    event_type: EventType | None = None
    opponent_deck: str | None = None
    ended_by_time: bool = False
    notes: str | None = None


@dataclass
class WinRateStats:
    """Decided-match record for one deck."""

    deck_id: str
    deck_name: str
    total_matches: int
    wins: int
    losses: int
    win_rate: int  # percent, 0-100


@dataclass
class WinRatePoint:
    """Cumulative win rate after one match, draws included in the denominator."""

    match_number: int
    played_at: datetime
    win_rate: int  # percent, 0-100
