"""
Match statistics API endpoints.

Computes win rates from match results supplied by the caller.
"""

from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from pokedeck.models.match import EventType, Match, MatchResult
from pokedeck.services.match_stats import (
    calculate_win_rate_over_time,
    calculate_win_rate_stats,
    summarize_results,
)

router = APIRouter(prefix="/matches", tags=["matches"])


class DeckRef(BaseModel):
    """A deck the caller wants statistics for."""

    id: str
    name: str


class MatchModel(BaseModel):
    """A recorded match."""

    deck_id: str
    result: MatchResult
    played_at: datetime
    event_type: EventType | None = None
    opponent_deck: str | None = None
    ended_by_time: bool = False
    notes: str | None = None


class MatchStatsRequest(BaseModel):
    """Request model for win-rate statistics."""

    decks: list[DeckRef]
    matches: list[MatchModel] = Field(default_factory=list)


class WinRateModel(BaseModel):
    deck_id: str
    deck_name: str
    total_matches: int
    wins: int
    losses: int
    win_rate: int = Field(..., description="Percent of decided matches won, 0-100")


class WinRatePointModel(BaseModel):
    match_number: int
    played_at: datetime
    win_rate: int


class MatchStatsResponse(BaseModel):
    """Response model for win-rate statistics."""

    stats: list[WinRateModel]
    total_wins: int
    total_losses: int
    win_rate_over_time: list[WinRatePointModel] = Field(
        default_factory=list,
        description="Cumulative win rate after each match, oldest first; draws count as played",
    )


@router.post("/stats", response_model=MatchStatsResponse)
async def match_stats(request: MatchStatsRequest) -> MatchStatsResponse:
    """
    Win rate per deck.

    Per-deck rates ignore draws, and decks without a win or loss are left
    out. The timeline covers every match of the listed decks, draws included.
    """
    decks = {deck.id: deck.name for deck in request.decks}
    matches = [
        Match(
            deck_id=m.deck_id,
            result=m.result,
            played_at=m.played_at,
            event_type=m.event_type,
            opponent_deck=m.opponent_deck,
            ended_by_time=m.ended_by_time,
            notes=m.notes,
        )
        for m in request.matches
        if m.deck_id in decks
    ]

    stats = calculate_win_rate_stats(decks, matches)
    total_wins, total_losses = summarize_results(stats)

    return MatchStatsResponse(
        stats=[
            WinRateModel(
                deck_id=s.deck_id,
                deck_name=s.deck_name,
                total_matches=s.total_matches,
                wins=s.wins,
                losses=s.losses,
                win_rate=s.win_rate,
            )
            for s in stats
        ],
        total_wins=total_wins,
        total_losses=total_losses,
        win_rate_over_time=[
            WinRatePointModel(
                match_number=p.match_number,
                played_at=p.played_at,
                win_rate=p.win_rate,
            )
            for p in calculate_win_rate_over_time(matches)
        ],
    )
