"""
Win-rate statistics over recorded matches.

Per-deck win rates leave draws out: they count toward neither wins nor
the match total. The win-rate timeline is cumulative over every match
played, so there a draw lowers the rate like a loss.
"""

import math
from collections.abc import Iterable
from datetime import UTC, datetime

from pokedeck.models.match import Match, MatchResult, WinRatePoint, WinRateStats


def calculate_win_rate_stats(
    decks: dict[str, str],
    matches: Iterable[Match],
) -> list[WinRateStats]:
    """
    Compute wins, losses and win rate per deck.

    Args:
        decks: Deck names keyed by deck id, in display order
        matches: Recorded matches for any of those decks

    Returns:
        One WinRateStats per deck with at least one win or loss, in deck
        order. Matches for unknown deck ids are ignored.
    """
    wins: dict[str, int] = dict.fromkeys(decks, 0)
    losses: dict[str, int] = dict.fromkeys(decks, 0)

    for match in matches:
        if match.deck_id not in decks:
            continue
        if match.result == MatchResult.WIN:
            wins[match.deck_id] += 1
        elif match.result == MatchResult.LOSE:
            losses[match.deck_id] += 1

    stats: list[WinRateStats] = []
    for deck_id, deck_name in decks.items():
        total = wins[deck_id] + losses[deck_id]
        if total == 0:
            continue
        stats.append(
            WinRateStats(
                deck_id=deck_id,
                deck_name=deck_name,
                total_matches=total,
                wins=wins[deck_id],
                losses=losses[deck_id],
                win_rate=math.floor(wins[deck_id] / total * 100 + 0.5),
            )
        )

    return stats


def summarize_results(stats: Iterable[WinRateStats]) -> tuple[int, int]:
    """Total (wins, losses) across decks."""
    total_wins = 0
    total_losses = 0
    for entry in stats:
        total_wins += entry.wins
        total_losses += entry.losses
    return total_wins, total_losses


def calculate_win_rate_over_time(matches: Iterable[Match]) -> list[WinRatePoint]:
    """
    Cumulative win rate after each match, oldest first.

    Matches played at the same time keep their input order. Times without
    a timezone are taken as UTC.
    """
    ordered = sorted(matches, key=lambda m: _as_utc(m.played_at))

    points: list[WinRatePoint] = []
    wins = 0
    for number, match in enumerate(ordered, start=1):
        if match.result == MatchResult.WIN:
            wins += 1
        points.append(
            WinRatePoint(
                match_number=number,
                played_at=match.played_at,
                win_rate=math.floor(wins / number * 100 + 0.5),
            )
        )

    return points


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment
