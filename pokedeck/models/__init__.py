from pokedeck.models.card import DeckCardEntry
from pokedeck.models.deck import (
    DeckAnalysis,
    DeckCompatibility,
    DeckDraft,
    DeckSection,
    DeckStats,
    DeckSuggestion,
    MissingCard,
    TypeCount,
    ValidationResult,
)
from pokedeck.models.export import TCGExportCard, TCGExportFormat
from pokedeck.models.failure import (
    DeckRuleViolationError,
    FailureDetail,
    FailureKind,
    FailureResponse,
    InvalidDeckFormatError,
    InvalidInputError,
    KnownError,
    OutcomeType,
)
from pokedeck.models.match import EventType, Match, MatchResult, WinRatePoint, WinRateStats
from pokedeck.models.metagame import Archetype, MetagameShare

__all__ = [
    "Archetype",
    "DeckAnalysis",
    "DeckCardEntry",
    "DeckCompatibility",
    "DeckDraft",
    "DeckRuleViolationError",
    "DeckSection",
    "DeckStats",
    "DeckSuggestion",
    "EventType",
    "FailureDetail",
    "FailureKind",
    "FailureResponse",
    "InvalidDeckFormatError",
    "InvalidInputError",
    "KnownError",
    "Match",
    "MatchResult",
    "MetagameShare",
    "MissingCard",
    "OutcomeType",
    "TCGExportCard",
    "TCGExportFormat",
    "TypeCount",
    "ValidationResult",
    "WinRatePoint",
    "WinRateStats",
]
