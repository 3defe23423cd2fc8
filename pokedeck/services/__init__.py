from pokedeck.services.card_classifier import (
    BASIC_ENERGY_NAMES,
    DEFAULT_CLASSIFIER,
    CardClassifier,
)
from pokedeck.services.deck_analysis import analyze_deck, calculate_deck_stats
from pokedeck.services.deck_compatibility import check_deck_compatibility
from pokedeck.services.deck_formatter import build_tcg_export, export_to_json, export_to_text
from pokedeck.services.deck_validator import ensure_deck_is_legal, validate_deck_format
from pokedeck.services.match_stats import (
    calculate_win_rate_over_time,
    calculate_win_rate_stats,
    summarize_results,
)
from pokedeck.services.metagame import calculate_metagame_share

__all__ = [
    "BASIC_ENERGY_NAMES",
    "DEFAULT_CLASSIFIER",
    "CardClassifier",
    "analyze_deck",
    "build_tcg_export",
    "calculate_deck_stats",
    "calculate_metagame_share",
    "calculate_win_rate_over_time",
    "calculate_win_rate_stats",
    "check_deck_compatibility",
    "ensure_deck_is_legal",
    "export_to_json",
    "export_to_text",
    "summarize_results",
    "validate_deck_format",
]
