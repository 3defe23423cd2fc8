from pokedeck.parsers.deck_text import (
    ParsedCardLine,
    ParsedDeckText,
    import_deck_text,
    import_from_text,
    match_section_header,
    merge_card_entries,
    parse_deck_text,
    reconcile_sections,
    tokenize_card_line,
)
from pokedeck.parsers.tcg_json import import_from_json, parse_tcg_export

__all__ = [
    "ParsedCardLine",
    "ParsedDeckText",
    "import_deck_text",
    "import_from_json",
    "import_from_text",
    "match_section_header",
    "merge_card_entries",
    "parse_deck_text",
    "parse_tcg_export",
    "reconcile_sections",
    "tokenize_card_line",
]
