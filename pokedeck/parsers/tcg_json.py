"""
Parser for the TCG Live JSON deck export.

The export only carries card names and counts, so imported cards have no
set code, collector number or image until they are resolved.
"""

import logging

from pydantic import ValidationError

from pokedeck.models.card import DeckCardEntry
from pokedeck.models.deck import DeckDraft
from pokedeck.models.export import TCGExportFormat
from pokedeck.models.failure import InvalidDeckFormatError

logger = logging.getLogger(__name__)


def parse_tcg_export(json_text: str) -> TCGExportFormat:
    """
    Decode and shape-check export JSON.

    Raises:
        InvalidDeckFormatError: If the text is not JSON or not an export
    """
    try:
        return TCGExportFormat.model_validate_json(json_text)
    except ValidationError as e:
        logger.info("Rejected deck JSON: %d error(s)", e.error_count())
        raise InvalidDeckFormatError(detail=_summarize_errors(e)) from e


def import_from_json(json_text: str) -> DeckDraft:
    """
    Build a deck draft from TCG Live export JSON.

    Args:
        json_text: JSON as produced by export_to_json

    Returns:
        DeckDraft with name and format copied verbatim

    Raises:
        InvalidDeckFormatError: If the JSON is malformed or not an export
    """
    export = parse_tcg_export(json_text)

    return DeckDraft(
        name=export.name,
        format=export.format,
        cards=[DeckCardEntry(name=card.name, quantity=card.count) for card in export.cards],
    )


def _summarize_errors(error: ValidationError) -> str:
    """First validation problem, in a form suitable for the failure detail."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return str(first["msg"])
