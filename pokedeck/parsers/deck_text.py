"""
Parser for Pokémon TCG Live deck list text.

Deck list format:
    Pokémon: <count>
    <quantity> <card name> <SETCODE> <collector_number>
    ...
    Trainer: <count>
    <quantity> <card name>
    ...
    Energy: <count>
    ...

Example:
    Pokémon: 19
    4 N's Zorua JTG 97
    Trainer: 16
    4 Ultra Ball SVI 196
    Energy: 10
    10 Darkness Energy

Headers are also accepted in Portuguese (Treinador, Energia). The count after
a header is optional and only used to report mismatches; it never changes
what gets imported.

Lines that are neither headers nor card lines are skipped silently, since
pasted lists often contain comments, blank lines and tool-specific noise.
"""

import logging
import re
from dataclasses import dataclass, field

from pokedeck.config import STANDARD_DECK_SIZE, settings
from pokedeck.models.card import DeckCardEntry
from pokedeck.models.deck import DeckDraft, DeckSection

logger = logging.getLogger(__name__)

# Digits are ASCII only: [0-9], never \d

# Pattern: "Pokémon: 19", "trainer:", "Energia: 10"
# Groups: (label, declared_count)
SECTION_HEADER_PATTERN = re.compile(
    r"^(pok[eé]mon|pokemon|trainer|treinador|energy|energia)\s*:\s*([0-9]+)?",
    re.IGNORECASE,
)

# Pattern: "3 Charcadet PAR 26" or "1 Iron Hands ex PAR 70"
# Groups: (quantity, card_name, set_code, collector_number)
CARD_FULL_PATTERN = re.compile(r"^([0-9]+)\s+(.+?)\s+([A-Z]{2,5})\s+([0-9]{1,4})$")

# Pattern: "4 Ultra Ball" (no set info)
# Groups: (quantity, card_name)
CARD_SIMPLE_PATTERN = re.compile(r"^([0-9]+)\s+(.+)$")

LINE_SPLIT_PATTERN = re.compile(r"\r?\n")

STANDARD_FORMAT = "Standard"
UNKNOWN_FORMAT = "Unknown"


@dataclass
class ParsedCardLine:
    """A card line before merging, tagged with the section it appeared in."""

    quantity: int
    name: str
    set_code: str | None = None
    code: str = ""
    section: DeckSection | None = None


@dataclass
class ParsedDeckText:
    """
    Everything extracted from a deck list before merging.

    Attributes:
        entries: Card lines in input order
        declared_totals: Count written on each section header (None if absent)
        section_totals: Sum of quantities actually found under each header
    """

    entries: list[ParsedCardLine] = field(default_factory=list)
    declared_totals: dict[DeckSection, int | None] = field(
        default_factory=lambda: dict.fromkeys(DeckSection)
    )
    section_totals: dict[DeckSection, int] = field(
        default_factory=lambda: dict.fromkeys(DeckSection, 0)
    )

    def total_cards(self) -> int:
        return sum(entry.quantity for entry in self.entries)


def match_section_header(line: str) -> tuple[DeckSection, int | None] | None:
    """
    Check if a line opens a deck section.

    Returns:
        (section, declared_count) for a header line, None otherwise.
    """
    match = SECTION_HEADER_PATTERN.match(line)
    if not match:
        return None

    label, declared = match.groups()
    label = label.lower()
    if label.startswith("pok"):
        section = DeckSection.POKEMON
    elif label.startswith(("tra", "tre")):
        section = DeckSection.TRAINER
    else:
        section = DeckSection.ENERGY

    return section, int(declared) if declared is not None else None


def tokenize_card_line(line: str) -> ParsedCardLine | None:
    """
    Parse a single trimmed card line.

    Returns None if the line doesn't match any known format.
    """
    # Try full format first (with set code and number)
    match = CARD_FULL_PATTERN.match(line)
    if match:
        quantity, name, set_code, number = match.groups()
        return ParsedCardLine(
            quantity=int(quantity),
            name=name.strip(),
            set_code=set_code,
            code=number,
        )

    # Try simple format (no set info)
    match = CARD_SIMPLE_PATTERN.match(line)
    if match:
        quantity, name = match.groups()
        return ParsedCardLine(quantity=int(quantity), name=name.strip())

    return None


def parse_deck_text(text: str) -> ParsedDeckText:
    """
    Extract card lines and section bookkeeping from deck list text.

    Cards before the first header belong to no section and are not counted
    in any section total.
    """
    parsed = ParsedDeckText()
    current_section: DeckSection | None = None

    for raw_line in LINE_SPLIT_PATTERN.split(text):
        line = raw_line.strip()
        if not line:
            continue

        header = match_section_header(line)
        if header is not None:
            current_section, declared = header
            parsed.declared_totals[current_section] = declared
            continue

        entry = tokenize_card_line(line)
        if entry is None:
            continue

        entry.section = current_section
        parsed.entries.append(entry)
        if current_section is not None:
            parsed.section_totals[current_section] += entry.quantity

    return parsed


def merge_card_entries(entries: list[ParsedCardLine]) -> list[DeckCardEntry]:
    """
    Collapse repeated printings into one entry each.

    Entries with the same name (any case), set code and number are summed.
    The first occurrence decides the spelling and the position in the output.
    """
    merged: dict[str, DeckCardEntry] = {}

    for entry in entries:
        card = DeckCardEntry(
            name=entry.name,
            quantity=entry.quantity,
            code=entry.code,
            set_code=entry.set_code,
        )
        key = card.merge_key()
        existing = merged.get(key)
        if existing is None:
            merged[key] = card
        else:
            merged[key] = DeckCardEntry(
                name=existing.name,
                quantity=existing.quantity + card.quantity,
                code=existing.code,
                set_code=existing.set_code,
            )

    return list(merged.values())


def infer_format(total_cards: int) -> str:
    """A 60-card list is assumed to be Standard; anything else is unknown."""
    return STANDARD_FORMAT if total_cards == STANDARD_DECK_SIZE else UNKNOWN_FORMAT


def reconcile_sections(parsed: ParsedDeckText) -> list[str]:
    """
    Compare declared section counts with what was actually parsed.

    Returns human-readable warnings. These are diagnostics only; a list
    that disagrees with its own headers still imports.
    """
    warnings: list[str] = []

    for section in DeckSection:
        declared = parsed.declared_totals[section]
        found = parsed.section_totals[section]
        if declared is not None and declared != found:
            warnings.append(f"Section {section.value} declared {declared} but found {found}")

    total = parsed.total_cards()
    if total != STANDARD_DECK_SIZE:
        warnings.append(f"Total card count {total} differs from {STANDARD_DECK_SIZE}")

    return warnings


def import_from_text(text: str) -> DeckDraft:
    """
    Build a deck draft from pasted deck list text.

    Args:
        text: Raw deck list (clipboard paste)

    Returns:
        DeckDraft named "Imported Deck" with merged cards. Format is
        "Standard" for exactly 60 cards, "Unknown" otherwise.
    """
    draft, _warnings = import_deck_text(text)
    return draft


def import_deck_text(text: str) -> tuple[DeckDraft, list[str]]:
    """
    Build a deck draft and collect reconciliation warnings.

    Warnings are logged and returned; they never change the draft.
    """
    parsed = parse_deck_text(text)
    cards = merge_card_entries(parsed.entries)

    draft = DeckDraft(
        name=settings.imported_deck_name,
        format=infer_format(parsed.total_cards()),
        cards=cards,
    )

    warnings = reconcile_sections(parsed)
    if warnings:
        logger.warning("Deck list import warnings: %s", "; ".join(warnings))

    logger.debug(
        "Imported %d distinct cards (%d total) as %s",
        len(draft.cards),
        draft.total_cards(),
        draft.format,
    )
    return draft, warnings
