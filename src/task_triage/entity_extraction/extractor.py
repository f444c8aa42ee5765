"""
Pattern-based entity extraction.

Four independent passes whose hits are concatenated in a fixed order:
1. Dates / relative days   (normalized text)
2. Person names            (case-preserved text)
3. Locations               (case-preserved text)
4. Domain nouns            (normalized text)

Within a pass, hits are left-to-right. Nothing is de-duplicated.

Passes 2 and 3 look for a capital-initial word, which cannot exist in the
lowercased text every other rule works on. The classifier therefore feeds
them the original "title description" text and lowercases what they capture,
so all entities share one casing. Called without original_text, they scan the
normalized text and find nothing.
"""

import re
from typing import List, Optional

import structlog

from .entity import Entity
from .patterns import DATE_PATTERN, DOMAIN_NOUN_PATTERN, LOCATION_PATTERN, PERSON_PATTERN


logger = structlog.get_logger(__name__)


def _whole_matches(pattern: re.Pattern, text: str, label: str) -> List[Entity]:
    return [
        Entity(text=m.group(0), label=label, start=m.start(), end=m.end())
        for m in pattern.finditer(text)
    ]


def _captured_names(pattern: re.Pattern, text: str, label: str, source: str) -> List[Entity]:
    return [
        Entity(
            text=m.group(1).lower(),
            label=label,
            start=m.start(1),
            end=m.end(1),
            source=source,
        )
        for m in pattern.finditer(text)
    ]


def extract_entity_spans(normalized_text: str, original_text: Optional[str] = None) -> List[Entity]:
    """
    Run all four passes and return the hits with span information.

    Args:
        normalized_text: Lowercased "title description" text
        original_text: Case-preserved "title description" text for the
            person and location passes (defaults to normalized_text)

    Returns:
        Entities in pass order, then source order within each pass
    """
    if original_text is None:
        name_text, name_source = normalized_text, "normalized"
    else:
        name_text, name_source = original_text, "original"

    dates = _whole_matches(DATE_PATTERN, normalized_text, "date")
    people = _captured_names(PERSON_PATTERN, name_text, "person", name_source)
    locations = _captured_names(LOCATION_PATTERN, name_text, "location", name_source)
    nouns = _whole_matches(DOMAIN_NOUN_PATTERN, normalized_text, "domain")

    logger.debug(
        "entity_extraction_complete",
        text_length=len(normalized_text),
        dates_count=len(dates),
        people_count=len(people),
        locations_count=len(locations),
        nouns_count=len(nouns),
    )

    return dates + people + locations + nouns


def extract_entities(normalized_text: str, original_text: Optional[str] = None) -> List[str]:
    """
    Extract entity fragments from task text.

    Args:
        normalized_text: Lowercased "title description" text
        original_text: Case-preserved variant for the name passes

    Returns:
        Entity strings, possibly empty, duplicates allowed

    Examples:
        >>> extract_entities("fix the bug in the system ")
        ['bug', 'system']
        >>> original = "Meet with Sarah at office tomorrow for budget review "
        >>> extract_entities(original.lower(), original)
        ['tomorrow', 'sarah', 'office', 'budget']
    """
    return [entity.text for entity in extract_entity_spans(normalized_text, original_text)]
