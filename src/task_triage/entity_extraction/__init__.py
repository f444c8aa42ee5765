"""
Entity extraction for task text (dates, people, locations, domain nouns).

Public API:
    - Entity: Dataclass for extracted entity spans
    - extract_entities: Entity strings in pass order (used by the classifier)
    - extract_entity_spans: Same hits with span information
"""

from .entity import Entity
from .extractor import extract_entities, extract_entity_spans

__all__ = [
    "Entity",
    "extract_entities",
    "extract_entity_spans",
]
