"""
Version constants for the task triage service.

Bump CLASSIFIER_VERSION whenever a keyword, action or pattern table changes,
since stored classifications depend on them.
"""

from typing import List

from pydantic import BaseModel, Field

from .classification.schemas import TaskCategory, TaskPriority

# API Version
API_VERSION = "1.0.0"

# Component versions (update these when implementations change)
CLASSIFIER_VERSION = "rules-1.0.0"
ENTITY_EXTRACTOR_VERSION = "entities-1.0.0"


class VersionInfo(BaseModel):
    """Versions and vocabularies of the running classifier."""

    classifier_version: str = Field(description="Keyword/action table version")
    entity_extractor_version: str = Field(description="Entity pattern version")
    categories: List[TaskCategory] = Field(description="Categories in precedence order")
    priorities: List[TaskPriority] = Field(description="Priorities in precedence order")


def get_current_version_info() -> VersionInfo:
    """
    Get current classifier version configuration.

    Returns:
        VersionInfo instance with current versions
    """
    return VersionInfo(
        classifier_version=CLASSIFIER_VERSION,
        entity_extractor_version=ENTITY_EXTRACTOR_VERSION,
        categories=list(TaskCategory),
        priorities=list(TaskPriority),
    )
