"""
Keyword-based priority assessment.

Tiers are checked high then medium; LOW has no keywords and is returned when
neither matches.
"""

import structlog

from task_triage.classification.category_matcher import first_keyword_hit
from task_triage.classification.keywords import PRIORITY_KEYWORDS
from task_triage.classification.schemas import TaskPriority


logger = structlog.get_logger(__name__)


def assess_priority(normalized_text: str) -> TaskPriority:
    """
    Assign a priority to normalized task text.

    Args:
        normalized_text: Lowercased "title description" text

    Returns:
        First matching TaskPriority, or TaskPriority.LOW
    """
    for priority, keywords in PRIORITY_KEYWORDS:
        keyword = first_keyword_hit(normalized_text, keywords)
        if keyword is not None:
            logger.debug("priority_assessed", priority=priority.value, keyword=keyword)
            return priority

    return TaskPriority.LOW
