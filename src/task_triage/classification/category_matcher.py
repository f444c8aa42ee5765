"""
Keyword-based category matching.

First category (in precedence order) with any keyword contained in the text
wins. Keyword counts and positions are irrelevant.
"""

from typing import Iterable, Optional

import structlog

from task_triage.classification.keywords import CATEGORY_KEYWORDS
from task_triage.classification.schemas import TaskCategory


logger = structlog.get_logger(__name__)


def first_keyword_hit(text: str, keywords: Iterable[str]) -> Optional[str]:
    """
    Return the first keyword contained in text, or None.

    Plain substring containment: "call" matches "recall".

    Args:
        text: Normalized (lowercased) text
        keywords: Iterable of lowercase keywords

    Returns:
        Matching keyword or None
    """
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


def match_category(normalized_text: str) -> TaskCategory:
    """
    Assign a category to normalized task text.

    Args:
        normalized_text: Lowercased "title description" text

    Returns:
        First matching TaskCategory, or TaskCategory.GENERAL

    Examples:
        >>> match_category("pay the invoice before the meeting")
        <TaskCategory.SCHEDULING: 'scheduling'>
        >>> match_category("general task description ")
        <TaskCategory.GENERAL: 'general'>
    """
    for category, keywords in CATEGORY_KEYWORDS:
        keyword = first_keyword_hit(normalized_text, keywords)
        if keyword is not None:
            logger.debug("category_matched", category=category.value, keyword=keyword)
            return category

    return TaskCategory.GENERAL
