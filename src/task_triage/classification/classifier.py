"""
Task classifier orchestrating the rule-based triage steps.

Coordinates:
1. Text normalization (title + description, lowercased once)
2. Category matching
3. Priority assessment
4. Entity extraction
5. Suggested action lookup
6. Result assembly

Every step is a pure function over the same input; the classifier holds no
mutable state and is safe to call concurrently.
"""

from typing import Iterable, List, Tuple

import structlog

from task_triage.classification.action_suggester import suggest_actions
from task_triage.classification.category_matcher import match_category
from task_triage.classification.priority_assessor import assess_priority
from task_triage.classification.schemas import ClassificationResult
from task_triage.entity_extraction import extract_entities


def join_text(title: str, description: str) -> str:
    """Join title and description with a single space, case preserved."""
    return f"{title} {description}"


def normalize_text(title: str, description: str) -> str:
    """
    Build the text every keyword rule matches against.

    Args:
        title: Task title
        description: Task description

    Returns:
        Lowercased "title description"
    """
    return join_text(title, description).lower()


# ============================================================================
# TASK CLASSIFIER
# ============================================================================

class TaskClassifier:
    """
    Rule-based task classifier.

    Maps a title + description pair to category, priority, entities and
    suggested actions.
    """

    def __init__(self):
        self.logger = structlog.get_logger(__name__, component="task_classifier")

    def classify(self, title: str, description: str = "") -> ClassificationResult:
        """
        Classify one task.

        Args:
            title: Task title
            description: Task description

        Returns:
            ClassificationResult

        Raises:
            TypeError: If title or description is not a string
        """
        if not isinstance(title, str) or not isinstance(description, str):
            raise TypeError(
                "title and description must be str, got "
                f"{type(title).__name__} and {type(description).__name__}"
            )

        original_text = join_text(title, description)
        normalized_text = original_text.lower()

        category = match_category(normalized_text)
        priority = assess_priority(normalized_text)
        entities = extract_entities(normalized_text, original_text)
        actions = suggest_actions(category)

        self.logger.debug(
            "task_classified",
            text_length=len(normalized_text),
            category=category.value,
            priority=priority.value,
            entities_count=len(entities),
        )

        return ClassificationResult(
            category=category,
            priority=priority,
            extracted_entities=tuple(entities),
            suggested_actions=actions,
        )

    def classify_batch(self, items: Iterable[Tuple[str, str]]) -> List[ClassificationResult]:
        """
        Classify several tasks in order.

        Args:
            items: (title, description) pairs

        Returns:
            One ClassificationResult per item, same order
        """
        results = [self.classify(title, description) for title, description in items]
        self.logger.debug("batch_classified", items_count=len(results))
        return results


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_classifier = TaskClassifier()


def classify_task(title: str, description: str = "") -> ClassificationResult:
    """
    Classify a task using the shared default classifier.

    Args:
        title: Task title
        description: Task description

    Returns:
        ClassificationResult

    Examples:
        >>> result = classify_task("Pay the invoice for materials urgently")
        >>> result.category.value, result.priority.value
        ('finance', 'high')
    """
    return _default_classifier.classify(title, description)


def classify_batch(items: Iterable[Tuple[str, str]]) -> List[ClassificationResult]:
    """Classify (title, description) pairs with the shared default classifier."""
    return _default_classifier.classify_batch(items)
