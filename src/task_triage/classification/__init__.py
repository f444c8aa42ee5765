"""
Classification package: rule-based task triage.

Main components:
- schemas: TaskCategory, TaskPriority, ClassificationResult
- keywords: ordered keyword and action tables
- category_matcher: first-match category assignment
- priority_assessor: first-match priority assignment
- action_suggester: category to next-step lookup
- classifier: orchestration and result assembly
"""

from task_triage.classification.schemas import (
    TaskCategory,
    TaskPriority,
    ClassificationResult,
)
from task_triage.classification.category_matcher import match_category
from task_triage.classification.priority_assessor import assess_priority
from task_triage.classification.action_suggester import suggest_actions
from task_triage.classification.classifier import (
    TaskClassifier,
    classify_task,
    classify_batch,
    normalize_text,
)

__all__ = [
    # Enums
    "TaskCategory",
    "TaskPriority",

    # Models
    "ClassificationResult",

    # Steps
    "match_category",
    "assess_priority",
    "suggest_actions",

    # Orchestration
    "TaskClassifier",
    "classify_task",
    "classify_batch",
    "normalize_text",
]
