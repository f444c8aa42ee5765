"""
Classification schemas for the task triage engine.

Defines:
- TaskCategory / TaskPriority enums (declaration order is precedence order)
- ClassificationResult, the immutable value returned to callers
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# ENUMS
# ============================================================================

class TaskCategory(str, Enum):
    """
    Subject-matter bucket for a task.

    Members are declared in match precedence order; GENERAL is the fallback
    and has no keywords of its own.
    """
    SCHEDULING = "scheduling"
    FINANCE = "finance"
    TECHNICAL = "technical"
    SAFETY = "safety"
    GENERAL = "general"


class TaskPriority(str, Enum):
    """Urgency level, highest first. LOW is the fallback."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ============================================================================
# RESULT
# ============================================================================

class ClassificationResult(BaseModel):
    """
    Outcome of classifying one title + description pair.

    Created once per call and never mutated; the surrounding service embeds
    it into its own task record.
    """
    model_config = ConfigDict(frozen=True)

    category: TaskCategory = Field(..., description="Exactly one category")
    priority: TaskPriority = Field(..., description="Exactly one priority")
    extracted_entities: Tuple[str, ...] = Field(
        default=(),
        description="Text fragments in extraction-pass order, duplicates kept"
    )
    suggested_actions: Tuple[str, ...] = Field(
        default=(),
        description="Fixed next steps for the category (empty for general)"
    )
