"""
Fixed lookup tables for rule-based classification.

Each table is an ordered tuple of (key, values) pairs. Matching walks the
pairs in order and stops at the first hit, so the order is part of the
behaviour.
"""

from typing import Tuple

from task_triage.classification.schemas import TaskCategory, TaskPriority


# ============================================================================
# CATEGORY KEYWORDS
# ============================================================================

CATEGORY_KEYWORDS: Tuple[Tuple[TaskCategory, Tuple[str, ...]], ...] = (
    (TaskCategory.SCHEDULING, ("meeting", "schedule", "call", "appointment", "deadline")),
    (TaskCategory.FINANCE, ("payment", "invoice", "bill", "budget", "cost", "expense")),
    (TaskCategory.TECHNICAL, ("bug", "fix", "error", "install", "repair", "maintain")),
    (TaskCategory.SAFETY, ("safety", "hazard", "inspection", "compliance", "ppe")),
)


# ============================================================================
# PRIORITY KEYWORDS
# ============================================================================

# "fix", "bug" and "inspection" also appear in CATEGORY_KEYWORDS; category
# and priority are assessed independently.
PRIORITY_KEYWORDS: Tuple[Tuple[TaskPriority, Tuple[str, ...]], ...] = (
    (TaskPriority.HIGH, ("urgent", "asap", "immediately", "today", "critical", "emergency")),
    (
        TaskPriority.MEDIUM,
        ("soon", "this week", "important", "tomorrow", "next week", "fix", "bug", "inspection"),
    ),
    (TaskPriority.LOW, ()),  # fallback only
)


# ============================================================================
# SUGGESTED ACTIONS
# ============================================================================

SUGGESTED_ACTIONS: Tuple[Tuple[TaskCategory, Tuple[str, ...]], ...] = (
    (TaskCategory.SCHEDULING, ("Block calendar", "Send invite", "Prepare agenda", "Set reminder")),
    (TaskCategory.FINANCE, ("Check budget", "Get approval", "Generate invoice", "Update records")),
    (
        TaskCategory.TECHNICAL,
        ("Diagnose issue", "Check resources", "Assign technician", "Document fix"),
    ),
    (
        TaskCategory.SAFETY,
        ("Conduct inspection", "File report", "Notify supervisor", "Update checklist"),
    ),
)
