"""
Unit tests for keyword-based priority assessment.
"""

import pytest

from task_triage.classification.priority_assessor import assess_priority
from task_triage.classification.schemas import TaskPriority


class TestAssessPriority:
    """Test priority tiers and fallback."""

    @pytest.mark.parametrize(
        "text",
        [
            "urgent meeting today",
            "reply asap",
            "shut the valve immediately",
            "critical outage",
            "emergency exit blocked",
        ],
    )
    def test_high_priority(self, text):
        assert assess_priority(text) == TaskPriority.HIGH

    @pytest.mark.parametrize(
        "text",
        [
            "schedule meeting soon",
            "finish this week",
            "important note",
            "call back tomorrow",
            "plan for next week",
            "fix the door",
            "log the bug",
            "site inspection",
        ],
    )
    def test_medium_priority(self, text):
        assert assess_priority(text) == TaskPriority.MEDIUM

    def test_low_is_fallback(self):
        assert assess_priority("regular maintenance task") == TaskPriority.LOW

    def test_empty_text_is_low(self):
        assert assess_priority("") == TaskPriority.LOW

    def test_high_tier_checked_first(self):
        """A high keyword wins even when medium keywords come earlier."""
        assert assess_priority("important call tomorrow, urgent") == TaskPriority.HIGH

    def test_substring_match(self):
        """'urgent' inside 'urgently' counts."""
        assert assess_priority("pay urgently") == TaskPriority.HIGH

    def test_multiword_keyword_needs_single_space(self):
        """'next week' is a literal phrase."""
        assert assess_priority("next  week") == TaskPriority.LOW
