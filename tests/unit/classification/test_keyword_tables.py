"""
Unit tests for classification enums and lookup tables.

The tables are fixed data; these tests pin their exact content and order.
"""

from task_triage.classification.keywords import (
    CATEGORY_KEYWORDS,
    PRIORITY_KEYWORDS,
    SUGGESTED_ACTIONS,
)
from task_triage.classification.schemas import TaskCategory, TaskPriority


class TestEnums:
    """Test enum definitions."""

    def test_category_enum_order(self):
        """Categories are declared in precedence order with general last."""
        assert [c.value for c in TaskCategory] == [
            "scheduling",
            "finance",
            "technical",
            "safety",
            "general",
        ]

    def test_priority_enum_order(self):
        """Priorities are declared highest first."""
        assert [p.value for p in TaskPriority] == ["high", "medium", "low"]

    def test_enums_compare_to_strings(self):
        """str-based enums compare equal to their values."""
        assert TaskCategory.FINANCE == "finance"
        assert TaskPriority.LOW == "low"


class TestCategoryKeywords:
    """Test category keyword table."""

    def test_category_order(self):
        """General has no entry; the rest follow precedence order."""
        assert [category for category, _ in CATEGORY_KEYWORDS] == [
            TaskCategory.SCHEDULING,
            TaskCategory.FINANCE,
            TaskCategory.TECHNICAL,
            TaskCategory.SAFETY,
        ]

    def test_category_keywords_verbatim(self):
        """Keyword lists match the published vocabulary."""
        table = dict(CATEGORY_KEYWORDS)

        assert table[TaskCategory.SCHEDULING] == (
            "meeting", "schedule", "call", "appointment", "deadline"
        )
        assert table[TaskCategory.FINANCE] == (
            "payment", "invoice", "bill", "budget", "cost", "expense"
        )
        assert table[TaskCategory.TECHNICAL] == (
            "bug", "fix", "error", "install", "repair", "maintain"
        )
        assert table[TaskCategory.SAFETY] == (
            "safety", "hazard", "inspection", "compliance", "ppe"
        )

    def test_tables_are_immutable(self):
        """Tables are tuples all the way down."""
        for table in (CATEGORY_KEYWORDS, PRIORITY_KEYWORDS, SUGGESTED_ACTIONS):
            assert isinstance(table, tuple)
            for _, values in table:
                assert isinstance(values, tuple)


class TestPriorityKeywords:
    """Test priority keyword table."""

    def test_priority_keywords_verbatim(self):
        """High and medium lists match; low is present but empty."""
        assert PRIORITY_KEYWORDS == (
            (
                TaskPriority.HIGH,
                ("urgent", "asap", "immediately", "today", "critical", "emergency"),
            ),
            (
                TaskPriority.MEDIUM,
                ("soon", "this week", "important", "tomorrow", "next week",
                 "fix", "bug", "inspection"),
            ),
            (TaskPriority.LOW, ()),
        )

    def test_overlap_with_category_keywords(self):
        """fix, bug and inspection feed both category and priority."""
        category_words = {w for _, words in CATEGORY_KEYWORDS for w in words}
        medium_words = set(dict(PRIORITY_KEYWORDS)[TaskPriority.MEDIUM])

        assert category_words & medium_words == {"fix", "bug", "inspection"}


class TestSuggestedActions:
    """Test suggested action table."""

    def test_four_actions_per_category(self):
        """Every non-general category has exactly four actions."""
        assert len(SUGGESTED_ACTIONS) == 4
        for _, actions in SUGGESTED_ACTIONS:
            assert len(actions) == 4

    def test_actions_verbatim(self):
        """Action labels and order match the published table."""
        table = dict(SUGGESTED_ACTIONS)

        assert table[TaskCategory.SCHEDULING] == (
            "Block calendar", "Send invite", "Prepare agenda", "Set reminder"
        )
        assert table[TaskCategory.FINANCE] == (
            "Check budget", "Get approval", "Generate invoice", "Update records"
        )
        assert table[TaskCategory.TECHNICAL] == (
            "Diagnose issue", "Check resources", "Assign technician", "Document fix"
        )
        assert table[TaskCategory.SAFETY] == (
            "Conduct inspection", "File report", "Notify supervisor", "Update checklist"
        )
