"""
Category to suggested-action lookup.
"""

from typing import Tuple, Union

from task_triage.classification.keywords import SUGGESTED_ACTIONS
from task_triage.classification.schemas import TaskCategory


def suggest_actions(category: Union[TaskCategory, str]) -> Tuple[str, ...]:
    """
    Get the fixed next steps for a category.

    Args:
        category: TaskCategory or its string value

    Returns:
        Ordered action labels; empty for general or unrecognized categories
    """
    for key, actions in SUGGESTED_ACTIONS:
        if key == category:
            return actions
    return ()
