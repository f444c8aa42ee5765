"""
CLI module for task classification.
"""

from task_triage.cli.classify import main as classify_main

__all__ = ["classify_main"]
