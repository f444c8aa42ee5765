"""
Rule-based task triage: category, priority, entities and suggested actions.
"""

from .version import API_VERSION

__version__ = API_VERSION
