"""
HTTP API for the task triage service.
"""
