# API data models for the task triage service

from .api_models import (
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyRequest,
    ClassifyResponse,
    HealthResponse,
    VersionResponse,
)

__all__ = [
    "ClassifyRequest",
    "ClassifyResponse",
    "ClassifyBatchRequest",
    "ClassifyBatchResponse",
    "HealthResponse",
    "VersionResponse",
]
