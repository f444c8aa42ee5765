"""
API request and response models for FastAPI endpoints.

This module defines the Pydantic models used for API request/response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..classification.schemas import ClassificationResult
from ..config import settings
from ..version import VersionInfo


class ClassifyRequest(BaseModel):
    """Request model for single task classification."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=settings.max_title_length,
        description="Task title",
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=settings.max_description_length,
        description="Free-text task description",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Schedule urgent meeting with Priya today",
                "description": "Discuss budget allocation at Head Office",
            }
        }
    }


class ClassifyResponse(BaseModel):
    """Response model for single task classification."""

    success: bool = Field(description="Whether classification succeeded")
    result: Optional[ClassificationResult] = Field(None, description="Classification result")
    error: Optional[str] = Field(None, description="Error message if failed")


class ClassifyBatchRequest(BaseModel):
    """Request model for batch classification."""

    items: List[ClassifyRequest] = Field(
        ...,
        min_length=1,
        max_length=settings.max_batch_size,
        description="Tasks to classify, in order",
    )


class ClassifyBatchResponse(BaseModel):
    """Response model for batch classification."""

    success: bool
    total_count: int
    results: List[ClassificationResult]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status", examples=["healthy"])
    version: str = Field(description="API version", examples=["1.0.0"])
    uptime_seconds: float = Field(description="Service uptime")


class VersionResponse(BaseModel):
    """Version information response."""

    api_version: str = Field(description="API version")
    classifier: VersionInfo = Field(description="Current classifier versions and vocabularies")
