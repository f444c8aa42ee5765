"""
Classification API routes.

Provides REST endpoints for task triage:
- POST /api/v1/classify - Single task classification
- POST /api/v1/classify/batch - Batch classification

Stateless: results are returned to the caller, nothing is stored.
"""

from fastapi import APIRouter, HTTPException, status
import structlog

from task_triage.classification.classifier import classify_task, classify_batch
from task_triage.models.api_models import (
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyRequest,
    ClassifyResponse,
)


logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["classification"])


@router.post("/classify", response_model=ClassifyResponse, status_code=status.HTTP_200_OK)
async def classify_endpoint(request: ClassifyRequest) -> ClassifyResponse:
    """
    Classify a single task.

    Args:
        request: Title and description, already validated

    Returns:
        ClassifyResponse with category, priority, entities, suggested actions

    Raises:
        HTTPException: On unexpected classification errors
    """
    logger.info(
        "classification_request_received",
        title_length=len(request.title),
        description_length=len(request.description),
    )

    try:
        result = classify_task(request.title, request.description)
    except Exception as e:
        logger.error("classification_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to classify task"
        )

    logger.info(
        "classification_completed",
        category=result.category.value,
        priority=result.priority.value,
        entities_count=len(result.extracted_entities),
    )

    return ClassifyResponse(success=True, result=result)


@router.post("/classify/batch", response_model=ClassifyBatchResponse, status_code=status.HTTP_200_OK)
async def classify_batch_endpoint(request: ClassifyBatchRequest) -> ClassifyBatchResponse:
    """
    Classify multiple tasks in one request.

    Args:
        request: Batch of title/description pairs

    Returns:
        ClassifyBatchResponse with one result per item, in request order
    """
    logger.info("batch_classification_request_received", items_count=len(request.items))

    try:
        results = classify_batch((item.title, item.description) for item in request.items)
    except Exception as e:
        logger.error("batch_classification_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to classify tasks"
        )

    logger.info("batch_classification_completed", total_count=len(results))

    return ClassifyBatchResponse(
        success=True,
        total_count=len(results),
        results=results,
    )
