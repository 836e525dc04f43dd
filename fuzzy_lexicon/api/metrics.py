"""Metrics and monitoring API endpoints."""

import os

import psutil
from fastapi import APIRouter, HTTPException

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global lexicon instance
from ..engine_instance import lexicon


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query statistics, index sizes and memory usage",
)
async def get_metrics() -> MetricsResponse:
    """Query statistics of the lexicon plus resident memory of the process."""
    try:
        stats = lexicon.get_stats()

        process = psutil.Process(os.getpid())
        memory_usage_mb = process.memory_info().rss / (1024 * 1024)

        return MetricsResponse(
            total_queries=stats["total_queries"],
            queries_by_strategy=stats["queries_by_strategy"],
            average_response_time_ms=stats["average_execution_time_ms"],
            vocabulary_size=stats["vocabulary_size"],
            feature_space_size=stats["feature_space_size"],
            memory_usage_mb=memory_usage_mb,
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get metrics: {str(e)}")
