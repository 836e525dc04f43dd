"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])

# Import the global lexicon instance
from ..engine_instance import lexicon, settings

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the lexicon service",
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the lexicon service.

    Every strategy is exercised with a throwaway query; an empty vocabulary
    reports the service as degraded.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {
            "prefix_index": "healthy",
            "feature_index": "healthy",
            "guided_search": "healthy",
        }

        probes = {
            "prefix_index": lambda: lexicon.prefix_index.fuzzy_search("test", 1),
            "feature_index": lambda: lexicon.feature_index.find_k_nearest("test", 1),
            "guided_search": lambda: lexicon.guided_search.find_similar_words("test", 1),
        }
        for name, probe in probes.items():
            try:
                probe()
            except Exception:
                dependencies[name] = "unhealthy"

        if lexicon.vocabulary_size == 0:
            dependencies["prefix_index"] = "degraded"
        if lexicon.feature_space_size == 0:
            dependencies["feature_index"] = "degraded"

        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies,
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Health check failed: {str(e)}")


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests",
)
async def readiness_check() -> JSONResponse:
    """Ready once statistics can be read from the lexicon."""
    try:
        stats = lexicon.get_stats()
        return JSONResponse(
            status_code=200,
            content={
                "status": "ready",
                "timestamp": datetime.utcnow().isoformat(),
                "vocabulary_size": stats["vocabulary_size"],
                "feature_space_size": stats["feature_space_size"],
            },
        )

    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": str(e),
                "timestamp": datetime.utcnow().isoformat(),
            },
        )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding",
)
async def liveness_check() -> JSONResponse:
    """Liveness probe for orchestration systems."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time,
        },
    )
