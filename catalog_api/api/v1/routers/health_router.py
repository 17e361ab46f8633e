"""
Health check роутер.

Предоставляет endpoint для проверки состояния сервиса.
"""

import logging

from fastapi import APIRouter

from ..schemas import HealthResponse
from ....core.config import settings

logger = logging.getLogger("catalog-api.api.health")

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Пример ответа:
        {
            "status": "healthy",
            "service": "catalog-api",
            "version": "0.1.0"
        }
    """
    logger.debug("Health check called")

    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=settings.version
    )
