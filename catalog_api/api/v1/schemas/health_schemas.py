"""
Схемы для health check endpoint.
"""
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Ответ health check"""
    status: str = Field(description="Статус сервиса")
    service: str = Field(description="Имя сервиса")
    version: str = Field(description="Версия сервиса")
