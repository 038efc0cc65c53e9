from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict
from catalog.config import settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "service": settings.app_name,
                "version": settings.app_version,
            }
        }
    )
    
    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    """Liveness probe; the catalog is in memory so there is nothing else to check"""
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version
    )
