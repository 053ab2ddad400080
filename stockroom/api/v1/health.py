"""Health check endpoint with storage connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends

from stockroom.api.v1.deps import get_product_service
from stockroom.core.config import settings
from stockroom.schemas.health import HealthResponse
from stockroom.services.products import ProductService

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    products: Annotated[ProductService, Depends(get_product_service)],
) -> HealthResponse:
    """
    Return service health status and storage connectivity.
    Used by load balancers and monitoring.
    """
    database = None
    if settings.STORAGE_BACKEND == "sql":
        database = "connected" if products.store.ping() else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        storage=settings.STORAGE_BACKEND,
        database=database,
    )
