"""
Health check router.

Reports the application version and which ProductService adapter the
process is wired to, so a caller can tell the in-memory default from a
real backing store.
"""

from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.domain.products.ports import ProductService
from app.interfaces.products.dependencies import get_product_service
from app.interfaces.products.schemas import HealthResponse
from app.shared.security.rate_limiting import current_rate_limit, limiter

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
@limiter.limit(current_rate_limit)
async def health_check(
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> HealthResponse:
    """Return application status, version, and the active service adapter."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        product_service=type(service).__name__,
    )
