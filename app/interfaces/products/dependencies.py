"""
Dependency injection for the products bounded context.

Provides FastAPI dependency functions that hand the router its
ProductService adapter and the per-request context.
Tests swap the service through ``app.dependency_overrides``.
"""

from functools import lru_cache
from uuid import uuid4

from fastapi import Request

from app.domain.products.entities import RequestContext
from app.domain.products.ports import ProductService
from app.infrastructure.products.in_memory_service import InMemoryProductService


@lru_cache
def get_product_service() -> ProductService:
    """Return the process-wide ProductService adapter."""
    return InMemoryProductService()


def get_request_context(request: Request) -> RequestContext:
    """Build the RequestContext for the inbound request.

    Reuses the id assigned by the security headers middleware when present.
    """
    request_id = getattr(request.state, "request_id", None) or uuid4().hex
    return RequestContext(request_id=request_id)
