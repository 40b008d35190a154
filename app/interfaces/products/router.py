"""
FastAPI router for the products bounded context.

Each route is a short linear pipeline: decode and validate the body
(write operations only), map it onto a Product, call the ProductService
port, and map the result back to the wire. Domain errors raised by the
service propagate to the centralized error handlers, which write the
single error response.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.domain.products.entities import RequestContext
from app.domain.products.ports import ProductService
from app.interfaces.products.dependencies import (
    get_product_service,
    get_request_context,
)
from app.interfaces.products.mappers import (
    create_to_product,
    render_response,
    to_single_response,
    update_to_product,
)
from app.interfaces.products.schemas import (
    MessageError,
    ProductCreateRequest,
    ProductSingleResponse,
    ProductUpdateRequest,
)
from app.interfaces.products.validation import (
    check_body_size,
    check_declared_size,
    decode_and_validate,
)
from app.shared.security.rate_limiting import current_rate_limit, limiter

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"

ERROR_RESPONSES = {
    400: {"model": MessageError},
    401: {"model": MessageError},
    404: {"model": MessageError},
    413: {"model": MessageError},
    500: {"model": MessageError},
}

router = APIRouter(prefix="/products", tags=["products"])


def _empty_response(status_code: int) -> Response:
    return Response(status_code=status_code, media_type=JSON_MEDIA_TYPE)


async def _read_body(request: Request) -> bytes:
    check_declared_size(
        request.headers.get("content-length"), settings.max_request_size_bytes
    )
    raw = await request.body()
    check_body_size(raw, settings.max_request_size_bytes)
    return raw


@router.get(
    "/{product_id}",
    response_model=ProductSingleResponse,
    responses=ERROR_RESPONSES,
    summary="Get a product",
    name="PRODUCT_GET",
)
@limiter.limit(current_rate_limit)
async def get_product(
    request: Request,
    product_id: str,
    ctx: RequestContext = Depends(get_request_context),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Return a single product wrapped in the ``product`` envelope."""
    logger.info("Fetching product id=%s request_id=%s", product_id, ctx.request_id)
    product = await service.get(ctx, product_id)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=render_response(to_single_response(product)),
    )


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Create a product",
    name="PRODUCT_CREATE",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                JSON_MEDIA_TYPE: {
                    "schema": ProductCreateRequest.model_json_schema(by_alias=True)
                }
            },
        }
    },
)
@limiter.limit(current_rate_limit)
async def create_product(
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Create a product under its client-assigned id."""
    payload = decode_and_validate(await _read_body(request), ProductCreateRequest)
    product = create_to_product(payload)
    logger.info(
        "Creating product id=%s request_id=%s", product.product_id, ctx.request_id
    )
    await service.create(ctx, product)
    return _empty_response(status.HTTP_201_CREATED)


@router.put(
    "/{product_id}",
    responses=ERROR_RESPONSES,
    summary="Update a product",
    name="PRODUCT_UPDATE",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                JSON_MEDIA_TYPE: {
                    "schema": ProductUpdateRequest.model_json_schema(by_alias=True)
                }
            },
        }
    },
)
@limiter.limit(current_rate_limit)
async def update_product(
    product_id: str,
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Forward a partial update; the route id always wins over the body."""
    payload = decode_and_validate(await _read_body(request), ProductUpdateRequest)
    product = update_to_product(payload)
    product.product_id = product_id
    logger.info("Updating product id=%s request_id=%s", product_id, ctx.request_id)
    await service.update(ctx, product_id, product)
    return _empty_response(status.HTTP_200_OK)


@router.delete(
    "/{product_id}",
    responses=ERROR_RESPONSES,
    summary="Delete a product",
    name="PRODUCT_DELETE",
)
@limiter.limit(current_rate_limit)
async def delete_product(
    request: Request,
    product_id: str,
    ctx: RequestContext = Depends(get_request_context),
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    logger.info("Deleting product id=%s request_id=%s", product_id, ctx.request_id)
    await service.delete(ctx, product_id)
    return _empty_response(status.HTTP_200_OK)
