"""
Translation between wire schemas and the Product entity.

Every function here is a plain field copy: no validation (the schemas
already did it), no defaulting, no IO.
"""

from typing import Any, Optional

from app.domain.products.entities import Product
from app.interfaces.products.schemas import (
    ProductCreateRequest,
    ProductData,
    ProductSingleResponse,
    ProductUpdateRequest,
)


def _copy_list(values: Optional[list[str]]) -> Optional[list[str]]:
    return None if values is None else list(values)


def create_to_product(request: ProductCreateRequest) -> Product:
    """Map a create request onto a new Product."""
    return Product(
        product_id=request.product_id,
        name=request.name,
        image_closed_url=request.image_closed_url,
        image_open_url=request.image_open_url,
        description=request.description,
        story=request.story,
        sourcing_values=_copy_list(request.sourcing_values),
        ingredients=_copy_list(request.ingredients),
        allergy_info=request.allergy_info,
        dietary_certification=request.dietary_certification,
    )


def update_to_product(request: ProductUpdateRequest) -> Product:
    """Map an update request onto a Product patch.

    The product id is left blank; the caller sets it from the route.
    """
    return Product(
        name=request.name,
        image_closed_url=request.image_closed_url,
        image_open_url=request.image_open_url,
        description=request.description,
        story=request.story,
        sourcing_values=_copy_list(request.sourcing_values),
        ingredients=_copy_list(request.ingredients),
        allergy_info=request.allergy_info,
        dietary_certification=request.dietary_certification,
    )


def to_single_response(product: Product) -> ProductSingleResponse:
    """Wrap a Product's public projection in the response envelope."""
    return ProductSingleResponse(
        product=ProductData(
            product_id=product.product_id,
            name=product.name,
            image_closed_url=product.image_closed_url,
            image_open_url=product.image_open_url,
            description=product.description,
            story=product.story,
            sourcing_values=_copy_list(product.sourcing_values),
            ingredients=_copy_list(product.ingredients),
            allergy_info=product.allergy_info,
            dietary_certification=product.dietary_certification,
        )
    )


def render_response(response: ProductSingleResponse) -> dict[str, Any]:
    """Serialize the envelope using wire key names.

    Absent sequence fields are dropped from the output; empty ones are kept.
    """
    body = response.model_dump(by_alias=True)
    product = body["product"]
    for key in ("sourcing_values", "ingredients"):
        if product[key] is None:
            del product[key]
    return body
