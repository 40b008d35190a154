"""
Domain entities for the products bounded context.

Entities are built per request from wire data and handed to the
product service. They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Product:
    """An ice-cream product in the catalog.

    String fields default to the empty string, which means "not supplied"
    on the update path. The two sequence fields use ``None`` for absent and
    ``[]`` for present-but-empty; the two states must never be merged.

    Attributes:
        product_id: Client-assigned numeric identifier.
        name: Display name (ASCII).
        image_closed_url: URI of the closed-pint image.
        image_open_url: URI of the open-pint image.
        description: Short description.
        story: Longer marketing story.
        sourcing_values: Sourcing claims, or None when absent.
        ingredients: Ingredient list, or None when absent.
        allergy_info: Allergy statement.
        dietary_certification: Dietary certification label.
    """

    product_id: str = ""
    name: str = ""
    image_closed_url: str = ""
    image_open_url: str = ""
    description: str = ""
    story: str = ""
    sourcing_values: Optional[list[str]] = None
    ingredients: Optional[list[str]] = None
    allergy_info: str = ""
    dietary_certification: str = ""


@dataclass(frozen=True)
class RequestContext:
    """Per-request context forwarded untouched to every service call.

    Attributes:
        request_id: Correlation id taken from ``X-Request-ID`` or generated.
    """

    request_id: str
