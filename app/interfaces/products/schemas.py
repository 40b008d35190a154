"""
Pydantic schemas for the products API.

These schemas define the wire contract: request bodies, the single-product
response envelope, and the error envelope. Field constraints live here;
decoding and error reporting live in the validation module.
No business logic belongs here.
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

NUMERIC_PATTERN = r"^[-+]?[0-9]+(?:\.[0-9]+)?$"
PRODUCT_ID_MIN_LEN = 3
NAME_MAX_LEN = 50
DESCRIPTION_MAX_LEN = 100
STORY_MAX_LEN = 300
ALLERGY_INFO_MAX_LEN = 50
DIETARY_CERTIFICATION_MAX_LEN = 25

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_FORBIDDEN_URI_CHARS_RE = re.compile(r"[\x00-\x20\x7f]")


def is_request_uri(value: str) -> bool:
    """Return True if value is an absolute URI or an absolute path.

    Relative references such as ``images/pint.png`` are rejected, as is
    anything containing whitespace or control characters.
    """
    if _FORBIDDEN_URI_CHARS_RE.search(value):
        return False
    if value.startswith("/"):
        return True
    try:
        scheme = urlsplit(value).scheme
    except ValueError:
        return False
    if not scheme or not _SCHEME_RE.match(scheme):
        return False
    return bool(value.split(":", 1)[1])


def check_ascii(value: str) -> str:
    """Reject strings with non-ASCII characters. Empty strings pass."""
    if value and not value.isascii():
        raise ValueError("must contain only ASCII characters")
    return value


def check_uri(value: str) -> str:
    """Reject non-empty strings that are not a request URI."""
    if value and not is_request_uri(value):
        raise ValueError("must be a valid URI")
    return value


class ProductCreateRequest(BaseModel):
    """Request body for ``POST /products/``.

    Attributes:
        product_id: Client-assigned numeric id, at least 3 characters.
        name: ASCII display name, at most 50 characters.
        image_closed_url: Optional URI.
        image_open_url: Optional URI.
        description: At most 100 characters.
        story: Optional, at most 300 characters.
        sourcing_values: Optional list; None when the key is absent.
        ingredients: Optional list; None when the key is absent.
        allergy_info: At most 50 characters.
        dietary_certification: At most 25 characters.
    """

    model_config = ConfigDict(strict=True)

    product_id: str = Field(
        ...,
        alias="productId",
        min_length=PRODUCT_ID_MIN_LEN,
        pattern=NUMERIC_PATTERN,
    )
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    image_closed_url: str = Field(default="", alias="image_closed")
    image_open_url: str = Field(default="", alias="image_open")
    description: str = Field(..., min_length=1, max_length=DESCRIPTION_MAX_LEN)
    story: str = Field(default="", max_length=STORY_MAX_LEN)
    sourcing_values: Optional[list[str]] = None
    ingredients: Optional[list[str]] = None
    allergy_info: str = Field(..., min_length=1, max_length=ALLERGY_INFO_MAX_LEN)
    dietary_certification: str = Field(
        ...,
        alias="dietary_certifications",
        min_length=1,
        max_length=DIETARY_CERTIFICATION_MAX_LEN,
    )

    @field_validator("name")
    @classmethod
    def name_is_ascii(cls, value: str) -> str:
        return check_ascii(value)

    @field_validator("image_closed_url", "image_open_url")
    @classmethod
    def image_is_uri(cls, value: str) -> str:
        return check_uri(value)


class ProductUpdateRequest(BaseModel):
    """Request body for ``PUT /products/{product_id}``.

    Every field is optional and an empty string counts as "not supplied".
    The product id is never read from the body; a ``productId`` key is
    ignored like any other unknown key.
    """

    model_config = ConfigDict(strict=True)

    name: str = Field(default="", max_length=NAME_MAX_LEN)
    image_closed_url: str = Field(default="", alias="image_closed")
    image_open_url: str = Field(default="", alias="image_open")
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LEN)
    story: str = Field(default="", max_length=STORY_MAX_LEN)
    sourcing_values: Optional[list[str]] = None
    ingredients: Optional[list[str]] = None
    allergy_info: str = Field(default="", max_length=ALLERGY_INFO_MAX_LEN)
    dietary_certification: str = Field(
        default="",
        alias="dietary_certifications",
        max_length=DIETARY_CERTIFICATION_MAX_LEN,
    )

    @field_validator("name")
    @classmethod
    def name_is_ascii(cls, value: str) -> str:
        return check_ascii(value)

    @field_validator("image_closed_url", "image_open_url")
    @classmethod
    def image_is_uri(cls, value: str) -> str:
        return check_uri(value)


class ProductData(BaseModel):
    """Public projection of a product."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    name: str
    image_closed_url: str = Field(alias="image_closed")
    image_open_url: str = Field(alias="image_open")
    description: str
    story: str
    sourcing_values: Optional[list[str]] = None
    ingredients: Optional[list[str]] = None
    allergy_info: str
    dietary_certification: str = Field(alias="dietary_certifications")


class ProductSingleResponse(BaseModel):
    """Envelope wrapping a single product under the ``product`` key."""

    product: ProductData


class MessageError(BaseModel):
    """Envelope wrapping a single human-readable error message."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    product_service: str
