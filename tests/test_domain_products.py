"""
Tests for the products domain layer.

Tests the entity and error classes in isolation.
No external dependencies or IO required.
"""

import pytest

from app.domain.products.entities import Product, RequestContext
from app.domain.products.errors import (
    AuthenticationFailedError,
    BadParamInputError,
    ConflictError,
    ErrorKind,
    ExpiredTokenError,
    InternalServiceError,
    ProductDomainError,
    ResourceNotFoundError,
)


class TestProductEntity:
    """Tests for the Product entity."""

    def test_defaults_mark_fields_as_not_supplied(self) -> None:
        product = Product()
        assert product.product_id == ""
        assert product.name == ""
        assert product.sourcing_values is None
        assert product.ingredients is None

    def test_absent_and_empty_sequences_differ(self) -> None:
        assert Product(sourcing_values=[]) != Product(sourcing_values=None)


class TestRequestContext:
    """Tests for the RequestContext value."""

    def test_is_immutable(self) -> None:
        ctx = RequestContext(request_id="r-1")
        with pytest.raises(AttributeError):
            ctx.request_id = "r-2"  # type: ignore[misc]


class TestDomainErrors:
    """Tests for domain error classes."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (AuthenticationFailedError(), ErrorKind.AUTH_FAILED),
            (ExpiredTokenError(), ErrorKind.EXPIRED_TOKEN),
            (BadParamInputError(), ErrorKind.BAD_PARAM_INPUT),
            (ConflictError("123"), ErrorKind.CONFLICT),
            (ResourceNotFoundError("123"), ErrorKind.NOT_FOUND),
            (InternalServiceError("boom"), ErrorKind.INTERNAL),
        ],
    )
    def test_each_error_carries_its_kind(
        self, error: ProductDomainError, kind: ErrorKind
    ) -> None:
        assert isinstance(error, ProductDomainError)
        assert error.kind is kind

    def test_not_found_message_contains_id(self) -> None:
        error = ResourceNotFoundError("646")
        assert error.product_id == "646"
        assert "646" in str(error)
        assert error.message == str(error)

    def test_conflict_message_contains_id(self) -> None:
        assert "2190" in str(ConflictError("2190"))

    def test_base_error_defaults_to_internal(self) -> None:
        assert ProductDomainError("x").kind is ErrorKind.INTERNAL
