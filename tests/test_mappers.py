"""
Tests for the wire/domain mappers.

Mappers are pure field copies; these tests check that nothing is lost,
nothing is defaulted, and absent sequences stay distinct from empty ones.
"""

import json

from app.domain.products.entities import Product
from app.interfaces.products.mappers import (
    create_to_product,
    render_response,
    to_single_response,
    update_to_product,
)
from app.interfaces.products.schemas import ProductCreateRequest, ProductUpdateRequest


def _create_request(**overrides) -> ProductCreateRequest:
    body = {
        "productId": "2190",
        "name": "Chocolate Fudge Brownie",
        "image_closed": "/files/pints/chocolate-fudge-brownie-closed.png",
        "image_open": "/files/pints/chocolate-fudge-brownie-open.png",
        "description": "Chocolate Ice Cream with Fudgy Brownies",
        "story": "Brownies from Greyston Bakery.",
        "sourcing_values": ["Non-GMO", "Fairtrade"],
        "ingredients": ["cream", "brownies"],
        "allergy_info": "contains milk, eggs, wheat and soy",
        "dietary_certifications": "Kosher",
    }
    body.update(overrides)
    return ProductCreateRequest.model_validate(body)


def _product(**overrides) -> Product:
    values = dict(
        product_id="2190",
        name="Chocolate Fudge Brownie",
        image_closed_url="/closed.png",
        image_open_url="/open.png",
        description="Chocolate Ice Cream with Fudgy Brownies",
        story="",
        sourcing_values=None,
        ingredients=None,
        allergy_info="contains milk",
        dietary_certification="Kosher",
    )
    values.update(overrides)
    return Product(**values)


class TestCreateToProduct:
    """Tests for create request mapping."""

    def test_fields_are_copied_verbatim(self) -> None:
        request = _create_request()
        product = create_to_product(request)
        assert product == Product(
            product_id="2190",
            name="Chocolate Fudge Brownie",
            image_closed_url="/files/pints/chocolate-fudge-brownie-closed.png",
            image_open_url="/files/pints/chocolate-fudge-brownie-open.png",
            description="Chocolate Ice Cream with Fudgy Brownies",
            story="Brownies from Greyston Bakery.",
            sourcing_values=["Non-GMO", "Fairtrade"],
            ingredients=["cream", "brownies"],
            allergy_info="contains milk, eggs, wheat and soy",
            dietary_certification="Kosher",
        )

    def test_sequences_are_not_shared_with_request(self) -> None:
        request = _create_request()
        product = create_to_product(request)
        product.ingredients.append("nuts")
        assert request.ingredients == ["cream", "brownies"]

    def test_absent_sequences_stay_absent(self) -> None:
        request = _create_request(sourcing_values=None, ingredients=[])
        product = create_to_product(request)
        assert product.sourcing_values is None
        assert product.ingredients == []


class TestUpdateToProduct:
    """Tests for update request mapping."""

    def test_id_is_left_blank(self) -> None:
        product = update_to_product(ProductUpdateRequest.model_validate({"name": "X"}))
        assert product.product_id == ""
        assert product.name == "X"

    def test_unsupplied_fields_keep_defaults(self) -> None:
        product = update_to_product(
            ProductUpdateRequest.model_validate({"ingredients": ["milk"]})
        )
        assert product == Product(ingredients=["milk"])


class TestResponseMapping:
    """Tests for the response envelope."""

    def test_envelope_uses_wire_keys(self) -> None:
        body = render_response(to_single_response(_product(story="Once upon a pint")))
        assert body == {
            "product": {
                "productId": "2190",
                "name": "Chocolate Fudge Brownie",
                "image_closed": "/closed.png",
                "image_open": "/open.png",
                "description": "Chocolate Ice Cream with Fudgy Brownies",
                "story": "Once upon a pint",
                "allergy_info": "contains milk",
                "dietary_certifications": "Kosher",
            }
        }

    def test_absent_sequences_are_omitted(self) -> None:
        body = render_response(to_single_response(_product()))
        assert "sourcing_values" not in body["product"]
        assert "ingredients" not in body["product"]

    def test_empty_sequences_are_kept(self) -> None:
        body = render_response(
            to_single_response(_product(sourcing_values=[], ingredients=["cream"]))
        )
        assert body["product"]["sourcing_values"] == []
        assert body["product"]["ingredients"] == ["cream"]

    def test_rendered_body_is_json_serializable(self) -> None:
        body = render_response(to_single_response(_product(ingredients=[])))
        assert json.loads(json.dumps(body)) == body

    def test_create_then_respond_is_lossless(self) -> None:
        request = _create_request()
        body = render_response(to_single_response(create_to_product(request)))
        assert body["product"] == request.model_dump(by_alias=True)
