from decimal import Decimal

import pytest

from product_catalogue.api.errors import ValidationError
from product_catalogue.domain import CategoryData, ProductData


def test_product_category_reference_from_nested_object():
    by_id = ProductData.from_dict({"name": "Hammer", "category": {"id": "3"}})
    by_name = ProductData.from_dict({"name": "Hammer", "category": {"name": "Tools"}})

    assert (by_id.category_id, by_id.category_name) == (3, None)
    assert (by_name.category_id, by_name.category_name) == (None, "Tools")


def test_product_category_reference_from_flat_keys():
    data = ProductData.from_dict({"name": "Hammer", "category_id": 2, "category_name": "Tools"})

    assert data.category_id == 2
    assert data.category_name == "Tools"


def test_product_numeric_fields_are_parsed():
    data = ProductData.from_dict({"name": "Hammer", "price": 9.99, "stock_quantity": "4"})

    assert data.price == Decimal("9.99")
    assert data.stock_quantity == 4


def test_integral_numbers_are_accepted_as_they_fit_the_columns():
    data = ProductData.from_dict({
        "name": "Hammer", "price": "1.50", "stock_quantity": 4.0, "category": {"id": 2.0},
    })

    assert data.price == Decimal("1.50")
    assert data.stock_quantity == 4
    assert data.category_id == 2
    assert ProductData.from_dict({"name": "Hammer", "price": "9999999999.99"}).price == Decimal("9999999999.99")


@pytest.mark.parametrize("payload", [
    {"price": 1},
    {"name": "  "},
    {"name": "Hammer", "price": "cheap"},
    {"name": "Hammer", "price": True},
    {"name": "Hammer", "price": "NaN"},
    {"name": "Hammer", "price": "Infinity"},
    {"name": "Hammer", "price": "-Infinity"},
    {"name": "Hammer", "price": float("nan")},
    {"name": "Hammer", "price": "1.234"},
    {"name": "Hammer", "price": 1e12},
    {"name": "Hammer", "price": "-10000000000"},
    {"name": "Hammer", "stock_quantity": "many"},
    {"name": "Hammer", "stock_quantity": 4.9},
    {"name": "Hammer", "stock_quantity": float("inf")},
    {"name": "Hammer", "category": {"id": 1.7}},
    {"name": "Hammer", "category_id": 1.5},
    {"name": "Hammer", "category": "Tools"},
    {"name": "Hammer", "category_name": "   "},
    {"name": "Hammer", "category": {"name": ""}},
])
def test_invalid_product_payloads(payload):
    with pytest.raises(ValidationError):
        ProductData.from_dict(payload)


def test_category_payload():
    assert CategoryData.from_dict({"name": "Tools"}) == CategoryData(name="Tools", description=None)
    with pytest.raises(ValidationError):
        CategoryData.from_dict(["Tools"])
