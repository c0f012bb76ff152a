from decimal import Decimal

import pytest

from product_catalogue.api.errors import NotFoundError, ValidationError
from product_catalogue.domain import CategoryData, ProductData


@pytest.fixture
def tools(category_service):
    return category_service.create_category(CategoryData(name="Tools", description="Hand tools"))


def test_create_product_with_existing_category_id(product_service, category_service, tools):
    product = product_service.create_product(
        ProductData(name="Hammer", price=Decimal("12.50"), stock_quantity=3, category_id=tools.id)
    )

    assert product.id == 1
    assert product.category_id == tools.id
    assert product.category.name == "Tools"
    assert product.price == Decimal("12.50")
    assert len(category_service.get_all_categories()) == 1


def test_create_product_with_unknown_category_id_fails(product_service, category_service, tools):
    with pytest.raises(NotFoundError):
        product_service.create_product(ProductData(name="Hammer", category_id=99))

    assert product_service.get_all_products() == []
    assert len(category_service.get_all_categories()) == 1


def test_create_product_with_existing_category_name_reuses_it(product_service, category_service, tools):
    product = product_service.create_product(ProductData(name="Hammer", category_name="Tools"))

    assert product.id == 1
    assert product.category.id == tools.id
    assert [c.name for c in category_service.get_all_categories()] == ["Tools"]


def test_create_product_with_new_category_name_creates_exactly_one_category(product_service, category_service):
    product = product_service.create_product(ProductData(name="Rake", category_name="Garden"))

    categories = category_service.get_all_categories()
    assert len(categories) == 1
    assert categories[0].name == "Garden"
    assert categories[0].description is None
    assert product.category_id == categories[0].id


def test_category_id_takes_precedence_over_name(product_service, category_service, tools):
    product = product_service.create_product(
        ProductData(name="Hammer", category_id=tools.id, category_name="Garden")
    )

    assert product.category_id == tools.id
    assert [c.name for c in category_service.get_all_categories()] == ["Tools"]


def test_create_product_without_category_fails(product_service, category_service):
    with pytest.raises(ValidationError) as excinfo:
        product_service.create_product(ProductData(name="Orphan"))

    assert excinfo.value.status_code == 400
    assert product_service.get_all_products() == []
    assert category_service.get_all_categories() == []


def test_get_product_by_id(product_service, tools):
    created = product_service.create_product(ProductData(name="Hammer", category_id=tools.id))

    found = product_service.get_product_by_id(created.id)

    assert found.name == "Hammer"
    assert found.category.name == "Tools"
    assert product_service.get_product_by_id(500) is None


def test_get_products_by_category_matches_exact_name(product_service, tools):
    product_service.create_product(ProductData(name="Hammer", category_id=tools.id))
    product_service.create_product(ProductData(name="Rake", category_name="Garden"))

    assert [p.name for p in product_service.get_products_by_category("Tools")] == ["Hammer"]
    assert product_service.get_products_by_category("tools") == []
    assert product_service.get_products_by_category("Kitchen") == []


def test_update_product_overwrites_all_mutable_fields(product_service, tools):
    created = product_service.create_product(ProductData(
        name="Hammer", description="Claw hammer", price=Decimal("10.00"),
        stock_quantity=5, image_url="hammer.png", category_id=tools.id,
    ))

    updated = product_service.update_product(created.id, ProductData(name="Mallet", price=Decimal("8.00")))

    assert updated.name == "Mallet"
    assert updated.description is None
    assert updated.price == Decimal("8.00")
    assert updated.stock_quantity is None
    assert updated.image_url is None
    assert updated.category_id == tools.id


def test_update_product_moves_category_by_id(product_service, category_service, tools):
    garden = category_service.create_category(CategoryData(name="Garden"))
    created = product_service.create_product(ProductData(name="Spade", category_id=tools.id))

    updated = product_service.update_product(created.id, ProductData(name="Spade", category_id=garden.id))

    assert updated.category_id == garden.id
    assert product_service.get_product_by_id(created.id).category.name == "Garden"


def test_update_product_ignores_category_name(product_service, category_service, tools):
    created = product_service.create_product(ProductData(name="Spade", category_id=tools.id))

    updated = product_service.update_product(created.id, ProductData(name="Spade", category_name="Garden"))

    assert updated.category_id == tools.id
    assert [c.name for c in category_service.get_all_categories()] == ["Tools"]


def test_update_product_with_unknown_category_id_fails_and_leaves_product_unchanged(product_service, tools):
    created = product_service.create_product(ProductData(name="Hammer", category_id=tools.id))

    with pytest.raises(NotFoundError):
        product_service.update_product(created.id, ProductData(name="Renamed", category_id=77))

    stored = product_service.get_product_by_id(created.id)
    assert stored.name == "Hammer"
    assert stored.category_id == tools.id


def test_update_missing_product_fails(product_service, tools):
    product_service.create_product(ProductData(name="Hammer", category_id=tools.id))

    with pytest.raises(NotFoundError):
        product_service.update_product(31, ProductData(name="Ghost", category_id=tools.id))

    assert [p.name for p in product_service.get_all_products()] == ["Hammer"]


def test_delete_product(product_service, category_service, tools):
    created = product_service.create_product(ProductData(name="Hammer", category_id=tools.id))

    product_service.delete_product(created.id)

    assert product_service.get_all_products() == []
    assert category_service.get_category_by_id(tools.id) is not None


def test_delete_missing_product_fails_and_leaves_store_unchanged(product_service, tools):
    product_service.create_product(ProductData(name="Hammer", category_id=tools.id))

    with pytest.raises(NotFoundError):
        product_service.delete_product(12)

    assert len(product_service.get_all_products()) == 1


def test_search_matches_name_or_description_ignoring_case(product_service, tools):
    product_service.create_product(ProductData(name="Blue Shirt", category_name="Clothing"))
    product_service.create_product(ProductData(name="Tee", description="cotton shirt for summer", category_name="Clothing"))
    product_service.create_product(ProductData(name="Pants", category_name="Clothing"))

    assert [p.name for p in product_service.search_products("shirt")] == ["Blue Shirt", "Tee"]
    assert [p.name for p in product_service.search_products("SHIRT")] == ["Blue Shirt", "Tee"]
    assert [p.name for p in product_service.search_products("pan")] == ["Pants"]
    assert product_service.search_products("socks") == []


def test_search_with_empty_keyword_returns_everything(product_service, tools):
    product_service.create_product(ProductData(name="Hammer", category_id=tools.id))
    product_service.create_product(ProductData(name="Saw", category_id=tools.id))

    assert len(product_service.search_products("")) == 2


def test_search_requires_a_keyword(product_service):
    with pytest.raises(ValidationError):
        product_service.search_products(None)
