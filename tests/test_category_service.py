import pytest

from product_catalogue.api.errors import ConflictError, DuplicateKeyError, NotFoundError, ValidationError
from product_catalogue.domain import CategoryData, ProductData


def _names(service):
    return [(c.id, c.name, c.description) for c in service.get_all_categories()]


def test_create_category_assigns_identifier(category_service):
    created = category_service.create_category(CategoryData(name="Tools"))

    assert created.id == 1
    assert created.name == "Tools"
    assert created.description is None


def test_create_category_with_existing_name_fails_and_leaves_store_unchanged(category_service):
    category_service.create_category(CategoryData(name="Tools", description="Hand tools"))
    before = _names(category_service)

    with pytest.raises(DuplicateKeyError):
        category_service.create_category(CategoryData(name="Tools", description="Other"))

    assert _names(category_service) == before


def test_duplicate_key_is_an_invalid_argument_kind(category_service):
    category_service.create_category(CategoryData(name="Tools"))

    with pytest.raises(ValidationError) as excinfo:
        category_service.create_category(CategoryData(name="Tools"))
    assert excinfo.value.status_code == 409


def test_category_names_are_case_sensitive(category_service):
    category_service.create_category(CategoryData(name="Tools"))
    lower = category_service.create_category(CategoryData(name="tools"))

    assert lower.id == 2


def test_get_category_by_id(category_service):
    created = category_service.create_category(CategoryData(name="Garden"))

    found = category_service.get_category_by_id(created.id)

    assert found is not None
    assert found.name == "Garden"
    assert category_service.get_category_by_id(999) is None


def test_update_category_overwrites_name_and_description(category_service):
    created = category_service.create_category(CategoryData(name="Tools", description="Hand tools"))

    updated = category_service.update_category(created.id, CategoryData(name="Power Tools"))

    assert updated.id == created.id
    assert updated.name == "Power Tools"
    assert updated.description is None
    assert _names(category_service) == [(created.id, "Power Tools", None)]


def test_update_missing_category_fails_and_leaves_store_unchanged(category_service):
    category_service.create_category(CategoryData(name="Tools"))
    before = _names(category_service)

    with pytest.raises(NotFoundError):
        category_service.update_category(42, CategoryData(name="Anything"))

    assert _names(category_service) == before


def test_update_category_to_a_taken_name_conflicts(category_service):
    category_service.create_category(CategoryData(name="Tools"))
    garden = category_service.create_category(CategoryData(name="Garden"))

    with pytest.raises(ConflictError):
        category_service.update_category(garden.id, CategoryData(name="Tools"))

    assert category_service.get_category_by_id(garden.id).name == "Garden"


def test_delete_category(category_service):
    created = category_service.create_category(CategoryData(name="Tools"))

    category_service.delete_category(created.id)

    assert category_service.get_category_by_id(created.id) is None
    assert category_service.get_all_categories() == []


def test_delete_missing_category_fails_and_leaves_store_unchanged(category_service):
    category_service.create_category(CategoryData(name="Tools"))
    before = _names(category_service)

    with pytest.raises(NotFoundError):
        category_service.delete_category(7)

    assert _names(category_service) == before


def test_delete_category_still_used_by_products_conflicts(category_service, product_service):
    tools = category_service.create_category(CategoryData(name="Tools"))
    product_service.create_product(ProductData(name="Hammer", category_id=tools.id))

    with pytest.raises(ConflictError):
        category_service.delete_category(tools.id)

    assert category_service.get_category_by_id(tools.id) is not None
    assert len(product_service.get_all_products()) == 1
