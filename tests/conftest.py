"""Pytest fixtures: a fresh in-memory SQLite catalogue per test."""

import pytest

from product_catalogue.config import Config
from product_catalogue.database import init_sqlalchemy, dispose_sqlalchemy_engine
from product_catalogue.database.category_repository import CategoryRepository
from product_catalogue.database.product_repository import ProductRepository
from product_catalogue.services import CategoryService, ProductService


@pytest.fixture
def engine():
    dispose_sqlalchemy_engine()
    engine = init_sqlalchemy("sqlite://")
    yield engine
    dispose_sqlalchemy_engine()


@pytest.fixture
def category_repository(engine):
    return CategoryRepository(engine)


@pytest.fixture
def product_repository(engine):
    return ProductRepository(engine)


@pytest.fixture
def category_service(category_repository):
    return CategoryService(category_repository)


@pytest.fixture
def product_service(product_repository, category_repository):
    return ProductService(product_repository, category_repository)


@pytest.fixture
def app():
    from product_catalogue.app import create_app

    dispose_sqlalchemy_engine()
    config = Config(SQLALCHEMY_DATABASE_URI="sqlite://", APP_DEBUG=True, LOG_LEVEL="DEBUG")
    app = create_app(config)
    app.config.update(TESTING=True)
    yield app
    dispose_sqlalchemy_engine()


@pytest.fixture
def client(app):
    return app.test_client()
