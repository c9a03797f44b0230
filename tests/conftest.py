"""Shared fixtures: an in-memory SQLite product table and a wired-up app."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from product_api.api.app import create_app
from product_api.config import Settings, create_db_engine
from product_api.repositories import SqlProductRepository
from product_api.services import ProductService

API_KEY = "test-function-key"

PRODUCT_TABLE_DDL = """
CREATE TABLE Product (
    Id INTEGER PRIMARY KEY AUTOINCREMENT,
    ProductName TEXT NOT NULL,
    Description TEXT,
    Price REAL NOT NULL,
    CompanyId INTEGER,
    StoreId INTEGER,
    ModifiedDate TEXT
)
"""


@pytest.fixture
def settings():
    """Settings pointing at an in-memory database with a function key."""
    return Settings(database_url="sqlite://", api_key=API_KEY, log_level="WARNING")


@pytest.fixture
def engine(settings):
    """Create an engine with an empty Product table."""
    engine = create_db_engine(settings)
    with engine.begin() as conn:
        conn.execute(text(PRODUCT_TABLE_DDL))
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    return SqlProductRepository.create(engine)


@pytest.fixture
def service(repository):
    return ProductService.create(repository=repository)


@pytest.fixture
def client(settings, engine):
    """Create a test client with lifespan running and the key preset."""
    app = create_app(settings=settings, engine=engine)
    with TestClient(app, headers={"x-functions-key": API_KEY}) as client:
        yield client


@pytest.fixture
def anonymous_client(settings, engine):
    """Create a test client that sends no function key."""
    app = create_app(settings=settings, engine=engine)
    with TestClient(app) as client:
        yield client
