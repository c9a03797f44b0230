"""
Tests for settings validation and engine construction.
"""

import pytest
from sqlalchemy.pool import StaticPool

from product_api.config import Settings, create_db_engine


def test_in_memory_sqlite_detection():
    assert Settings(database_url="sqlite://").is_in_memory_sqlite
    assert Settings(database_url="sqlite:///:memory:").is_in_memory_sqlite
    assert not Settings(database_url="sqlite:///./products.db").is_in_memory_sqlite
    assert not Settings(database_url="mssql+pyodbc://sa:pw@db/products").is_in_memory_sqlite


def test_in_memory_engine_shares_one_connection():
    engine = create_db_engine(Settings(database_url="sqlite://"))

    assert isinstance(engine.pool, StaticPool)
    assert engine.dialect.name == "sqlite"


def test_file_engine_uses_regular_pool(tmp_path):
    engine = create_db_engine(Settings(database_url=f"sqlite:///{tmp_path / 'products.db'}"))

    assert not isinstance(engine.pool, StaticPool)


def test_empty_database_url_rejected():
    with pytest.raises(ValueError, match="DATABASE_URL"):
        Settings(database_url="")


def test_unknown_log_level_rejected():
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(log_level="CHATTY")


def test_settings_are_immutable():
    settings = Settings(database_url="sqlite://")

    with pytest.raises(AttributeError):
        settings.database_url = "sqlite:///other.db"  # type: ignore[misc]
