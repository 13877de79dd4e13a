import copy

import pytest
from sqlalchemy.orm import sessionmaker

from wardview.config.database import DatabaseConfig, init_db
from wardview.config.settings import Settings, get_settings
from wardview.data.seed import SEED_DATA
from wardview.services.cache import ResponseCache
from wardview.services.data_service import DataService
from wardview.services.data_sources import StaticDataSource
from wardview.services.sql_source import SQLDataSource, seed_database


@pytest.fixture()
def dataset():
    return copy.deepcopy(SEED_DATA)


@pytest.fixture()
def static_source(dataset):
    return StaticDataSource(dataset)


@pytest.fixture()
def cache():
    return ResponseCache(ttl=60)


@pytest.fixture()
def service(static_source, cache):
    return DataService(static_source, cache=cache)


@pytest.fixture()
def db_session():
    engine = DatabaseConfig(Settings(database_url="sqlite://")).create_engine()
    init_db(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture()
def sql_source(db_session, dataset):
    seed_database(db_session, dataset)
    return SQLDataSource(db_session)


@pytest.fixture()
def pii_viewer(monkeypatch):
    """Allow the 'physician' role to see unmasked PII"""
    monkeypatch.setenv("PII_VIEWER_ROLES", "physician, auditor")
    get_settings.cache_clear()
    yield "physician"
    get_settings.cache_clear()
