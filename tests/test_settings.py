import pytest

from wardview.api.dependencies import get_data_service
from wardview.config.settings import Settings, get_settings
from wardview.services.data_sources import StaticDataSource
from wardview.services.sql_source import SQLDataSource


def test_defaults(monkeypatch):
    for name in ("DATA_SOURCE", "CACHE_BACKEND", "PII_VIEWER_ROLES", "OVERVIEW_REVERSIBLE_COUNTERS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.data_source == "static"
    assert settings.cache_backend == "memory"
    assert settings.cache_ttl_seconds == 300
    assert settings.pii_viewer_roles == []
    assert settings.overview_reversible_counters is False


def test_environment_values(monkeypatch):
    monkeypatch.setenv("DATA_SOURCE", "sql")
    monkeypatch.setenv("PII_VIEWER_ROLES", "physician, auditor,")
    monkeypatch.setenv("OVERVIEW_REVERSIBLE_COUNTERS", "True")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "60")

    settings = Settings()

    assert settings.data_source == "sql"
    assert settings.pii_viewer_roles == ["physician", "auditor"]
    assert settings.overview_reversible_counters is True
    assert settings.cache_ttl_seconds == 60


def test_overrides_and_validation():
    assert Settings(database_url="sqlite://").database_url == "sqlite://"

    with pytest.raises(TypeError):
        Settings(databse_url="sqlite://")
    with pytest.raises(ValueError):
        Settings(data_source="spreadsheet")


def test_data_service_follows_configured_source(monkeypatch, db_session):
    monkeypatch.setenv("DATA_SOURCE", "sql")
    monkeypatch.setenv("OVERVIEW_REVERSIBLE_COUNTERS", "true")
    get_settings.cache_clear()
    try:
        service = get_data_service(db_session)
        assert isinstance(service.source, SQLDataSource)
        assert service.accumulator.reversible is True

        monkeypatch.setenv("DATA_SOURCE", "static")
        get_settings.cache_clear()
        assert isinstance(get_data_service(db_session).source, StaticDataSource)
    finally:
        get_settings.cache_clear()
