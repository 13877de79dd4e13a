"""
Shared FastAPI dependencies
"""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from wardview.config.database import get_db
from wardview.config.settings import get_settings
from wardview.data.seed import SEED_DATA
from wardview.services.cache import build_cache
from wardview.services.data_service import DataService
from wardview.services.data_sources import StaticDataSource
from wardview.services.overview import OverviewAccumulator
from wardview.services.remote_source import RemoteDataSource
from wardview.services.sql_source import SQLDataSource


@lru_cache()
def get_response_cache():
    return build_cache(get_settings())


@lru_cache()
def get_static_source() -> StaticDataSource:
    """Process-wide static dataset; writes persist until restart"""
    return StaticDataSource(SEED_DATA)


def get_data_service(db: Session = Depends(get_db)) -> DataService:
    """Read-model over the data source selected by settings"""
    settings = get_settings()
    if settings.data_source == "sql":
        source = SQLDataSource(db)
    elif settings.data_source == "remote":
        source = RemoteDataSource(settings.api_base_url, timeout=settings.api_timeout_seconds)
    else:
        source = get_static_source()

    return DataService(
        source,
        cache=get_response_cache(),
        accumulator=OverviewAccumulator(reversible=settings.overview_reversible_counters),
    )


def get_records_service(db: Session = Depends(get_db)) -> DataService:
    """Service over the local SQL store, backing the records API"""
    settings = get_settings()
    return DataService(
        SQLDataSource(db),
        cache=get_response_cache(),
        accumulator=OverviewAccumulator(reversible=settings.overview_reversible_counters),
    )
