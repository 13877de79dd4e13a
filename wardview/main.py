"""
WardView application entry point
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from wardview.api import dashboard_api, records_api
from wardview.config.database import SessionLocal, init_db
from wardview.config.logging_config import configure_logging
from wardview.config.settings import Settings, get_settings
from wardview.data.seed import SEED_DATA
from wardview.services.errors import DataSourceError, DuplicateDisplayNameError, DuplicateRecordError
from wardview.services.sql_source import seed_database

logger = logging.getLogger(__name__)


def _prepare_store(settings: Settings):
    """Create tables, and seed them when the dashboard reads from SQL"""
    init_db()
    if settings.data_source != "sql":
        return
    db = SessionLocal()
    try:
        seed_database(db, SEED_DATA)
    finally:
        db.close()


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _prepare_store(settings)
        logger.info(f"WardView started with {settings.data_source} data source")
        yield

    app = FastAPI(title="WardView", version="0.1.0", lifespan=lifespan)
    app.include_router(dashboard_api.router)
    app.include_router(records_api.router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=422, content={"detail": exc.errors(include_url=False, include_context=False, include_input=False)})

    @app.exception_handler(DuplicateRecordError)
    async def duplicate_record_handler(request: Request, exc: DuplicateRecordError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(DuplicateDisplayNameError)
    async def duplicate_name_handler(request: Request, exc: DuplicateDisplayNameError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(DataSourceError)
    async def data_source_error_handler(request: Request, exc: DataSourceError):
        return JSONResponse(status_code=502, content={"detail": "Data source unavailable"})

    return app


app = create_app()


if __name__ == "__main__":
    import os
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(app, host="0.0.0.0", port=port)
