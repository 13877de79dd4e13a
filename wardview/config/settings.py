"""
Application Settings for WardView
Environment-driven configuration for data sources, cache and privacy
"""
from functools import lru_cache
import os

DATA_SOURCES = ("static", "sql", "remote")
CACHE_BACKENDS = ("memory", "redis")


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_list(name: str) -> list:
    return [item.strip() for item in os.getenv(name, "").split(",") if item.strip()]


class Settings:
    """Runtime settings read from environment variables; keyword overrides win"""

    def __init__(self, **overrides):
        # Storage
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./wardview.db")
        self.redis_url = os.getenv("REDIS_URL", "redis://localhost:6379")
        self.db_pool_size = int(os.getenv("DB_POOL_SIZE", "20"))
        self.db_max_overflow = int(os.getenv("DB_MAX_OVERFLOW", "30"))
        self.db_echo = _env_bool("DB_ECHO")

        # Raw data source behind the read-model
        self.data_source = os.getenv("DATA_SOURCE", "static")
        self.api_base_url = os.getenv("API_BASE_URL", "http://localhost:3001/api")
        self.api_timeout_seconds = float(os.getenv("API_TIMEOUT_SECONDS", "3"))

        # Aggregate response cache
        self.cache_backend = os.getenv("CACHE_BACKEND", "memory")
        self.cache_ttl_seconds = int(os.getenv("CACHE_TTL_SECONDS", "300"))

        # Overview counters also decrement when an appointment leaves Completed/Cancelled
        self.overview_reversible_counters = _env_bool("OVERVIEW_REVERSIBLE_COUNTERS")

        # Comma-separated roles allowed to see unmasked PII; empty means nobody
        self.pii_viewer_roles = _env_list("PII_VIEWER_ROLES")

        self.log_level = os.getenv("LOG_LEVEL", "INFO")

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise TypeError(f"Unknown setting: {name}")
            setattr(self, name, value)

        if self.data_source not in DATA_SOURCES:
            raise ValueError(f"DATA_SOURCE must be one of {', '.join(DATA_SOURCES)}")
        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(f"CACHE_BACKEND must be one of {', '.join(CACHE_BACKENDS)}")


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
