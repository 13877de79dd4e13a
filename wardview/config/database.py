"""
Database Configuration for WardView
SQL document store and redis cache connections
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
import redis

from wardview.config.settings import Settings, get_settings


class DatabaseConfig:
    """Database configuration with connection pooling"""

    def __init__(self, settings: Settings = None):
        settings = settings or get_settings()
        self.database_url = settings.database_url
        self.redis_url = settings.redis_url
        self.pool_size = settings.db_pool_size
        self.max_overflow = settings.db_max_overflow
        self.echo = settings.db_echo

    def create_engine(self):
        """Create database engine; in-memory SQLite shares one connection"""
        if self.database_url.startswith("sqlite"):
            options = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in self.database_url or self.database_url == "sqlite://":
                options["poolclass"] = StaticPool
            return create_engine(self.database_url, echo=self.echo, **options)

        return create_engine(
            self.database_url,
            poolclass=QueuePool,
            pool_size=self.pool_size,
            max_overflow=self.max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            echo=self.echo
        )

    def create_redis_client(self):
        """Create Redis client for the aggregate response cache"""
        return redis.from_url(self.redis_url, decode_responses=True)


Base = declarative_base()
engine = DatabaseConfig().create_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create all tables on the given engine"""
    # models must be imported so their tables register on Base.metadata
    from wardview.models import hospital, metrics  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    """Dependency for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
