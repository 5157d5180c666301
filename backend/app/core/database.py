"""
Database Engine & Session Factory
"""
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings


Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    """Create the pooled engine shared by all requests"""
    url = settings.DATABASE_URL

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # in-memory databases live as long as their single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=settings.DEBUG, **kwargs)

    return create_engine(url, echo=settings.DEBUG, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    """Session factory; deleted rows stay readable after commit"""
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def check_connection(engine: Engine) -> None:
    """Round-trip to the database, raising on failure"""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def init_db(engine: Engine) -> None:
    """Verify the connection and create missing tables"""
    # Import models so they register on Base.metadata
    from app import models  # noqa: F401

    check_connection(engine)
    Base.metadata.create_all(bind=engine)
