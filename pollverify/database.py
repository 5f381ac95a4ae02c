from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Base class for models
Base = declarative_base()


def create_memory_engine(echo: bool = False) -> Engine:
    """
    Create a private in-memory SQLite engine.

    StaticPool keeps the single connection alive for the life of the engine,
    otherwise every new connection would see an empty database.
    """
    return create_engine(
        "sqlite://",
        echo=echo,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the engine"""
    return sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


def init_db(engine: Engine) -> None:
    """Initialize database tables"""
    # Import all models to ensure they're registered
    from pollverify.models import (  # noqa: F401
        user, voter, queue, station, issue, system, stat,
        biometric, accessibility, notification, anomaly, predictive, blockchain
    )

    # Create all tables
    Base.metadata.create_all(engine)
