# app/database.py
"""
Database connection, session management, and table creation.
Uses SQLAlchemy with PostgreSQL (SQLite is accepted for tests and local demos).
All models are auto-imported here so create_tables() creates every table in one call.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings
from app.utils.logger import get_logger

logger = get_logger(__name__)

if settings.IS_SQLITE:
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,        # One shared connection, in-memory DB survives across sessions
    )

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,          # Auto-reconnect if DB connection drops
        pool_size=10,
        max_overflow=20,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency. Yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    # Floor plan
    from app.models.office import Office                   # noqa
    from app.models.floor import Floor                     # noqa
    from app.models.layer import Layer                     # noqa
    from app.models.zone import Zone                       # noqa
    # Inventory
    from app.models.catalog_item import CatalogItem        # noqa
    from app.models.floor_stock import FloorStock          # noqa
    from app.models.zone_allocation import ZoneAllocation  # noqa
    from app.models.zone_object import ZoneObject          # noqa
    from app.models.alert import InventoryAlert            # noqa

    Base.metadata.create_all(bind=engine)
    logger.debug(f"Tables ensured: {sorted(Base.metadata.tables)}")
