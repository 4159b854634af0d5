"""Shared fixtures: in-memory SQLite database with a small floor plan and catalog."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_CATALOG_ON_STARTUP"] = "false"
os.environ["LOG_FILE"] = ""

from types import SimpleNamespace

import pytest
from app.database import Base, SessionLocal, create_tables, engine
from app.models.floor import Floor
from app.models.layer import Layer
from app.models.office import Office
from app.models.zone import Zone
from app.services.catalog_service import seed_catalog

SQUARE = [[0, 0], [4, 0], [4, 4], [0, 4]]


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def plan(db):
    """
    Office with two floors. Floor 1 has zones A and B, floor 2 has zone C.
    The default catalog is seeded.
    """
    seed_catalog(db)
    office = Office(name="HQ", city="Riga", address="Main st 1", country="LV")
    db.add(office)
    db.flush()
    floor1 = Floor(office_id=office.id, number=1)
    floor2 = Floor(office_id=office.id, number=2)
    db.add_all([floor1, floor2])
    db.flush()
    layer1 = Layer(floor_id=floor1.id, name="Furniture", type="custom")
    layer2 = Layer(floor_id=floor2.id, name="Furniture", type="custom")
    db.add_all([layer1, layer2])
    db.flush()
    zone_a = Zone(floor_id=floor1.id, layer_id=layer1.id, name="A", description="", coordinates=SQUARE)
    zone_b = Zone(floor_id=floor1.id, layer_id=layer1.id, name="B", description="", coordinates=SQUARE)
    zone_c = Zone(floor_id=floor2.id, layer_id=layer2.id, name="C", description="", coordinates=SQUARE)
    db.add_all([zone_a, zone_b, zone_c])
    db.commit()
    return SimpleNamespace(
        office_id=office.id,
        floor1=floor1.id, floor2=floor2.id,
        zone_a=zone_a.id, zone_b=zone_b.id, zone_c=zone_c.id,
    )
