"""
Seed the inventory catalog (upsert by id), optionally with a demo floor plan.
Usage: python scripts/setup/seed_catalog.py [--demo]

--demo adds one office with floor 1, a custom layer and two zones ("Zone A",
"Zone B") so the ledgers can be exercised straight away, e.g. with
scripts/test/simulate_allocation.py.
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import SessionLocal, create_tables
from app.models.office import Office
from app.models.floor import Floor
from app.models.layer import Layer
from app.models.zone import Zone
from app.services.catalog_service import DEFAULT_CATALOG, seed_catalog

SQUARE = [[0, 0], [10, 0], [10, 10], [0, 10]]


def seed_demo_plan(db):
    office = db.query(Office).filter(Office.name == "Demo Office").first()
    if office:
        print(f"ℹ️  Demo office already exists (id={office.id})")
        return
    office = Office(name="Demo Office", city="Riga", address="Brivibas iela 1", country="LV")
    db.add(office)
    db.flush()
    floor = Floor(office_id=office.id, number=1)
    db.add(floor)
    db.flush()
    layer = Layer(floor_id=floor.id, name="Furniture", type="custom")
    db.add(layer)
    db.flush()
    for name in ("Zone A", "Zone B"):
        db.add(Zone(floor_id=floor.id, layer_id=layer.id, name=name, description="", coordinates=SQUARE))
    db.commit()
    print(f"✅ Demo plan: office={office.id} floor={floor.id} layer={layer.id} zones=Zone A, Zone B")


def main():
    parser = argparse.ArgumentParser(description="Seed inventory catalog")
    parser.add_argument("--demo", action="store_true", help="also create a demo office/floor/zones")
    args = parser.parse_args()

    create_tables()
    db = SessionLocal()
    try:
        inserted = seed_catalog(db)
        print(f"✅ Catalog seeded: {len(DEFAULT_CATALOG)} items ({inserted} new)")
        if args.demo:
            seed_demo_plan(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
