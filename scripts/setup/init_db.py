"""
Initialize database: creates the floor-plan and inventory tables.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--reset]
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import argparse

from app.database import Base, create_tables, engine
from app.config import settings
from sqlalchemy import func, inspect, select, table, text


def main():
    parser = argparse.ArgumentParser(description="Create inventory tables")
    parser.add_argument("--reset", action="store_true",
                        help="Drop every table first (destroys stock, allocations and placements)")
    args = parser.parse_args()

    print(f"🗄️  Inventory DB init on {settings.DATABASE_URL}")
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        sys.exit(1)

    if args.reset:
        create_tables()   # registers every model on Base.metadata
        Base.metadata.drop_all(bind=engine)
        print("🧹 Existing tables dropped")

    create_tables()

    tables = sorted(inspect(engine).get_table_names())
    with engine.connect() as conn:
        for name in tables:
            rows = conn.execute(select(func.count()).select_from(table(name))).scalar()
            print(f"   ✓ {name:<20} {rows} row(s)")

    print("\nNext: python scripts/setup/seed_catalog.py --demo")
    print(f"      uvicorn app.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT}")


if __name__ == "__main__":
    main()
