# app/services/catalog_service.py
"""
Inventory catalog helpers: read access and idempotent seeding.
The catalog is reference data: the ledgers read it, only seeding writes it.
"""

from sqlalchemy.orm import Session
from app.models.catalog_item import CatalogItem
from app.services.exceptions import NotFound
from app.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOG = [
    {"id": "chair", "display_name": "Chair", "icon_key": "chair", "category": "furniture"},
    {"id": "table", "display_name": "Table", "icon_key": "table", "category": "furniture"},
    {"id": "computer", "display_name": "Computer", "icon_key": "computer", "category": "device"},
    {"id": "keyboard", "display_name": "Keyboard", "icon_key": "keyboard", "category": "device"},
    {"id": "mouse", "display_name": "Mouse", "icon_key": "mouse", "category": "device"},
    {"id": "headphones", "display_name": "Headphones", "icon_key": "headphones", "category": "device"},
    {"id": "wifi", "display_name": "Wi-Fi access point", "icon_key": "wifi", "category": "infra"},
    {"id": "charging", "display_name": "Charging station", "icon_key": "charging", "category": "infra"},
    {"id": "camera", "display_name": "Camera", "icon_key": "camera", "category": "device"},
    {"id": "printer", "display_name": "Printer", "icon_key": "printer", "category": "device"},
    {"id": "printer_disabled", "display_name": "Printer (out of order)", "icon_key": "printer_disabled",
     "category": "device"},
    {"id": "coffee", "display_name": "Coffee machine", "icon_key": "coffee", "category": "kitchen"},
    {"id": "fridge", "display_name": "Fridge", "icon_key": "fridge", "category": "kitchen"},
    {"id": "microwave", "display_name": "Microwave", "icon_key": "microwave", "category": "kitchen"},
    {"id": "water", "display_name": "Water cooler", "icon_key": "water", "category": "kitchen"},
    {"id": "docs", "display_name": "Documents", "icon_key": "docs", "category": "infra"},
    {"id": "wardrobe", "display_name": "Wardrobe", "icon_key": "wardrobe", "category": "room"},
    {"id": "wash", "display_name": "Sink", "icon_key": "wash", "category": "room"},
    {"id": "laundry", "display_name": "Laundry", "icon_key": "laundry", "category": "room"},
    {"id": "bathroom", "display_name": "Bathroom", "icon_key": "bathroom", "category": "room"},
    {"id": "speaker", "display_name": "Speaker", "icon_key": "speaker", "category": "device"},
    {"id": "mic", "display_name": "Microphone", "icon_key": "mic", "category": "device"},
    {"id": "storage", "display_name": "Storage room", "icon_key": "storage", "category": "room"},
    {"id": "fire", "display_name": "Fire extinguisher", "icon_key": "fire", "category": "safety"},
    {"id": "hvac", "display_name": "Ventilation", "icon_key": "hvac", "category": "infra"},
    {"id": "usb", "display_name": "USB device", "icon_key": "usb", "category": "device"},
    {"id": "breakfast", "display_name": "Buffet / kitchen", "icon_key": "breakfast", "category": "kitchen"},
    {"id": "fax", "display_name": "Fax", "icon_key": "fax", "category": "device"},
    {"id": "scanner", "display_name": "Scanner", "icon_key": "scanner", "category": "device"},
    {"id": "blender", "display_name": "Blender", "icon_key": "blender", "category": "kitchen"},
    {"id": "iron", "display_name": "Iron", "icon_key": "iron", "category": "kitchen"},
    {"id": "flash", "display_name": "Lighting", "icon_key": "flash", "category": "infra"},
]


def list_catalog(db: Session):
    """All catalog items, grouped by category then display name."""
    return db.query(CatalogItem).order_by(CatalogItem.category.asc(), CatalogItem.display_name.asc()).all()


def get_catalog_item(db: Session, catalog_id: str) -> CatalogItem:
    item = db.query(CatalogItem).filter(CatalogItem.id == catalog_id).first()
    if not item:
        raise NotFound(f"Catalog item '{catalog_id}' not found")
    return item


def seed_catalog(db: Session, items=None) -> int:
    """
    Upsert catalog items by id. Safe to run repeatedly.
    Returns the number of items inserted (updates are not counted).
    """
    inserted = 0
    for data in items if items is not None else DEFAULT_CATALOG:
        item = db.query(CatalogItem).filter(CatalogItem.id == data["id"]).first()
        if item is None:
            db.add(CatalogItem(**data))
            inserted += 1
        else:
            item.display_name = data["display_name"]
            item.icon_key = data["icon_key"]
            item.category = data.get("category")
    db.commit()
    logger.info(f"Catalog seeded: {inserted} new item(s)")
    return inserted
