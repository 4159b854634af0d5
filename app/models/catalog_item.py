# app/models/catalog_item.py
"""
Inventory catalog: static reference list of item types (chair, printer, ...).
Seeded by scripts/setup/seed_catalog.py; never mutated by the ledgers.
"""

from sqlalchemy import Column, String
from app.database import Base


class CatalogItem(Base):
    __tablename__ = "inventory_catalog"

    id = Column(String(100), primary_key=True)           # stable key, e.g. "chair"
    display_name = Column(String(200), nullable=False)
    icon_key = Column(String(100), nullable=False)
    category = Column(String(50))                        # furniture | device | infra | kitchen | room | safety

    def __repr__(self):
        return f"<CatalogItem {self.id} category={self.category}>"
