# app/models/floor_stock.py
"""
Floor stock ledger (tier 1).
Total units of one catalog item available on a floor, unique per (floor_id, catalog_id).
The "used" and "available" figures are derived from zone allocations, never stored.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database import Base


class FloorStock(Base):
    __tablename__ = "floor_stock"
    __table_args__ = (UniqueConstraint("floor_id", "catalog_id", name="ux_floor_stock_floor_catalog"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    floor_id = Column(Integer, ForeignKey("floors.id", ondelete="CASCADE"), nullable=False, index=True)
    catalog_id = Column(String(100), ForeignKey("inventory_catalog.id", ondelete="RESTRICT"), nullable=False)
    count = Column(Integer, nullable=False, default=0)

    catalog = relationship("CatalogItem")

    def __repr__(self):
        return f"<FloorStock {self.id} floor={self.floor_id} item={self.catalog_id} count={self.count}>"
