# app/models/alert.py
"""
Inventory alerts table. Records discrepancies the ledgers tolerate but must surface:
  - stock_overcommitted: floor stock count lowered below what is already allocated
  - placement_drift:     an allocation holds more placed objects than it reserves
Written by alert_service inside the transaction that detected the discrepancy.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from app.database import Base


class InventoryAlert(Base):
    __tablename__ = "inventory_alerts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    alert_type = Column(String(50), nullable=False, index=True)
    floor_stock_id = Column(Integer, index=True)       # no FK, kept after the stock entry is deleted
    zone_allocation_id = Column(Integer, index=True)
    description = Column(Text)
    is_resolved = Column(Integer, default=0, nullable=False)
    triggered_at = Column(DateTime, nullable=False, index=True)
    resolved_at = Column(DateTime)

    def __repr__(self):
        return f"<InventoryAlert {self.id} type={self.alert_type} resolved={self.is_resolved}>"
