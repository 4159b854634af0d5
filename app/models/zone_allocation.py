# app/models/zone_allocation.py
"""
Zone allocation ledger (tier 2).
Units of a floor stock entry reserved for one zone, unique per (zone_id, floor_stock_id).
`quantity` is the reserved figure and only changes through allocate / re-allocate.
The placed count is derived by counting zone_objects rows.
"""

from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database import Base


class ZoneAllocation(Base):
    __tablename__ = "zone_allocations"
    __table_args__ = (UniqueConstraint("zone_id", "floor_stock_id", name="ux_zone_allocations_zone_stock"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    zone_id = Column(Integer, ForeignKey("zones.id", ondelete="CASCADE"), nullable=False, index=True)
    floor_stock_id = Column(Integer, ForeignKey("floor_stock.id", ondelete="CASCADE"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=0)

    floor_stock = relationship("FloorStock")

    def __repr__(self):
        return f"<ZoneAllocation {self.id} zone={self.zone_id} stock={self.floor_stock_id} qty={self.quantity}>"
