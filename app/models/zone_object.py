# app/models/zone_object.py
"""
Zone object placements (tier 3).
One row per concrete object drawn on the plan; each consumes one unit of its allocation.
"""

from sqlalchemy import Column, Integer, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class ZoneObject(Base):
    __tablename__ = "zone_objects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    zone_id = Column(Integer, ForeignKey("zones.id", ondelete="CASCADE"), nullable=False, index=True)
    zone_allocation_id = Column(Integer, ForeignKey("zone_allocations.id", ondelete="CASCADE"),
                                nullable=False, index=True)
    x = Column(Float, nullable=False)
    y = Column(Float, nullable=False)
    rotation = Column(Float, nullable=False, default=0.0)

    allocation = relationship("ZoneAllocation")

    @property
    def catalog(self):
        return self.allocation.floor_stock.catalog

    def __repr__(self):
        return f"<ZoneObject {self.id} zone={self.zone_id} alloc={self.zone_allocation_id} at=({self.x},{self.y})>"
