# app/models/zone.py
"""
Zones table: polygonal regions drawn on a layer of a floor.
Zones draw inventory from their floor's stock via zone allocations.
Coordinates are stored as opaque JSON; no geometry is computed server-side.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, JSON
from app.database import Base


class Zone(Base):
    __tablename__ = "zones"

    id = Column(Integer, primary_key=True, autoincrement=True)
    floor_id = Column(Integer, ForeignKey("floors.id", ondelete="CASCADE"), nullable=False, index=True)
    layer_id = Column(Integer, ForeignKey("layers.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default="free")  # free | occupied
    coordinates = Column(JSON, nullable=False)

    def __repr__(self):
        return f"<Zone {self.id} floor={self.floor_id} name={self.name}>"
