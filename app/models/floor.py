# app/models/floor.py
"""
Floors table. One row per storey of an office, unique by (office_id, number).
Plan image URLs point at uploaded files stored outside the database.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from app.database import Base


class Floor(Base):
    __tablename__ = "floors"
    __table_args__ = (UniqueConstraint("office_id", "number", name="ux_floors_office_number"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    office_id = Column(Integer, ForeignKey("offices.id", ondelete="CASCADE"), nullable=False)
    number = Column(Integer, nullable=False)
    plan_image_url = Column(String(500))
    firesafe_image_url = Column(String(500))

    def __repr__(self):
        return f"<Floor {self.id} office={self.office_id} number={self.number}>"
