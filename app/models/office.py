# app/models/office.py
"""
Offices table. Top of the floor-plan hierarchy: office → floors → layers/zones.
Rows are created by setup tooling; the inventory ledgers only reference them.
"""

from sqlalchemy import Column, Integer, String
from app.database import Base


class Office(Base):
    __tablename__ = "offices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    city = Column(String(100), nullable=False)
    address = Column(String(300), nullable=False)
    country = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Office {self.id} name={self.name} city={self.city}>"
