# app/models/layer.py
"""Layout layers of a floor plan (fire-safety overlay or custom drawing layers)."""

from sqlalchemy import Column, Integer, String, ForeignKey
from app.database import Base


class Layer(Base):
    __tablename__ = "layers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    floor_id = Column(Integer, ForeignKey("floors.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    type = Column(String(20), nullable=False, default="custom")  # firesafe | custom

    def __repr__(self):
        return f"<Layer {self.id} floor={self.floor_id} type={self.type}>"
