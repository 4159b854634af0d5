from pydantic import BaseModel, Field, StrictFloat, StrictInt
from typing import Optional
from app.schemas.catalog import CatalogItemOut


class ZoneObjectCreate(BaseModel):
    zone_allocation_id: StrictInt
    x: StrictFloat = Field(..., allow_inf_nan=False)
    y: StrictFloat = Field(..., allow_inf_nan=False)
    rotation: Optional[StrictFloat] = Field(None, allow_inf_nan=False)   # defaults to 0


class ZoneObjectUpdate(BaseModel):
    x: Optional[StrictFloat] = Field(None, allow_inf_nan=False)
    y: Optional[StrictFloat] = Field(None, allow_inf_nan=False)
    rotation: Optional[StrictFloat] = Field(None, allow_inf_nan=False)


class ZoneObjectOut(BaseModel):
    id: int
    zone_id: int
    zone_allocation_id: int
    x: float
    y: float
    rotation: float

    class Config:
        from_attributes = True


class ZoneObjectDetailOut(ZoneObjectOut):
    catalog: CatalogItemOut
