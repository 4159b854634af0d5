from pydantic import BaseModel, Field, StrictInt
from app.schemas.catalog import CatalogItemOut
from app.schemas.floor_stock import FloorStockOut


class ZoneAllocationCreate(BaseModel):
    floor_stock_id: StrictInt
    quantity: StrictInt = Field(..., ge=0)


class ZoneAllocationUpdate(BaseModel):
    quantity: StrictInt = Field(..., ge=0)


class ZoneAllocationOut(BaseModel):
    id: int
    zone_id: int
    floor_stock_id: int
    quantity: int       # reserved

    class Config:
        from_attributes = True


class ZoneAllocationUsageOut(ZoneAllocationOut):
    placed: int
    remaining: int
    floor_stock: FloorStockOut
    catalog: CatalogItemOut
