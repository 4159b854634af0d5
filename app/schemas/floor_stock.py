from pydantic import BaseModel, Field, StrictInt, field_validator
from app.schemas.catalog import CatalogItemOut


class FloorStockCreate(BaseModel):
    catalog_id: str = Field(..., min_length=1, max_length=100)
    count: StrictInt = Field(..., ge=0)

    @field_validator("catalog_id")
    @classmethod
    def strip_catalog_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("catalog_id required")
        return v


class FloorStockUpdate(BaseModel):
    count: StrictInt = Field(..., ge=0)


class FloorStockOut(BaseModel):
    id: int
    floor_id: int
    catalog_id: str
    count: int
    catalog: CatalogItemOut

    class Config:
        from_attributes = True


class FloorStockUsageOut(FloorStockOut):
    used: int
    available: int      # max(count - used, 0)
