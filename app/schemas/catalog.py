from pydantic import BaseModel
from typing import Optional


class CatalogItemOut(BaseModel):
    id: str
    display_name: str
    icon_key: str
    category: Optional[str]

    class Config:
        from_attributes = True
