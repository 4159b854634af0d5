"""Inventory catalog, a read-only list of item types."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.catalog import CatalogItemOut
from app.services.catalog_service import get_catalog_item, list_catalog

router = APIRouter()


@router.get("/inventory/catalog", response_model=list[CatalogItemOut], summary="List catalog items")
def get_catalog(db: Session = Depends(get_db)):
    return list_catalog(db)


@router.get("/inventory/catalog/{catalog_id}", response_model=CatalogItemOut, summary="Get one catalog item")
def get_catalog_entry(catalog_id: str, db: Session = Depends(get_db)):
    return get_catalog_item(db, catalog_id)
