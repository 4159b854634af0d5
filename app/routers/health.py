# app/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB, the catalog size and unresolved inventory alerts.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import get_db
from app.models.alert import InventoryAlert
from app.models.catalog_item import CatalogItem
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    """
    Returns:
    - Database connectivity
    - Catalog item count (0 means the catalog was never seeded)
    - Number of open alerts (overcommitted stock, placement drift)
    """
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "database": "unknown",
        "catalog_items": None,
        "open_alerts": None,
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"
        return result

    result["catalog_items"] = db.query(CatalogItem).count()
    result["open_alerts"] = db.query(InventoryAlert).filter(InventoryAlert.is_resolved == 0).count()
    if result["catalog_items"] == 0:
        result["status"] = "degraded"
    return result
