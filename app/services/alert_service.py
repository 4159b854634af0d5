# app/services/alert_service.py
"""
Shared inventory alert service.
Used by floor_stock_service (stock lowered below allocations) and
placement_service (placements exceeding a reservation).
Alerts join the caller's transaction; run_atomic commits or discards them with the ledger write.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from app.models.alert import InventoryAlert
from app.services.exceptions import NotFound
from app.utils.logger import get_logger

logger = get_logger(__name__)

STOCK_OVERCOMMITTED = "stock_overcommitted"
PLACEMENT_DRIFT = "placement_drift"


def create_alert(db: Session, alert_type: str, description: str,
                 floor_stock_id: Optional[int] = None, zone_allocation_id: Optional[int] = None):
    """Add an alert record to the current transaction. Does not commit."""
    alert = InventoryAlert(alert_type=alert_type, floor_stock_id=floor_stock_id,
                           zone_allocation_id=zone_allocation_id, description=description,
                           is_resolved=0, triggered_at=datetime.utcnow())
    db.add(alert)
    logger.warning(f"[ALERT][{alert_type.upper()}] {description}")
    return alert


def list_alerts(db: Session, alert_type: Optional[str] = None,
                is_resolved: Optional[int] = None, limit: int = 50):
    q = db.query(InventoryAlert)
    if alert_type:
        q = q.filter(InventoryAlert.alert_type == alert_type)
    if is_resolved is not None:
        q = q.filter(InventoryAlert.is_resolved == is_resolved)
    return q.order_by(InventoryAlert.triggered_at.desc(), InventoryAlert.id.desc()).limit(limit).all()


def resolve_alert(db: Session, alert_id: int):
    alert = db.query(InventoryAlert).filter(InventoryAlert.id == alert_id).first()
    if not alert:
        raise NotFound(f"Alert {alert_id} not found")
    if not alert.is_resolved:
        alert.is_resolved = 1
        alert.resolved_at = datetime.utcnow()
    return alert
