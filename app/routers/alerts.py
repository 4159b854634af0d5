from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.alert import AlertOut
from app.services import alert_service
from typing import Optional

router = APIRouter()


@router.get("/alerts", response_model=list[AlertOut], summary="Inventory alerts, filterable by type")
def get_all_alerts(
    alert_type: Optional[str] = None,
    is_resolved: Optional[int] = None,
    limit: int = 50,
    db: Session = Depends(get_db)
):
    """stock_overcommitted and placement_drift alerts, newest first."""
    return alert_service.list_alerts(db, alert_type=alert_type, is_resolved=is_resolved, limit=limit)


@router.put("/alerts/{alert_id}/resolve", response_model=AlertOut, summary="Mark an alert resolved")
def resolve_alert(alert_id: int, db: Session = Depends(get_db)):
    alert = alert_service.resolve_alert(db, alert_id)
    db.commit()
    return alert
