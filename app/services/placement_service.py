# app/services/placement_service.py
"""
Zone Object Placement: tier 3 of the inventory hierarchy.

Each placed object consumes one unit of its zone allocation:

    count(zone_objects for an allocation)  <=  zone_allocations.quantity

The reserved quantity is never touched here; the placed count is derived by
counting rows. Place and remove lock the allocation row for the duration of the
transaction, so concurrent placements against one allocation are serialized.
"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload
from sqlalchemy.orm.exc import StaleDataError

from app.models.floor_stock import FloorStock
from app.models.zone_allocation import ZoneAllocation
from app.models.zone_object import ZoneObject
from app.services.alert_service import create_alert, PLACEMENT_DRIFT
from app.services.allocation_service import lock_allocation, placed_count
from app.services.exceptions import BadRequest, CapacityExceeded, InvalidReference, NotFound
from app.services.transaction import run_atomic
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _load_object(db: Session, object_id: int, zone_id: int, lock: bool = False) -> ZoneObject:
    q = db.query(ZoneObject).filter(ZoneObject.id == object_id)
    if lock:
        q = q.with_for_update().populate_existing()
    obj = q.first()
    if not obj:
        raise NotFound("Object not found")
    if obj.zone_id != zone_id:
        raise InvalidReference("Object does not belong to this zone")
    return obj


def place(db: Session, zone_id: int, zone_allocation_id: int,
          x: float, y: float, rotation: Optional[float] = None) -> ZoneObject:
    """Put one object of an allocation on the plan."""

    def _place():
        allocation = lock_allocation(db, zone_allocation_id)
        if allocation.zone_id != zone_id:
            raise InvalidReference("zoneInventoryId does not belong to this zone")

        placed = placed_count(db, zone_allocation_id)
        if placed >= allocation.quantity:
            raise CapacityExceeded(
                max(allocation.quantity - placed, 0),
                f"All {allocation.quantity} reserved unit(s) already placed",
            )

        obj = ZoneObject(zone_id=zone_id, zone_allocation_id=zone_allocation_id,
                         x=x, y=y, rotation=rotation if rotation is not None else 0.0)
        db.add(obj)
        db.flush()
        return obj, allocation.quantity - placed - 1

    obj, remaining = run_atomic(db, _place, "place_object")
    logger.info(f"[PLACE] zone={zone_id} alloc={zone_allocation_id} object={obj.id} "
                f"at ({x}, {y}) remaining={remaining}")
    return obj


def move(db: Session, object_id: int, zone_id: int, x: Optional[float] = None,
         y: Optional[float] = None, rotation: Optional[float] = None) -> ZoneObject:
    """Partial update of position / rotation. Fields left as None are untouched."""
    changes = {k: v for k, v in (("x", x), ("y", y), ("rotation", rotation)) if v is not None}
    if not changes:
        raise BadRequest("No fields to update")

    def _move():
        obj = _load_object(db, object_id, zone_id, lock=True)
        for field, value in changes.items():
            setattr(obj, field, value)
        try:
            db.flush()
        except StaleDataError as exc:
            # Row deleted by a concurrent remove / deallocate before the UPDATE
            raise NotFound("Object not found") from exc
        return obj

    obj = run_atomic(db, _move, "move_object")
    logger.debug(f"[PLACE] object={object_id} updated {changes}")
    return obj


def remove(db: Session, object_id: int, zone_id: int) -> None:
    """
    Take an object off the plan. The unit returns to the allocation implicitly.
    If the allocation still holds more objects than it reserves afterwards, the
    removal commits anyway and a placement_drift alert is recorded.
    """

    def _remove():
        obj = _load_object(db, object_id, zone_id)
        allocation = lock_allocation(db, obj.zone_allocation_id)
        obj = _load_object(db, object_id, zone_id, lock=True)   # allocation, then object
        db.delete(obj)
        db.flush()
        placed = placed_count(db, allocation.id)
        if placed > allocation.quantity:
            create_alert(db, PLACEMENT_DRIFT,
                         f"Allocation {allocation.id} holds {placed} object(s) "
                         f"but reserves {allocation.quantity}",
                         floor_stock_id=allocation.floor_stock_id, zone_allocation_id=allocation.id)
        return allocation.id

    allocation_id = run_atomic(db, _remove, "remove_object")
    logger.info(f"[PLACE] zone={zone_id} object={object_id} removed (alloc={allocation_id})")


def list_zone_objects(db: Session, zone_id: int):
    """Objects placed in a zone, with catalog metadata reachable via `.catalog`."""
    return (
        db.query(ZoneObject)
        .options(
            joinedload(ZoneObject.allocation)
            .joinedload(ZoneAllocation.floor_stock)
            .joinedload(FloorStock.catalog)
        )
        .filter(ZoneObject.zone_id == zone_id)
        .order_by(ZoneObject.id.asc())
        .all()
    )
