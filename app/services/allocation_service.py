# app/services/allocation_service.py
"""
Zone Allocation Ledger: tier 2 of the inventory hierarchy.

A zone reserves units of a floor stock entry. For every stock entry:

    Σ zone_allocations.quantity  <=  floor_stock.count

Every check-then-write runs in one transaction holding a row lock on the
floor stock entry, so two concurrent requests against the same entry cannot
both pass the capacity check. Lock order is always floor stock → allocation.

Requests are all-or-nothing: no partial grants and no waiting queue.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.models.catalog_item import CatalogItem
from app.models.floor_stock import FloorStock
from app.models.zone import Zone
from app.models.zone_allocation import ZoneAllocation
from app.models.zone_object import ZoneObject
from app.services.exceptions import (
    CapacityExceeded, Conflict, InvalidReference, NotFound, require_non_negative_int,
)
from app.services.floor_stock_service import allocated_sum, lock_floor_stock
from app.services.transaction import run_atomic
from app.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class AllocationUsage:
    id: int
    zone_id: int
    floor_stock_id: int
    quantity: int        # reserved
    placed: int          # counted from zone_objects
    remaining: int       # max(quantity - placed, 0)
    floor_stock: Optional[FloorStock] = None
    catalog: Optional[CatalogItem] = None


def placed_count(db: Session, allocation_id: int) -> int:
    return int(
        db.query(func.count(ZoneObject.id))
        .filter(ZoneObject.zone_allocation_id == allocation_id)
        .scalar() or 0
    )


def lock_allocation(db: Session, allocation_id: int) -> ZoneAllocation:
    """Load an allocation with a row lock held until the transaction ends."""
    row = (
        db.query(ZoneAllocation)
        .filter(ZoneAllocation.id == allocation_id)
        .with_for_update()
        .populate_existing()
        .first()
    )
    if not row:
        raise NotFound("Zone inventory not found")
    return row


def _find_allocation(db: Session, zone_id: int, floor_stock_id: int) -> Optional[ZoneAllocation]:
    return (
        db.query(ZoneAllocation)
        .filter(ZoneAllocation.zone_id == zone_id, ZoneAllocation.floor_stock_id == floor_stock_id)
        .first()
    )


def _check_zone(row: ZoneAllocation, zone_id: Optional[int]):
    if zone_id is not None and row.zone_id != zone_id:
        raise InvalidReference(f"Zone inventory {row.id} does not belong to zone {zone_id}")


# ── Mutations ────────────────────────────────────────────────────────────────

def allocate(db: Session, zone_id: int, floor_stock_id: int, quantity: int) -> ZoneAllocation:
    """Reserve `quantity` units of a floor stock entry for a zone."""
    require_non_negative_int("quantity", quantity)

    def _allocate():
        stock = lock_floor_stock(db, floor_stock_id)

        zone = db.query(Zone).filter(Zone.id == zone_id).first()
        if not zone:
            raise NotFound(f"Zone {zone_id} not found")
        if zone.floor_id != stock.floor_id:
            raise InvalidReference(
                f"Zone {zone_id} is on floor {zone.floor_id}, inventory item is on floor {stock.floor_id}"
            )

        used = allocated_sum(db, floor_stock_id)
        available = stock.count - used
        if quantity > available:
            raise CapacityExceeded(max(available, 0))

        if _find_allocation(db, zone_id, floor_stock_id):
            raise Conflict("Already attached, use re-allocate")

        row = ZoneAllocation(zone_id=zone_id, floor_stock_id=floor_stock_id, quantity=quantity)
        db.add(row)
        try:
            db.flush()
        except IntegrityError as exc:
            raise Conflict("Duplicate (zoneId, floorStockId)") from exc
        return row, available - quantity

    row, left = run_atomic(db, _allocate, "allocate")
    logger.info(f"[ALLOC] zone={zone_id} stock={floor_stock_id} reserved {quantity} (id={row.id}, left={left})")
    return row


def reallocate(db: Session, allocation_id: int, quantity: int, zone_id: Optional[int] = None) -> ZoneAllocation:
    """
    Change the reserved quantity of an existing allocation.
    Capacity is checked against the other zones' reservations only.
    Shrinking below the number of objects already placed is refused.
    """
    require_non_negative_int("quantity", quantity)

    def _reallocate():
        row = db.query(ZoneAllocation).filter(ZoneAllocation.id == allocation_id).first()
        if not row:
            raise NotFound("Zone inventory not found")
        _check_zone(row, zone_id)

        stock = lock_floor_stock(db, row.floor_stock_id)
        row = lock_allocation(db, allocation_id)

        used_by_others = allocated_sum(db, stock.id, exclude_allocation_id=allocation_id)
        available_for_this = stock.count - used_by_others
        if quantity > available_for_this:
            raise CapacityExceeded(max(available_for_this, 0))

        placed = placed_count(db, allocation_id)
        if quantity < placed:
            raise Conflict(f"{placed} object(s) already placed from this allocation; "
                           f"remove objects before reducing below {placed}")

        previous = row.quantity
        row.quantity = quantity
        db.flush()
        return row, previous

    row, previous = run_atomic(db, _reallocate, "reallocate")
    logger.info(f"[ALLOC] id={allocation_id} quantity {previous} → {quantity}")
    return row


def deallocate(db: Session, allocation_id: int, zone_id: Optional[int] = None) -> int:
    """Delete an allocation and, in the same transaction, every object placed from it."""

    def _deallocate():
        row = lock_allocation(db, allocation_id)
        _check_zone(row, zone_id)
        objects = (
            db.query(ZoneObject)
            .filter(ZoneObject.zone_allocation_id == allocation_id)
            .delete(synchronize_session=False)
        )
        db.delete(row)
        db.flush()
        return objects

    objects = run_atomic(db, _deallocate, "deallocate")
    logger.info(f"[ALLOC] id={allocation_id} deleted with {objects} object(s)")
    return objects


# ── Reads ────────────────────────────────────────────────────────────────────

def list_zone_allocations(db: Session, zone_id: int) -> list[AllocationUsage]:
    """Allocations of a zone with catalog metadata and reserved / placed / remaining."""
    rows = (
        db.query(ZoneAllocation)
        .options(joinedload(ZoneAllocation.floor_stock).joinedload(FloorStock.catalog))
        .filter(ZoneAllocation.zone_id == zone_id)
        .order_by(ZoneAllocation.id.asc())
        .all()
    )
    if not rows:
        return []
    placed = dict(
        db.query(ZoneObject.zone_allocation_id, func.count(ZoneObject.id))
        .filter(ZoneObject.zone_allocation_id.in_([r.id for r in rows]))
        .group_by(ZoneObject.zone_allocation_id)
        .all()
    )
    result = []
    for r in rows:
        n = int(placed.get(r.id) or 0)
        result.append(AllocationUsage(
            id=r.id, zone_id=r.zone_id, floor_stock_id=r.floor_stock_id,
            quantity=r.quantity, placed=n, remaining=max(r.quantity - n, 0),
            floor_stock=r.floor_stock, catalog=r.floor_stock.catalog,
        ))
    return result
