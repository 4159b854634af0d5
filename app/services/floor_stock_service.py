# app/services/floor_stock_service.py
"""
Floor Stock Ledger: tier 1 of the inventory hierarchy.

Owns the per-(floor, catalog item) total count. The used / available figures
are always computed from zone allocations:

    used      = Σ zone_allocations.quantity for the stock entry
    available = max(count - used, 0)

Lowering a count below what is already allocated is allowed (stock count is a
planning figure). It is recorded as a stock_overcommitted alert. Capacity is
enforced at allocation time by allocation_service.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.models.catalog_item import CatalogItem
from app.models.floor import Floor
from app.models.floor_stock import FloorStock
from app.models.zone_allocation import ZoneAllocation
from app.models.zone_object import ZoneObject
from app.services.alert_service import create_alert, STOCK_OVERCOMMITTED
from app.services.exceptions import Conflict, InvalidReference, NotFound, require_non_negative_int
from app.services.transaction import run_atomic
from app.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class StockUsage:
    id: int
    floor_id: int
    catalog_id: str
    count: int
    used: int
    available: int
    catalog: Optional[CatalogItem] = None


def allocated_sum(db: Session, floor_stock_id: int, exclude_allocation_id: Optional[int] = None) -> int:
    """Σ quantity of the zone allocations drawing from a stock entry."""
    q = db.query(func.coalesce(func.sum(ZoneAllocation.quantity), 0)).filter(
        ZoneAllocation.floor_stock_id == floor_stock_id
    )
    if exclude_allocation_id is not None:
        q = q.filter(ZoneAllocation.id != exclude_allocation_id)
    return int(q.scalar() or 0)


def lock_floor_stock(db: Session, stock_id: int) -> FloorStock:
    """Load a stock entry with a row lock held until the transaction ends."""
    stock = (
        db.query(FloorStock)
        .filter(FloorStock.id == stock_id)
        .with_for_update()
        .populate_existing()
        .first()
    )
    if not stock:
        raise NotFound("Inventory item not found")
    return stock


def _check_floor(stock: FloorStock, floor_id: Optional[int]):
    if floor_id is not None and stock.floor_id != floor_id:
        raise InvalidReference(f"Inventory item {stock.id} does not belong to floor {floor_id}")


def _usage(stock: FloorStock, used: int) -> StockUsage:
    return StockUsage(id=stock.id, floor_id=stock.floor_id, catalog_id=stock.catalog_id,
                      count=stock.count, used=used, available=max(stock.count - used, 0),
                      catalog=stock.catalog)


# ── Mutations ────────────────────────────────────────────────────────────────

def create_stock(db: Session, floor_id: int, catalog_id: str, count: int) -> FloorStock:
    """Add a catalog item to a floor with an initial total count."""
    require_non_negative_int("count", count)

    def _create():
        if not db.query(Floor).filter(Floor.id == floor_id).first():
            raise NotFound(f"Floor {floor_id} not found")
        if not db.query(CatalogItem).filter(CatalogItem.id == catalog_id).first():
            raise InvalidReference(f"Unknown catalogId '{catalog_id}'")
        existing = (
            db.query(FloorStock)
            .filter(FloorStock.floor_id == floor_id, FloorStock.catalog_id == catalog_id)
            .first()
        )
        if existing:
            raise Conflict("Item already exists for this floor")

        stock = FloorStock(floor_id=floor_id, catalog_id=catalog_id, count=count)
        db.add(stock)
        try:
            db.flush()
        except IntegrityError as exc:
            raise Conflict("Item already exists for this floor") from exc
        return stock

    stock = run_atomic(db, _create, "create_stock")
    logger.info(f"[STOCK] floor={floor_id} item={catalog_id} created count={count} (id={stock.id})")
    return stock


def update_count(db: Session, stock_id: int, count: int, floor_id: Optional[int] = None) -> FloorStock:
    """
    Set a new total. Not validated against existing allocations; when the new
    total is below the allocated sum an alert is recorded in the same transaction.
    """
    require_non_negative_int("count", count)

    def _update():
        stock = lock_floor_stock(db, stock_id)
        _check_floor(stock, floor_id)
        previous = stock.count
        stock.count = count
        used = allocated_sum(db, stock_id)
        if used > count:
            create_alert(db, STOCK_OVERCOMMITTED,
                         f"Stock {stock_id} ({stock.catalog_id}) lowered to {count} "
                         f"but {used} unit(s) are allocated to zones",
                         floor_stock_id=stock_id)
        db.flush()
        return stock, previous

    stock, previous = run_atomic(db, _update, "update_stock_count")
    logger.info(f"[STOCK] id={stock_id} count {previous} → {count}")
    return stock


def delete_stock(db: Session, stock_id: int, floor_id: Optional[int] = None) -> dict:
    """Delete a stock entry together with its allocations and their placements, atomically."""

    def _delete():
        stock = lock_floor_stock(db, stock_id)
        _check_floor(stock, floor_id)
        allocation_ids = select(ZoneAllocation.id).where(ZoneAllocation.floor_stock_id == stock_id)
        objects = (
            db.query(ZoneObject)
            .filter(ZoneObject.zone_allocation_id.in_(allocation_ids))
            .delete(synchronize_session=False)
        )
        allocations = (
            db.query(ZoneAllocation)
            .filter(ZoneAllocation.floor_stock_id == stock_id)
            .delete(synchronize_session=False)
        )
        db.delete(stock)
        db.flush()
        return {"allocations": allocations, "objects": objects}

    removed = run_atomic(db, _delete, "delete_stock")
    logger.info(f"[STOCK] id={stock_id} deleted with {removed['allocations']} allocation(s) "
                f"and {removed['objects']} object(s)")
    return removed


# ── Reads ────────────────────────────────────────────────────────────────────

def compute_usage(db: Session, stock_id: int, floor_id: Optional[int] = None) -> StockUsage:
    """count / used / available for one stock entry. Pure read."""
    stock = db.query(FloorStock).filter(FloorStock.id == stock_id).first()
    if not stock:
        raise NotFound("Inventory item not found")
    _check_floor(stock, floor_id)
    return _usage(stock, allocated_sum(db, stock_id))


def list_floor_stock(db: Session, floor_id: int):
    """Stock entries of a floor with their catalog item, ordered by display name."""
    return (
        db.query(FloorStock)
        .join(CatalogItem, FloorStock.catalog_id == CatalogItem.id)
        .options(joinedload(FloorStock.catalog))
        .filter(FloorStock.floor_id == floor_id)
        .order_by(CatalogItem.display_name.asc(), FloorStock.id.asc())
        .all()
    )


def list_floor_stock_with_usage(db: Session, floor_id: int) -> list[StockUsage]:
    """Same as list_floor_stock, plus used / available per entry."""
    stocks = list_floor_stock(db, floor_id)
    if not stocks:
        return []
    sums = dict(
        db.query(ZoneAllocation.floor_stock_id, func.sum(ZoneAllocation.quantity))
        .filter(ZoneAllocation.floor_stock_id.in_([s.id for s in stocks]))
        .group_by(ZoneAllocation.floor_stock_id)
        .all()
    )
    return [_usage(s, int(sums.get(s.id) or 0)) for s in stocks]
