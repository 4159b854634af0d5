# app/routers/floor_inventory.py
"""
Floor Stock Ledger endpoints.
Totals per catalog item on a floor; used / available are derived from zone allocations.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.floor_stock import FloorStockCreate, FloorStockOut, FloorStockUpdate, FloorStockUsageOut
from app.services import floor_stock_service

router = APIRouter(prefix="/offices/{office_id}/floors/{floor_id}/inventory")


@router.get("", response_model=list[FloorStockOut], summary="List floor stock")
def list_floor_inventory(office_id: int, floor_id: int, db: Session = Depends(get_db)):
    return floor_stock_service.list_floor_stock(db, floor_id)


@router.get("/with-usage", response_model=list[FloorStockUsageOut], summary="List floor stock with usage")
def list_floor_inventory_with_usage(office_id: int, floor_id: int, db: Session = Depends(get_db)):
    """Each entry with `used` (allocated to zones) and `available` (never negative)."""
    usages = floor_stock_service.list_floor_stock_with_usage(db, floor_id)
    return [FloorStockUsageOut.model_validate(u) for u in usages]


@router.get("/{stock_id}/usage", response_model=FloorStockUsageOut, summary="Usage of one stock entry")
def get_stock_usage(office_id: int, floor_id: int, stock_id: int, db: Session = Depends(get_db)):
    usage = floor_stock_service.compute_usage(db, stock_id, floor_id=floor_id)
    return FloorStockUsageOut.model_validate(usage)


@router.post("", response_model=FloorStockOut, status_code=status.HTTP_201_CREATED,
             summary="Add a catalog item to the floor")
def create_floor_inventory(office_id: int, floor_id: int, body: FloorStockCreate,
                           db: Session = Depends(get_db)):
    return floor_stock_service.create_stock(db, floor_id, body.catalog_id, body.count)


@router.patch("/{stock_id}", response_model=FloorStockOut, summary="Set the total count")
def update_floor_inventory(office_id: int, floor_id: int, stock_id: int, body: FloorStockUpdate,
                           db: Session = Depends(get_db)):
    """
    Not validated against existing allocations. Lowering the total below what
    zones already hold raises a stock_overcommitted alert.
    """
    return floor_stock_service.update_count(db, stock_id, body.count, floor_id=floor_id)


@router.delete("/{stock_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Delete a stock entry with its allocations and objects")
def delete_floor_inventory(office_id: int, floor_id: int, stock_id: int, db: Session = Depends(get_db)):
    floor_stock_service.delete_stock(db, stock_id, floor_id=floor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
