# app/routers/zone_inventory.py
"""Zone Allocation Ledger endpoints. Units of floor stock reserved per zone."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.zone_allocation import (
    ZoneAllocationCreate, ZoneAllocationOut, ZoneAllocationUpdate, ZoneAllocationUsageOut,
)
from app.services import allocation_service

router = APIRouter(prefix="/offices/{office_id}/floors/{floor_id}/zones/{zone_id}/inventory")


@router.get("", response_model=list[ZoneAllocationUsageOut], summary="List zone allocations")
def list_zone_inventory(office_id: int, floor_id: int, zone_id: int, db: Session = Depends(get_db)):
    usages = allocation_service.list_zone_allocations(db, zone_id)
    return [ZoneAllocationUsageOut.model_validate(u) for u in usages]


@router.post("", response_model=ZoneAllocationOut, status_code=status.HTTP_201_CREATED,
             summary="Reserve floor stock for the zone")
def create_zone_inventory(office_id: int, floor_id: int, zone_id: int, body: ZoneAllocationCreate,
                          db: Session = Depends(get_db)):
    """409 CapacityExceeded (with `available`) or 409 Conflict if already attached."""
    return allocation_service.allocate(db, zone_id, body.floor_stock_id, body.quantity)


@router.patch("/{allocation_id}", response_model=ZoneAllocationOut, summary="Change reserved quantity")
def update_zone_inventory(office_id: int, floor_id: int, zone_id: int, allocation_id: int,
                          body: ZoneAllocationUpdate, db: Session = Depends(get_db)):
    return allocation_service.reallocate(db, allocation_id, body.quantity, zone_id=zone_id)


@router.delete("/{allocation_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Release an allocation and remove its objects")
def delete_zone_inventory(office_id: int, floor_id: int, zone_id: int, allocation_id: int,
                          db: Session = Depends(get_db)):
    allocation_service.deallocate(db, allocation_id, zone_id=zone_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
