# app/routers/zone_objects.py
"""Zone Object Placement endpoints. Concrete objects drawn on the plan."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.zone_object import ZoneObjectCreate, ZoneObjectDetailOut, ZoneObjectOut, ZoneObjectUpdate
from app.services import placement_service

router = APIRouter(prefix="/offices/{office_id}/floors/{floor_id}/zones/{zone_id}/objects")


@router.get("", response_model=list[ZoneObjectDetailOut], summary="List objects placed in the zone")
def list_zone_objects(office_id: int, floor_id: int, zone_id: int, db: Session = Depends(get_db)):
    return placement_service.list_zone_objects(db, zone_id)


@router.post("", response_model=ZoneObjectOut, status_code=status.HTTP_201_CREATED,
             summary="Place one object from a zone allocation")
def create_zone_object(office_id: int, floor_id: int, zone_id: int, body: ZoneObjectCreate,
                       db: Session = Depends(get_db)):
    return placement_service.place(db, zone_id, body.zone_allocation_id, body.x, body.y, body.rotation)


@router.patch("/{object_id}", response_model=ZoneObjectOut, summary="Move or rotate an object")
def update_zone_object(office_id: int, floor_id: int, zone_id: int, object_id: int,
                       body: ZoneObjectUpdate, db: Session = Depends(get_db)):
    return placement_service.move(db, object_id, zone_id, x=body.x, y=body.y, rotation=body.rotation)


@router.delete("/{object_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove an object")
def delete_zone_object(office_id: int, floor_id: int, zone_id: int, object_id: int,
                       db: Session = Depends(get_db)):
    placement_service.remove(db, object_id, zone_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
