# go4motors/routers/vehicle.py
"""
Vehicle catalogue endpoints.
Reads take ?lang= to pick the translation language (default: fr); the same
parameter also selects the language of the response message.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from go4motors.database import get_db
from go4motors.schemas.common import MessageResponse
from go4motors.schemas.vehicle import (VehicleCreate, VehicleListResponse, VehicleResponse,
                                       VehicleUpdate)
from go4motors.services import vehicle_service
from go4motors.utils.i18n import get_lang

router = APIRouter()


@router.get("/vehicle/all", response_model=VehicleListResponse, summary="List vehicles")
def list_vehicles(language: Optional[str] = Query(None, alias="lang"),
                  db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return vehicle_service.list_vehicles(db, lang, language)


@router.get("/vehicle/category/{category_id}", response_model=VehicleListResponse,
            summary="List vehicles of a category")
def list_by_category(category_id: str, language: Optional[str] = Query(None, alias="lang"),
                     db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return vehicle_service.list_vehicles_by_category(db, category_id, lang, language)


@router.get("/vehicle/{vehicle_id}", response_model=VehicleResponse, summary="Get one vehicle")
def get_vehicle(vehicle_id: str, language: Optional[str] = Query(None, alias="lang"),
                db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return vehicle_service.get_vehicle(db, vehicle_id, lang, language)


@router.post("/vehicle/create", response_model=VehicleResponse, status_code=status.HTTP_201_CREATED,
             summary="Create a vehicle with images and translations")
def create_vehicle(body: VehicleCreate, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return vehicle_service.create_vehicle(db, body, lang)


@router.put("/vehicle/update/{vehicle_id}", response_model=VehicleResponse,
            summary="Update a vehicle (images and translations are replaced as a whole)")
def update_vehicle(vehicle_id: str, body: VehicleUpdate, db: Session = Depends(get_db),
                   lang: str = Depends(get_lang)):
    return vehicle_service.update_vehicle(db, vehicle_id, body, lang)


@router.delete("/vehicle/delete/{vehicle_id}", response_model=MessageResponse,
               summary="Delete a vehicle with its images and translations")
def delete_vehicle(vehicle_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return vehicle_service.delete_vehicle(db, vehicle_id, lang)
