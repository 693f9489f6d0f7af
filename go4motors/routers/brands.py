# go4motors/routers/brands.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from go4motors.database import get_db
from go4motors.schemas.brand import BrandCreate, BrandOut, BrandResponse, BrandUpdate
from go4motors.schemas.common import MessageResponse
from go4motors.services import brand_service
from go4motors.utils.i18n import get_lang

router = APIRouter()


@router.get("/brands/all", response_model=List[BrandOut], summary="List brands with translations")
def list_brands(db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return brand_service.list_brands(db, lang)


@router.get("/brands/{brand_id}", response_model=BrandOut, summary="Get one brand")
def get_brand(brand_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return brand_service.get_brand(db, brand_id, lang)


@router.post("/brands/create", response_model=BrandResponse, status_code=status.HTTP_201_CREATED,
             summary="Create a brand")
def create_brand(body: BrandCreate, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return brand_service.create_brand(db, body, lang)


@router.put("/brands/update/{brand_id}", response_model=BrandResponse,
            summary="Update a brand (translations are replaced as a whole)")
def update_brand(brand_id: str, body: BrandUpdate, db: Session = Depends(get_db),
                 lang: str = Depends(get_lang)):
    return brand_service.update_brand(db, brand_id, body, lang)


@router.delete("/brands/delete/{brand_id}", response_model=MessageResponse, summary="Delete a brand")
def delete_brand(brand_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return brand_service.delete_brand(db, brand_id, lang)
