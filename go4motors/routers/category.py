# go4motors/routers/category.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from go4motors.database import get_db
from go4motors.schemas.category import CategoryCreate, CategoryOut, CategoryResponse, CategoryUpdate
from go4motors.schemas.common import MessageResponse
from go4motors.services import category_service
from go4motors.utils.i18n import get_lang

router = APIRouter()


@router.get("/category/all", response_model=List[CategoryOut], summary="List categories with translations")
def list_categories(db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return category_service.list_categories(db, lang)


@router.get("/category/{category_id}", response_model=CategoryOut, summary="Get one category")
def get_category(category_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return category_service.get_category(db, category_id, lang)


@router.post("/category/create", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED,
             summary="Create a category")
def create_category(body: CategoryCreate, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return category_service.create_category(db, body, lang)


@router.put("/category/update/{category_id}", response_model=CategoryResponse,
            summary="Update a category (translations are replaced as a whole)")
def update_category(category_id: str, body: CategoryUpdate, db: Session = Depends(get_db),
                    lang: str = Depends(get_lang)):
    return category_service.update_category(db, category_id, body, lang)


@router.delete("/category/delete/{category_id}", response_model=MessageResponse, summary="Delete a category")
def delete_category(category_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return category_service.delete_category(db, category_id, lang)
