# go4motors/routers/user.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from go4motors.database import get_db
from go4motors.schemas.common import MessageResponse
from go4motors.schemas.user import RoleUpdate, UserOut, UserResponse
from go4motors.services import user_service
from go4motors.utils.i18n import get_lang

router = APIRouter()


@router.get("/user/all", response_model=List[UserOut], summary="List users")
def list_users(db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return user_service.list_users(db, lang)


@router.get("/user/{user_id}", response_model=UserOut, summary="Get one user")
def get_user(user_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return user_service.get_user(db, user_id, lang)


@router.patch("/user/{user_id}/role", response_model=UserResponse, summary="Change a user's role")
def update_role(user_id: str, body: RoleUpdate, db: Session = Depends(get_db),
                lang: str = Depends(get_lang)):
    return user_service.update_user_role(db, user_id, body.role, lang)


@router.delete("/user/delete/{user_id}", response_model=MessageResponse, summary="Delete a user")
def delete_user(user_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return user_service.delete_user(db, user_id, lang)
