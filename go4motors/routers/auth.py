# go4motors/routers/auth.py
"""
Account endpoints: signup, email verification, login, profile, password reset.
Verification and reset emails are queued as background tasks.
"""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session

from go4motors.database import get_db
from go4motors.schemas.auth import (AuthResponse, ForgotPasswordRequest, LoginRequest,
                                    ResetPasswordRequest, SignupRequest, UserProfile)
from go4motors.schemas.common import MessageResponse
from go4motors.services import auth_service
from go4motors.utils.i18n import get_lang
from go4motors.utils.security import TokenData, get_current_user

router = APIRouter()


@router.post("/auth/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED,
             summary="Create an unverified account")
def signup(body: SignupRequest, background_tasks: BackgroundTasks,
           db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return auth_service.signup(db, body, lang, background_tasks)


@router.post("/auth/verify", response_model=AuthResponse, summary="Confirm an email address")
def verify_email(token: Optional[str] = None, db: Session = Depends(get_db),
                 lang: str = Depends(get_lang)):
    """Consumes the verification token and returns a session token."""
    return auth_service.verify_email(db, token, lang)


@router.post("/auth/login", response_model=AuthResponse, summary="Log in with email and password")
def login(body: LoginRequest, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return auth_service.login(db, body, lang)


@router.get("/auth/profile", response_model=UserProfile, summary="Profile of the authenticated user")
def profile(current: TokenData = Depends(get_current_user), db: Session = Depends(get_db),
            lang: str = Depends(get_lang)):
    return auth_service.validate_user(db, current.id, lang)


@router.post("/auth/forgot-password", response_model=MessageResponse,
             summary="Send a password reset link")
def forgot_password(body: ForgotPasswordRequest, background_tasks: BackgroundTasks,
                    db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return auth_service.forgot_password(db, body, lang, background_tasks)


@router.post("/auth/reset-password", response_model=AuthResponse,
             summary="Set a new password with a reset token")
def reset_password(body: ResetPasswordRequest, db: Session = Depends(get_db),
                   lang: str = Depends(get_lang)):
    return auth_service.reset_password(db, body, lang)
