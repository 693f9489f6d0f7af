# go4motors/services/auth_service.py
"""
Account lifecycle: signup, email verification, login, password reset.

Signup creates an unverified user holding a one-time verification token.
Verification clears that token and issues a session token (JWT). Login never
tells "unknown email" apart from "wrong password"; an unverified account gets
its own message. Reset tokens are single-use and expire after
RESET_TOKEN_TTL_MINUTES.
"""

from datetime import timedelta
from typing import Callable, Optional

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from go4motors.config import settings
from go4motors.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from go4motors.models.mixins import utcnow
from go4motors.models.user import DEFAULT_ROLE, Role, User
from go4motors.schemas.auth import (ForgotPasswordRequest, LoginRequest, ResetPasswordRequest,
                                    SignupRequest, UserProfile, UserPublic)
from go4motors.services.email_service import send_reset_password_email, send_verification_email
from go4motors.utils.i18n import normalize_language, translate
from go4motors.utils.logger import get_logger
from go4motors.utils.persistence import storage_boundary
from go4motors.utils.security import (create_access_token, generate_one_time_token, hash_password,
                                      pwd_context, verify_password)

logger = get_logger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def role_label(role_name: str, lang: str) -> str:
    key = f"user.ROLE_{role_name.upper()}"
    label = translate(key, lang)
    return role_name if label == key else label


def public_user(user: User, lang: str) -> UserPublic:
    return UserPublic(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        role=role_label(user.role.name, lang),
        preferred_language=user.preferred_language,
        is_verified=user.is_verified,
    )


def issue_session_token(user: User) -> str:
    return create_access_token(user.id, user.email, user.role.name)


def _dispatch_email(background_tasks: Optional[BackgroundTasks], send: Callable, *args) -> None:
    """Fire-and-forget when a BackgroundTasks is available, inline otherwise."""
    if background_tasks is not None:
        background_tasks.add_task(send, *args)
    else:
        send(*args)


def ensure_role(db: Session, name: str) -> Role:
    role = db.query(Role).filter(Role.name == name).first()
    if not role:
        role = Role(name=name)
        db.add(role)
        db.flush()
        logger.info(f"[AUTH] Created missing role '{name}'")
    return role


def signup(db: Session, body: SignupRequest, lang: str,
           background_tasks: Optional[BackgroundTasks] = None) -> dict:
    email = _normalize_email(body.email)
    phone = (body.phone or "").strip() or None
    preferred = normalize_language(body.preferred_language)
    lang = preferred or lang
    verification_token = generate_one_time_token()

    with storage_boundary(db, lang, "common.FAILED_TO_CREATE"):
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            if not existing.is_verified:
                existing.verification_token = verification_token
                db.commit()
                logger.info(f"[AUTH] Verification token regenerated for {email}")
                # sent inline: background tasks are dropped when the request fails
                send_verification_email(existing.email, verification_token, lang)
                raise ValidationError("auth.EMAIL_NOT_VERIFIED_RESEND", lang)
            raise ConflictError("auth.EMAIL_ALREADY_USED", lang)

        if phone and db.query(User).filter(User.phone == phone).first():
            raise ConflictError("auth.PHONE_ALREADY_USED", lang)

        role = ensure_role(db, DEFAULT_ROLE)
        user = User(
            first_name=body.first_name,
            last_name=body.last_name,
            email=email,
            phone=phone,
            password=hash_password(body.password),
            role=role,
            preferred_language=preferred or settings.SIGNUP_DEFAULT_LANGUAGE,
            is_verified=False,
            verification_token=verification_token,
        )
        db.add(user)
        db.commit()
        db.refresh(user)

    logger.info(f"[AUTH] Signup {user.email} (id={user.id})")
    _dispatch_email(background_tasks, send_verification_email, user.email, verification_token, lang)
    return {"message": translate("auth.SIGNUP_SUCCESS", lang), "user": public_user(user, lang)}


def verify_email(db: Session, token: Optional[str], lang: str) -> dict:
    if not token:
        raise ValidationError("auth.INVALID_TOKEN", lang)

    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        user = db.query(User).filter(User.verification_token == token).first()
        if not user:
            raise ValidationError("auth.INVALID_TOKEN", lang)
        user.is_verified = True
        user.verification_token = None
        db.commit()
        db.refresh(user)

    logger.info(f"[AUTH] Email verified for {user.email}")
    return {
        "message": translate("auth.VERIFICATION_SUCCESS", lang),
        "user": public_user(user, lang),
        "token": issue_session_token(user),
    }


def login(db: Session, body: LoginRequest, lang: str) -> dict:
    email = _normalize_email(body.email)
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        user = db.query(User).filter(User.email == email).first()

    if not user:
        pwd_context.dummy_verify()   # same cost as a real check
        raise UnauthorizedError("auth.INVALID_CREDENTIALS", lang)
    if not verify_password(body.password, user.password):
        raise UnauthorizedError("auth.INVALID_CREDENTIALS", lang)
    if not user.is_verified:
        raise UnauthorizedError("auth.EMAIL_NOT_VERIFIED", lang)

    logger.info(f"[AUTH] Login {user.email}")
    return {
        "message": translate("auth.LOGIN_SUCCESS", lang),
        "user": public_user(user, lang),
        "token": issue_session_token(user),
    }


def forgot_password(db: Session, body: ForgotPasswordRequest, lang: str,
                    background_tasks: Optional[BackgroundTasks] = None) -> dict:
    email = _normalize_email(body.email)
    reset_token = generate_one_time_token()

    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        user = db.query(User).filter(User.email == email).first()
        if not user:
            raise ValidationError("user.NOT_FOUND", lang)
        user.reset_password_token = reset_token
        user.reset_password_expires_at = utcnow() + timedelta(minutes=settings.RESET_TOKEN_TTL_MINUTES)
        db.commit()

    logger.info(f"[AUTH] Password reset requested for {email}")
    _dispatch_email(background_tasks, send_reset_password_email, email, reset_token, lang)
    return {"message": translate("auth.RESET_EMAIL_SENT", lang)}


def reset_password(db: Session, body: ResetPasswordRequest, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        user = db.query(User).filter(User.reset_password_token == body.token).first()
        expired = (user is not None and (user.reset_password_expires_at is None
                                         or user.reset_password_expires_at < utcnow()))
        if not user or expired:
            raise ValidationError("auth.INVALID_TOKEN", lang)

        user.password = hash_password(body.password)
        user.reset_password_token = None
        user.reset_password_expires_at = None
        db.commit()
        db.refresh(user)

    logger.info(f"[AUTH] Password reset completed for {user.email}")
    return {"message": translate("auth.RESET_PASSWORD_SUCCESS", lang), "user": public_user(user, lang)}


def validate_user(db: Session, user_id: Optional[str], lang: str) -> UserProfile:
    """Full profile of the account behind a session token."""
    if not user_id:
        raise ValidationError("user.INVALID_ID", lang)
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("user.NOT_FOUND", lang)
    return UserProfile(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        phone=user.phone,
        role=user.role.name,
        is_verified=user.is_verified,
        preferred_language=user.preferred_language,
    )
