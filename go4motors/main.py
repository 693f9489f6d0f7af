# go4motors/main.py
"""
FastAPI application entry point.
Includes CORS, request timing, the error handlers and all routers.
"""

import time

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from go4motors.config import settings
from go4motors.database import create_tables
from go4motors.errors import AppError
from go4motors.routers import auth, brands, category, health, supplier, transaction, user, vehicle
from go4motors.utils.i18n import CATALOGUES, resolve_language, translate
from go4motors.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Go4Motors API",
    description="Vehicle marketplace: catalogue, sales and rentals.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGIN_LIST,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} -> {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{exc.kind} error on {request.url.path}: {exc.key}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _localize_validation_errors(errors, lang: str):
    """Pydantic messages that are catalogue keys ("Value error, common.X") get translated."""
    known = CATALOGUES.get(lang) or {}
    localized = []
    for err in errors:
        err = dict(err)
        msg = str(err.get("msg", ""))
        key = msg.split(", ", 1)[-1]
        if key in known:
            err["msg"] = translate(key, lang)
        err.pop("ctx", None)
        err.pop("input", None)   # may hold a password
        localized.append(err)
    return localized


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    lang = resolve_language(request)
    errors = _localize_validation_errors(exc.errors(), lang)
    detail = errors[0]["msg"] if len(errors) == 1 else translate("common.VALIDATION_FAILED", lang)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "kind": "validation", "lang": lang,
                 "errors": jsonable_encoder(errors)},
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    lang = resolve_language(request)
    logger.warning(f"Integrity violation on {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": translate("common.UNIQUE_CONSTRAINT", lang), "kind": "conflict", "lang": lang},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    lang = resolve_language(request)
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": translate("common.INTERNAL_SERVER_ERROR", lang), "kind": "internal",
                 "lang": lang},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(auth.router,        tags=["Auth"])
app.include_router(brands.router,      tags=["Brands"])
app.include_router(category.router,    tags=["Categories"])
app.include_router(supplier.router,    tags=["Suppliers"])
app.include_router(vehicle.router,     tags=["Vehicles"])
app.include_router(transaction.router, tags=["Transactions"])
app.include_router(user.router,        tags=["Users"])
app.include_router(health.router,      tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Go4Motors backend starting up...")
    create_tables()
    logger.info("Database tables ready")
    logger.info(f"Languages: {settings.LANGUAGES} (default {settings.DEFAULT_LANGUAGE})")
    if not settings.EMAIL_ENABLED:
        logger.warning("EMAIL_USER / EMAIL_PASS not set: account emails will not be sent")
    logger.info(f"Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Go4Motors backend shutting down...")
