# go4motors/errors.py
"""
Domain error taxonomy shared by every service.
Each error carries its kind, HTTP status, translation key and resolved language;
main.py turns them into JSON responses with a single exception handler.
"""

from typing import Optional

from go4motors.utils.i18n import translate


class AppError(Exception):
    kind = "internal"
    status_code = 500

    def __init__(self, key: str, lang: Optional[str] = None, **args):
        self.key = key
        self.lang = lang
        self.message = translate(key, lang, **args)
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"detail": self.message, "kind": self.kind, "lang": self.lang}


class ValidationError(AppError):
    kind = "validation"
    status_code = 400


class ConflictError(AppError):
    kind = "conflict"
    status_code = 409


class NotFoundError(AppError):
    kind = "not_found"
    status_code = 404


class UnauthorizedError(AppError):
    kind = "unauthorized"
    status_code = 401


class InternalError(AppError):
    kind = "internal"
    status_code = 500
