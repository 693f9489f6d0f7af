# go4motors/services/email_service.py
"""
Outbound account emails (verification, password reset) over SMTP.

Best effort only: these functions never raise. When EMAIL_USER / EMAIL_PASS are
not configured, or the SMTP exchange fails, they log and return False, and the
request that triggered them still succeeds.
"""

import smtplib
from email.message import EmailMessage

from go4motors.config import settings
from go4motors.utils.i18n import translate
from go4motors.utils.logger import get_logger

logger = get_logger(__name__)


def build_frontend_link(path: str, token: str, lang: str) -> str:
    return f"{settings.FRONTEND_URL.rstrip('/')}/{lang}/auth/{path}?token={token}"


def send_email(to: str, subject: str, body: str) -> bool:
    if not settings.EMAIL_ENABLED:
        logger.warning(f"Email service disabled, '{subject}' not sent to {to}")
        return False

    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = settings.EMAIL_FROM or settings.EMAIL_USER
    message["To"] = to
    message.set_content(body)

    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT,
                          timeout=settings.SMTP_TIMEOUT_SECONDS) as smtp:
            smtp.starttls()
            smtp.login(settings.EMAIL_USER, settings.EMAIL_PASS)
            smtp.send_message(message)
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Email '{subject}' to {to} failed: {e}")
        return False

    logger.info(f"Email '{subject}' sent to {to}")
    return True


def send_verification_email(email: str, token: str, lang: str) -> bool:
    url = build_frontend_link("verify-email", token, lang)
    subject = translate("auth.VERIFICATION_SUBJECT", lang, app=settings.APP_NAME)
    body = translate("auth.VERIFICATION_BODY", lang, app=settings.APP_NAME, url=url)
    return send_email(email, subject, body)


def send_reset_password_email(email: str, token: str, lang: str) -> bool:
    url = build_frontend_link("reset-password", token, lang)
    subject = translate("auth.RESET_SUBJECT", lang, app=settings.APP_NAME)
    body = translate("auth.RESET_BODY", lang, app=settings.APP_NAME, url=url)
    return send_email(email, subject, body)
