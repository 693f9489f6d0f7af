# go4motors/utils/i18n.py
"""
Message catalogues and language resolution.

Catalogues live in go4motors/locales/<lang>.json and are loaded once at import
into read-only mappings keyed by language tag, then by dotted message key
("auth.LOGIN_SUCCESS"). Lookup falls back to DEFAULT_LANGUAGE, then to the key.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from fastapi import Request

from go4motors.config import settings
from go4motors.utils.logger import get_logger

logger = get_logger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"


class _KeepMissing(dict):
    def __missing__(self, key):
        return "{" + key + "}"


def _flatten(tree: dict, prefix: str = "") -> dict:
    flat = {}
    for key, value in tree.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(_flatten(value, dotted))
        else:
            flat[dotted] = str(value)
    return flat


def _load_catalogues(directory: Path = LOCALES_DIR) -> Mapping[str, Mapping[str, str]]:
    catalogues = {}
    for path in sorted(directory.glob("*.json")):
        with path.open(encoding="utf-8") as fh:
            catalogues[path.stem] = MappingProxyType(_flatten(json.load(fh)))
    logger.debug(f"Loaded message catalogues: {sorted(catalogues)}")
    return MappingProxyType(catalogues)


CATALOGUES = _load_catalogues()


def normalize_language(value: Optional[str]) -> Optional[str]:
    """'fr-FR' -> 'fr'. Returns None for empty or unsupported tags."""
    if not value:
        return None
    tag = value.strip().lower().replace("_", "-").split("-")[0]
    return tag if tag in settings.LANGUAGES else None


def translate(key: str, lang: Optional[str] = None, **args) -> str:
    """Localized message for key, formatted with args."""
    for candidate in (normalize_language(lang), settings.DEFAULT_LANGUAGE):
        catalogue = CATALOGUES.get(candidate or "")
        if catalogue and key in catalogue:
            return catalogue[key].format_map(_KeepMissing(args))
    return key


def resolve_language(request: Request) -> str:
    """Query parameter, then custom header, then cookie, then the default."""
    sources = (
        request.query_params.get(settings.LANG_QUERY_PARAM),
        request.headers.get(settings.LANG_HEADER),
        request.cookies.get(settings.LANG_COOKIE),
    )
    for value in sources:
        lang = normalize_language(value)
        if lang:
            return lang
    return settings.DEFAULT_LANGUAGE


def get_lang(request: Request) -> str:
    """FastAPI dependency: the language tag resolved for this request."""
    return resolve_language(request)
