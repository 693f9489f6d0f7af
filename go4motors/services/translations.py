# go4motors/services/translations.py
"""
Child-collection helpers shared by the catalogue services.

Updates never merge translations (or vehicle images) by language: a supplied
collection replaces the stored one entirely, so languages left out of the
payload are dropped.
"""

from typing import Iterable, List, Optional

from sqlalchemy.orm import Session


def build_children(model_cls, items: Optional[Iterable]) -> List:
    """ORM rows from validated pydantic items (translations, images)."""
    return [model_cls(**item.model_dump()) for item in (items or [])]


def replace_collection(db: Session, parent, attr: str, children: List) -> None:
    """
    Delete every stored child, then attach the new ones.
    The flush between the two keeps (parent, language) unique constraints
    from tripping on languages present in both the old and the new set.
    """
    collection = getattr(parent, attr)
    collection.clear()
    db.flush()
    collection.extend(children)


def in_language(translations: Iterable, lang: str) -> List:
    return [t for t in translations if t.language == lang]
