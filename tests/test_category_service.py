# tests/test_category_service.py
"""Unit tests for the vehicle category catalogue."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from go4motors.errors import ConflictError, NotFoundError
from go4motors.models.category import Category, CategoryTranslation
from go4motors.schemas.category import CategoryCreate, CategoryUpdate
from go4motors.schemas.common import TranslationIn
from go4motors.services import category_service


def make_body(slug="trucks"):
    return CategoryCreate(slug=slug, translations=[
        TranslationIn(language="fr", name="Camions"),
        TranslationIn(language="en", name="Trucks"),
    ])


class TestCategoryService:
    def test_create(self, db):
        result = category_service.create_category(db, make_body(), "it")
        assert result["message"] == "Categoria creata con successo"
        assert len(result["category"].translations) == 2

    def test_duplicate_slug_conflicts(self, db):
        category_service.create_category(db, make_body(), "en")
        with pytest.raises(ConflictError):
            category_service.create_category(db, make_body(), "en")
        assert db.query(Category).count() == 1

    def test_language_id_alias_is_accepted(self):
        body = CategoryCreate.model_validate({
            "slug": "vans",
            "translations": [{"languageId": "fr", "name": "Fourgons"}],
        })
        assert body.translations[0].language == "fr"

    def test_update_replaces_translations(self, db):
        category = category_service.create_category(db, make_body(), "en")["category"]

        category_service.update_category(
            db, category.id,
            CategoryUpdate(slug="heavy-trucks",
                           translations=[TranslationIn(language="en", name="Heavy trucks")]),
            "en",
        )

        rows = db.query(CategoryTranslation).all()
        assert [(t.language, t.name) for t in rows] == [("en", "Heavy trucks")]
        assert db.query(Category).one().slug == "heavy-trucks"

    def test_delete_missing(self, db):
        with pytest.raises(NotFoundError):
            category_service.delete_category(db, "missing", "en")

    def test_delete(self, db):
        category = category_service.create_category(db, make_body(), "en")["category"]
        category_service.delete_category(db, category.id, "en")
        assert db.query(Category).count() == 0
        assert db.query(CategoryTranslation).count() == 0
