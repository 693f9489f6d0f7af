# tests/test_brand_service.py
"""Unit tests for the brand catalogue."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from go4motors.errors import ConflictError, NotFoundError
from go4motors.models.brand import Brand, BrandTranslation
from go4motors.schemas.brand import BrandCreate, BrandUpdate
from go4motors.schemas.common import TranslationIn
from go4motors.services import brand_service


def make_body(slug="volvo", languages=("fr", "en")):
    return BrandCreate(
        slug=slug,
        image="https://cdn.example.com/volvo.png",
        translations=[TranslationIn(language=lang, name=f"Volvo {lang}") for lang in languages],
    )


class TestBrandService:
    def test_create_persists_translations(self, db):
        result = brand_service.create_brand(db, make_body(), "en")

        brand = result["brand"]
        assert result["message"] == "Brand created successfully"
        assert brand.slug == "volvo"
        assert sorted(t.language for t in brand.translations) == ["en", "fr"]

    def test_duplicate_slug_conflicts(self, db):
        brand_service.create_brand(db, make_body(), "en")
        with pytest.raises(ConflictError) as exc:
            brand_service.create_brand(db, make_body(), "en")
        assert exc.value.key == "brand.SLUG_ALREADY_EXISTS"
        assert "volvo" in exc.value.message
        assert db.query(Brand).count() == 1

    def test_get_missing_brand(self, db):
        with pytest.raises(NotFoundError):
            brand_service.get_brand(db, "missing", "en")

    def test_update_replaces_whole_translation_set(self, db):
        brand = brand_service.create_brand(db, make_body(), "en")["brand"]

        body = BrandUpdate(translations=[TranslationIn(language="it", name="Volvo IT"),
                                         TranslationIn(language="fr", name="Volvo nouveau")])
        brand_service.update_brand(db, brand.id, body, "en")

        rows = db.query(BrandTranslation).filter(BrandTranslation.brand_id == brand.id).all()
        assert sorted((t.language, t.name) for t in rows) == [("fr", "Volvo nouveau"), ("it", "Volvo IT")]

    def test_update_without_translations_keeps_them(self, db):
        brand = brand_service.create_brand(db, make_body(), "en")["brand"]

        brand_service.update_brand(db, brand.id, BrandUpdate(image="new.png", translations=[]), "en")

        assert db.query(BrandTranslation).count() == 2
        assert db.query(Brand).one().image == "new.png"

    def test_update_to_taken_slug_conflicts(self, db):
        brand_service.create_brand(db, make_body("volvo"), "en")
        scania = brand_service.create_brand(db, make_body("scania"), "en")["brand"]
        with pytest.raises(ConflictError):
            brand_service.update_brand(db, scania.id, BrandUpdate(slug="volvo"), "en")

    def test_update_missing_brand(self, db):
        with pytest.raises(NotFoundError):
            brand_service.update_brand(db, "missing", BrandUpdate(slug="x"), "en")

    def test_delete_cascades_to_translations(self, db):
        brand = brand_service.create_brand(db, make_body(), "en")["brand"]
        brand_id = brand.id

        result = brand_service.delete_brand(db, brand_id, "fr")

        assert result["message"] == "Marque supprimée avec succès"
        assert db.query(BrandTranslation).count() == 0
        with pytest.raises(NotFoundError):
            brand_service.get_brand(db, brand_id, "en")

    def test_list_orders_by_slug(self, db):
        brand_service.create_brand(db, make_body("volvo"), "en")
        brand_service.create_brand(db, make_body("daf"), "en")
        assert [b.slug for b in brand_service.list_brands(db, "en")] == ["daf", "volvo"]
