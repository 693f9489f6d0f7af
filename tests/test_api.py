# tests/test_api.py
"""End-to-end tests through the HTTP layer (TestClient, SQLite)."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
import pytest
from unittest.mock import MagicMock, patch

from go4motors.models.user import User
from go4motors.utils.i18n import translate

SIGNUP = {"email": "a@x.com", "password": "Abcdef12", "firstName": "Ada", "lastName": "Rossi"}


@pytest.fixture(autouse=True)
def no_emails():
    with patch("go4motors.services.auth_service.send_verification_email") as verification, \
         patch("go4motors.services.auth_service.send_reset_password_email") as reset:
        yield {"verification": verification, "reset": reset}


class TestAuthFlow:
    def test_signup_verify_login(self, client, db, no_emails):
        resp = client.post("/auth/signup", json=SIGNUP)
        assert resp.status_code == 201
        assert resp.json()["user"]["isVerified"] is False
        no_emails["verification"].assert_called_once()

        resp = client.post("/auth/login", json={"email": "a@x.com", "password": "Abcdef12"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == translate("auth.EMAIL_NOT_VERIFIED", "en")

        token = db.query(User).filter(User.email == "a@x.com").one().verification_token
        resp = client.post(f"/auth/verify?token={token}")
        assert resp.status_code == 200
        assert isinstance(resp.json()["token"], str) and resp.json()["token"]

        resp = client.post("/auth/login", json={"email": "a@x.com", "password": "Abcdef12"})
        assert resp.status_code == 200
        session_token = resp.json()["token"]
        assert session_token

        resp = client.get("/auth/profile", headers={"Authorization": f"Bearer {session_token}"})
        assert resp.status_code == 200
        assert resp.json()["email"] == "a@x.com"
        assert resp.json()["role"] == "client"

    def test_unverified_duplicate_signup_resends_new_token(self, client, db, no_emails):
        assert client.post("/auth/signup", json=SIGNUP).status_code == 201

        resp = client.post("/auth/signup", json=SIGNUP)

        assert resp.status_code == 400
        assert resp.json()["kind"] == "validation"
        assert resp.json()["detail"] == translate("auth.EMAIL_NOT_VERIFIED_RESEND", "en")
        assert no_emails["verification"].call_count == 2
        stored_token = db.query(User).filter(User.email == "a@x.com").one().verification_token
        email, token, lang = no_emails["verification"].call_args[0]
        assert (email, token, lang) == ("a@x.com", stored_token, "en")

    def test_verified_duplicate_signup_is_409(self, client, make_user):
        make_user(email="a@x.com", role="client")
        resp = client.post("/auth/signup", json=SIGNUP)
        assert resp.status_code == 409
        assert resp.json()["kind"] == "conflict"

    def test_weak_password_is_400_in_request_language(self, client):
        resp = client.post("/auth/signup", json={**SIGNUP, "password": "abcdefgh"},
                           headers={"x-custom-lang": "fr"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["lang"] == "fr"
        assert body["detail"] == translate("common.PASSWORD_TOO_WEAK", "fr")

    def test_profile_requires_token(self, client):
        resp = client.get("/auth/profile")
        assert resp.status_code == 401
        assert resp.json()["detail"] == translate("auth.NOT_AUTHENTICATED", "en")

    def test_profile_rejects_garbage_token(self, client):
        resp = client.get("/auth/profile", headers={"Authorization": "Bearer not-a-jwt"})
        assert resp.status_code == 401


class TestCatalogueApi:
    def test_brand_crud_round(self, client):
        resp = client.post("/brands/create", json={
            "slug": "volvo",
            "translations": [{"language": "fr", "name": "Volvo"}, {"languageId": "en", "name": "Volvo"}],
        })
        assert resp.status_code == 201
        brand_id = resp.json()["brand"]["id"]

        assert client.post("/brands/create", json={"slug": "volvo", "translations": []}).status_code == 409

        resp = client.put(f"/brands/update/{brand_id}", json={"translations": [{"language": "it", "name": "Volvo"}]})
        assert resp.status_code == 200
        assert [t["language"] for t in resp.json()["brand"]["translations"]] == ["it"]

        assert client.delete(f"/brands/delete/{brand_id}").status_code == 200
        resp = client.get(f"/brands/{brand_id}?lang=it")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Marca non trovata", "kind": "not_found", "lang": "it"}

    def test_vehicle_lang_filter(self, client, catalogue):
        resp = client.post("/vehicle/create", json={
            "model": "FH16",
            "condition": "used",
            "adminId": catalogue["admin"].id,
            "categoryId": catalogue["category"].id,
            "brandId": catalogue["brand"].id,
            "supplierId": catalogue["supplier"].id,
            "translations": [{"languageId": "fr", "title": "Tracteur"}, {"languageId": "it", "title": "Trattore"}],
        })
        assert resp.status_code == 201
        vehicle_id = resp.json()["vehicle"]["id"]

        resp = client.get(f"/vehicle/{vehicle_id}")
        assert [t["title"] for t in resp.json()["vehicle"]["translations"]] == ["Tracteur"]

        resp = client.get("/vehicle/all?lang=it")
        body = resp.json()
        assert body["count"] == 1
        assert body["message"] == translate("vehicle.LIST_SUCCESS", "it")
        assert [t["title"] for t in body["vehicles"][0]["translations"]] == ["Trattore"]

    def test_transaction_missing_fields_is_500(self, client):
        resp = client.post("/transaction/create", json={"type": "sale"})
        assert resp.status_code == 500
        assert resp.json()["kind"] == "internal"

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["database"] == "ok"


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_app_error_handler_uses_error_status(self):
        from go4motors.errors import ConflictError
        from go4motors.main import app_error_handler

        request = MagicMock()
        resp = await app_error_handler(request, ConflictError("auth.EMAIL_ALREADY_USED", "fr"))

        assert resp.status_code == 409
        assert json.loads(resp.body) == {
            "detail": translate("auth.EMAIL_ALREADY_USED", "fr"), "kind": "conflict", "lang": "fr",
        }

    @pytest.mark.asyncio
    async def test_integrity_error_handler_is_409(self):
        from sqlalchemy.exc import IntegrityError
        from go4motors.main import integrity_error_handler

        request = MagicMock()
        request.query_params = {"lang": "it"}
        request.headers = {}
        request.cookies = {}
        exc = IntegrityError("INSERT ...", {}, Exception("UNIQUE constraint failed: brands.slug"))

        resp = await integrity_error_handler(request, exc)

        assert resp.status_code == 409
        assert json.loads(resp.body)["detail"] == translate("common.UNIQUE_CONSTRAINT", "it")
