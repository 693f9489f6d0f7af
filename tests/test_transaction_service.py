# tests/test_transaction_service.py
"""Unit tests for sale and rental transactions."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime, timedelta
from unittest.mock import patch

from go4motors.errors import ConflictError, InternalError, NotFoundError, ValidationError
from go4motors.models.transaction import Transaction, TransactionStatus, VehicleTransaction
from go4motors.models.vehicle import Vehicle
from go4motors.schemas.transaction import TransactionCreate, VehicleTransactionIn
from go4motors.services import transaction_service


@pytest.fixture
def vehicles(db, catalogue):
    rows = [
        Vehicle(model=model, condition="new", admin_id=catalogue["admin"].id,
                category_id=catalogue["category"].id, brand_id=catalogue["brand"].id,
                supplier_id=catalogue["supplier"].id)
        for model in ("FH16", "FM")
    ]
    db.add_all(rows)
    db.commit()
    return rows


def make_body(user_id, vehicle_ids, /, **overrides):
    fields = dict(
        total_amount=1200.0,
        type="rental",
        status="pending",
        start_date="2024-05-01",
        end_date="2024-05-10T12:30:00Z",
        user_id=user_id,
        vehicle_transactions=[VehicleTransactionIn(vehicle_id=vid, price=600.0) for vid in vehicle_ids],
    )
    fields.update(overrides)
    return TransactionCreate(**fields)


class TestParseDate:
    def test_date_only_is_midnight_utc(self):
        assert transaction_service.parse_date("2024-05-01", "en") == datetime(2024, 5, 1)

    def test_offset_is_converted_to_utc(self):
        assert transaction_service.parse_date("2024-05-01T02:00:00+02:00", "en") == datetime(2024, 5, 1)

    def test_invalid_date(self):
        with pytest.raises(ValidationError):
            transaction_service.parse_date("01/05/2024", "en")

    def test_empty(self):
        assert transaction_service.parse_date(None, "en") is None


class TestCreateTransaction:
    def test_create_with_line_items(self, db, catalogue, vehicles):
        body = make_body(catalogue["admin"].id, [v.id for v in vehicles])

        result = transaction_service.create_transaction(db, body, "en")

        transaction = result["transaction"]
        assert transaction.status == TransactionStatus.pending
        assert transaction.start_date == datetime(2024, 5, 1)
        assert transaction.end_date == datetime(2024, 5, 10, 12, 30)
        assert len(transaction.vehicle_transactions) == 2
        assert transaction.user.email == catalogue["admin"].email

    @pytest.mark.parametrize("missing", ["total_amount", "type", "status", "user_id"])
    def test_missing_required_field_is_internal_error(self, db, catalogue, vehicles, missing):
        body = make_body(catalogue["admin"].id, [vehicles[0].id], **{missing: None})
        with pytest.raises(InternalError) as exc:
            transaction_service.create_transaction(db, body, "en")
        assert exc.value.key == "transaction.MISSING_REQUIRED_FIELDS"
        assert db.query(Transaction).count() == 0

    def test_no_line_items_is_internal_error(self, db, catalogue):
        with pytest.raises(InternalError):
            transaction_service.create_transaction(db, make_body(catalogue["admin"].id, []), "en")


class TestListTransactions:
    def test_by_user_newest_first(self, db, catalogue, vehicles):
        user_id = catalogue["admin"].id
        older = transaction_service.create_transaction(db, make_body(user_id, [vehicles[0].id]), "en")
        newer = transaction_service.create_transaction(db, make_body(user_id, [vehicles[1].id]), "en")
        older_row = db.get(Transaction, older["transaction"].id)
        older_row.created_at = older_row.created_at - timedelta(hours=1)
        db.commit()

        result = transaction_service.list_by_user(db, user_id, "en")

        assert [t.id for t in result] == [newer["transaction"].id, older["transaction"].id]
        assert transaction_service.list_by_user(db, "someone-else", "en") == []

    def test_by_vehicle_keeps_only_matching_items(self, db, catalogue, vehicles):
        body = make_body(catalogue["admin"].id, [v.id for v in vehicles])
        transaction_service.create_transaction(db, body, "en")

        result = transaction_service.list_by_vehicle(db, vehicles[0].id, "en")

        assert len(result) == 1
        assert [item.vehicle_id for item in result[0].vehicle_transactions] == [vehicles[0].id]
        assert db.query(VehicleTransaction).count() == 2

    def test_get_missing(self, db):
        with pytest.raises(NotFoundError):
            transaction_service.get_transaction(db, "missing", "en")


class TestUpdateStatus:
    @pytest.fixture
    def transaction(self, db, catalogue, vehicles):
        body = make_body(catalogue["admin"].id, [vehicles[0].id], status="completed")
        return transaction_service.create_transaction(db, body, "en")["transaction"]

    def test_overwrite_is_unconditional_by_default(self, db, transaction):
        result = transaction_service.update_status(db, transaction.id, "pending", "en")
        assert result["transaction"].status == TransactionStatus.pending

    def test_invalid_status(self, db, transaction):
        with pytest.raises(ValidationError) as exc:
            transaction_service.update_status(db, transaction.id, "shipped", "en")
        assert exc.value.key == "transaction.INVALID_STATUS"

    def test_strict_mode_locks_terminal_states(self, db, transaction):
        with patch("go4motors.services.transaction_service.settings.STRICT_TRANSACTION_STATUS", True):
            with pytest.raises(ConflictError) as exc:
                transaction_service.update_status(db, transaction.id, "cancelled", "en")
        assert "completed" in exc.value.message
        assert db.query(Transaction).one().status == TransactionStatus.completed

    def test_strict_mode_allows_leaving_pending(self, db, catalogue, vehicles):
        body = make_body(catalogue["admin"].id, [vehicles[0].id])
        pending = transaction_service.create_transaction(db, body, "en")["transaction"]
        with patch("go4motors.services.transaction_service.settings.STRICT_TRANSACTION_STATUS", True):
            result = transaction_service.update_status(db, pending.id, "completed", "en")
        assert result["transaction"].status == TransactionStatus.completed


class TestDeleteTransaction:
    def test_delete_removes_line_items(self, db, catalogue, vehicles):
        body = make_body(catalogue["admin"].id, [v.id for v in vehicles])
        transaction = transaction_service.create_transaction(db, body, "en")["transaction"]

        transaction_service.delete_transaction(db, transaction.id, "en")

        assert db.query(Transaction).count() == 0
        assert db.query(VehicleTransaction).count() == 0

    def test_delete_missing(self, db):
        with pytest.raises(NotFoundError):
            transaction_service.delete_transaction(db, "missing", "en")
