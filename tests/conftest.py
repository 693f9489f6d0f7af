# tests/conftest.py
"""
Shared fixtures: an in-memory SQLite database per test, a FastAPI TestClient
bound to it, and small factories for the rows most tests need.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Settings are read at import time: point them at SQLite before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("EMAIL_USER", "")
os.environ.setdefault("EMAIL_PASS", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from go4motors.database import Base, create_tables, get_db
from go4motors.models.brand import Brand, BrandTranslation
from go4motors.models.category import Category, CategoryTranslation
from go4motors.models.supplier import Supplier
from go4motors.models.user import Role, User
from go4motors.utils.security import hash_password

TEST_PASSWORD = "Abcdef12"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    create_tables(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    from go4motors.main import app

    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # No `with`: startup would create tables on the configured DATABASE_URL
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make(email="admin@go4motors.com", role="admin", verified=True, phone=None, **fields):
        role_row = db.query(Role).filter(Role.name == role).first()
        if not role_row:
            role_row = Role(name=role)
            db.add(role_row)
            db.flush()
        user = User(
            first_name=fields.pop("first_name", "Ada"),
            last_name=fields.pop("last_name", "Rossi"),
            email=email,
            phone=phone,
            password=hash_password(fields.pop("password", TEST_PASSWORD)),
            preferred_language=fields.pop("preferred_language", "en"),
            is_verified=verified,
            role=role_row,
            **fields,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make


@pytest.fixture
def catalogue(db, make_user):
    """One admin, category, brand and supplier, each translated in fr and en."""
    admin = make_user()
    category = Category(slug="trucks", translations=[
        CategoryTranslation(language="fr", name="Camions"),
        CategoryTranslation(language="en", name="Trucks"),
    ])
    brand = Brand(slug="volvo", translations=[
        BrandTranslation(language="fr", name="Volvo FR"),
        BrandTranslation(language="en", name="Volvo EN"),
    ])
    supplier = Supplier(name="Nord Trucks")
    db.add_all([category, brand, supplier])
    db.commit()
    return {"admin": admin, "category": category, "brand": brand, "supplier": supplier}
