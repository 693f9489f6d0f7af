# scripts/setup/init_db.py
"""
Initialize database: creates all tables and seeds the account roles.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from go4motors.config import settings
from go4motors.database import SessionLocal, create_tables, engine
from go4motors.models.user import KNOWN_ROLES, Role


def seed_roles(db) -> list:
    """Insert the roles that are missing. Returns the names created."""
    existing = {name for (name,) in db.query(Role.name).all()}
    created = [name for name in KNOWN_ROLES if name not in existing]
    for name in created:
        db.add(Role(name=name))
    db.commit()
    return created


def main():
    print("Go4Motors DB Initialization")
    print("=" * 40)
    print(f"Database: {engine.url.render_as_string(hide_password=True)}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except SQLAlchemyError as e:
        print(f"Cannot connect to database: {e}")
        print("\nCheck DATABASE_URL in .env and that PostgreSQL is running.")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()
    tables = sorted(inspect(engine).get_table_names())
    print(f"Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   - {t}")

    db = SessionLocal()
    try:
        created = seed_roles(db)
    finally:
        db.close()
    print(f"\nRoles seeded: {created or 'none missing'} (known: {list(KNOWN_ROLES)})")

    print("\nDatabase ready! You can now start the backend:")
    print(f"   uvicorn go4motors.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
