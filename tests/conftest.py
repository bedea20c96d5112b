"""
Shared fixtures for route tests.

The database is a throwaway SQLite file; it must be configured before any
app module is imported.
"""

import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="integram-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-for-session-signing"

import pytest
from fastapi.testclient import TestClient

from app.auth import hash_password
from app.database import SessionLocal, init_db
from app.main import app
from app.models import User
from app.services.notifications import reset_notifications

PASSWORD = "correct horse battery staple"


@pytest.fixture
def users():
    """Create one user per role and return their ids keyed by role."""
    init_db()
    db = SessionLocal()
    try:
        db.query(User).delete()
        created = {}
        for role in User.ROLES:
            user = User(
                email=f"{role}@integram.test",
                full_name=role.title(),
                role=role,
                password_hash=hash_password(PASSWORD),
                is_active=True,
            )
            db.add(user)
            db.flush()
            created[role] = user.id
        db.commit()
        return created
    finally:
        db.close()


@pytest.fixture
def client(users):
    reset_notifications()
    with TestClient(app) as test_client:
        yield test_client
    reset_notifications()


@pytest.fixture
def login(client):
    """Submit the login form for the given role's user."""
    def _login(role, redirect=None):
        data = {"email": f"{role}@integram.test", "password": PASSWORD}
        if redirect is not None:
            data["redirect"] = redirect
        return client.post("/login", data=data, follow_redirects=False)
    return _login
