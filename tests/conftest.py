import os

# Must be set before aus_cms.core.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-0123")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from aus_cms.core.security import get_password_hash
from aus_cms.database import get_db
from aus_cms.main import app
from aus_cms.models import Admin, Base

SUPERADMIN_EMAIL = "root@example.com"
SUPERADMIN_PASSWORD = "root-password"
ADMIN_EMAIL = "editor@example.com"
ADMIN_PASSWORD = "editor-password"


@pytest.fixture()
def db_path(tmp_path):
    path = tmp_path / "test.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    with Session(engine) as s:
        s.add_all([
            Admin(
                email=SUPERADMIN_EMAIL,
                hashed_password=get_password_hash(SUPERADMIN_PASSWORD),
                superadmin=True,
            ),
            Admin(
                email=ADMIN_EMAIL,
                hashed_password=get_password_hash(ADMIN_PASSWORD),
                superadmin=False,
            ),
        ])
        s.commit()
    engine.dispose()
    return path


@pytest.fixture()
def client(db_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def login(client, email, password):
    r = client.post("/auth/login-admin", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def superadmin_token(client):
    return login(client, SUPERADMIN_EMAIL, SUPERADMIN_PASSWORD)


@pytest.fixture()
def admin_token(client):
    return login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
