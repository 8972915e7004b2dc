import uuid
from datetime import timedelta

from sqlalchemy import create_engine, update

from aus_cms.core.config import settings
from aus_cms.core.security import create_access_token, verify_access_token
from aus_cms.models import Admin
from conftest import (
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    SUPERADMIN_EMAIL,
    SUPERADMIN_PASSWORD,
    bearer,
    login,
)


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_login_returns_admin_and_token(client):
    r = client.post("/auth/login-admin", json={"email": SUPERADMIN_EMAIL, "password": SUPERADMIN_PASSWORD})
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Login successful"
    assert body["admin"] == {"email": SUPERADMIN_EMAIL, "superadmin": True}
    assert verify_access_token(body["token"]).id


def test_login_missing_fields(client):
    r = client.post("/auth/login-admin", json={"email": SUPERADMIN_EMAIL})
    assert r.status_code == 400
    assert r.json()["message"] == "Email and password are required"

    r = client.post("/auth/login-admin", json={"email": "", "password": ""})
    assert r.status_code == 400


def test_login_wrong_password_and_unknown_email_are_indistinguishable(client):
    wrong = client.post("/auth/login-admin", json={"email": ADMIN_EMAIL, "password": "nope-nope"})
    unknown = client.post("/auth/login-admin", json={"email": "ghost@example.com", "password": "nope-nope"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"message": "Invalid credentials"}


def test_login_email_is_case_sensitive(client):
    r = client.post("/auth/login-admin", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD})
    assert r.status_code == 401


def test_me_requires_token(client):
    r = client.get("/auth/me")
    assert r.status_code == 401
    assert r.json()["message"] == "No token provided"

    r = client.get("/auth/me", headers={"Authorization": "Basic abc"})
    assert r.json()["message"] == "No token provided"


def test_me_rejects_invalid_and_expired_tokens(client):
    r = client.get("/auth/me", headers=bearer("not-a-token"))
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid token"

    expired = create_access_token(uuid.uuid4(), expires_delta=timedelta(seconds=-5))
    r = client.get("/auth/me", headers=bearer(expired))
    assert r.status_code == 401
    assert r.json()["message"] == "Token expired"


def test_me_rejects_token_for_unknown_admin(client):
    r = client.get("/auth/me", headers=bearer(create_access_token(uuid.uuid4())))
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid token or user not found"


def test_me_returns_public_fields_only(client, admin_token):
    r = client.get("/auth/me", headers={"Authorization": f"bearer   {admin_token}"})
    assert r.status_code == 200
    body = r.json()
    assert set(body) == {"id", "email", "superadmin", "createdAt", "updatedAt"}
    assert body["email"] == ADMIN_EMAIL
    assert body["superadmin"] is False


def test_register_requires_superadmin(client, admin_token):
    payload = {"email": "new@example.com", "password": "new-password"}

    r = client.post("/auth/register-admin", json=payload)
    assert r.status_code == 401

    r = client.post("/auth/register-admin", json=payload, headers=bearer(admin_token))
    assert r.status_code == 403
    assert r.json()["message"] == "Access denied: Not a superadmin"


def test_register_then_login(client, superadmin_token):
    r = client.post(
        "/auth/register-admin",
        json={"email": "new@example.com", "password": "new-password"},
        headers=bearer(superadmin_token),
    )
    assert r.status_code == 201
    assert r.json() == {"message": "Admin registered successfully.", "admin": {"email": "new@example.com"}}

    token = login(client, "new@example.com", "new-password")
    me = client.get("/auth/me", headers=bearer(token)).json()
    assert verify_access_token(token).id == me["id"]
    assert me["superadmin"] is False


def test_register_duplicate_and_missing_fields(client, superadmin_token):
    r = client.post(
        "/auth/register-admin",
        json={"email": ADMIN_EMAIL, "password": "whatever-123"},
        headers=bearer(superadmin_token),
    )
    assert r.status_code == 409

    r = client.post("/auth/register-admin", json={"email": "x@example.com"}, headers=bearer(superadmin_token))
    assert r.status_code == 400


def test_list_admins_newest_first(client, superadmin_token, admin_token):
    client.post(
        "/auth/register-admin",
        json={"email": "newest@example.com", "password": "new-password"},
        headers=bearer(superadmin_token),
    )
    r = client.get("/auth/admins", headers=bearer(superadmin_token))
    assert r.status_code == 200
    admins = r.json()["admins"]
    assert [a["email"] for a in admins][0] == "newest@example.com"
    assert {a["email"] for a in admins} == {"newest@example.com", SUPERADMIN_EMAIL, ADMIN_EMAIL}
    for a in admins:
        assert set(a) == {"id", "email", "superadmin", "createdAt"}

    assert client.get("/auth/admins", headers=bearer(admin_token)).status_code == 403


def test_change_password_validation(client, admin_token):
    headers = bearer(admin_token)

    r = client.post("/auth/change-password", json={"currentPassword": ADMIN_PASSWORD}, headers=headers)
    assert r.status_code == 400

    r = client.post(
        "/auth/change-password",
        json={"currentPassword": ADMIN_PASSWORD, "newPassword": "short"},
        headers=headers,
    )
    assert r.status_code == 400
    assert r.json()["message"] == "New password must be at least 8 characters long"

    r = client.post(
        "/auth/change-password",
        json={"currentPassword": "not-my-password", "newPassword": "brand-new-password"},
        headers=headers,
    )
    assert r.status_code == 401
    assert r.json()["message"] == "Current password is incorrect"


def test_change_password_to_same_password_is_rejected(client, admin_token):
    r = client.post(
        "/auth/change-password",
        json={"currentPassword": ADMIN_PASSWORD, "newPassword": ADMIN_PASSWORD},
        headers=bearer(admin_token),
    )
    assert r.status_code == 400
    assert r.json()["message"] == "New password must be different from the old one"


def test_change_password_success(client, admin_token):
    r = client.post(
        "/auth/change-password",
        json={"currentPassword": ADMIN_PASSWORD, "newPassword": "brand-new-password"},
        headers=bearer(admin_token),
    )
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Password updated successfully"

    # Fresh token works, the one it replaced is revoked
    assert client.get("/auth/me", headers=bearer(body["token"])).status_code == 200
    r = client.get("/auth/me", headers=bearer(admin_token))
    assert r.status_code == 401
    assert r.json()["message"] == "Token revoked"

    old = client.post("/auth/login-admin", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert old.status_code == 401
    login(client, ADMIN_EMAIL, "brand-new-password")


def test_reset_admin_password(client, superadmin_token, admin_token):
    admins = client.get("/auth/admins", headers=bearer(superadmin_token)).json()["admins"]
    target = next(a for a in admins if a["email"] == ADMIN_EMAIL)

    r = client.post(
        f"/auth/admins/{target['id']}/reset-password",
        json={"newPassword": "reset-by-root"},
        headers=bearer(superadmin_token),
    )
    assert r.status_code == 200
    assert r.json() == {"message": "Password reset successfully"}

    # Outstanding tokens of the target stop working
    assert client.get("/auth/me", headers=bearer(admin_token)).status_code == 401
    login(client, ADMIN_EMAIL, "reset-by-root")


def test_reset_admin_password_errors(client, superadmin_token, admin_token):
    headers = bearer(superadmin_token)

    r = client.post(f"/auth/admins/{uuid.uuid4()}/reset-password", json={"newPassword": "long-enough"}, headers=headers)
    assert r.status_code == 404

    r = client.post("/auth/admins/not-an-id/reset-password", json={"newPassword": "long-enough"}, headers=headers)
    assert r.status_code == 400

    r = client.post(f"/auth/admins/{uuid.uuid4()}/reset-password", json={"newPassword": "short"}, headers=headers)
    assert r.status_code == 400

    r = client.post(f"/auth/admins/{uuid.uuid4()}/reset-password", json={}, headers=headers)
    assert r.status_code == 400
    assert r.json()["message"] == "newPassword is required"

    r = client.post(
        f"/auth/admins/{uuid.uuid4()}/reset-password",
        json={"newPassword": "long-enough"},
        headers=bearer(admin_token),
    )
    assert r.status_code == 403


def test_role_downgrade_applies_to_the_next_request(client, db_path, superadmin_token):
    headers = bearer(superadmin_token)
    assert client.get("/auth/admins", headers=headers).status_code == 200

    engine = create_engine(f"sqlite:///{db_path}")
    with engine.begin() as conn:
        conn.execute(update(Admin).where(Admin.email == SUPERADMIN_EMAIL).values(superadmin=False))
    engine.dispose()

    r = client.get("/auth/admins", headers=headers)
    assert r.status_code == 403
    assert r.json() == {"message": "Access denied: Not a superadmin"}


def test_old_token_survives_password_change_when_revocation_disabled(client, admin_token, monkeypatch):
    monkeypatch.setattr(settings, "TOKEN_REVOCATION_ENABLED", False)
    r = client.post(
        "/auth/change-password",
        json={"currentPassword": ADMIN_PASSWORD, "newPassword": "brand-new-password"},
        headers=bearer(admin_token),
    )
    assert r.status_code == 200
    assert client.get("/auth/me", headers=bearer(admin_token)).status_code == 200


def test_register_with_unhashable_password_is_server_error(client, superadmin_token):
    r = client.post(
        "/auth/register-admin",
        json={"email": "nul@example.com", "password": "bad\x00password"},
        headers=bearer(superadmin_token),
    )
    assert r.status_code == 500
    assert r.json() == {"message": "Server error"}
