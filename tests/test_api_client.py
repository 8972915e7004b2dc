import asyncio
import json

import httpx
import pytest

from streamlit_app.utils.api_client import APIClient, APIError


def make_client(handler, token="tok-123"):
    return APIClient(
        base_url="http://cms.test",
        token_getter=lambda: token,
        transport=httpx.MockTransport(handler),
    )


def test_login_posts_credentials_and_returns_body():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={
            "message": "Login successful",
            "admin": {"email": "a@example.com", "superadmin": True},
            "token": "jwt",
        })

    result = asyncio.run(make_client(handler, token=None).login("a@example.com", "pw"))
    assert seen == {"path": "/auth/login-admin", "body": {"email": "a@example.com", "password": "pw"}}
    assert result["token"] == "jwt"


def test_bearer_header_attached_only_with_token():
    headers = {}

    def handler(request):
        headers["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"id": "1", "email": "a", "superadmin": False,
                                         "createdAt": "x", "updatedAt": "y"})

    asyncio.run(make_client(handler).get_current_admin())
    assert headers["auth"] == "Bearer tok-123"

    asyncio.run(make_client(handler, token=None).get_current_admin())
    assert headers["auth"] is None


def test_error_message_comes_from_server_body():
    def handler(request):
        return httpx.Response(401, json={"message": "Token expired"})

    with pytest.raises(APIError) as exc:
        asyncio.run(make_client(handler).get_current_admin())
    assert exc.value.status_code == 401
    assert exc.value.message == "Token expired"


def test_error_without_json_body():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(APIError) as exc:
        asyncio.run(make_client(handler).get_founder())
    assert exc.value.status_code == 502
    assert exc.value.message == "Bad Gateway"


def test_change_password_sends_camel_case_fields():
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"message": "Password updated successfully", "token": "new"})

    result = asyncio.run(make_client(handler).change_password("old-pass", "new-pass-123"))
    assert seen["body"] == {"currentPassword": "old-pass", "newPassword": "new-pass-123"}
    assert result["token"] == "new"


def test_list_admins_returns_the_admins_array():
    def handler(request):
        assert request.url.path == "/auth/admins"
        return httpx.Response(200, json={"admins": [{"id": "1", "email": "a", "superadmin": True, "createdAt": "x"}]})

    admins = asyncio.run(make_client(handler).list_admins())
    assert admins[0]["email"] == "a"


@pytest.mark.parametrize("founder_id,path", [("abc", "/api/founder/abc"), (None, "/api/founder")])
def test_founder_update_and_delete_addressing(founder_id, path):
    calls = []

    def handler(request):
        calls.append((request.method, request.url.path))
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, json={"id": "abc"})

    client = make_client(handler)
    asyncio.run(client.update_founder({"name": "N"}, founder_id=founder_id))
    assert asyncio.run(client.delete_founder(founder_id)) is None
    assert calls == [("PUT", path), ("DELETE", path)]


def test_get_founder_null():
    def handler(request):
        return httpx.Response(200, json=None)

    assert asyncio.run(make_client(handler).get_founder()) is None
