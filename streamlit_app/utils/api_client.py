"""API client for the CMS backend"""
import os
import httpx
import streamlit as st
from typing import Any, Callable, Dict, List, Optional


class APIError(Exception):
    """Non-2xx answer from the API, carrying the server's ``message``"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code})"


def _session_token() -> Optional[str]:
    return st.session_state.get("access_token")


class APIClient:
    """Client for communicating with the CMS backend"""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token_getter: Callable[[], Optional[str]] = _session_token,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_getter = token_getter
        self.transport = transport

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers with auth token"""
        headers = {"Content-Type": "application/json"}
        token = self.token_getter()
        # Only attach Authorization header when we actually have a token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport) as client:
            response = await client.request(method, path, json=json, headers=self._get_headers())
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            message = message or response.text or response.reason_phrase
            raise APIError(response.status_code, message)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # ---- Auth ----

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """Returns {message, admin: {email, superadmin}, token}"""
        return await self._request("POST", "/auth/login-admin", {"email": email, "password": password})

    async def register_admin(self, email: str, password: str) -> Dict[str, Any]:
        return await self._request("POST", "/auth/register-admin", {"email": email, "password": password})

    async def get_current_admin(self) -> Dict[str, Any]:
        return await self._request("GET", "/auth/me")

    async def list_admins(self) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/auth/admins")
        return data["admins"]

    async def change_password(self, current_password: str, new_password: str) -> Dict[str, Any]:
        """Returns {message, token}; the caller should store the new token"""
        return await self._request(
            "POST",
            "/auth/change-password",
            {"currentPassword": current_password, "newPassword": new_password},
        )

    async def reset_admin_password(self, admin_id: str, new_password: str) -> Dict[str, Any]:
        return await self._request(
            "POST", f"/auth/admins/{admin_id}/reset-password", {"newPassword": new_password}
        )

    # ---- Founder ----

    async def get_founder(self) -> Optional[Dict[str, Any]]:
        return await self._request("GET", "/api/founder")

    async def create_founder(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/api/founder", payload)

    async def update_founder(self, payload: Dict[str, Any], founder_id: Optional[str] = None) -> Dict[str, Any]:
        """PUT by id when known, otherwise against the singleton"""
        path = f"/api/founder/{founder_id}" if founder_id else "/api/founder"
        return await self._request("PUT", path, payload)

    async def delete_founder(self, founder_id: Optional[str] = None) -> None:
        path = f"/api/founder/{founder_id}" if founder_id else "/api/founder"
        await self._request("DELETE", path)


# Global API client instance
api_client = APIClient(base_url=os.getenv("AUS_API_URL", "http://localhost:8000"))
