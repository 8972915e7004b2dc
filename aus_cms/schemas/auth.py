"""Authentication schemas"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID
from aus_cms.schemas.base import CamelModel


class LoginRequest(CamelModel):
    """Admin login request. Presence is checked by the service so that
    missing fields produce the documented message."""
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ChangePasswordRequest(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class ResetPasswordRequest(CamelModel):
    new_password: Optional[str] = None


class AdminSummary(CamelModel):
    email: str
    superadmin: bool


class RegisteredAdmin(CamelModel):
    email: str


class LoginResponse(CamelModel):
    message: str
    admin: AdminSummary
    token: str


class RegisterResponse(CamelModel):
    message: str
    admin: RegisteredAdmin


class CurrentAdminResponse(CamelModel):
    """Public view of an admin; the password hash is never part of it"""
    id: UUID
    email: str
    superadmin: bool
    created_at: datetime
    updated_at: datetime


class ChangePasswordResponse(CamelModel):
    message: str
    token: str


class MessageResponse(CamelModel):
    message: str


class AdminListItem(CamelModel):
    id: UUID
    email: str
    superadmin: bool
    created_at: datetime


class AdminListResponse(CamelModel):
    admins: List[AdminListItem]
