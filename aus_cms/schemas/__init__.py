"""Pydantic schemas for request/response validation"""
from aus_cms.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    CurrentAdminResponse,
    ChangePasswordRequest,
    ChangePasswordResponse,
    ResetPasswordRequest,
    MessageResponse,
    AdminListResponse,
)
from aus_cms.schemas.founder import FounderPayload, FounderResponse

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "CurrentAdminResponse",
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "ResetPasswordRequest",
    "MessageResponse",
    "AdminListResponse",
    # Founder
    "FounderPayload",
    "FounderResponse",
]
