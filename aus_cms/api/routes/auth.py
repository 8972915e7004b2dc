"""Authentication and admin management endpoints"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from aus_cms.database import get_db
from aus_cms.api.deps import AuthContext, get_current_admin, get_current_superadmin
from aus_cms.core.logging_config import get_logger
from aus_cms.schemas.auth import (
    AdminListItem,
    AdminListResponse,
    AdminSummary,
    ChangePasswordRequest,
    ChangePasswordResponse,
    CurrentAdminResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    RegisteredAdmin,
    ResetPasswordRequest,
)
from aus_cms.services.auth_service import AuthService

logger = get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login-admin", response_model=LoginResponse)
async def login_admin(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """Authenticate an admin and return an access token"""
    admin, token = await AuthService(db).login(credentials.email, credentials.password)
    return LoginResponse(
        message="Login successful",
        admin=AdminSummary(email=admin.email, superadmin=admin.superadmin),
        token=token,
    )


@router.post("/register-admin", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_admin(
    payload: RegisterRequest,
    auth: AuthContext = Depends(get_current_superadmin),
    db: AsyncSession = Depends(get_db)
):
    """Register a new admin (superadmin only)"""
    logger.debug(f"Admin registration by {auth.admin.email}")
    admin = await AuthService(db).register(payload.email, payload.password)
    return RegisterResponse(
        message="Admin registered successfully.",
        admin=RegisteredAdmin(email=admin.email),
    )


@router.get("/me", response_model=CurrentAdminResponse)
async def get_me(auth: AuthContext = Depends(get_current_admin)):
    """Public fields of the authenticated admin"""
    return CurrentAdminResponse.model_validate(auth.admin)


@router.post("/change-password", response_model=ChangePasswordResponse)
async def change_password(
    payload: ChangePasswordRequest,
    auth: AuthContext = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db)
):
    """Change own password; the response carries a fresh token"""
    token = await AuthService(db).change_password(
        auth.admin.id, payload.current_password, payload.new_password
    )
    return ChangePasswordResponse(message="Password updated successfully", token=token)


@router.post("/admins/{admin_id}/reset-password", response_model=MessageResponse)
async def reset_admin_password(
    admin_id: str,
    payload: ResetPasswordRequest,
    auth: AuthContext = Depends(get_current_superadmin),
    db: AsyncSession = Depends(get_db)
):
    """Reset another admin's password (superadmin only)"""
    logger.debug(f"Password reset of {admin_id} requested by {auth.admin.email}")
    await AuthService(db).reset_password(admin_id, payload.new_password)
    return MessageResponse(message="Password reset successfully")


@router.get("/admins", response_model=AdminListResponse)
async def list_admins(
    auth: AuthContext = Depends(get_current_superadmin),
    db: AsyncSession = Depends(get_db)
):
    """All admins, newest first (superadmin only)"""
    admins = await AuthService(db).list_admins()
    return AdminListResponse(admins=[AdminListItem.model_validate(a) for a in admins])
