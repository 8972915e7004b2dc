"""API dependencies"""
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from aus_cms.database import get_db
from aus_cms.core.config import settings
from aus_cms.core.security import (
    TokenClaims,
    TokenError,
    TokenExpiredError,
    verify_access_token,
)
from aus_cms.core.logging_config import get_logger
from aus_cms.models.admin import Admin
from aus_cms.core.exceptions import UnauthorizedException, ForbiddenException

logger = get_logger(__name__)

_BEARER_RE = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


@dataclass(frozen=True)
class AdminIdentity:
    """Snapshot of the authenticated admin, taken once per request"""
    id: UUID
    email: str
    superadmin: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, admin: Admin) -> "AdminIdentity":
        return cls(
            id=admin.id,
            email=admin.email,
            superadmin=bool(admin.superadmin),
            created_at=admin.created_at,
            updated_at=admin.updated_at,
        )


@dataclass(frozen=True)
class AuthContext:
    admin: AdminIdentity
    claims: TokenClaims


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` header, or None"""
    if not authorization:
        return None
    match = _BEARER_RE.match(authorization)
    return match.group(1) if match else None


async def get_current_admin(
    authorization: Optional[str] = Header(default=None),
    db: AsyncSession = Depends(get_db)
) -> AuthContext:
    """Authenticate the request and load the admin it belongs to"""
    token = extract_bearer_token(authorization)
    if not token:
        raise UnauthorizedException("No token provided")

    try:
        claims = verify_access_token(token)
    except TokenExpiredError:
        raise UnauthorizedException("Token expired")
    except TokenError as e:
        logger.warning(f"Rejected token: {type(e).__name__}")
        raise UnauthorizedException("Invalid token")

    try:
        admin_id = UUID(claims.id)
    except ValueError:
        raise UnauthorizedException("Invalid token")

    result = await db.execute(select(Admin).where(Admin.id == admin_id))
    admin = result.scalar_one_or_none()
    if admin is None:
        raise UnauthorizedException("Invalid token or user not found")

    if settings.TOKEN_REVOCATION_ENABLED and claims.version != admin.token_version:
        logger.warning(f"Revoked token presented for admin {admin.id}")
        raise UnauthorizedException("Token revoked")

    return AuthContext(admin=AdminIdentity.from_model(admin), claims=claims)


async def get_current_superadmin(
    auth: AuthContext = Depends(get_current_admin)
) -> AuthContext:
    """Authenticate and require the superadmin flag"""
    if not auth.admin.superadmin:
        logger.warning(f"Superadmin access denied for admin {auth.admin.id}")
        raise ForbiddenException("Access denied: Not a superadmin")
    return auth
