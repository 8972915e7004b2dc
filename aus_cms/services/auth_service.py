"""Auth service - login, admin registration and password management"""
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import undefer
from aus_cms.core.config import settings
from aus_cms.core.logging_config import get_logger
from aus_cms.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)
from aus_cms.core.exceptions import (
    AdminNotFoundException,
    BadRequestException,
    ConflictException,
    ServerErrorException,
    UnauthorizedException,
)
from aus_cms.models.admin import Admin

logger = get_logger(__name__)


def _hash(password: str) -> str:
    try:
        return get_password_hash(password)
    except Exception as e:
        logger.error(f"Password hashing failed: {e}", exc_info=True)
        raise ServerErrorException()


def _check_new_password(new_password: str) -> None:
    if len(str(new_password)) < settings.PASSWORD_MIN_LENGTH:
        raise BadRequestException(
            f"New password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
        )


class AuthService:
    """Service for admin auth operations"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_with_password(self, admin_id: UUID) -> Optional[Admin]:
        # populate_existing: the auth dependency may already hold this admin
        # in the session without the deferred hash loaded
        result = await self.db.execute(
            select(Admin)
            .options(undefer(Admin.hashed_password))
            .where(Admin.id == admin_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def login(self, email: Optional[str], password: Optional[str]) -> Tuple[Admin, str]:
        """Authenticate by email/password and issue a token"""
        if not email or not password:
            raise BadRequestException("Email and password are required")

        logger.debug(f"Login attempt for email: {email}")
        result = await self.db.execute(
            select(Admin).options(undefer(Admin.hashed_password)).where(Admin.email == email)
        )
        admin = result.scalar_one_or_none()

        # Same answer for unknown email and wrong password
        if admin is None or not verify_password(password, admin.hashed_password):
            logger.warning(f"Login failed: Invalid credentials for email: {email}")
            raise UnauthorizedException("Invalid credentials")

        token = create_access_token(admin.id, admin.token_version)
        logger.info(f"Login successful: {admin.email}")
        return admin, token

    async def register(self, email: Optional[str], password: Optional[str]) -> Admin:
        """Create a regular admin. Does not log the new admin in."""
        if not email or not password:
            raise BadRequestException("Email and password are required.")

        existing = (
            await self.db.execute(select(Admin.id).where(Admin.email == email))
        ).scalar_one_or_none()
        if existing:
            logger.warning(f"Register failed: Email already registered - {email}")
            raise ConflictException("Admin with this email already exists.")

        admin = Admin(email=email, hashed_password=_hash(password), superadmin=False)
        self.db.add(admin)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Register lost a race on email {email}")
            raise ConflictException("Admin with this email already exists.")

        logger.info(f"Admin registered: {email}")
        return admin

    async def change_password(
        self,
        admin_id: UUID,
        current_password: Optional[str],
        new_password: Optional[str]
    ) -> str:
        """Change the caller's own password and return a fresh token"""
        if not current_password or not new_password:
            raise BadRequestException("currentPassword and newPassword are required")
        _check_new_password(new_password)

        admin = await self._get_with_password(admin_id)
        if admin is None:
            raise AdminNotFoundException()

        if not verify_password(current_password, admin.hashed_password):
            logger.warning(f"Change password failed: wrong current password for {admin.email}")
            raise UnauthorizedException("Current password is incorrect")

        # Compared against the stored digest, so this only catches resubmitting the same password
        if verify_password(new_password, admin.hashed_password):
            raise BadRequestException("New password must be different from the old one")

        admin.hashed_password = _hash(new_password)
        admin.token_version = (admin.token_version or 0) + 1
        await self.db.commit()

        logger.info(f"Password changed for admin {admin.email}")
        return create_access_token(admin.id, admin.token_version)

    async def reset_password(self, target_id: str, new_password: Optional[str]) -> Admin:
        """Superadmin override of another admin's password. No token is issued."""
        if not new_password:
            raise BadRequestException("newPassword is required")
        _check_new_password(new_password)

        try:
            admin_id = UUID(str(target_id))
        except ValueError:
            raise BadRequestException("Invalid admin id.")

        admin = await self._get_with_password(admin_id)
        if admin is None:
            raise AdminNotFoundException()

        admin.hashed_password = _hash(new_password)
        admin.token_version = (admin.token_version or 0) + 1
        await self.db.commit()

        logger.info(f"Password reset for admin {admin.email}")
        return admin

    async def list_admins(self) -> List[Admin]:
        result = await self.db.execute(select(Admin).order_by(Admin.created_at.desc()))
        return list(result.scalars().all())

    async def ensure_superadmin(self, email: str, password: str) -> Admin:
        """Create a superadmin if no admin with this email exists"""
        existing = (
            await self.db.execute(select(Admin).where(Admin.email == email))
        ).scalar_one_or_none()
        if existing:
            if not existing.superadmin:
                logger.warning(f"Admin {email} exists but is not a superadmin; leaving it unchanged")
            return existing

        admin = Admin(email=email, hashed_password=_hash(password), superadmin=True)
        self.db.add(admin)
        await self.db.commit()
        logger.info(f"Superadmin created: {email}")
        return admin
