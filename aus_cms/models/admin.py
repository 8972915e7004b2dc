"""Admin model"""
from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import deferred
from aus_cms.models.base import BaseModel


class Admin(BaseModel):
    """Admin account. The password hash is deferred and only loaded on request."""
    __tablename__ = "admins"

    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = deferred(Column(String(255), nullable=False))
    superadmin = Column(Boolean, default=False, nullable=False)
    # Bumped on every password change/reset; tokens carry the value they were minted with
    token_version = Column(Integer, default=0, nullable=False)

    def __repr__(self):
        return f"<Admin(id={self.id}, email={self.email}, superadmin={self.superadmin})>"
