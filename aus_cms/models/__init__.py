"""Database models"""
from aus_cms.models.base import Base
from aus_cms.models.admin import Admin
from aus_cms.models.founder import Founder

__all__ = ["Base", "Admin", "Founder"]
