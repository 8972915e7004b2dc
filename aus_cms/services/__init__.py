"""Business logic services"""
from aus_cms.services.auth_service import AuthService
from aus_cms.services.founder_service import FounderService

__all__ = [
    "AuthService",
    "FounderService",
]
