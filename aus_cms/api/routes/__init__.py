"""API routes"""
from aus_cms.api.routes import auth, founder

__all__ = ["auth", "founder"]
