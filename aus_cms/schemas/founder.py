"""Founder profile schemas"""
from datetime import datetime
from typing import Any, List, Optional, Union
from uuid import UUID
from aus_cms.schemas.base import CamelModel


class FounderPayload(CamelModel):
    """Create/update body. Fields left out of an update are not touched.

    ``badges`` may be a list or a comma-separated string.
    """
    name: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None
    badges: Optional[Union[List[Any], str]] = None


class FounderResponse(CamelModel):
    id: UUID
    name: str
    title: str
    bio: str
    image: str
    badges: List[str]
    created_at: datetime
    updated_at: datetime
