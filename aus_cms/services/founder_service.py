"""Founder service - the founder profile, addressed by id or as a singleton"""
from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from aus_cms.core.logging_config import get_logger
from aus_cms.core.exceptions import BadRequestException, NotFoundException
from aus_cms.models.founder import Founder, FOUNDER_SINGLETON_KEY

logger = get_logger(__name__)

REQUIRED_FIELDS = ("name", "title", "bio", "image")


def normalize_badges(value: Any) -> Optional[List[str]]:
    """
    Normalize badges to a list of trimmed, non-empty strings.

    Accepts a list (items are stringified) or a comma-separated string.
    Returns None for anything else so the field is left untouched.
    """
    if isinstance(value, (list, tuple)):
        return [str(b).strip() for b in value if b is not None and str(b).strip()]
    if isinstance(value, str):
        return [b.strip() for b in value.split(",") if b.strip()]
    return None


def normalize_founder_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only recognised fields, trimming strings and normalizing badges"""
    payload: Dict[str, Any] = {}
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if isinstance(value, str):
            payload[field] = value.strip()

    badges = normalize_badges(data.get("badges"))
    if badges is not None:
        payload["badges"] = badges

    return payload


def parse_founder_id(founder_id: str) -> UUID:
    try:
        return UUID(str(founder_id))
    except ValueError:
        raise BadRequestException("Invalid founder id.")


class FounderService:
    """Service for founder profile operations"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def read(self) -> Optional[Founder]:
        """The current profile: the most recently created record, if any"""
        result = await self.db.execute(
            select(Founder).order_by(Founder.created_at.desc()).limit(1)
        )
        return result.scalars().first()

    async def create(self, data: Dict[str, Any]) -> Founder:
        """Create the profile, or replace the existing one in place"""
        payload = normalize_founder_payload(data)
        missing = [f for f in REQUIRED_FIELDS if not payload.get(f)]
        if missing:
            logger.warning(f"Founder create rejected, missing: {', '.join(missing)}")
            raise BadRequestException("name, title, bio and image are required")
        payload.setdefault("badges", [])

        existing = await self._get_by_singleton_key()
        if existing is not None:
            return await self._apply(existing, payload)

        founder = Founder(singleton_key=FOUNDER_SINGLETON_KEY, **payload)
        self.db.add(founder)
        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent create won; overwrite its row instead
            await self.db.rollback()
            logger.info("Founder create raced another create, updating instead")
            existing = await self._get_by_singleton_key()
            if existing is None:
                raise
            return await self._apply(existing, payload)

        await self.db.refresh(founder)
        logger.info(f"Founder created: {founder.id}")
        return founder

    async def update_by_id(self, founder_id: str, data: Dict[str, Any]) -> Founder:
        founder = await self._get_by_id(founder_id)
        if founder is None:
            raise NotFoundException("Founder not found.")
        return await self._apply(founder, self._validated_update(data))

    async def update_singleton(self, data: Dict[str, Any]) -> Founder:
        founder = await self.read()
        if founder is None:
            raise NotFoundException("No founder to update.")
        return await self._apply(founder, self._validated_update(data))

    async def delete_by_id(self, founder_id: str) -> None:
        founder = await self._get_by_id(founder_id)
        if founder is None:
            raise NotFoundException("Founder not found.")
        await self._delete(founder)

    async def delete_singleton(self) -> None:
        founder = await self.read()
        if founder is None:
            raise NotFoundException("No founder to delete.")
        await self._delete(founder)

    async def _get_by_id(self, founder_id: str) -> Optional[Founder]:
        uid = parse_founder_id(founder_id)
        result = await self.db.execute(select(Founder).where(Founder.id == uid))
        return result.scalar_one_or_none()

    async def _get_by_singleton_key(self) -> Optional[Founder]:
        result = await self.db.execute(
            select(Founder).where(Founder.singleton_key == FOUNDER_SINGLETON_KEY)
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _validated_update(data: Dict[str, Any]) -> Dict[str, Any]:
        payload = normalize_founder_payload(data)
        for field in REQUIRED_FIELDS:
            if field in payload and not payload[field]:
                raise BadRequestException(f"Founder {field} cannot be empty.")
        return payload

    async def _apply(self, founder: Founder, payload: Dict[str, Any]) -> Founder:
        for key, value in payload.items():
            setattr(founder, key, value)
        await self.db.commit()
        await self.db.refresh(founder)
        logger.info(f"Founder updated: {founder.id} ({', '.join(payload) or 'no changes'})")
        return founder

    async def _delete(self, founder: Founder) -> None:
        founder_id = founder.id
        await self.db.delete(founder)
        await self.db.commit()
        logger.info(f"Founder deleted: {founder_id}")
