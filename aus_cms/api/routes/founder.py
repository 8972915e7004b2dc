"""Founder profile endpoints"""
from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from aus_cms.database import get_db
from aus_cms.schemas.founder import FounderPayload, FounderResponse
from aus_cms.services.founder_service import FounderService

router = APIRouter(prefix="/api/founder", tags=["founder"])


@router.get("", response_model=Optional[FounderResponse])
async def get_founder(db: AsyncSession = Depends(get_db)):
    """Current founder profile, or null"""
    return await FounderService(db).read()


@router.post("", response_model=FounderResponse, status_code=status.HTTP_201_CREATED)
async def create_founder(payload: FounderPayload, db: AsyncSession = Depends(get_db)):
    return await FounderService(db).create(payload.model_dump(exclude_unset=True))


@router.put("/{founder_id}", response_model=FounderResponse)
async def update_founder_by_id(
    founder_id: str,
    payload: FounderPayload,
    db: AsyncSession = Depends(get_db)
):
    return await FounderService(db).update_by_id(founder_id, payload.model_dump(exclude_unset=True))


@router.put("", response_model=FounderResponse)
async def update_singleton_founder(payload: FounderPayload, db: AsyncSession = Depends(get_db)):
    return await FounderService(db).update_singleton(payload.model_dump(exclude_unset=True))


@router.delete("/{founder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_founder_by_id(founder_id: str, db: AsyncSession = Depends(get_db)):
    await FounderService(db).delete_by_id(founder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_singleton_founder(db: AsyncSession = Depends(get_db)):
    await FounderService(db).delete_singleton()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
