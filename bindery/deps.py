from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bindery.database import get_session
from bindery.store import RecordStore


async def get_store(session: AsyncSession = Depends(get_session)) -> RecordStore:
    return RecordStore(session)
