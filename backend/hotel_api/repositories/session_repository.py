from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.metrics import record_db_operation
from hotel_api.models import Session


async def find_session_by_token(db: AsyncSession, token: str) -> Optional[Session]:
    record_db_operation("find_session")
    result = await db.execute(select(Session).where(Session.token == token))
    return result.scalar_one_or_none()
