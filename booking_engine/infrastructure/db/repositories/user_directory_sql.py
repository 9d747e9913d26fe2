from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booking_engine.application.interfaces.user_directory import UserDirectory
from booking_engine.domain.entities.user import UserProfile
from booking_engine.infrastructure.db.tables import users


class UserDirectorySQL(UserDirectory):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_user(self, user_id: int) -> UserProfile | None:
        stmt = select(users).where(users.c.id == user_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return UserProfile(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )
