"""In-memory identity lookup."""

from booking_engine.application.interfaces.user_directory import UserDirectory
from booking_engine.domain.entities.user import UserProfile


class InMemoryUserDirectory(UserDirectory):
    def __init__(self) -> None:
        self._users: dict[int, UserProfile] = {}

    def add(self, user: UserProfile) -> UserProfile:
        self._users[user.id] = user
        return user

    async def get_user(self, user_id: int) -> UserProfile | None:
        return self._users.get(user_id)
