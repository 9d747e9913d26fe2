from booking_engine.domain.entities.user import UserProfile


class UserDirectory:
    """Identity lookup: resolves a user id to display name and email."""

    async def get_user(self, user_id: int) -> UserProfile | None:
        raise NotImplementedError
