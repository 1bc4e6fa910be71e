"""In-memory user directory repository for testing."""

from typing import Optional, Sequence

from deck.domain.model.user import User
from deck.domain.repository.user import UserRepository
from deck.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._users[i] for i in user_ids if i in self._users]

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user
