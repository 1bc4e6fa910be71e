"""User directory repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from deck.domain.model.user import User
from deck.domain.value import UserId


class UserRepository(ABC):
    """Read access to the user directory, used for display decoration."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query)."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
