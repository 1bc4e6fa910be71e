"""User directory domain service."""

from typing import Sequence

import logfire

from deck.config import DiscussionSettings
from deck.domain.error import UnauthorizedError
from deck.domain.model.thread import AuthorDisplay
from deck.domain.model.user import User
from deck.domain.repository import UserRepository
from deck.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups and display decoration."""

    def __init__(
        self,
        user_repository: UserRepository,
        discussion_settings: DiscussionSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            discussion_settings: Display settings (anonymous fallback name)
        """
        self.user_repository = user_repository
        self.discussion_settings = discussion_settings

    async def require_user(self, user_id: UserId) -> User:
        """Resolve the acting principal.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            UnauthorizedError: If the user is not in the directory
        """
        with logfire.span("user_service.require_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Unresolvable principal", user_id=str(user_id))
                raise UnauthorizedError(f"Unknown user: {user_id}")
            return user

    def fallback_display(self, user_id: UserId) -> AuthorDisplay:
        """Display decoration for an author missing from the directory."""
        name = self.discussion_settings.anonymous_name
        return AuthorDisplay(user_id=user_id, name=name, initial=name[:1].upper())

    def display_for(self, user: User) -> AuthorDisplay:
        return AuthorDisplay(
            user_id=user.id,
            name=user.display_name.root,
            initial=user.display_name.initial,
        )

    async def get_author_displays(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, AuthorDisplay]:
        """Batch-resolve display decoration for several authors.

        Every requested id gets an entry; unknown users get the anonymous
        fallback.

        Args:
            user_ids: Author IDs (duplicates allowed)

        Returns:
            Mapping of user ID to display decoration
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        users = await self.user_repository.find_by_ids(unique_ids)
        found = {user.id: self.display_for(user) for user in users}
        return {
            user_id: found.get(user_id) or self.fallback_display(user_id)
            for user_id in unique_ids
        }
