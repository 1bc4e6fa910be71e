"""User entry as exposed by the user directory."""

from typing import Optional

from deck.domain.model.common import DomainModel
from deck.domain.value import DisplayName, UserId


class User(DomainModel):
    """User directory entry.

    Only the fields needed to decorate comments and feed entries.
    """

    id: UserId
    display_name: DisplayName
    avatar_url: Optional[str] = None
