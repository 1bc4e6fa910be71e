"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from deck.config import AuthSettings
from deck.domain.model import Comment, Document, User
from deck.domain.repository import CommentRepository, DocumentRepository, UserRepository
from deck.domain.value import CommentId, CommentKind, DisplayName, DocumentId, UserId
from deck.util.jwt import create_token
from tests.di import build_test_container

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


async def make_user(repo: UserRepository, name: str = "Ada") -> User:
    """Save a user to the directory and return it."""
    return await repo.save(User(id=UserId(uuid4()), display_name=DisplayName(name)))


async def make_document(
    repo: DocumentRepository,
    title: str = "Linear Algebra, Week 3",
    page_count: int = 12,
    is_public: bool = True,
) -> Document:
    """Save a document to the catalog and return it."""
    return await repo.save(
        Document(
            id=DocumentId(uuid4()),
            title=title,
            page_count=page_count,
            is_public=is_public,
        )
    )


async def make_comment(
    repo: CommentRepository,
    document_id: DocumentId,
    author_id: UserId,
    content: str = "Nice slides",
    minutes_ago: int = 0,
    page_index: int | None = None,
    star_rating: int | None = None,
    parent_id: CommentId | None = None,
    kind: CommentKind = CommentKind.COMMENT,
) -> Comment:
    """Save a comment with a controlled timestamp relative to BASE_TIME."""
    return await repo.save(
        Comment(
            id=CommentId(uuid4()),
            document_id=document_id,
            author_id=author_id,
            content=content,
            kind=kind,
            page_index=page_index,
            star_rating=star_rating,
            parent_id=parent_id,
            created_at=BASE_TIME - timedelta(minutes=minutes_ago),
        )
    )


def auth_headers(user: User) -> dict[str, str]:
    """Request headers carrying a valid auth cookie for the user."""
    token = create_token(str(user.id), user.display_name.root, AuthSettings())
    return {"Cookie": f"auth_token={token}"}


@pytest_asyncio.fixture
async def container():
    """Test container with in-memory persistence, closed after the test."""
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client talking to an app wired to the test container."""
    # Imported here so logfire is configured before the module-level app is built
    from deck.interface.api.app import create_app

    app_instance = create_app(container)
    async with AsyncClient(
        transport=ASGITransport(app=app_instance), base_url="http://test"
    ) as http_client:
        yield http_client
