"""
Shared fixtures for the blogging test suite.

The API tests run against in-memory repositories that implement the
domain ports, wired in through FastAPI dependency overrides. No MongoDB
server is needed.
"""

import os

# Must be set before app.core.config is imported.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.domain.blogging.entities import AuthorSummary, Blog, Comment, User
from app.domain.blogging.errors import ConflictError
from app.domain.blogging.ports import BlogRepository, CommentRepository, UserRepository
from app.infrastructure.blogging.documents import require_object_id
from app.interfaces.blogging.dependencies import (
    get_blog_repository,
    get_comment_repository,
    get_user_repository,
)
from app.main import app


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MemoryStore:
    """Plain dict-backed stand-in for the three collections.

    The repositories reject malformed references on write the same way the
    Mongo adapters do.
    """

    users: dict[str, User] = field(default_factory=dict)
    blogs: dict[str, Blog] = field(default_factory=dict)
    comments: dict[str, Comment] = field(default_factory=dict)

    def author_summary(self, author_id: str) -> Optional[AuthorSummary]:
        user = self.users.get(author_id)
        if user is None:
            return None
        return AuthorSummary(id=user.id, username=user.username)


class MemoryUserRepository(UserRepository):
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    def create(self, user: User) -> User:
        for existing in self._store.users.values():
            if existing.username == user.username:
                raise ConflictError("User", "username")
            if existing.email == user.email:
                raise ConflictError("User", "email")
        now = _now()
        stored = replace(user, id=str(ObjectId()), created_at=now, updated_at=now)
        self._store.users[stored.id] = stored
        return stored

    def get_by_id(self, user_id: str) -> Optional[User]:
        user = self._store.users.get(user_id)
        if user is None:
            return None
        return replace(user, password_hash=None)


class MemoryBlogRepository(BlogRepository):
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    def create(self, blog: Blog) -> Blog:
        require_object_id(blog.author_id, "author")
        now = _now()
        stored = replace(blog, id=str(ObjectId()), created_at=now, updated_at=now)
        self._store.blogs[stored.id] = stored
        return stored

    def get_by_id(self, blog_id: str) -> Optional[Blog]:
        blog = self._store.blogs.get(blog_id)
        if blog is None:
            return None
        return replace(blog, author=self._store.author_summary(blog.author_id))

    def get_all(self) -> list[Blog]:
        return [
            replace(blog, author=self._store.author_summary(blog.author_id))
            for blog in self._store.blogs.values()
        ]

    def get_by_author(self, author_id: str) -> list[Blog]:
        return [b for b in self._store.blogs.values() if b.author_id == author_id]


class MemoryCommentRepository(CommentRepository):
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    def create(self, comment: Comment) -> Comment:
        require_object_id(comment.author_id, "author")
        require_object_id(comment.blog_id, "blog")
        now = _now()
        stored = replace(comment, id=str(ObjectId()), created_at=now, updated_at=now)
        self._store.comments[stored.id] = stored
        return stored

    def get_by_blog(self, blog_id: str) -> list[Comment]:
        return [
            replace(c, author=self._store.author_summary(c.author_id))
            for c in self._store.comments.values()
            if c.blog_id == blog_id
        ]


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def client(memory_store: MemoryStore):
    """TestClient whose repositories live in memory."""
    app.dependency_overrides[get_user_repository] = lambda: MemoryUserRepository(memory_store)
    app.dependency_overrides[get_blog_repository] = lambda: MemoryBlogRepository(memory_store)
    app.dependency_overrides[get_comment_repository] = lambda: MemoryCommentRepository(
        memory_store
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice(client: TestClient) -> dict:
    """A registered user, as returned by the API."""
    response = client.post(
        "/api/users",
        json={"username": "alice", "email": "a@x.com", "password": "secret"},
    )
    assert response.status_code == 201
    return response.json()
