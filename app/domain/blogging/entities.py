"""
Domain entities for the blogging bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.

Identifiers are opaque strings. An entity that has not been persisted
yet carries ``id=None`` and no timestamps; the repository adapter fills
them in on insert.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AuthorSummary:
    """Projection of a user embedded in blog and comment read views."""

    id: str
    username: str


@dataclass(frozen=True)
class User:
    """A registered blog user.

    ``password_hash`` is only populated on the write path. Read paths
    project it out so it never leaves the store.
    """

    username: str
    email: str
    password_hash: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Blog:
    """A blog post written by a user.

    ``author`` is the resolved author summary. It is set on read paths
    only and stays None for freshly created blogs or dangling references.
    """

    title: str
    content: str
    author_id: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    author: Optional[AuthorSummary] = None


@dataclass(frozen=True)
class Comment:
    """A comment left by a user on a blog post."""

    content: str
    author_id: str
    blog_id: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    author: Optional[AuthorSummary] = None
