"""
Data Transfer Objects for the blogging application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.

Command fields are Optional on purpose: presence checks belong to the
use cases, which raise ValidationError instead of letting the transport
layer reject the request.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.domain.blogging.entities import AuthorSummary, Blog, Comment, User


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering a new user.

    Attributes:
        username: Desired unique username.
        email: Unique email address.
        password: Plaintext password, hashed before storage.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for reading a user by id."""

    user_id: str


@dataclass(frozen=True)
class GetUserBlogsQuery:
    """Input DTO for listing the blogs of a user."""

    user_id: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a user. Never carries the password."""

    id: str
    username: str
    email: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, user: User) -> "UserResult":
        return cls(
            id=user.id or "",
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class AuthorResult:
    """Output DTO for a resolved author reference."""

    id: str
    username: str

    @classmethod
    def from_summary(cls, summary: Optional[AuthorSummary]) -> Optional["AuthorResult"]:
        if summary is None:
            return None
        return cls(id=summary.id, username=summary.username)


@dataclass(frozen=True)
class CreateBlogCommand:
    """Input DTO for creating a blog post.

    Attributes:
        title: Blog title.
        content: Blog body.
        author_id: Identifier of the authoring user, as supplied by the caller.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    author_id: Optional[str] = None


@dataclass(frozen=True)
class GetBlogQuery:
    """Input DTO for reading a blog by id."""

    blog_id: str


@dataclass(frozen=True)
class BlogResult:
    """Output DTO for a blog post.

    Attributes:
        author_id: Raw author reference, always present.
        author: Resolved author summary. None on the create path and for
            dangling references.
    """

    id: str
    title: str
    content: str
    author_id: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    author: Optional[AuthorResult] = None

    @classmethod
    def from_entity(cls, blog: Blog) -> "BlogResult":
        return cls(
            id=blog.id or "",
            title=blog.title,
            content=blog.content,
            author_id=blog.author_id,
            created_at=blog.created_at,
            updated_at=blog.updated_at,
            author=AuthorResult.from_summary(blog.author),
        )


@dataclass(frozen=True)
class CreateCommentCommand:
    """Input DTO for commenting on a blog post."""

    content: Optional[str] = None
    author_id: Optional[str] = None
    blog_id: Optional[str] = None


@dataclass(frozen=True)
class GetBlogCommentsQuery:
    """Input DTO for listing the comments of a blog."""

    blog_id: str


@dataclass(frozen=True)
class CommentResult:
    """Output DTO for a comment."""

    id: str
    content: str
    author_id: str
    blog_id: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    author: Optional[AuthorResult] = None

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResult":
        return cls(
            id=comment.id or "",
            content=comment.content,
            author_id=comment.author_id,
            blog_id=comment.blog_id,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=AuthorResult.from_summary(comment.author),
        )
