"""
Pydantic schemas for blogging API request/response validation.

These schemas define the API contract. Request fields are optional at
this level: presence checks are business rules enforced by the use
cases, which answer 400 rather than the framework's 422.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, Field

ID_DESCRIPTION = "24-character hexadecimal identifier"


# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------


class RegisterUserRequest(BaseModel):
    """Request schema for user registration.

    Attributes:
        username: Unique username.
        email: Unique email address.
        password: Plaintext password. Stored only as a bcrypt hash.
    """

    username: str | None = Field(default=None, examples=["johndoe"])
    email: str | None = Field(default=None, examples=["johndoe@example.com"])
    password: str | None = Field(default=None, examples=["s3cret!"])


class UserResponse(BaseModel):
    """A user as returned by the API. Never includes the password."""

    id: str = Field(..., description=ID_DESCRIPTION)
    username: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ------------------------------------------------------------------
# Blogs
# ------------------------------------------------------------------


class CreateBlogRequest(BaseModel):
    """Request schema for blog creation.

    Attributes:
        title: Blog title.
        content: Blog body.
        author: Id of the authoring user. Taken as supplied.
    """

    title: str | None = Field(default=None, examples=["My First Blog"])
    content: str | None = Field(default=None, examples=["This is the content of my blog post."])
    author: str | None = Field(default=None, description=ID_DESCRIPTION)


class AuthorSummaryItem(BaseModel):
    """Resolved author reference: id and username only."""

    id: str
    username: str


class BlogItem(BaseModel):
    """A blog with its raw author id, as stored."""

    id: str
    title: str
    content: str
    author: str = Field(..., description=ID_DESCRIPTION)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BlogDetailItem(BaseModel):
    """A blog with its author resolved. ``author`` is null when dangling."""

    id: str
    title: str
    content: str
    author: AuthorSummaryItem | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ------------------------------------------------------------------
# Comments
# ------------------------------------------------------------------


class CreateCommentRequest(BaseModel):
    """Request schema for comment creation."""

    content: str | None = Field(default=None, examples=["Great post!"])
    author: str | None = Field(default=None, description=ID_DESCRIPTION)
    blog: str | None = Field(default=None, description=ID_DESCRIPTION)


class CommentItem(BaseModel):
    """A comment with raw author and blog ids, as stored."""

    id: str
    content: str
    author: str
    blog: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CommentDetailItem(BaseModel):
    """A comment with its author resolved."""

    id: str
    content: str
    author: AuthorSummaryItem | None
    blog: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ------------------------------------------------------------------
# Shared
# ------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


class ErrorDetail(BaseModel):
    """Body of an error response."""

    message: str
    status: int


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: ErrorDetail
