"""
Port interfaces (ABCs) for the blogging bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.blogging.entities import Blog, Comment, User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def create(self, user: User) -> User:
        """Persist a new user and return it with identity and timestamps.

        Raises:
            ConflictError: If the username or email is already taken.
            StoreError: On any other store failure.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return a user without its password hash, or None if not found."""
        raise NotImplementedError


class BlogRepository(ABC):
    """Port for persisting and retrieving blog posts."""

    @abstractmethod
    def create(self, blog: Blog) -> Blog:
        """Persist a new blog and return it with raw author reference."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, blog_id: str) -> Optional[Blog]:
        """Return a blog with its author resolved, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_all(self) -> list[Blog]:
        """Return every blog in store order, authors resolved."""
        raise NotImplementedError

    @abstractmethod
    def get_by_author(self, author_id: str) -> list[Blog]:
        """Return the blogs written by a user, authors left unresolved."""
        raise NotImplementedError


class CommentRepository(ABC):
    """Port for persisting and retrieving comments."""

    @abstractmethod
    def create(self, comment: Comment) -> Comment:
        """Persist a new comment and return it with raw references."""
        raise NotImplementedError

    @abstractmethod
    def get_by_blog(self, blog_id: str) -> list[Comment]:
        """Return the comments attached to a blog, authors resolved.

        Args:
            blog_id: Identifier of the blog.

        Returns:
            List of comments in store order. Empty if the blog has none
            or does not exist.
        """
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way salted password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of the plaintext password."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Return True if the plaintext password matches the hash."""
        raise NotImplementedError
