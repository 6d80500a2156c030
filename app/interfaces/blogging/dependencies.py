"""
Dependency injection for the blogging bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the blogging context.

The store handle is opened by the application lifespan and read from
``app.state``; nothing here holds a connection of its own.
"""

from functools import lru_cache

from fastapi import Depends, Request

from app.application.blogging.create_blog import CreateBlogUseCase
from app.application.blogging.create_comment import CreateCommentUseCase
from app.application.blogging.get_all_blogs import GetAllBlogsUseCase
from app.application.blogging.get_blog import GetBlogUseCase
from app.application.blogging.get_blog_comments import GetBlogCommentsUseCase
from app.application.blogging.get_user import GetUserUseCase
from app.application.blogging.get_user_blogs import GetUserBlogsUseCase
from app.application.blogging.register_user import RegisterUserUseCase
from app.core.config import settings
from app.domain.blogging.errors import StoreError
from app.domain.blogging.ports import (
    BlogRepository,
    CommentRepository,
    PasswordHasher,
    UserRepository,
)
from app.infrastructure.blogging.blog_repository import BlogRepositoryAdapter
from app.infrastructure.blogging.comment_repository import CommentRepositoryAdapter
from app.infrastructure.blogging.mongo_store import MongoStore
from app.infrastructure.blogging.password_hasher import BcryptPasswordHasher
from app.infrastructure.blogging.user_repository import UserRepositoryAdapter


def get_store(request: Request) -> MongoStore:
    """Return the store handle opened at startup.

    Raises:
        StoreError: If the application was started without a store.
    """
    store = getattr(request.app.state, "store", None)
    if store is None or not store.is_open:
        raise StoreError("store is not connected")
    return store


def get_user_repository(store: MongoStore = Depends(get_store)) -> UserRepository:
    return UserRepositoryAdapter(store)


def get_blog_repository(store: MongoStore = Depends(get_store)) -> BlogRepository:
    return BlogRepositoryAdapter(store)


def get_comment_repository(store: MongoStore = Depends(get_store)) -> CommentRepository:
    return CommentRepositoryAdapter(store)


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    """Build the process-wide bcrypt hasher from settings."""
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_register_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> RegisterUserUseCase:
    """Build RegisterUserUseCase with its infrastructure dependencies."""
    return RegisterUserUseCase(user_repo=user_repo, password_hasher=password_hasher)


def get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=user_repo)


def get_user_blogs_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    blog_repo: BlogRepository = Depends(get_blog_repository),
) -> GetUserBlogsUseCase:
    """Build GetUserBlogsUseCase with its infrastructure dependencies."""
    return GetUserBlogsUseCase(user_repo=user_repo, blog_repo=blog_repo)


def get_create_blog_use_case(
    blog_repo: BlogRepository = Depends(get_blog_repository),
) -> CreateBlogUseCase:
    """Build CreateBlogUseCase with its infrastructure dependencies."""
    return CreateBlogUseCase(blog_repo=blog_repo)


def get_blog_use_case(
    blog_repo: BlogRepository = Depends(get_blog_repository),
) -> GetBlogUseCase:
    """Build GetBlogUseCase with its infrastructure dependencies."""
    return GetBlogUseCase(blog_repo=blog_repo)


def get_all_blogs_use_case(
    blog_repo: BlogRepository = Depends(get_blog_repository),
) -> GetAllBlogsUseCase:
    """Build GetAllBlogsUseCase with its infrastructure dependencies."""
    return GetAllBlogsUseCase(blog_repo=blog_repo)


def get_create_comment_use_case(
    comment_repo: CommentRepository = Depends(get_comment_repository),
) -> CreateCommentUseCase:
    """Build CreateCommentUseCase with its infrastructure dependencies."""
    return CreateCommentUseCase(comment_repo=comment_repo)


def get_blog_comments_use_case(
    comment_repo: CommentRepository = Depends(get_comment_repository),
) -> GetBlogCommentsUseCase:
    """Build GetBlogCommentsUseCase with its infrastructure dependencies."""
    return GetBlogCommentsUseCase(comment_repo=comment_repo)
