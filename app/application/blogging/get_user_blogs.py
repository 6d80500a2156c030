"""
Use case: List the blogs written by a user.

Input: GetUserBlogsQuery (user_id)
Output: list[BlogResult] (author references left unresolved)
Side effects: None (read-only query).
Failure cases: NotFoundError.
"""

import logging

from app.application.blogging.dtos import BlogResult, GetUserBlogsQuery
from app.domain.blogging.errors import NotFoundError
from app.domain.blogging.ports import BlogRepository, UserRepository

logger = logging.getLogger(__name__)


class GetUserBlogsUseCase:
    """Verifies the user exists, then lists their blogs."""

    def __init__(self, user_repo: UserRepository, blog_repo: BlogRepository) -> None:
        self._user_repo = user_repo
        self._blog_repo = blog_repo

    def execute(self, query: GetUserBlogsQuery) -> list[BlogResult]:
        """Run the get user blogs use case.

        Returns:
            The user's blogs, possibly empty.

        Raises:
            NotFoundError: If no user exists for the id.
        """
        logger.info("Retrieving blogs for user id=%s", query.user_id)

        user = self._user_repo.get_by_id(query.user_id)
        if user is None:
            raise NotFoundError("User", query.user_id)

        blogs = self._blog_repo.get_by_author(query.user_id)
        return [BlogResult.from_entity(blog) for blog in blogs]
