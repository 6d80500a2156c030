"""
Use case: List every blog post.

Input: None
Output: list[BlogResult] (authors resolved)
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from app.application.blogging.dtos import BlogResult
from app.domain.blogging.ports import BlogRepository

logger = logging.getLogger(__name__)


class GetAllBlogsUseCase:
    """Lists all blogs in store order. No pagination."""

    def __init__(self, blog_repo: BlogRepository) -> None:
        self._blog_repo = blog_repo

    def execute(self) -> list[BlogResult]:
        """Run the list blogs use case."""
        blogs = self._blog_repo.get_all()
        logger.info("Retrieved %d blogs", len(blogs))
        return [BlogResult.from_entity(blog) for blog in blogs]
