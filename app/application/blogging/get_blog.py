"""
Use case: Retrieve a blog post by id.

Input: GetBlogQuery (blog_id)
Output: BlogResult (author resolved to id and username)
Side effects: None (read-only query).
Failure cases: NotFoundError.
"""

import logging

from app.application.blogging.dtos import BlogResult, GetBlogQuery
from app.domain.blogging.errors import NotFoundError
from app.domain.blogging.ports import BlogRepository

logger = logging.getLogger(__name__)


class GetBlogUseCase:
    """Looks up a single blog post."""

    def __init__(self, blog_repo: BlogRepository) -> None:
        self._blog_repo = blog_repo

    def execute(self, query: GetBlogQuery) -> BlogResult:
        """Run the get blog use case.

        Raises:
            NotFoundError: If no blog exists for the id.
        """
        logger.info("Retrieving blog id=%s", query.blog_id)

        blog = self._blog_repo.get_by_id(query.blog_id)
        if blog is None:
            raise NotFoundError("Blog", query.blog_id)
        return BlogResult.from_entity(blog)
