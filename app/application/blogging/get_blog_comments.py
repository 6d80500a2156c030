"""
Use case: List the comments of a blog post.

Input: GetBlogCommentsQuery (blog_id)
Output: list[CommentResult] (authors resolved)
Side effects: None (read-only query).
Failure cases: None. An unknown blog yields an empty list.
"""

import logging

from app.application.blogging.dtos import CommentResult, GetBlogCommentsQuery
from app.domain.blogging.ports import CommentRepository

logger = logging.getLogger(__name__)


class GetBlogCommentsUseCase:
    """Lists the comments attached to a blog."""

    def __init__(self, comment_repo: CommentRepository) -> None:
        self._comment_repo = comment_repo

    def execute(self, query: GetBlogCommentsQuery) -> list[CommentResult]:
        """Run the get blog comments use case."""
        logger.info("Retrieving comments for blog id=%s", query.blog_id)

        comments = self._comment_repo.get_by_blog(query.blog_id)
        return [CommentResult.from_entity(comment) for comment in comments]
