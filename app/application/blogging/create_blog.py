"""
Use case: Create a blog post.

Input: CreateBlogCommand (title, content, author_id)
Output: BlogResult (raw author reference)
Side effects: One write to the blog store.
Failure cases: ValidationError, StoreError.

The author id is taken from the caller as-is. Nothing binds it to an
authenticated principal.
"""

import logging

from app.application.blogging.dtos import BlogResult, CreateBlogCommand
from app.application.blogging.validation import require_fields
from app.domain.blogging.entities import Blog
from app.domain.blogging.ports import BlogRepository

logger = logging.getLogger(__name__)


class CreateBlogUseCase:
    """Orchestrates blog creation."""

    def __init__(self, blog_repo: BlogRepository) -> None:
        self._blog_repo = blog_repo

    def execute(self, command: CreateBlogCommand) -> BlogResult:
        """Run the create blog use case.

        Args:
            command: Blog data and the claimed author id.

        Returns:
            The created blog.

        Raises:
            ValidationError: If title or content is missing.
        """
        require_fields(
            "Title and content are required",
            title=command.title,
            content=command.content,
        )

        logger.info("Creating blog for author=%s", command.author_id)

        blog = self._blog_repo.create(
            Blog(
                title=command.title,
                content=command.content,
                author_id=command.author_id,
            )
        )
        return BlogResult.from_entity(blog)
