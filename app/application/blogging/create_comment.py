"""
Use case: Comment on a blog post.

Input: CreateCommentCommand (content, author_id, blog_id)
Output: CommentResult (raw author and blog references)
Side effects: One write to the comment store.
Failure cases: ValidationError, StoreError.
"""

import logging

from app.application.blogging.dtos import CommentResult, CreateCommentCommand
from app.application.blogging.validation import require_fields
from app.domain.blogging.entities import Comment
from app.domain.blogging.ports import CommentRepository

logger = logging.getLogger(__name__)


class CreateCommentUseCase:
    """Orchestrates comment creation.

    Neither the author nor the blog is checked for existence.
    """

    def __init__(self, comment_repo: CommentRepository) -> None:
        self._comment_repo = comment_repo

    def execute(self, command: CreateCommentCommand) -> CommentResult:
        """Run the create comment use case.

        Raises:
            ValidationError: If content, author or blog is missing.
        """
        require_fields(
            "Content, author, and blog are required",
            content=command.content,
            author=command.author_id,
            blog=command.blog_id,
        )

        logger.info(
            "Creating comment on blog=%s by author=%s",
            command.blog_id,
            command.author_id,
        )

        comment = self._comment_repo.create(
            Comment(
                content=command.content,
                author_id=command.author_id,
                blog_id=command.blog_id,
            )
        )
        return CommentResult.from_entity(comment)
