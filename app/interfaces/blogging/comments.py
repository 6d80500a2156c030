"""
FastAPI router for comments.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, status

from app.application.blogging.create_comment import CreateCommentUseCase
from app.application.blogging.dtos import CreateCommentCommand, GetBlogCommentsQuery
from app.application.blogging.get_blog_comments import GetBlogCommentsUseCase
from app.interfaces.blogging.blogs import to_author_item
from app.interfaces.blogging.dependencies import (
    get_blog_comments_use_case,
    get_create_comment_use_case,
)
from app.interfaces.blogging.schemas import (
    CommentDetailItem,
    CommentItem,
    CreateCommentRequest,
    ErrorResponse,
)

router = APIRouter(prefix="/comments", tags=["comments"])


@router.post(
    "/",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a comment",
    description="Comment on a blog. Author and blog are taken from the request body.",
)
def create_comment(
    request: CreateCommentRequest,
    use_case: CreateCommentUseCase = Depends(get_create_comment_use_case),
) -> CommentItem:
    """Create a comment."""
    command = CreateCommentCommand(
        content=request.content,
        author_id=request.author,
        blog_id=request.blog,
    )
    result = use_case.execute(command)
    return CommentItem(
        id=result.id,
        content=result.content,
        author=result.author_id,
        blog=result.blog_id,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.get(
    "/blog/{blog_id}",
    response_model=list[CommentDetailItem],
    summary="List a blog's comments",
    description="Retrieve every comment of a blog. An unknown blog yields an empty list.",
)
def get_blog_comments(
    blog_id: str,
    use_case: GetBlogCommentsUseCase = Depends(get_blog_comments_use_case),
) -> list[CommentDetailItem]:
    """List the comments of a blog."""
    results = use_case.execute(GetBlogCommentsQuery(blog_id=blog_id))
    return [
        CommentDetailItem(
            id=r.id,
            content=r.content,
            author=to_author_item(r.author),
            blog=r.blog_id,
            created_at=r.created_at,
            updated_at=r.updated_at,
        )
        for r in results
    ]
