"""
FastAPI router for blogs.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.

Writes answer with the stored shape (raw author id); reads answer
with the author resolved to id and username.
"""

from fastapi import APIRouter, Depends, status

from app.application.blogging.create_blog import CreateBlogUseCase
from app.application.blogging.dtos import (
    AuthorResult,
    BlogResult,
    CreateBlogCommand,
    GetBlogQuery,
)
from app.application.blogging.get_all_blogs import GetAllBlogsUseCase
from app.application.blogging.get_blog import GetBlogUseCase
from app.interfaces.blogging.dependencies import (
    get_all_blogs_use_case,
    get_blog_use_case,
    get_create_blog_use_case,
)
from app.interfaces.blogging.schemas import (
    AuthorSummaryItem,
    BlogDetailItem,
    BlogItem,
    CreateBlogRequest,
    ErrorResponse,
)

router = APIRouter(prefix="/blogs", tags=["blogs"])


def to_author_item(author: AuthorResult | None) -> AuthorSummaryItem | None:
    if author is None:
        return None
    return AuthorSummaryItem(id=author.id, username=author.username)


def to_blog_item(result: BlogResult) -> BlogItem:
    return BlogItem(
        id=result.id,
        title=result.title,
        content=result.content,
        author=result.author_id,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


def to_blog_detail_item(result: BlogResult) -> BlogDetailItem:
    return BlogDetailItem(
        id=result.id,
        title=result.title,
        content=result.content,
        author=to_author_item(result.author),
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.post(
    "/",
    response_model=BlogItem,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=BlogItem,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a blog",
    description="Create a blog post. The author id is taken from the request body.",
)
def create_blog(
    request: CreateBlogRequest,
    use_case: CreateBlogUseCase = Depends(get_create_blog_use_case),
) -> BlogItem:
    """Create a blog post."""
    command = CreateBlogCommand(
        title=request.title,
        content=request.content,
        author_id=request.author,
    )
    return to_blog_item(use_case.execute(command))


@router.get("/", response_model=list[BlogDetailItem], include_in_schema=False)
@router.get(
    "",
    response_model=list[BlogDetailItem],
    summary="List blogs",
    description="Retrieve every blog with its author's id and username.",
)
def get_all_blogs(
    use_case: GetAllBlogsUseCase = Depends(get_all_blogs_use_case),
) -> list[BlogDetailItem]:
    """List all blogs."""
    return [to_blog_detail_item(r) for r in use_case.execute()]


@router.get(
    "/{blog_id}",
    response_model=BlogDetailItem,
    responses={404: {"model": ErrorResponse}},
    summary="Get a blog",
    description="Retrieve a blog by id with its author's id and username.",
)
def get_blog(
    blog_id: str,
    use_case: GetBlogUseCase = Depends(get_blog_use_case),
) -> BlogDetailItem:
    """Get a single blog."""
    return to_blog_detail_item(use_case.execute(GetBlogQuery(blog_id=blog_id)))
