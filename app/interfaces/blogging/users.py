"""
FastAPI router for users.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, status

from app.application.blogging.dtos import (
    GetUserBlogsQuery,
    GetUserQuery,
    RegisterUserCommand,
    UserResult,
)
from app.application.blogging.get_user import GetUserUseCase
from app.application.blogging.get_user_blogs import GetUserBlogsUseCase
from app.application.blogging.register_user import RegisterUserUseCase
from app.interfaces.blogging.blogs import to_blog_item
from app.interfaces.blogging.dependencies import (
    get_register_user_use_case,
    get_user_blogs_use_case,
    get_user_use_case,
)
from app.interfaces.blogging.schemas import (
    BlogItem,
    ErrorResponse,
    RegisterUserRequest,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_user_response(result: UserResult) -> UserResponse:
    return UserResponse(
        id=result.id,
        username=result.username,
        email=result.email,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Register a new user",
    description="Create a user. The password is stored as a bcrypt hash and never returned.",
)
def register_user(
    request: RegisterUserRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> UserResponse:
    """Register a user from username, email and password."""
    command = RegisterUserCommand(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    return _to_user_response(use_case.execute(command))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a user",
    description="Retrieve a user by id, without the password.",
)
def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> UserResponse:
    """Get a single user."""
    return _to_user_response(use_case.execute(GetUserQuery(user_id=user_id)))


@router.get(
    "/{user_id}/blogs",
    response_model=list[BlogItem],
    responses={404: {"model": ErrorResponse}},
    summary="List a user's blogs",
    description="Retrieve every blog written by the user.",
)
def get_user_blogs(
    user_id: str,
    use_case: GetUserBlogsUseCase = Depends(get_user_blogs_use_case),
) -> list[BlogItem]:
    """List the blogs of a user."""
    results = use_case.execute(GetUserBlogsQuery(user_id=user_id))
    return [to_blog_item(r) for r in results]
