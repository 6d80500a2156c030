"""
Use case: Retrieve a user by id.

Input: GetUserQuery (user_id)
Output: UserResult (without password)
Side effects: None (read-only query).
Failure cases: NotFoundError.
"""

import logging

from app.application.blogging.dtos import GetUserQuery, UserResult
from app.domain.blogging.errors import NotFoundError
from app.domain.blogging.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Looks up a single user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: GetUserQuery) -> UserResult:
        """Run the get user use case.

        Raises:
            NotFoundError: If no user exists for the id.
        """
        logger.info("Retrieving user id=%s", query.user_id)

        user = self._user_repo.get_by_id(query.user_id)
        if user is None:
            raise NotFoundError("User", query.user_id)
        return UserResult.from_entity(user)
