"""
Use case: Register a new user.

Input: RegisterUserCommand (username, email, password)
Output: UserResult (without password)
Side effects: One write to the user store.
Failure cases: ValidationError, ConflictError, StoreError.
"""

import logging

from app.application.blogging.dtos import RegisterUserCommand, UserResult
from app.application.blogging.validation import require_fields
from app.domain.blogging.entities import User
from app.domain.blogging.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Orchestrates user signup.

    Checks that every field is present, hashes the password and
    persists the user. The plaintext password never reaches the store.
    """

    def __init__(self, user_repo: UserRepository, password_hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher

    def execute(self, command: RegisterUserCommand) -> UserResult:
        """Run the registration use case.

        Args:
            command: Signup data.

        Returns:
            The stored user with generated id and timestamps.

        Raises:
            ValidationError: If username, email or password is missing.
            ConflictError: If the username or email is already registered.
        """
        require_fields(
            "All fields are required",
            username=command.username,
            email=command.email,
            password=command.password,
        )

        hashed = self._password_hasher.hash(command.password)
        user = self._user_repo.create(
            User(username=command.username, email=command.email, password_hash=hashed)
        )
        logger.info("Registered user id=%s", user.id)
        return UserResult.from_entity(user)
