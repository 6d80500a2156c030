"""
Adapter: User persistence.

Implements UserRepository port against the ``users`` collection.
The password hash is stored under ``password`` and projected out of
every read.
"""

from dataclasses import replace
from typing import Optional

from app.domain.blogging.entities import User
from app.domain.blogging.ports import UserRepository
from app.infrastructure.blogging.documents import (
    id_str,
    parse_object_id,
    store_errors,
    utcnow,
)
from app.infrastructure.blogging.mongo_store import MongoStore

WITHOUT_PASSWORD = {"password": 0}


class UserRepositoryAdapter(UserRepository):
    """Concrete adapter for user persistence in MongoDB."""

    def __init__(self, store: MongoStore) -> None:
        self._store = store

    def create(self, user: User) -> User:
        """Insert a user document.

        Raises:
            ConflictError: If the username or email is already taken.
            StoreError: On any other driver failure.
        """
        now = utcnow()
        document = {
            "username": user.username,
            "email": user.email,
            "password": user.password_hash,
            "created_at": now,
            "updated_at": now,
        }
        with store_errors("User"):
            result = self._store.users.insert_one(document)
        return replace(
            user,
            id=id_str(result.inserted_id),
            created_at=now,
            updated_at=now,
        )

    def get_by_id(self, user_id: str) -> Optional[User]:
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        with store_errors("User"):
            document = self._store.users.find_one({"_id": oid}, WITHOUT_PASSWORD)
        if document is None:
            return None
        return User(
            id=id_str(document["_id"]),
            username=document["username"],
            email=document["email"],
            created_at=document.get("created_at"),
            updated_at=document.get("updated_at"),
        )
