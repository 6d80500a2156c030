"""
MongoDB store handle.

Owns the single ``MongoClient`` of the process. Opened once at
application startup, closed at shutdown, and passed explicitly to every
repository adapter. No module-level connection state.
"""

import logging
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger(__name__)

USERS = "users"
BLOGS = "blogs"
COMMENTS = "comments"


class MongoStore:
    """Connection lifecycle and collection access for the blogging store.

    Usage::

        with MongoStore(uri, "blogging").open() as store:
            store.users.find_one(...)
    """

    def __init__(self, uri: str, database: str, timeout_ms: int = 5000) -> None:
        self._uri = uri
        self._database_name = database
        self._timeout_ms = timeout_ms
        self._client: Optional[MongoClient] = None

    def open(self) -> "MongoStore":
        """Connect, verify the server answers, and ensure indexes.

        Raises:
            pymongo.errors.PyMongoError: If the server is unreachable.
        """
        if self._client is not None:
            return self

        self._client = MongoClient(
            self._uri,
            serverSelectionTimeoutMS=self._timeout_ms,
            tz_aware=True,
        )
        try:
            self._client.admin.command("ping")
            self.ensure_indexes()
        except Exception:
            logger.error("MongoDB connection failed (database=%s)", self._database_name)
            self.close()
            raise

        logger.info("MongoDB connected (database=%s)", self._database_name)
        return self

    def ensure_indexes(self) -> None:
        """Create the indexes the store relies on. Idempotent."""
        self.users.create_index([("username", ASCENDING)], unique=True)
        self.users.create_index([("email", ASCENDING)], unique=True)
        self.blogs.create_index([("author", ASCENDING)])
        self.comments.create_index([("blog", ASCENDING)])

    def ping(self) -> bool:
        """Return True if the server answers a ping."""
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
        except Exception:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False
        return True

    def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    @property
    def is_open(self) -> bool:
        return self._client is not None

    @property
    def database(self) -> Database:
        if self._client is None:
            raise RuntimeError("MongoStore is not open")
        return self._client[self._database_name]

    @property
    def users(self) -> Collection:
        return self.database[USERS]

    @property
    def blogs(self) -> Collection:
        return self.database[BLOGS]

    @property
    def comments(self) -> Collection:
        return self.database[COMMENTS]

    def __enter__(self) -> "MongoStore":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()
