"""
Helpers shared by the Mongo repository adapters.

Covers identifier conversion, timestamps, author resolution
("populate") and translation of driver errors into domain errors.
"""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.domain.blogging.entities import AuthorSummary
from app.domain.blogging.errors import ConflictError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Return the current time, truncated to what BSON dates can hold."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return the ObjectId for a 24-hex string, or None if malformed."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def require_object_id(value: Any, field: str) -> ObjectId:
    """Convert a reference about to be written.

    Raises:
        ValidationError: If the value is not a valid identifier.
    """
    oid = parse_object_id(value)
    if oid is None:
        raise ValidationError(f"Invalid {field} identifier", fields=(field,))
    return oid


def id_str(value: Any) -> str:
    return str(value) if value is not None else ""


def load_author_summaries(
    users: Collection, author_ids: Iterable[Any]
) -> dict[ObjectId, AuthorSummary]:
    """Resolve author references to ``{id, username}`` in one query.

    Ids without a matching user are absent from the result.
    """
    unique_ids = list({oid for oid in author_ids if isinstance(oid, ObjectId)})
    if not unique_ids:
        return {}
    cursor = users.find({"_id": {"$in": unique_ids}}, {"username": 1})
    return {
        doc["_id"]: AuthorSummary(id=str(doc["_id"]), username=doc["username"])
        for doc in cursor
    }


def _duplicate_field(exc: DuplicateKeyError) -> Optional[str]:
    details = exc.details or {}
    key_pattern = details.get("keyPattern") or details.get("keyValue") or {}
    if key_pattern:
        return next(iter(key_pattern))
    return None


@contextmanager
def store_errors(entity: str) -> Iterator[None]:
    """Translate driver exceptions raised inside the block.

    DuplicateKeyError becomes ConflictError; any other PyMongoError
    becomes StoreError. Domain errors pass through untouched.
    """
    try:
        yield
    except DuplicateKeyError as exc:
        field = _duplicate_field(exc)
        logger.warning("Duplicate %s rejected by store (field=%s)", entity, field)
        raise ConflictError(entity, field) from exc
    except PyMongoError as exc:
        logger.error("Store failure on %s: %s", entity, type(exc).__name__)
        raise StoreError(str(exc)) from exc
