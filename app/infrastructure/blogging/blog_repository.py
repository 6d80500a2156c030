"""
Adapter: Blog persistence.

Implements BlogRepository port against the ``blogs`` collection.
Read paths resolve the author reference with a second query on
``users`` projecting only the username.
"""

from dataclasses import replace
from typing import Any, Optional

from pymongo import ASCENDING

from app.domain.blogging.entities import AuthorSummary, Blog
from app.domain.blogging.ports import BlogRepository
from app.infrastructure.blogging.documents import (
    id_str,
    load_author_summaries,
    parse_object_id,
    require_object_id,
    store_errors,
    utcnow,
)
from app.infrastructure.blogging.mongo_store import MongoStore

# ObjectIds grow monotonically, so this is creation order.
INSERTION_ORDER = [("_id", ASCENDING)]


def _to_blog(document: dict[str, Any], author: Optional[AuthorSummary] = None) -> Blog:
    return Blog(
        id=id_str(document["_id"]),
        title=document["title"],
        content=document["content"],
        author_id=id_str(document.get("author")),
        created_at=document.get("created_at"),
        updated_at=document.get("updated_at"),
        author=author,
    )


class BlogRepositoryAdapter(BlogRepository):
    """Concrete adapter for blog persistence in MongoDB."""

    def __init__(self, store: MongoStore) -> None:
        self._store = store

    def create(self, blog: Blog) -> Blog:
        """Insert a blog document.

        Raises:
            ValidationError: If the author id is not a valid identifier.
            StoreError: On driver failure.
        """
        now = utcnow()
        document = {
            "title": blog.title,
            "content": blog.content,
            "author": require_object_id(blog.author_id, "author"),
            "created_at": now,
            "updated_at": now,
        }
        with store_errors("Blog"):
            result = self._store.blogs.insert_one(document)
        return replace(
            blog,
            id=id_str(result.inserted_id),
            created_at=now,
            updated_at=now,
        )

    def get_by_id(self, blog_id: str) -> Optional[Blog]:
        oid = parse_object_id(blog_id)
        if oid is None:
            return None
        with store_errors("Blog"):
            document = self._store.blogs.find_one({"_id": oid})
            if document is None:
                return None
            authors = load_author_summaries(self._store.users, [document.get("author")])
        return _to_blog(document, authors.get(document.get("author")))

    def get_all(self) -> list[Blog]:
        with store_errors("Blog"):
            documents = list(self._store.blogs.find().sort(INSERTION_ORDER))
            authors = load_author_summaries(
                self._store.users, (doc.get("author") for doc in documents)
            )
        return [_to_blog(doc, authors.get(doc.get("author"))) for doc in documents]

    def get_by_author(self, author_id: str) -> list[Blog]:
        oid = parse_object_id(author_id)
        if oid is None:
            return []
        with store_errors("Blog"):
            documents = list(self._store.blogs.find({"author": oid}).sort(INSERTION_ORDER))
        return [_to_blog(doc) for doc in documents]
