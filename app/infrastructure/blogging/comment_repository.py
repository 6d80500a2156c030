"""
Adapter: Comment persistence.

Implements CommentRepository port against the ``comments`` collection.
"""

from dataclasses import replace
from typing import Any, Optional

from app.domain.blogging.entities import AuthorSummary, Comment
from app.domain.blogging.ports import CommentRepository
from app.infrastructure.blogging.blog_repository import INSERTION_ORDER
from app.infrastructure.blogging.documents import (
    id_str,
    load_author_summaries,
    parse_object_id,
    require_object_id,
    store_errors,
    utcnow,
)
from app.infrastructure.blogging.mongo_store import MongoStore


def _to_comment(document: dict[str, Any], author: Optional[AuthorSummary]) -> Comment:
    return Comment(
        id=id_str(document["_id"]),
        content=document["content"],
        author_id=id_str(document.get("author")),
        blog_id=id_str(document.get("blog")),
        created_at=document.get("created_at"),
        updated_at=document.get("updated_at"),
        author=author,
    )


class CommentRepositoryAdapter(CommentRepository):
    """Concrete adapter for comment persistence in MongoDB."""

    def __init__(self, store: MongoStore) -> None:
        self._store = store

    def create(self, comment: Comment) -> Comment:
        """Insert a comment document.

        Raises:
            ValidationError: If the author or blog id is not a valid identifier.
            StoreError: On driver failure.
        """
        now = utcnow()
        document = {
            "content": comment.content,
            "author": require_object_id(comment.author_id, "author"),
            "blog": require_object_id(comment.blog_id, "blog"),
            "created_at": now,
            "updated_at": now,
        }
        with store_errors("Comment"):
            result = self._store.comments.insert_one(document)
        return replace(
            comment,
            id=id_str(result.inserted_id),
            created_at=now,
            updated_at=now,
        )

    def get_by_blog(self, blog_id: str) -> list[Comment]:
        oid = parse_object_id(blog_id)
        if oid is None:
            return []
        with store_errors("Comment"):
            documents = list(self._store.comments.find({"blog": oid}).sort(INSERTION_ORDER))
            authors = load_author_summaries(
                self._store.users, (doc.get("author") for doc in documents)
            )
        return [_to_comment(doc, authors.get(doc.get("author"))) for doc in documents]
