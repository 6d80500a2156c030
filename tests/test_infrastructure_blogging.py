"""
Tests for the blogging infrastructure adapters.

Uses unittest.mock to avoid requiring a live MongoDB instance.
Validates document shapes, identifier handling, author resolution,
error translation and the store lifecycle. The password hasher runs
against real bcrypt.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from app.domain.blogging.entities import AuthorSummary, Blog, Comment, User
from app.domain.blogging.errors import ConflictError, StoreError, ValidationError
from app.infrastructure.blogging.blog_repository import (
    INSERTION_ORDER,
    BlogRepositoryAdapter,
)
from app.infrastructure.blogging.comment_repository import CommentRepositoryAdapter
from app.infrastructure.blogging.documents import (
    load_author_summaries,
    parse_object_id,
    require_object_id,
    store_errors,
)
from app.infrastructure.blogging.mongo_store import MongoStore
from app.infrastructure.blogging.password_hasher import BcryptPasswordHasher
from app.infrastructure.blogging.user_repository import (
    WITHOUT_PASSWORD,
    UserRepositoryAdapter,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
USER_OID = ObjectId("65a000000000000000000001")
BLOG_OID = ObjectId("65a000000000000000000002")
COMMENT_OID = ObjectId("65a000000000000000000003")


def _blog_doc(oid: ObjectId = BLOG_OID, author=USER_OID, title: str = "T") -> dict:
    return {
        "_id": oid,
        "title": title,
        "content": "C",
        "author": author,
        "created_at": NOW,
        "updated_at": NOW,
    }


def _comment_doc(author=USER_OID) -> dict:
    return {
        "_id": COMMENT_OID,
        "content": "nice",
        "author": author,
        "blog": BLOG_OID,
        "created_at": NOW,
        "updated_at": NOW,
    }


@pytest.fixture
def store() -> MagicMock:
    mock = MagicMock()
    mock.users.find.return_value = [{"_id": USER_OID, "username": "alice"}]
    return mock


# ══════════════════════════════════════════════════════════════════════
# Document helpers
# ══════════════════════════════════════════════════════════════════════


class TestObjectIds:
    """Tests for identifier parsing."""

    def test_parse_valid_hex(self) -> None:
        assert parse_object_id(str(USER_OID)) == USER_OID

    def test_parse_passes_object_id_through(self) -> None:
        assert parse_object_id(USER_OID) is USER_OID

    @pytest.mark.parametrize("value", [None, "", "not-an-id", "abcdefghijkl", 42])
    def test_parse_malformed_returns_none(self, value) -> None:
        assert parse_object_id(value) is None

    def test_require_rejects_malformed_reference(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            require_object_id("nope", "author")
        assert exc_info.value.message == "Invalid author identifier"
        assert exc_info.value.fields == ("author",)


class TestStoreErrors:
    """Tests for driver error translation."""

    def test_duplicate_key_becomes_conflict(self) -> None:
        duplicate = DuplicateKeyError(
            "E11000 duplicate key", 11000, {"keyPattern": {"email": 1}}
        )
        with pytest.raises(ConflictError) as exc_info:
            with store_errors("User"):
                raise duplicate
        assert exc_info.value.field == "email"
        assert exc_info.value.__cause__ is duplicate

    def test_duplicate_key_without_details(self) -> None:
        with pytest.raises(ConflictError) as exc_info:
            with store_errors("User"):
                raise DuplicateKeyError("E11000 duplicate key", 11000)
        assert exc_info.value.message == "User already exists"

    def test_driver_error_becomes_store_error(self) -> None:
        with pytest.raises(StoreError):
            with store_errors("Blog"):
                raise ServerSelectionTimeoutError("no servers")

    def test_domain_errors_pass_through(self) -> None:
        with pytest.raises(ValidationError):
            with store_errors("Blog"):
                raise ValidationError("bad")


class TestLoadAuthorSummaries:
    """Tests for author resolution."""

    def test_resolves_in_one_query(self, store) -> None:
        summaries = load_author_summaries(store.users, [USER_OID, USER_OID])

        assert summaries == {USER_OID: AuthorSummary(id=str(USER_OID), username="alice")}
        store.users.find.assert_called_once_with({"_id": {"$in": [USER_OID]}}, {"username": 1})

    def test_no_ids_skips_query(self, store) -> None:
        assert load_author_summaries(store.users, [None, "raw"]) == {}
        store.users.find.assert_not_called()


# ══════════════════════════════════════════════════════════════════════
# Repositories
# ══════════════════════════════════════════════════════════════════════


class TestUserRepositoryAdapter:
    """Tests for the users collection adapter."""

    def test_create_stores_hash_under_password(self, store) -> None:
        store.users.insert_one.return_value = MagicMock(inserted_id=USER_OID)
        repo = UserRepositoryAdapter(store)

        created = repo.create(User(username="alice", email="a@x.com", password_hash="h"))

        document = store.users.insert_one.call_args.args[0]
        assert document["password"] == "h"
        assert document["created_at"] == document["updated_at"]
        assert created.id == str(USER_OID)
        assert created.created_at == document["created_at"]

    def test_create_translates_duplicate(self, store) -> None:
        store.users.insert_one.side_effect = DuplicateKeyError(
            "E11000", 11000, {"keyPattern": {"username": 1}}
        )

        with pytest.raises(ConflictError) as exc_info:
            UserRepositoryAdapter(store).create(
                User(username="alice", email="a@x.com", password_hash="h")
            )
        assert exc_info.value.field == "username"

    def test_get_by_id_projects_out_password(self, store) -> None:
        store.users.find_one.return_value = {
            "_id": USER_OID,
            "username": "alice",
            "email": "a@x.com",
            "created_at": NOW,
            "updated_at": NOW,
        }

        user = UserRepositoryAdapter(store).get_by_id(str(USER_OID))

        store.users.find_one.assert_called_once_with({"_id": USER_OID}, WITHOUT_PASSWORD)
        assert user == User(
            id=str(USER_OID),
            username="alice",
            email="a@x.com",
            created_at=NOW,
            updated_at=NOW,
        )

    def test_get_by_id_missing(self, store) -> None:
        store.users.find_one.return_value = None
        assert UserRepositoryAdapter(store).get_by_id(str(USER_OID)) is None

    def test_get_by_id_malformed_skips_query(self, store) -> None:
        assert UserRepositoryAdapter(store).get_by_id("not-an-id") is None
        store.users.find_one.assert_not_called()


class TestBlogRepositoryAdapter:
    """Tests for the blogs collection adapter."""

    def test_create_stores_author_as_object_id(self, store) -> None:
        store.blogs.insert_one.return_value = MagicMock(inserted_id=BLOG_OID)

        created = BlogRepositoryAdapter(store).create(
            Blog(title="T", content="C", author_id=str(USER_OID))
        )

        document = store.blogs.insert_one.call_args.args[0]
        assert document["author"] == USER_OID
        assert created.id == str(BLOG_OID)
        assert created.author_id == str(USER_OID)
        assert created.author is None

    def test_create_rejects_malformed_author(self, store) -> None:
        with pytest.raises(ValidationError):
            BlogRepositoryAdapter(store).create(Blog(title="T", content="C", author_id="bad"))
        store.blogs.insert_one.assert_not_called()

    def test_get_by_id_resolves_author(self, store) -> None:
        store.blogs.find_one.return_value = _blog_doc()

        blog = BlogRepositoryAdapter(store).get_by_id(str(BLOG_OID))

        assert blog.author == AuthorSummary(id=str(USER_OID), username="alice")
        assert blog.author_id == str(USER_OID)

    def test_get_by_id_missing(self, store) -> None:
        store.blogs.find_one.return_value = None
        assert BlogRepositoryAdapter(store).get_by_id(str(BLOG_OID)) is None
        store.users.find.assert_not_called()

    def test_get_all_in_insertion_order(self, store) -> None:
        dangling = ObjectId("65a0000000000000000000ff")
        store.blogs.find.return_value.sort.return_value = [
            _blog_doc(title="first"),
            _blog_doc(oid=ObjectId("65a000000000000000000004"), author=dangling, title="second"),
        ]

        blogs = BlogRepositoryAdapter(store).get_all()

        store.blogs.find.return_value.sort.assert_called_once_with(INSERTION_ORDER)
        assert [b.title for b in blogs] == ["first", "second"]
        assert blogs[0].author.username == "alice"
        assert blogs[1].author is None
        assert blogs[1].author_id == str(dangling)

    def test_get_all_empty(self, store) -> None:
        store.blogs.find.return_value.sort.return_value = []
        assert BlogRepositoryAdapter(store).get_all() == []

    def test_get_by_author_leaves_author_unresolved(self, store) -> None:
        store.blogs.find.return_value.sort.return_value = [_blog_doc()]

        blogs = BlogRepositoryAdapter(store).get_by_author(str(USER_OID))

        store.blogs.find.assert_called_once_with({"author": USER_OID})
        assert blogs[0].author is None
        store.users.find.assert_not_called()

    def test_get_by_author_malformed(self, store) -> None:
        assert BlogRepositoryAdapter(store).get_by_author("bad") == []

    def test_driver_failure_becomes_store_error(self, store) -> None:
        store.blogs.find.side_effect = ServerSelectionTimeoutError("no servers")
        with pytest.raises(StoreError):
            BlogRepositoryAdapter(store).get_all()


class TestCommentRepositoryAdapter:
    """Tests for the comments collection adapter."""

    def test_create_keeps_raw_references(self, store) -> None:
        store.comments.insert_one.return_value = MagicMock(inserted_id=COMMENT_OID)

        created = CommentRepositoryAdapter(store).create(
            Comment(content="nice", author_id=str(USER_OID), blog_id=str(BLOG_OID))
        )

        document = store.comments.insert_one.call_args.args[0]
        assert (document["author"], document["blog"]) == (USER_OID, BLOG_OID)
        assert created.id == str(COMMENT_OID)
        assert created.blog_id == str(BLOG_OID)

    def test_create_rejects_malformed_blog(self, store) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CommentRepositoryAdapter(store).create(
                Comment(content="nice", author_id=str(USER_OID), blog_id="bad")
            )
        assert exc_info.value.fields == ("blog",)

    def test_get_by_blog_resolves_authors(self, store) -> None:
        store.comments.find.return_value.sort.return_value = [_comment_doc()]

        comments = CommentRepositoryAdapter(store).get_by_blog(str(BLOG_OID))

        store.comments.find.assert_called_once_with({"blog": BLOG_OID})
        assert comments[0].author == AuthorSummary(id=str(USER_OID), username="alice")
        assert comments[0].blog_id == str(BLOG_OID)

    def test_get_by_blog_malformed_is_empty(self, store) -> None:
        assert CommentRepositoryAdapter(store).get_by_blog("bad") == []
        store.comments.find.assert_not_called()


# ══════════════════════════════════════════════════════════════════════
# Store lifecycle
# ══════════════════════════════════════════════════════════════════════


class TestMongoStore:
    """Tests for open, close and collection access."""

    @patch("app.infrastructure.blogging.mongo_store.MongoClient")
    def test_open_pings_and_ensures_indexes(self, client_cls) -> None:
        client = client_cls.return_value
        collection = client.__getitem__.return_value.__getitem__.return_value

        store = MongoStore("mongodb://db:27017", "blogging", timeout_ms=100).open()

        client_cls.assert_called_once_with(
            "mongodb://db:27017", serverSelectionTimeoutMS=100, tz_aware=True
        )
        client.admin.command.assert_called_once_with("ping")
        assert collection.create_index.call_count == 4
        assert store.is_open

    @patch("app.infrastructure.blogging.mongo_store.MongoClient")
    def test_open_is_idempotent(self, client_cls) -> None:
        store = MongoStore("mongodb://db", "blogging")
        store.open()
        store.open()
        client_cls.assert_called_once()

    @patch("app.infrastructure.blogging.mongo_store.MongoClient")
    def test_failed_open_closes_client(self, client_cls) -> None:
        client = client_cls.return_value
        client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
        store = MongoStore("mongodb://db", "blogging")

        with pytest.raises(ServerSelectionTimeoutError):
            store.open()

        client.close.assert_called_once()
        assert not store.is_open

    @patch("app.infrastructure.blogging.mongo_store.MongoClient")
    def test_context_manager_closes(self, client_cls) -> None:
        with MongoStore("mongodb://db", "blogging") as store:
            assert store.is_open
        client_cls.return_value.close.assert_called_once()
        assert not store.is_open

    def test_collections_require_open_store(self) -> None:
        store = MongoStore("mongodb://db", "blogging")
        with pytest.raises(RuntimeError):
            _ = store.users

    def test_ping_when_closed(self) -> None:
        assert MongoStore("mongodb://db", "blogging").ping() is False


# ══════════════════════════════════════════════════════════════════════
# Password hashing
# ══════════════════════════════════════════════════════════════════════


class TestBcryptPasswordHasher:
    """Tests against the real bcrypt backend."""

    def test_hash_is_salted_and_verifiable(self) -> None:
        hasher = BcryptPasswordHasher(rounds=4)

        first = hasher.hash("secret")
        second = hasher.hash("secret")

        assert first != "secret"
        assert first != second
        assert hasher.verify("secret", first)
        assert not hasher.verify("wrong", first)

    def test_default_cost_factor(self) -> None:
        assert BcryptPasswordHasher().hash("secret").startswith("$2b$10$")
