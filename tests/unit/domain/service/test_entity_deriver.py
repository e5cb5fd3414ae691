"""Unit tests for EntityDeriver."""

import pytest

from udiddit.domain.error import ValidationError
from udiddit.domain.repository import LegacySource, TopicRepository, UserRepository
from udiddit.domain.service import EntityDeriver, collect_names
from udiddit.domain.model import LegacyComment, LegacyPost
from udiddit.domain.value import LegacyCommentId, LegacyPostId, TopicName, Username
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCollectNames:
    """Tests for collect_names."""

    def test_names_come_from_authors_voters_and_topics(self):
        """Every username source contributes, deduplicated by exact equality."""
        posts = [
            LegacyPost(
                id=LegacyPostId(1),
                title="Hi",
                text_content="hello",
                username="alice",
                topic="news",
                upvotes="bob,carol",
                downvotes="dave",
            ),
            LegacyPost(
                id=LegacyPostId(2),
                title="Again",
                url="http://example.com",
                username="alice",
                topic="news",
            ),
        ]
        comments = [
            LegacyComment(
                id=LegacyCommentId(1),
                post_id=LegacyPostId(1),
                username="erin",
                text_content="nice",
            )
        ]

        names = collect_names(posts, comments)

        assert names.usernames == {"alice", "bob", "carol", "dave", "erin"}
        assert names.topic_names == {"news"}

    def test_dedup_is_case_sensitive(self):
        """Names differing only in case are distinct users."""
        posts = [
            LegacyPost(
                id=LegacyPostId(1),
                title="Hi",
                text_content="hello",
                username="Alice",
                topic="news",
                upvotes="alice",
            )
        ]

        names = collect_names(posts, [])

        assert names.usernames == {"Alice", "alice"}


class TestDerive:
    """Tests for EntityDeriver.derive."""

    @pytest.mark.asyncio
    async def test_derive_creates_one_row_per_distinct_name(self, unit_env):
        """Each name is persisted once and mapped to its new id."""
        # Arrange
        deriver = await unit_env.get(EntityDeriver)
        source = await unit_env.get(LegacySource)
        user_repo = await unit_env.get(UserRepository)
        topic_repo = await unit_env.get(TopicRepository)

        source.add_post(
            1, "Hi", "alice", "news", text_content="x", upvotes="bob", downvotes="alice"
        )
        source.add_post(2, "Yo", "bob", "sports", url="http://a.example")
        source.add_comment(1, 1, "carol", "first")

        # Act
        derivation = await deriver.derive(source)

        # Assert
        assert set(derivation.user_ids) == {"alice", "bob", "carol"}
        assert set(derivation.topic_ids) == {"news", "sports"}
        assert await user_repo.count() == 3
        assert await topic_repo.count() == 2

        alice = await user_repo.find_by_username(Username("alice"))
        assert alice.id == derivation.user_ids["alice"]
        sports = await topic_repo.find_by_name(TopicName("sports"))
        assert sports.id == derivation.topic_ids["sports"]

    @pytest.mark.asyncio
    async def test_ids_follow_sorted_name_order(self, unit_env):
        """Sorted insertion makes surrogate ids deterministic."""
        deriver = await unit_env.get(EntityDeriver)
        source = await unit_env.get(LegacySource)
        source.add_post(1, "Hi", "zed", "news", text_content="x", upvotes="amy,mo")

        derivation = await deriver.derive(source)

        assert derivation.user_ids["amy"] < derivation.user_ids["mo"]
        assert derivation.user_ids["mo"] < derivation.user_ids["zed"]

    @pytest.mark.asyncio
    async def test_derivation_maps_are_read_only(self, unit_env):
        """A completed derivation cannot be altered afterwards."""
        deriver = await unit_env.get(EntityDeriver)
        source = await unit_env.get(LegacySource)
        source.add_post(1, "Hi", "alice", "news", text_content="x")

        derivation = await deriver.derive(source)

        with pytest.raises(TypeError):
            derivation.user_ids["mallory"] = 99

    @pytest.mark.asyncio
    async def test_overlong_username_is_fatal_before_any_insert(self, unit_env):
        """Names are never truncated; validation happens up front."""
        deriver = await unit_env.get(EntityDeriver)
        source = await unit_env.get(LegacySource)
        user_repo = await unit_env.get(UserRepository)
        source.add_post(1, "Hi", "a" * 26, "news", text_content="x")

        with pytest.raises(ValidationError, match="username"):
            await deriver.derive(source)

        assert await user_repo.count() == 0

    @pytest.mark.asyncio
    async def test_overlong_topic_name_is_fatal(self, unit_env):
        """Topic names over 30 characters abort the derivation."""
        deriver = await unit_env.get(EntityDeriver)
        source = await unit_env.get(LegacySource)
        source.add_post(1, "Hi", "alice", "t" * 31, text_content="x")

        with pytest.raises(ValidationError, match="topic name"):
            await deriver.derive(source)

    @pytest.mark.asyncio
    async def test_null_post_author_is_fatal(self, unit_env):
        """A legacy post without an author cannot be attributed."""
        deriver = await unit_env.get(EntityDeriver)
        source = await unit_env.get(LegacySource)
        user_repo = await unit_env.get(UserRepository)
        source.add_post(1, "Hi", None, "news", text_content="x")

        with pytest.raises(ValidationError, match="Missing username.*post:1"):
            await deriver.derive(source)

        assert await user_repo.count() == 0

    @pytest.mark.asyncio
    async def test_null_topic_is_fatal(self, unit_env):
        """A legacy post without a topic cannot be placed anywhere."""
        deriver = await unit_env.get(EntityDeriver)
        source = await unit_env.get(LegacySource)
        source.add_post(1, "Hi", "alice", None, text_content="x")

        with pytest.raises(ValidationError, match="Missing topic name"):
            await deriver.derive(source)

    @pytest.mark.asyncio
    async def test_null_comment_author_is_fatal(self, unit_env):
        """Comment authors are required the same way post authors are."""
        deriver = await unit_env.get(EntityDeriver)
        source = await unit_env.get(LegacySource)
        source.add_post(1, "Hi", "alice", "news", text_content="x")
        source.add_comment(7, 1, None, "anonymous")

        with pytest.raises(ValidationError, match="comment:7"):
            await deriver.derive(source)
