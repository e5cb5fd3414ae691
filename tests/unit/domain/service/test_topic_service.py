"""Unit tests for TopicService."""

import pytest

from udiddit.domain.error import BusinessRuleViolationError, NotFoundError
from udiddit.domain.model import Vote
from udiddit.domain.repository import (
    CommentRepository,
    PostRepository,
    TopicRepository,
    VoteRepository,
)
from udiddit.domain.service import (
    CommentService,
    PostService,
    TopicService,
    UserService,
)
from udiddit.domain.value import TopicId, TopicName, Username, VoteDirection
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateTopic:
    """Tests for create_topic."""

    @pytest.mark.asyncio
    async def test_create_topic_with_description(self, unit_env):
        topic_service = await unit_env.get(TopicService)

        topic = await topic_service.create_topic(TopicName("news"), "Daily news")

        assert topic.id is not None
        assert topic.topic_description == "Daily news"

    @pytest.mark.asyncio
    async def test_duplicate_topic_name_fails(self, unit_env):
        topic_service = await unit_env.get(TopicService)
        await topic_service.create_topic(TopicName("news"))

        with pytest.raises(BusinessRuleViolationError):
            await topic_service.create_topic(TopicName("news"))


class TestDeleteTopic:
    """Tests for delete_topic."""

    @pytest.mark.asyncio
    async def test_delete_topic_cascades_through_posts(self, unit_env):
        """Posts, nested comments and votes of the topic are all removed."""
        # Arrange
        topic_service = await unit_env.get(TopicService)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        user_service = await unit_env.get(UserService)
        topic_repo = await unit_env.get(TopicRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)

        alice = await user_service.register_user(Username("alice"))
        news = await topic_service.create_topic(TopicName("news"))
        sports = await topic_service.create_topic(TopicName("sports"))
        first = await post_service.create_post(
            "One", news.id, user_id=alice.id, content="x"
        )
        second = await post_service.create_post("Two", news.id, url="http://a.example")
        survivor = await post_service.create_post("Goal", sports.id, content="y")

        root = await comment_service.add_comment(first.id, "root")
        child = await comment_service.add_comment(first.id, "child", parent_id=root.id)
        grandchild = await comment_service.add_comment(
            first.id, "grandchild", parent_id=child.id
        )
        await vote_repo.add(
            Vote(vote=VoteDirection.UP, user_id=alice.id, post_id=first.id)
        )
        await vote_repo.add(
            Vote(vote=VoteDirection.DOWN, user_id=alice.id, post_id=second.id)
        )

        # Act
        deleted = await topic_service.delete_topic(news.id)

        # Assert
        assert deleted == 2
        assert await topic_repo.find_by_id(news.id) is None
        assert await post_repo.find_by_topic(news.id) == []
        for comment in (root, child, grandchild):
            assert await comment_repo.find_by_id(comment.id) is None
        assert await vote_repo.find_by_user(alice.id) == []

        assert await topic_repo.find_by_id(sports.id) is not None
        assert await post_repo.find_by_id(survivor.id) is not None

    @pytest.mark.asyncio
    async def test_delete_topic_keeps_users(self, unit_env):
        """Authors are never deleted along with their posts."""
        topic_service = await unit_env.get(TopicService)
        post_service = await unit_env.get(PostService)
        user_service = await unit_env.get(UserService)
        alice = await user_service.register_user(Username("alice"))
        news = await topic_service.create_topic(TopicName("news"))
        await post_service.create_post("One", news.id, user_id=alice.id, content="x")

        await topic_service.delete_topic(news.id)

        assert await user_service.get_by_id(alice.id) == alice

    @pytest.mark.asyncio
    async def test_delete_missing_topic_fails(self, unit_env):
        topic_service = await unit_env.get(TopicService)

        with pytest.raises(NotFoundError):
            await topic_service.delete_topic(TopicId(404))
