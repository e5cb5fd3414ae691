"""Unit tests for NormalizerWriter."""

import pytest

from udiddit.config import MigrationSettings
from udiddit.domain.error import AmbiguousContentError, ResolutionError
from udiddit.domain.repository import (
    CommentRepository,
    LegacySource,
    PostRepository,
    VoteRepository,
)
from udiddit.domain.service import (
    EntityDeriver,
    NormalizerWriter,
    ReferenceResolver,
    truncate_title,
)
from udiddit.domain.value import LegacyPostId, RejectionKind, VoteDirection
from tests.harness import create_env_fixture, seed_hi_post

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def resolver_for(env, source) -> ReferenceResolver:
    """Run the derivation stage over the seeded corpus."""
    deriver = await env.get(EntityDeriver)
    return ReferenceResolver(await deriver.derive(source))


class TestTruncateTitle:
    """Tests for truncate_title."""

    def test_long_titles_are_cut_to_100_characters(self):
        assert truncate_title("x" * 150) == "x" * 100

    def test_short_titles_are_unchanged(self):
        assert truncate_title("Hi") == "Hi"

    def test_null_title_stays_none(self):
        assert truncate_title(None) is None


class TestWritePosts:
    """Tests for the posts pass."""

    @pytest.mark.asyncio
    async def test_posts_are_written_with_resolved_references(self, unit_env):
        """Author and topic names become surrogate ids."""
        # Arrange
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        post_repo = await unit_env.get(PostRepository)
        seed_hi_post(source)
        source.add_post(2, "Link", "bob", "tech", url="http://example.com")
        resolver = await resolver_for(unit_env, source)

        # Act
        post_ids, result = await writer.write_posts(source, resolver)

        # Assert
        assert result.created == 2
        assert result.rejections == []

        text_post = await post_repo.find_by_id(post_ids.resolve(LegacyPostId(1)))
        assert text_post.post_title == "Hi"
        assert text_post.post_content == "hello world"
        assert text_post.post_url is None
        assert text_post.user_id == resolver.user_id("alice")
        assert text_post.topic_id == resolver.topic_id("news")

        link_post = await post_repo.find_by_id(post_ids.resolve(LegacyPostId(2)))
        assert link_post.post_url == "http://example.com"
        assert link_post.post_content is None

    @pytest.mark.asyncio
    async def test_long_title_is_truncated(self, unit_env):
        """Legacy titles are free text and get cut to 100 characters."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        post_repo = await unit_env.get(PostRepository)
        seed_hi_post(source, title="t" * 150)
        resolver = await resolver_for(unit_env, source)

        post_ids, _ = await writer.write_posts(source, resolver)

        post = await post_repo.find_by_id(post_ids.resolve(LegacyPostId(1)))
        assert post.post_title == "t" * 100

    @pytest.mark.asyncio
    async def test_post_with_url_and_content_is_rejected(self, unit_env):
        """The default policy rejects ambiguous posts and carries on."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source, url="http://example.com")
        seed_hi_post(source, id=2)
        resolver = await resolver_for(unit_env, source)

        post_ids, result = await writer.write_posts(source, resolver)

        assert result.created == 1
        assert len(result.rejections) == 1
        rejection = result.rejections[0]
        assert rejection.kind == RejectionKind.AMBIGUOUS_CONTENT
        assert rejection.entity == "post"
        assert rejection.key == "post:1"
        assert post_ids.resolve(LegacyPostId(1)) is None

    @pytest.mark.asyncio
    async def test_abort_policy_raises_on_ambiguous_post(self, unit_env):
        """With the abort policy an ambiguous post is fatal."""
        writer = NormalizerWriter(
            post_repository=await unit_env.get(PostRepository),
            comment_repository=await unit_env.get(CommentRepository),
            vote_repository=await unit_env.get(VoteRepository),
            settings=MigrationSettings(ambiguous_content_policy="abort"),
        )
        source = await unit_env.get(LegacySource)
        seed_hi_post(source, id=7, url="http://example.com")
        resolver = await resolver_for(unit_env, source)

        with pytest.raises(AmbiguousContentError) as exc_info:
            await writer.write_posts(source, resolver)

        assert exc_info.value.legacy_post_id == 7

    @pytest.mark.asyncio
    async def test_post_without_url_or_content_is_rejected(self, unit_env):
        """Neither url nor content is a missing-content rejection."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source, text_content=None)
        resolver = await resolver_for(unit_env, source)

        _, result = await writer.write_posts(source, resolver)

        assert result.created == 0
        assert [r.kind for r in result.rejections] == [RejectionKind.MISSING_CONTENT]

    @pytest.mark.asyncio
    async def test_blank_title_is_a_constraint_rejection(self, unit_env):
        """Model validation failures are non-fatal per-record rejections."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source, title="   ")
        resolver = await resolver_for(unit_env, source)

        post_ids, result = await writer.write_posts(source, resolver)

        assert result.created == 0
        rejection = result.rejections[0]
        assert rejection.kind == RejectionKind.CONSTRAINT_VIOLATION
        assert "title" in rejection.reason
        assert post_ids.resolve(LegacyPostId(1)) is None

    @pytest.mark.asyncio
    async def test_null_title_is_a_constraint_rejection(self, unit_env):
        """A NULL legacy title is skipped, not a crash."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source, title=None)
        seed_hi_post(source, id=2)
        resolver = await resolver_for(unit_env, source)

        post_ids, result = await writer.write_posts(source, resolver)

        assert result.created == 1
        rejection = result.rejections[0]
        assert rejection.kind == RejectionKind.CONSTRAINT_VIOLATION
        assert rejection.key == "post:1"
        assert post_ids.resolve(LegacyPostId(1)) is None

    @pytest.mark.asyncio
    async def test_post_id_map_rejects_unknown_legacy_ids(self, unit_env):
        """Ids that were never part of the corpus do not resolve."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source)
        resolver = await resolver_for(unit_env, source)

        post_ids, _ = await writer.write_posts(source, resolver)

        with pytest.raises(ResolutionError):
            post_ids.resolve(LegacyPostId(42))


class TestWriteComments:
    """Tests for the comments pass."""

    @pytest.mark.asyncio
    async def test_comments_are_written_top_level(self, unit_env):
        """Legacy comments are flat and keep their text verbatim."""
        # Arrange
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        comment_repo = await unit_env.get(CommentRepository)
        seed_hi_post(source)
        source.add_comment(1, 1, "bob", "  nice post  ")
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)

        # Act
        result = await writer.write_comments(source, resolver, post_ids)

        # Assert
        assert result.created == 1
        comments = await comment_repo.find_by_post(post_ids.resolve(LegacyPostId(1)))
        assert len(comments) == 1
        assert comments[0].comment_text == "  nice post  "
        assert comments[0].comment_parent_id is None
        assert comments[0].user_id == resolver.user_id("bob")

    @pytest.mark.asyncio
    async def test_comment_on_rejected_post_is_orphaned(self, unit_env):
        """Comments follow their rejected post into the report."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source, text_content=None)
        source.add_comment(5, 1, "bob", "nice")
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)

        result = await writer.write_comments(source, resolver, post_ids)

        assert result.created == 0
        rejection = result.rejections[0]
        assert rejection.kind == RejectionKind.ORPHANED
        assert rejection.key == "comment:5"

    @pytest.mark.asyncio
    async def test_comment_on_unknown_post_is_fatal(self, unit_env):
        """A dangling legacy post reference cannot be resolved."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source)
        source.add_comment(1, 99, "bob", "where am I")
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)

        with pytest.raises(ResolutionError, match="post"):
            await writer.write_comments(source, resolver, post_ids)

    @pytest.mark.asyncio
    async def test_blank_comment_is_rejected(self, unit_env):
        """Empty comment text is a per-record rejection."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source)
        source.add_comment(1, 1, "bob", "   ")
        source.add_comment(2, 1, "bob", "ok")
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)

        result = await writer.write_comments(source, resolver, post_ids)

        assert result.created == 1
        assert result.rejections[0].kind == RejectionKind.CONSTRAINT_VIOLATION
        assert result.rejections[0].key == "comment:1"

    @pytest.mark.asyncio
    async def test_null_comment_text_is_rejected(self, unit_env):
        """A NULL legacy comment body is a per-record rejection."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source)
        source.add_comment(1, 1, "bob", None)
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)

        result = await writer.write_comments(source, resolver, post_ids)

        assert result.created == 0
        assert result.rejections[0].kind == RejectionKind.CONSTRAINT_VIOLATION
        assert result.rejections[0].key == "comment:1"

    @pytest.mark.asyncio
    async def test_comment_without_post_id_is_rejected(self, unit_env):
        """A comment that names no legacy post is skipped."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source)
        source.add_comment(3, None, "bob", "lost")
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)

        result = await writer.write_comments(source, resolver, post_ids)

        assert result.created == 0
        rejection = result.rejections[0]
        assert rejection.kind == RejectionKind.CONSTRAINT_VIOLATION
        assert "post id" in rejection.reason


class TestWriteVotes:
    """Tests for the votes pass."""

    @pytest.mark.asyncio
    async def test_duplicate_voter_keeps_the_upvote(self, unit_env):
        """alice up and down on the same post: one +1 row, one rejection."""
        # Arrange
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        vote_repo = await unit_env.get(VoteRepository)
        seed_hi_post(source, upvotes="alice,bob", downvotes="alice")
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)
        post_id = post_ids.resolve(LegacyPostId(1))

        # Act
        result = await writer.write_votes(source, resolver, post_ids)

        # Assert
        assert result.created == 2
        assert len(result.rejections) == 1
        rejection = result.rejections[0]
        assert rejection.kind == RejectionKind.DUPLICATE_VOTE
        assert rejection.key == "vote:post=1,user=alice"

        alice_vote = await vote_repo.find_by_user_and_post(
            resolver.user_id("alice"), post_id
        )
        assert alice_vote.vote == VoteDirection.UP

    @pytest.mark.asyncio
    async def test_double_comma_yields_two_votes(self, unit_env):
        """carol,,dave makes exactly two up-votes and no error."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        vote_repo = await unit_env.get(VoteRepository)
        seed_hi_post(source, upvotes="carol,,dave")
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)

        result = await writer.write_votes(source, resolver, post_ids)

        assert result.created == 2
        assert result.rejections == []
        votes = await vote_repo.find_by_post(post_ids.resolve(LegacyPostId(1)))
        assert sorted(v.user_id for v in votes) == sorted(
            [resolver.user_id("carol"), resolver.user_id("dave")]
        )
        assert all(v.vote == VoteDirection.UP for v in votes)

    @pytest.mark.asyncio
    async def test_votes_on_rejected_post_are_orphaned(self, unit_env):
        """Every voter of a rejected post is reported."""
        writer = await unit_env.get(NormalizerWriter)
        source = await unit_env.get(LegacySource)
        seed_hi_post(source, text_content=None, upvotes="bob", downvotes="carol")
        resolver = await resolver_for(unit_env, source)
        post_ids, _ = await writer.write_posts(source, resolver)

        result = await writer.write_votes(source, resolver, post_ids)

        assert result.created == 0
        assert [r.kind for r in result.rejections] == [
            RejectionKind.ORPHANED,
            RejectionKind.ORPHANED,
        ]
