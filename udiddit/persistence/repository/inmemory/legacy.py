"""In-memory legacy source for testing."""

from typing import AsyncIterator, Optional

from udiddit.domain.model.legacy import LegacyComment, LegacyPost
from udiddit.domain.repository.legacy import LegacySource
from udiddit.domain.value import LegacyCommentId, LegacyPostId


class InMemoryLegacySource(LegacySource):
    """Legacy corpus held in lists, seeded by tests."""

    def __init__(self) -> None:
        self._posts: list[LegacyPost] = []
        self._comments: list[LegacyComment] = []

    def add_post(
        self,
        id: int,
        title: Optional[str],
        username: Optional[str],
        topic: Optional[str],
        url: Optional[str] = None,
        text_content: Optional[str] = None,
        upvotes: Optional[str] = None,
        downvotes: Optional[str] = None,
    ) -> LegacyPost:
        """Seed a legacy post."""
        post = LegacyPost(
            id=LegacyPostId(id),
            title=title,
            url=url,
            text_content=text_content,
            username=username,
            topic=topic,
            upvotes=upvotes,
            downvotes=downvotes,
        )
        self._posts.append(post)
        return post

    def add_comment(
        self,
        id: int,
        post_id: Optional[int],
        username: Optional[str],
        text_content: Optional[str],
    ) -> LegacyComment:
        """Seed a legacy comment. Any column but the id may be None."""
        comment = LegacyComment(
            id=LegacyCommentId(id),
            post_id=LegacyPostId(post_id) if post_id is not None else None,
            username=username,
            text_content=text_content,
        )
        self._comments.append(comment)
        return comment

    async def iter_posts(self) -> AsyncIterator[LegacyPost]:
        """Iterate over legacy posts in id order."""
        for post in sorted(self._posts, key=lambda p: p.id):
            yield post

    async def iter_comments(self) -> AsyncIterator[LegacyComment]:
        """Iterate over legacy comments in id order."""
        for comment in sorted(self._comments, key=lambda c: c.id):
            yield comment
