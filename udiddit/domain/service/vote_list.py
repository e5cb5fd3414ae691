"""Splitting of legacy comma-joined voter lists."""

from typing import Iterator, Optional

from udiddit.domain.value import VoteDirection


def split_vote_lists(
    upvotes: Optional[str], downvotes: Optional[str]
) -> Iterator[tuple[str, VoteDirection]]:
    """Yield one ``(username, direction)`` pair per voter.

    Up-voters come first, then down-voters, each in list order. Empty and
    whitespace-only tokens (trailing or doubled commas) are dropped; other
    tokens are returned verbatim. A missing list counts as empty.

    Args:
        upvotes: Comma-joined up-voter usernames
        downvotes: Comma-joined down-voter usernames

    Yields:
        Voter username and vote direction
    """
    yield from _split(upvotes, VoteDirection.UP)
    yield from _split(downvotes, VoteDirection.DOWN)


def _split(
    voters: Optional[str], direction: VoteDirection
) -> Iterator[tuple[str, VoteDirection]]:
    if not voters:
        return
    for token in voters.split(","):
        if token.strip():
            yield token, direction
