"""Strongly typed identifiers for Udiddit entities.

Surrogate ids are integers assigned by the storage layer on insert.
Legacy ids identify rows of the denormalized source tables and are never
written into the normalized schema.
"""

from typing import NewType

# Normalized entity identifiers
UserId = NewType("UserId", int)
TopicId = NewType("TopicId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)

# Legacy source identifiers
LegacyPostId = NewType("LegacyPostId", int)
LegacyCommentId = NewType("LegacyCommentId", int)
