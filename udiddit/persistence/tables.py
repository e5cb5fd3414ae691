"""SQLAlchemy table definitions for Udiddit.

``metadata`` holds the normalized schema and matches the Alembic migrations.
``legacy_metadata`` describes the denormalized source tables, which the
migration only reads and Alembic never manages.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all normalized tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("username", String(25), nullable=False),
    Column(
        "time_created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "username_updated",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    UniqueConstraint("username", name="uq_users_username"),
    CheckConstraint("LENGTH(TRIM(username)) > 0", name="username_not_empty"),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# TOPICS TABLE
# ============================================================================
topics_table = Table(
    "topics",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("topic_name", String(30), nullable=False),
    Column("topic_description", String(500), nullable=True),
    Column(
        "time_created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("topic_name", name="uq_topics_topic_name"),
    CheckConstraint("LENGTH(TRIM(topic_name)) > 0", name="topic_name_not_empty"),
)

Index("idx_topics_topic_name", topics_table.c.topic_name)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("post_title", String(100), nullable=False),
    Column("post_url", String, nullable=True),
    Column("post_content", Text, nullable=True),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "topic_id", Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "time_created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("LENGTH(TRIM(post_title)) > 0", name="post_title_not_empty"),
    CheckConstraint(
        "(post_url IS NOT NULL AND post_content IS NULL)"
        " OR (post_url IS NULL AND post_content IS NOT NULL)",
        name="post_url_or_content",
    ),
)

Index("idx_posts_post_url", posts_table.c.post_url)
Index("idx_posts_topic_id", posts_table.c.topic_id)
Index("idx_posts_user_id", posts_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("comment_text", Text, nullable=False),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "comment_parent_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "time_created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("LENGTH(TRIM(comment_text)) > 0", name="comment_text_not_empty"),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.comment_parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("vote", SmallInteger, nullable=False),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "time_created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", name="one_vote_per_user_and_post"),
    CheckConstraint("vote = 1 OR vote = -1", name="vote_up_or_down"),
)

Index("idx_votes_post_id", votes_table.c.post_id)

# ============================================================================
# LEGACY TABLES (read-only source)
# ============================================================================
legacy_metadata = MetaData()

bad_posts_table = Table(
    "bad_posts",
    legacy_metadata,
    Column("id", Integer, primary_key=True),
    Column("topic", String(50)),
    Column("username", String(50)),
    Column("title", String(150)),
    Column("url", String(4000)),
    Column("text_content", Text),
    Column("upvotes", Text),
    Column("downvotes", Text),
)

bad_comments_table = Table(
    "bad_comments",
    legacy_metadata,
    Column("id", Integer, primary_key=True),
    Column("username", String(50)),
    Column("post_id", Integer),
    Column("text_content", Text),
)
