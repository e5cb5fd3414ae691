"""normalized_schema

Create the normalized Udiddit schema that replaces bad_posts/bad_comments:
- Users (unique username, rename timestamp)
- Topics (unique name, optional description)
- Posts (url XOR content, author kept optional)
- Comments (threaded through comment_parent_id)
- Votes (+1/-1, one per user and post)

The legacy tables are left untouched.

Revision ID: 4c1e7a2b9d30
Revises:
Create Date: 2026-10-17 09:12:44.218305

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4c1e7a2b9d30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _time_created() -> sa.Column:
    return sa.Column(
        "time_created",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(25), nullable=False),
        _time_created(),
        sa.Column(
            "username_updated",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.CheckConstraint("LENGTH(TRIM(username)) > 0", name="username_not_empty"),
    )
    op.create_index("idx_users_username", "users", ["username"])

    # ========================================================================
    # TOPICS table
    # ========================================================================
    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("topic_name", sa.String(30), nullable=False),
        sa.Column("topic_description", sa.String(500), nullable=True),
        _time_created(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("topic_name", name="uq_topics_topic_name"),
        sa.CheckConstraint(
            "LENGTH(TRIM(topic_name)) > 0", name="topic_name_not_empty"
        ),
    )
    op.create_index("idx_topics_topic_name", "topics", ["topic_name"])

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("post_title", sa.String(100), nullable=False),
        sa.Column("post_url", sa.String(), nullable=True),
        sa.Column("post_content", sa.Text(), nullable=True),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        _time_created(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "LENGTH(TRIM(post_title)) > 0", name="post_title_not_empty"
        ),
        sa.CheckConstraint(
            "(post_url IS NOT NULL AND post_content IS NULL)"
            " OR (post_url IS NULL AND post_content IS NOT NULL)",
            name="post_url_or_content",
        ),
    )
    op.create_index("idx_posts_post_url", "posts", ["post_url"])
    op.create_index("idx_posts_topic_id", "posts", ["topic_id"])
    op.create_index("idx_posts_user_id", "posts", ["user_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("comment_text", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("comment_parent_id", sa.Integer(), nullable=True),
        _time_created(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["comment_parent_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.CheckConstraint(
            "LENGTH(TRIM(comment_text)) > 0", name="comment_text_not_empty"
        ),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_parent_id", "comments", ["comment_parent_id"])
    op.create_index("idx_comments_user_id", "comments", ["user_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("vote", sa.SmallInteger(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("post_id", sa.Integer(), nullable=False),
        _time_created(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "post_id", name="one_vote_per_user_and_post"),
        sa.CheckConstraint("vote = 1 OR vote = -1", name="vote_up_or_down"),
    )
    op.create_index("idx_votes_post_id", "votes", ["post_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("topics")
    op.drop_table("users")
