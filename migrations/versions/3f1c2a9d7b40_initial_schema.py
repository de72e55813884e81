"""initial_schema

Create the Inkwell schema:
- Users (account directory with post and read counters)
- Blogs (content, tags, activity counters)
- Comments (two-level tree: top-level comments and replies with child lists)
- Notifications (like / comment / reply, one like per actor and blog)
- Follow-ups (outbox of counter deltas and notification writes)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-17 09:12:44.518302

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(64), nullable=False),
        sa.Column("fullname", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("profile_img", sa.Text(), nullable=True),
        sa.Column("bio", sa.String(500), nullable=True),
        sa.Column("total_posts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_reads", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.CheckConstraint("total_posts >= 0", name="users_total_posts_non_negative"),
        sa.CheckConstraint("total_reads >= 0", name="users_total_reads_non_negative"),
    )

    # ========================================================================
    # BLOGS table
    # ========================================================================
    op.create_table(
        "blogs",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.String(200), nullable=False, server_default=""),
        sa.Column("banner_url", sa.Text(), nullable=True),
        sa.Column(
            "content",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{\"blocks\": []}'"),
        ),
        sa.Column(
            "tags", postgresql.ARRAY(sa.String(50)), nullable=False, server_default="{}"
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("draft", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("published_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("total_likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_reads", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "total_parent_comments", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_blogs_slug"),
        sa.CheckConstraint("total_likes >= 0", name="blogs_total_likes_non_negative"),
        sa.CheckConstraint(
            "total_comments >= 0", name="blogs_total_comments_non_negative"
        ),
        sa.CheckConstraint("total_reads >= 0", name="blogs_total_reads_non_negative"),
        sa.CheckConstraint(
            "total_parent_comments >= 0",
            name="blogs_total_parent_comments_non_negative",
        ),
    )
    op.create_index("idx_blogs_author_id", "blogs", ["author_id"])
    op.create_index(
        "idx_blogs_published_at", "blogs", [sa.text("published_at DESC")]
    )
    op.create_index("idx_blogs_tags", "blogs", ["tags"], postgresql_using="gin")

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("blog_author_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        sa.Column("is_reply", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "child_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "is_reply = (parent_comment_id IS NOT NULL)", name="reply_has_parent"
        ),
        sa.CheckConstraint("length(body) > 0", name="body_not_empty"),
    )
    op.create_index(
        "idx_comments_blog_top_level",
        "comments",
        ["blog_id", sa.text("created_at DESC")],
        postgresql_where=sa.text("is_reply = false"),
    )
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=True),
        sa.Column("replied_on_comment_id", sa.UUID(), nullable=True),
        sa.Column("reply_id", sa.UUID(), nullable=True),
        sa.Column("seen", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('like', 'comment', 'reply')", name="notification_type"
        ),
    )
    op.create_index(
        "idx_notifications_recipient_created_at",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_notifications_comment_id", "notifications", ["comment_id"])
    op.create_index("idx_notifications_reply_id", "notifications", ["reply_id"])
    op.create_index(
        "uq_notifications_like",
        "notifications",
        ["actor_id", "blog_id"],
        unique=True,
        postgresql_where=sa.text("type = 'like'"),
    )

    # ========================================================================
    # FOLLOW_UPS table (outbox)
    # ========================================================================
    op.create_table(
        "follow_ups",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("key", sa.String(255), nullable=False),
        sa.Column("kind", sa.String(50), nullable=False),
        sa.Column(
            "payload", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'")
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_error", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("applied_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("key", name="uq_follow_ups_key"),
        sa.CheckConstraint(
            "status IN ('pending', 'applied', 'failed')", name="follow_up_status"
        ),
    )
    op.create_index(
        "idx_follow_ups_pending",
        "follow_ups",
        ["created_at"],
        postgresql_where=sa.text("status = 'pending'"),
    )

    # Trigger function to update updated_at timestamp
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_users_updated_at
        BEFORE UPDATE ON users
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)

    op.execute("""
        CREATE TRIGGER update_blogs_updated_at
        BEFORE UPDATE ON blogs
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TRIGGER IF EXISTS update_blogs_updated_at ON blogs")
    op.execute("DROP TRIGGER IF EXISTS update_users_updated_at ON users")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("follow_ups")
    op.drop_table("notifications")
    op.drop_table("comments")
    op.drop_table("blogs")
    op.drop_table("users")
