"""SQLAlchemy table definitions for Inkwell.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (Account directory; rows are created by the account service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(64), nullable=False, unique=True),
    Column("fullname", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("profile_img", Text, nullable=True),
    Column("bio", String(500), nullable=True),
    Column("total_posts", Integer, nullable=False, server_default="0"),
    Column("total_reads", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("total_posts >= 0", name="users_total_posts_non_negative"),
    CheckConstraint("total_reads >= 0", name="users_total_reads_non_negative"),
)

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("slug", String(100), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column("description", String(200), nullable=False, server_default=""),
    Column("banner_url", Text, nullable=True),
    Column("content", JSONB, nullable=False, server_default=text("'{\"blocks\": []}'")),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("draft", Boolean, nullable=False, server_default="false"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("total_likes", Integer, nullable=False, server_default="0"),
    Column("total_comments", Integer, nullable=False, server_default="0"),
    Column("total_reads", Integer, nullable=False, server_default="0"),
    Column("total_parent_comments", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("total_likes >= 0", name="blogs_total_likes_non_negative"),
    CheckConstraint("total_comments >= 0", name="blogs_total_comments_non_negative"),
    CheckConstraint("total_reads >= 0", name="blogs_total_reads_non_negative"),
    CheckConstraint(
        "total_parent_comments >= 0", name="blogs_total_parent_comments_non_negative"
    ),
)

Index("idx_blogs_author_id", blogs_table.c.author_id)
Index("idx_blogs_published_at", blogs_table.c.published_at.desc())
Index("idx_blogs_tags", blogs_table.c.tags, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "blog_id",
        UUID(as_uuid=True),
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Snapshot of the blog's author at creation (authorization cache)
    Column("blog_author_id", UUID(as_uuid=True), nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    # No FK: subtrees are removed explicitly by the cascade delete
    Column("parent_comment_id", UUID(as_uuid=True), nullable=True),
    Column("is_reply", Boolean, nullable=False, server_default="false"),
    Column("child_ids", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "is_reply = (parent_comment_id IS NOT NULL)", name="reply_has_parent"
    ),
    CheckConstraint("length(body) > 0", name="body_not_empty"),
)

Index(
    "idx_comments_blog_top_level",
    comments_table.c.blog_id,
    comments_table.c.created_at.desc(),
    postgresql_where=comments_table.c.is_reply.is_(False),
)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("type", String(20), nullable=False),  # 'like', 'comment', 'reply'
    Column("blog_id", UUID(as_uuid=True), nullable=False),
    Column("recipient_id", UUID(as_uuid=True), nullable=False),
    Column("actor_id", UUID(as_uuid=True), nullable=False),
    Column("comment_id", UUID(as_uuid=True), nullable=True),
    Column("replied_on_comment_id", UUID(as_uuid=True), nullable=True),
    Column("reply_id", UUID(as_uuid=True), nullable=True),
    Column("seen", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("type IN ('like', 'comment', 'reply')", name="notification_type"),
)

Index(
    "idx_notifications_recipient_created_at",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index("idx_notifications_comment_id", notifications_table.c.comment_id)
Index("idx_notifications_reply_id", notifications_table.c.reply_id)
# One like per actor and blog
Index(
    "uq_notifications_like",
    notifications_table.c.actor_id,
    notifications_table.c.blog_id,
    unique=True,
    postgresql_where=notifications_table.c.type == "like",
)

# ============================================================================
# FOLLOW_UPS TABLE (outbox)
# ============================================================================
follow_ups_table = Table(
    "follow_ups",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("key", String(255), nullable=False, unique=True),
    Column("kind", String(50), nullable=False),
    Column("payload", JSONB, nullable=False, server_default=text("'{}'")),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("attempts", Integer, nullable=False, server_default="0"),
    Column("last_error", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("applied_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('pending', 'applied', 'failed')", name="follow_up_status"
    ),
)

Index(
    "idx_follow_ups_pending",
    follow_ups_table.c.created_at,
    postgresql_where=follow_ups_table.c.status == "pending",
)
