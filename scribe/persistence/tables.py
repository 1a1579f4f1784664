"""SQLAlchemy table definitions for Scribe.

Core tables used by the repositories. They match the schema created by the
Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

post_status_enum = postgresql.ENUM(
    "draft", "published", "archived", name="post_status", create_type=False
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=True),
    # Identity provider user id; no FK, users live with the provider
    Column("user_id", UUID, nullable=True),
    Column("status", post_status_enum, nullable=False, server_default="draft"),
    Column("featured_image", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_user_id_created_at", posts_table.c.user_id, posts_table.c.created_at)
Index("idx_posts_status_created_at", posts_table.c.status, posts_table.c.created_at)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", Text, nullable=False, unique=True),
    Column("slug", Text, nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS_TAGS TABLE (many-to-many)
# ============================================================================
posts_tags_table = Table(
    "posts_tags",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("post_id", "tag_id", name="pk_posts_tags"),
)

Index("idx_posts_tags_tag_id", posts_tags_table.c.tag_id)

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False, unique=True),
    Column("name", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
