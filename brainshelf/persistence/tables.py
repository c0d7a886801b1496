"""SQLAlchemy table definitions for BrainShelf.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations; the search_vector
columns are maintained by database triggers, never written by the app.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, TSVECTOR, UUID

from brainshelf.domain.value import EntryType

# Metadata object for all tables
metadata = MetaData()

entry_type_enum = postgresql.ENUM(
    *[t.value for t in EntryType], name="entry_type", create_type=False
)

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("description", String(1000), nullable=True),
    Column("color", String(7), nullable=False, server_default="#3B82F6"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_projects_created_at", projects_table.c.created_at.desc())

# ============================================================================
# ENTRIES TABLE
# ============================================================================
entries_table = Table(
    "entries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(500), nullable=False),
    Column("description", String(2000), nullable=True),
    Column("type", entry_type_enum, nullable=False),
    Column("content", Text, nullable=True),
    Column("url", Text, nullable=True),
    # Weighted english+russian vector over title/description/content/url
    Column("search_vector", TSVECTOR, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_entries_project_id", entries_table.c.project_id)
Index("idx_entries_type", entries_table.c.type)
Index("idx_entries_created_at", entries_table.c.created_at.desc())
Index("idx_entries_updated_at", entries_table.c.updated_at.desc())
Index(
    "idx_entries_search_vector",
    entries_table.c.search_vector,
    postgresql_using="gin",
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),  # Normalized: trimmed, lower-case
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_tags_name", tags_table.c.name, unique=True)

# ============================================================================
# ENTRY_TAGS TABLE (association only, no payload)
# ============================================================================
entry_tags_table = Table(
    "entry_tags",
    metadata,
    Column(
        "entry_id", UUID, ForeignKey("entries.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    PrimaryKeyConstraint("entry_id", "tag_id", name="pk_entry_tags"),
)

Index("idx_entry_tags_tag_id", entry_tags_table.c.tag_id)

# ============================================================================
# ENTRY_METADATA TABLE (one-to-one with entries)
# ============================================================================
entry_metadata_table = Table(
    "entry_metadata",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "entry_id",
        UUID,
        ForeignKey("entries.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("title", Text, nullable=True),
    Column("description", Text, nullable=True),
    Column("keywords", Text, nullable=True),
    Column("image_url", Text, nullable=True),
    Column("favicon_url", Text, nullable=True),
    Column("author", Text, nullable=True),
    Column("site_name", Text, nullable=True),
    # Weighted english+russian vector over title/description/keywords/author
    Column("search_vector", TSVECTOR, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_entry_metadata_search_vector",
    entry_metadata_table.c.search_vector,
    postgresql_using="gin",
)

# ============================================================================
# TEMPLATES TABLE
# ============================================================================
templates_table = Table(
    "templates",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("description", String(1000), nullable=True),
    Column("type", entry_type_enum, nullable=False),
    Column("title", String(500), nullable=True),
    Column("content", Text, nullable=True),
    Column("tag_names", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column("is_default", Boolean, nullable=False, server_default="false"),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_templates_project_id", templates_table.c.project_id)
