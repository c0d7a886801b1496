"""initial_schema

Create the BrainShelf schema:
- Projects (top-level containers)
- Entries (note, link, code, task) with a weighted full-text search vector
- Tags (normalized, unique names) and the entry_tags association
- Entry metadata (extracted from link pages, one per entry) with its own vector
- Templates (global or per-project entry blueprints)

Search vectors are maintained by triggers over unaccented text in both the
english and russian configurations.

Revision ID: 3f9c1a7d2b64
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f9c1a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
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
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')
    op.execute('CREATE EXTENSION IF NOT EXISTS "unaccent"')

    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE entry_type AS ENUM ('note', 'link', 'code', 'task');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    entry_type = postgresql.ENUM(
        "note", "link", "code", "task", name="entry_type", create_type=False
    )

    # ========================================================================
    # PROJECTS table
    # ========================================================================
    op.create_table(
        "projects",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("color", sa.String(7), nullable=False, server_default="#3B82F6"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_projects_created_at", "projects", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # ENTRIES table
    # ========================================================================
    op.create_table(
        "entries",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.String(2000), nullable=True),
        sa.Column("type", entry_type, nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("search_vector", postgresql.TSVECTOR(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_entries_project_id", "entries", ["project_id"])
    op.create_index("idx_entries_type", "entries", ["type"])
    op.create_index("idx_entries_created_at", "entries", [sa.text("created_at DESC")])
    op.create_index("idx_entries_updated_at", "entries", [sa.text("updated_at DESC")])
    op.create_index(
        "idx_entries_search_vector",
        "entries",
        ["search_vector"],
        postgresql_using="gin",
    )

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),  # trimmed, lower-case
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tags_name", "tags", ["name"], unique=True)

    # ========================================================================
    # ENTRY_TAGS table (association only)
    # ========================================================================
    op.create_table(
        "entry_tags",
        sa.Column("entry_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.PrimaryKeyConstraint("entry_id", "tag_id", name="pk_entry_tags"),
        sa.ForeignKeyConstraint(["entry_id"], ["entries.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_entry_tags_tag_id", "entry_tags", ["tag_id"])

    # ========================================================================
    # ENTRY_METADATA table (one-to-one with entries)
    # ========================================================================
    op.create_table(
        "entry_metadata",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("entry_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("keywords", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("favicon_url", sa.Text(), nullable=True),
        sa.Column("author", sa.Text(), nullable=True),
        sa.Column("site_name", sa.Text(), nullable=True),
        sa.Column("search_vector", postgresql.TSVECTOR(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["entry_id"], ["entries.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("entry_id", name="uq_entry_metadata_entry_id"),
    )
    op.create_index(
        "idx_entry_metadata_search_vector",
        "entry_metadata",
        ["search_vector"],
        postgresql_using="gin",
    )

    # ========================================================================
    # TEMPLATES table
    # ========================================================================
    op.create_table(
        "templates",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("type", entry_type, nullable=False),
        sa.Column("title", sa.String(500), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column(
            "tag_names",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("project_id", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="SET NULL"),
    )
    op.create_index("idx_templates_project_id", "templates", ["project_id"])

    # ========================================================================
    # SEARCH VECTOR TRIGGERS
    # ========================================================================

    # Entries: title A, description and content B, url C
    op.execute("""
        CREATE OR REPLACE FUNCTION entries_search_vector_update()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.search_vector :=
                setweight(to_tsvector('english', unaccent(coalesce(NEW.title, ''))), 'A') ||
                setweight(to_tsvector('russian', unaccent(coalesce(NEW.title, ''))), 'A') ||
                setweight(to_tsvector('english', unaccent(coalesce(NEW.description, ''))), 'B') ||
                setweight(to_tsvector('russian', unaccent(coalesce(NEW.description, ''))), 'B') ||
                setweight(to_tsvector('english', unaccent(coalesce(NEW.content, ''))), 'B') ||
                setweight(to_tsvector('russian', unaccent(coalesce(NEW.content, ''))), 'B') ||
                setweight(to_tsvector('english', unaccent(coalesce(NEW.url, ''))), 'C') ||
                setweight(to_tsvector('russian', unaccent(coalesce(NEW.url, ''))), 'C');
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER entries_search_vector_trigger
        BEFORE INSERT OR UPDATE OF title, description, content, url ON entries
        FOR EACH ROW EXECUTE FUNCTION entries_search_vector_update()
    """)

    # Metadata: title A, description B, keywords C, author D
    op.execute("""
        CREATE OR REPLACE FUNCTION entry_metadata_search_vector_update()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.search_vector :=
                setweight(to_tsvector('english', unaccent(coalesce(NEW.title, ''))), 'A') ||
                setweight(to_tsvector('russian', unaccent(coalesce(NEW.title, ''))), 'A') ||
                setweight(to_tsvector('english', unaccent(coalesce(NEW.description, ''))), 'B') ||
                setweight(to_tsvector('russian', unaccent(coalesce(NEW.description, ''))), 'B') ||
                setweight(to_tsvector('english', unaccent(coalesce(NEW.keywords, ''))), 'C') ||
                setweight(to_tsvector('russian', unaccent(coalesce(NEW.keywords, ''))), 'C') ||
                setweight(to_tsvector('english', unaccent(coalesce(NEW.author, ''))), 'D') ||
                setweight(to_tsvector('russian', unaccent(coalesce(NEW.author, ''))), 'D');
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER entry_metadata_search_vector_trigger
        BEFORE INSERT OR UPDATE OF title, description, keywords, author ON entry_metadata
        FOR EACH ROW EXECUTE FUNCTION entry_metadata_search_vector_update()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop triggers
    op.execute(
        "DROP TRIGGER IF EXISTS entry_metadata_search_vector_trigger ON entry_metadata"
    )
    op.execute("DROP TRIGGER IF EXISTS entries_search_vector_trigger ON entries")

    # Drop trigger functions
    op.execute("DROP FUNCTION IF EXISTS entry_metadata_search_vector_update()")
    op.execute("DROP FUNCTION IF EXISTS entries_search_vector_update()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("templates")
    op.drop_table("entry_metadata")
    op.drop_table("entry_tags")
    op.drop_table("tags")
    op.drop_table("entries")
    op.drop_table("projects")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS entry_type")
