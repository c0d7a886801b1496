"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from brainshelf.domain.model import Entry, Metadata, Project, Tag, TagUsage, Template
from brainshelf.domain.value import (
    EntryId,
    EntryType,
    MetadataId,
    ProjectColor,
    ProjectId,
    TagId,
    TagName,
    TemplateId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model.

    Args:
        row: Database row as dict

    Returns:
        Project domain model
    """
    return Project(
        id=ProjectId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        color=ProjectColor(row["color"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict."""
    return {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "color": project.color.root,
        "created_at": project.created_at,
        "updated_at": project.updated_at,
    }


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_tag_usage(row: Dict[str, Any]) -> TagUsage:
    """Convert a tag row joined with usage columns to TagUsage."""
    return TagUsage(
        tag=row_to_tag(row),
        usage_count=row.get("usage_count") or 0,
        last_used_at=row.get("last_used_at"),
    )


def row_to_metadata(row: Dict[str, Any]) -> Metadata:
    """Convert database row to Metadata domain model."""
    return Metadata(
        id=MetadataId(_uuid(row["id"])),
        entry_id=EntryId(_uuid(row["entry_id"])),
        title=row.get("title"),
        description=row.get("description"),
        keywords=row.get("keywords"),
        image_url=row.get("image_url"),
        favicon_url=row.get("favicon_url"),
        author=row.get("author"),
        site_name=row.get("site_name"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def metadata_to_dict(metadata: Metadata) -> Dict[str, Any]:
    """Convert Metadata domain model to database dict."""
    return metadata.model_dump()


def row_to_entry(
    row: Dict[str, Any],
    tag_names: Optional[list[str]] = None,
    metadata: Optional[Metadata] = None,
    project_name: Optional[str] = None,
) -> Entry:
    """Convert database row to Entry domain model.

    Args:
        row: Database row as dict
        tag_names: Names of the entry's tags
        metadata: The entry's metadata, if any
        project_name: Name of the owning project

    Returns:
        Entry domain model
    """
    return Entry(
        id=EntryId(_uuid(row["id"])),
        project_id=ProjectId(_uuid(row["project_id"])),
        title=row["title"],
        description=row.get("description"),
        type=EntryType(row["type"]),
        content=row.get("content"),
        url=row.get("url"),
        tag_names=[TagName(name) for name in (tag_names or [])],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        metadata=metadata,
        project_name=project_name,
    )


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    """Convert Entry domain model to database dict.

    Tags, metadata and project name are stored elsewhere and excluded.
    """
    return {
        "id": entry.id,
        "project_id": entry.project_id,
        "title": entry.title,
        "description": entry.description,
        "type": entry.type.value,
        "content": entry.content,
        "url": entry.url,
        "created_at": entry.created_at,
        "updated_at": entry.updated_at,
    }


def row_to_template(row: Dict[str, Any]) -> Template:
    """Convert database row to Template domain model."""
    project_id = row.get("project_id")
    return Template(
        id=TemplateId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        type=EntryType(row["type"]),
        title=row.get("title"),
        content=row.get("content"),
        tag_names=[TagName(name) for name in (row.get("tag_names") or [])],
        is_default=row.get("is_default", False),
        project_id=ProjectId(_uuid(project_id)) if project_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def template_to_dict(template: Template) -> Dict[str, Any]:
    """Convert Template domain model to database dict."""
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "type": template.type.value,
        "title": template.title,
        "content": template.content,
        "tag_names": [name.root for name in template.tag_names],
        "is_default": template.is_default,
        "project_id": template.project_id,
        "created_at": template.created_at,
        "updated_at": template.updated_at,
    }
