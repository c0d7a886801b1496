"""Tag consolidation: rename and merge across the tag store and entries."""

import logfire

from brainshelf.domain.error import ConflictError, InvalidOperationError, NotFoundError
from brainshelf.domain.model.tag import MergeResult, Tag
from brainshelf.domain.repository.tag import TagRepository
from brainshelf.domain.value import TagId

from .base import Service
from .tag_service import parse_tag_name


class TagConsolidationService(Service):
    """Domain service for renaming and merging tags.

    Both operations are atomic in the repository: a failure part-way
    leaves tags and entry associations exactly as they were.
    """

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag consolidation service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def rename_tag(self, tag_id: TagId, new_name: str) -> Tag:
        """Rename a tag.

        Renaming onto the tag's own (normalized) name is a no-op.

        Args:
            tag_id: Tag to rename
            new_name: Raw new name (normalized here)

        Returns:
            The renamed tag

        Raises:
            ValidationError: If the new name is blank or too long
            NotFoundError: If the tag does not exist
            ConflictError: If another tag already has the new name
        """
        name = parse_tag_name(new_name, field="newName")
        with logfire.span(
            "tag_consolidation.rename_tag", tag_id=str(tag_id), new_name=name.root
        ):
            tag = await self.tag_repository.find_by_id(tag_id)
            if tag is None:
                logfire.warn("Tag not found for rename", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))

            if tag.name == name:
                logfire.info("Tag already has requested name", tag_id=str(tag_id))
                return tag

            existing = await self.tag_repository.find_by_name(name)
            if existing is not None:
                logfire.warn(
                    "Tag rename collides with existing tag",
                    tag_id=str(tag_id),
                    existing_id=str(existing.id),
                    new_name=name.root,
                )
                raise ConflictError(
                    f"Tag '{name.root}' already exists. Use merge instead."
                )

            # The unique index still guards against a concurrent rename
            renamed = await self.tag_repository.rename(tag_id, name)
            if renamed is None:
                raise NotFoundError("Tag", str(tag_id))

            logfire.info(
                "Tag renamed",
                tag_id=str(tag_id),
                old_name=tag.name.root,
                new_name=name.root,
            )
            return renamed

    async def merge_tags(self, source_id: TagId, target_id: TagId) -> MergeResult:
        """Merge the source tag into the target tag.

        Every entry tagged with the source ends up tagged with the target
        (once), is marked updated, and the source tag is deleted.

        Args:
            source_id: Tag to merge away
            target_id: Tag to keep

        Returns:
            Merge result with the target tag and the number of entries moved

        Raises:
            InvalidOperationError: If source and target are the same tag
            NotFoundError: If either tag does not exist
        """
        with logfire.span(
            "tag_consolidation.merge_tags",
            source_id=str(source_id),
            target_id=str(target_id),
        ):
            if source_id == target_id:
                logfire.warn("Attempted self-merge", tag_id=str(source_id))
                raise InvalidOperationError("Cannot merge a tag into itself")

            source = await self.tag_repository.find_by_id(source_id)
            if source is None:
                raise NotFoundError("Tag", str(source_id))
            target = await self.tag_repository.find_by_id(target_id)
            if target is None:
                raise NotFoundError("Tag", str(target_id))

            reassigned = await self.tag_repository.merge(source_id, target_id)

            logfire.info(
                "Tags merged",
                source=source.name.root,
                target=target.name.root,
                reassigned_entries=reassigned,
            )
            return MergeResult(
                source_id=source_id, target=target, reassigned_entries=reassigned
            )
