"""Strongly typed identifiers for BrainShelf domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

ProjectId = NewType("ProjectId", UUID)
EntryId = NewType("EntryId", UUID)
TagId = NewType("TagId", UUID)
MetadataId = NewType("MetadataId", UUID)
TemplateId = NewType("TemplateId", UUID)
