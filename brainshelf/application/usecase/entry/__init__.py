"""Entry use cases."""

from .bulk_entries import (
    BulkDeleteRequest,
    BulkDeleteUseCase,
    BulkResponse,
    BulkTagRequest,
    BulkTagUseCase,
)
from .delete_entry import DeleteEntryRequest, DeleteEntryUseCase
from .duplicate_entry import DuplicateEntryRequest, DuplicateEntryUseCase
from .entry_item import EntryItem, MetadataItem
from .extract_metadata import (
    ExtractMetadataRequest,
    ExtractMetadataResponse,
    ExtractMetadataUseCase,
)
from .get_entry import GetEntryRequest, GetEntryUseCase
from .list_entries import ListEntriesRequest, ListEntriesUseCase
from .save_entry import (
    CreateEntryRequest,
    CreateEntryUseCase,
    UpdateEntryRequest,
    UpdateEntryUseCase,
)

__all__ = [
    "BulkDeleteRequest",
    "BulkDeleteUseCase",
    "BulkResponse",
    "BulkTagRequest",
    "BulkTagUseCase",
    "CreateEntryRequest",
    "CreateEntryUseCase",
    "DeleteEntryRequest",
    "DeleteEntryUseCase",
    "DuplicateEntryRequest",
    "DuplicateEntryUseCase",
    "EntryItem",
    "ExtractMetadataRequest",
    "ExtractMetadataResponse",
    "ExtractMetadataUseCase",
    "GetEntryRequest",
    "GetEntryUseCase",
    "ListEntriesRequest",
    "ListEntriesUseCase",
    "MetadataItem",
    "UpdateEntryRequest",
    "UpdateEntryUseCase",
]
