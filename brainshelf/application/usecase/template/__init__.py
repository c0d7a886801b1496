"""Template use cases."""

from .list_templates import ListTemplatesRequest, ListTemplatesUseCase
from .manage_templates import (
    CreateTemplateRequest,
    CreateTemplateUseCase,
    DeleteTemplateRequest,
    DeleteTemplateUseCase,
    GetTemplateRequest,
    GetTemplateUseCase,
    UpdateTemplateRequest,
    UpdateTemplateUseCase,
)
from .template_item import TemplateFields, TemplateItem

__all__ = [
    "CreateTemplateRequest",
    "CreateTemplateUseCase",
    "DeleteTemplateRequest",
    "DeleteTemplateUseCase",
    "GetTemplateRequest",
    "GetTemplateUseCase",
    "ListTemplatesRequest",
    "ListTemplatesUseCase",
    "TemplateFields",
    "TemplateItem",
    "UpdateTemplateRequest",
    "UpdateTemplateUseCase",
]
