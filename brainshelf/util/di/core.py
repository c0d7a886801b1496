"""Core dependencies (not overridden in tests)."""

from typing import Annotated

from fastapi import Depends, Request

from brainshelf.config import Settings


def get_settings(request: Request) -> Settings:
    """Provide the settings the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_settings)]
