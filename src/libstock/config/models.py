"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, libstock.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    backend: Literal["memory", "sqlite"] = "memory"
    path: str = ".libstock/libstock.db"
    per_title_locking: bool = True


class MembersConfig(BaseModel):
    """[members] section."""

    model_config = {"frozen": True}

    allowed: list[int] = Field(default_factory=list)
    allow_all: bool = False


class NotifyConfig(BaseModel):
    """[notify] section."""

    model_config = {"frozen": True}

    discover_plugins: bool = True
    log_events: bool = True
