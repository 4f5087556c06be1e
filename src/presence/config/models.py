"""Pydantic configuration models with code-baked defaults.

Each model is one table of the config file ([plugins], [output]).  Files
only carry overrides; the defaults live here.
An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- presence.toml sections ---


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".presence/plugins"
    disabled: list[str] = Field(default_factory=list)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True
