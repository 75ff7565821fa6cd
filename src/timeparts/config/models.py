"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``timeparts.toml`` only holds
overrides.  An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from timeparts.domain.formats import TimeFormat

# --- timeparts.toml sections ---


class FormatConfig(BaseModel):
    """[format] section."""

    model_config = {"frozen": True}

    default_pattern: str = TimeFormat.DATE_TIME.value
    utc: bool = False


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    allow_time_only: bool = True


class TimepartsConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    format: FormatConfig = Field(default_factory=FormatConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)
