"""TimepartsSettings: one frozen object built from flags, env and TOML.

Sources, strongest first: CLI flags (init kwargs), ``TIMEPARTS_*``
environment variables (``TIMEPARTS_FORMAT__UTC=true`` reaches a nested
section), the ``timeparts.toml`` named by ``config_path``, then the
defaults of the section models.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from timeparts.config.discovery import find_config
from timeparts.config.models import FormatConfig, ParseConfig


class TimepartsSettings(BaseSettings):
    """Resolved settings shared by the CLI and the services.

    ``config_path`` is both an input and a record: the TOML file it names
    feeds the ``format`` and ``parse`` sections.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="TIMEPARTS_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    format: FormatConfig = Field(default_factory=FormatConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_file = None
        if isinstance(init_settings, InitSettingsSource):
            toml_file = init_settings.init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TimepartsSettings:
        """Settings for one CLI invocation.

        An explicit *config_path* that is not a file is ignored; without
        one, ``timeparts.toml`` is looked up from *start* (default: cwd).

        Raises:
            click.ClickException: The TOML file does not parse.
        """
        if config_path:
            path: Path | None = Path(config_path) if Path(config_path).is_file() else None
        else:
            path = find_config(start)
        try:
            return cls(config_path=path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
