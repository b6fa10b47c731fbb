"""Unified settings — CLI flags and environment variables in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BRAS_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class BrasSettings(BaseSettings):
    """Settings for the ``bras`` CLI, frozen after construction.

    Stored on the :class:`~bras.commands._context.AppContext` at the CLI
    root and read by every command.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BRAS_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and env vars; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> BrasSettings:
        """Construct settings from a CLI invocation.

        Flags left at ``None`` or ``False`` are dropped so that ``BRAS_*``
        environment variables still apply when the flag was not given.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
