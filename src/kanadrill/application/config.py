from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from kanadrill.domain.constants import DEFAULT_SETS, SET_SEPARATOR

CONFIG_FILES = [
    Path(".config/kanadrill/config.toml"),
    Path(".kanadrill.toml"),
]


class AppConfig(BaseSettings):
    """
    Configuration model for kana-drill.
    Supports loading from:
    1. Environment variables (KANADRILL_*)
    2. Config file (~/.config/kanadrill/config.toml or ~/.kanadrill.toml)
    3. Manual overrides (CLI)
    """

    model_config = SettingsConfigDict(
        env_prefix="KANADRILL_",
        extra="ignore",
    )

    # Session
    sets: str = DEFAULT_SETS
    seed: int | None = None

    # Output
    verbose: int = 0

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # First existing file wins; CLI overrides come first so they take precedence
        toml_file = None
        for f in CONFIG_FILES:
            candidate = Path.home() / f
            if candidate.exists():
                toml_file = candidate
                break

        if toml_file:
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (init_settings, env_settings)

    @field_validator("sets", mode="before")
    @classmethod
    def normalize_sets(cls, v: Any) -> str:
        if v is None:
            return DEFAULT_SETS
        if isinstance(v, (list, tuple)):
            v = SET_SEPARATOR.join(str(s) for s in v)
        return str(v).strip()

    def set_names(self) -> list[str]:
        """Requested set identifiers in order, as given."""
        return self.sets.split(SET_SEPARATOR)


def resolve_config(cli_overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in AppConfig
    2. ~/.config/kanadrill/config.toml (if exists)
    3. Environment variables (KANADRILL_*)
    4. cli_overrides (passed from Typer; None values are dropped)
    """
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    return AppConfig(**overrides)
