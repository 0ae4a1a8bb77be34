"""Root settings model for flatvec configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from flatvec.config.models.observability import ObservabilityConfig
from flatvec.config.models.search import SearchConfig

# TOML values handed to the settings source by get_settings()
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlValuesSource(PydanticBaseSettingsSource):
    """Settings source over already-loaded TOML values.

    Nested tables are returned whole and validated by the section models.
    """

    def __init__(self, settings_cls: type[BaseSettings], values: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._values = values

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        # Abstract on the base class; __call__ returns every value at once
        return self._values.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {key: value for key, value in self._values.items() if key in fields}


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml
    3. config/{FLATVEC_ENV}.toml
    4. FLATVEC_* environment variables
    """

    model_config = SettingsConfigDict(
        env_prefix="FLATVEC_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="flatvec", description="Application name for logging")
    debug: bool = Field(default=False, description="Enable debug mode")

    search: SearchConfig = Field(
        default_factory=SearchConfig,
        description="Vector search configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: constructor arguments, then env vars, then TOML."""
        return (
            init_settings,
            env_settings,
            TomlValuesSource(settings_cls, _toml_config),
        )
