"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_MAX_LIBRARIES = 1
MAX_MAX_LIBRARIES = 20


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoreConfig(Base):
    """Remote document management service."""

    base_url: str = "http://127.0.0.1:6280/api"
    api_key: str = ""
    timeout: float = 30.0


class SuggestLibrariesConfig(Base):
    """Library suggestion tool configuration."""

    enabled: bool = True
    default_max_libraries: int = 5
    results_per_library: int = Field(default=3, ge=1)
    snippet_length: int = Field(default=200, ge=1)
    search_timeout: float | None = None  # seconds per library; None waits for the store

    @field_validator("default_max_libraries")
    @classmethod
    def _check_default_max_libraries(cls, value: int) -> int:
        if not MIN_MAX_LIBRARIES <= value <= MAX_MAX_LIBRARIES:
            raise ValueError(
                f"defaultMaxLibraries must be between {MIN_MAX_LIBRARIES} and {MAX_MAX_LIBRARIES}"
            )
        return value

    @field_validator("search_timeout")
    @classmethod
    def _check_search_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("searchTimeout must be > 0")
        return value


class ToolsConfig(Base):
    """Tools configuration."""

    suggest_libraries: SuggestLibrariesConfig = Field(default_factory=SuggestLibrariesConfig)


class Config(BaseSettings):
    """Root configuration for docsbot."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)

    model_config = SettingsConfigDict(
        env_prefix="DOCSBOT_",
        env_nested_delimiter="__",
        alias_generator=to_camel,
        populate_by_name=True,
    )
