from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic import Field, model_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_ARBITER_DIR = Path(".arbiter")
DEFAULT_CONFIG_PATH = DEFAULT_ARBITER_DIR / "config.json"
DEFAULT_STORE_FILENAME = "arbitrator.json"


class Config(BaseSettings):
    """
    Arbiter configuration.

    Sources, highest priority first: constructor arguments, ARBITER_*
    environment variables, .env, then .arbiter/config.json.
    """

    arbiter_dir: Path = Field(
        default=DEFAULT_ARBITER_DIR,
        description="Root directory for arbiter artifacts.",
    )
    store_path: Optional[Path] = Field(
        default=None,
        description=(
            "Path to the arbitrator JSON store. Relative paths live under "
            "arbiter_dir."
        ),
    )
    save_on_every_update: bool = Field(
        default=False,
        description="Whether explicit save requests write to the store.",
    )
    store_write_attempts: int = Field(
        default=3, ge=1, description="Write attempts before a store write fails."
    )
    log_level: str = Field(default="INFO", description="Package logging level.")

    model_config = SettingsConfigDict(
        env_prefix="ARBITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        json_file=DEFAULT_CONFIG_PATH,
        extra="forbid",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
        )

    @model_validator(mode="after")
    def _place_store(self) -> "Config":
        """Puts the store file under arbiter_dir unless an absolute path is set."""

        store_path = self.store_path or Path(DEFAULT_STORE_FILENAME)
        if not store_path.is_absolute():
            store_path = self.arbiter_dir / store_path
        self.store_path = store_path
        return self

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """
        Loads configuration, optionally from an explicitly named JSON file.

        Values in an explicitly named file take precedence over the
        environment, since the caller asked for that file by name.

        Args:
            path: JSON config file to use instead of .arbiter/config.json.

        Returns:
            A validated configuration object.
        """
        if path is None:
            return cls()
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
        return cls(**JsonConfigSettingsSource(cls, json_file=path)())

    def get_store_path(self) -> Path:
        if self.store_path is None:
            raise ValueError("Arbitrator store path is not configured.")
        return self.store_path
