from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_lower(v: str) -> str:
    """Converts to lowercase and strips whitespace."""
    return v.strip().lower() if isinstance(v, str) else v


def parse_upper(v: str) -> str:
    """Converts to uppercase and strips whitespace."""
    return v.strip().upper() if isinstance(v, str) else v


def resolve_path(v: str | None) -> str | None:
    """Pins a relative path to the working directory at load time."""
    return str(Path(v).expanduser().resolve()) if v else v


# Custom types for automatic formatting
LowerStr = Annotated[str, BeforeValidator(parse_lower)]
UpperStr = Annotated[str, BeforeValidator(parse_upper)]
ResolvedPath = Annotated[str | None, AfterValidator(resolve_path)]


class EnvBase(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AppSettings(EnvBase):
    """General application settings."""

    PROJECT_NAME: str = "Career Details"
    VERSION: str = "0.1.0"

    # Server config
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    ENV_MODE: UpperStr = "LOCAL"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: UpperStr = "INFO"
    LOG_VERBOSITY: LowerStr = "verbose"


class ContentSettings(EnvBase):
    """Locations of the content assets.

    Both default to the JSON files packaged under ``career_details/data``.
    Relative paths are made absolute when the settings are loaded.
    """

    CAREER_DETAILS_CONTENT_PATH: ResolvedPath = None
    CAREER_PROGRESSIONS_CONTENT_PATH: ResolvedPath = None


class Settings:
    def __init__(self):
        self.reload()

    def reload(self) -> None:
        """Re-read every settings group from the environment."""
        self.app = AppSettings()
        self.content = ContentSettings()


settings = Settings()
