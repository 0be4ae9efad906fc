"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from pathlib import Path
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Tierboard API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage (single JSON document)
    ratings_file: Path = Field(
        default=Path("ratings.json"),
        validation_alias=AliasChoices("RATINGS_FILE"),
    )

    # Front-end page served at "/" when the directory exists
    static_dir: Path = Field(
        default=Path("public"),
        validation_alias=AliasChoices("STATIC_DIR"),
    )

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """Origins from a JSON array string, a comma-separated string or a list."""
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    v = json.loads(s)
                except json.JSONDecodeError:
                    v = s.strip("[]").split(",")
            else:
                v = s.split(",")
        if not isinstance(v, list):
            raise ValueError("cors_origins must be a list or a string")
        return [str(x).strip() for x in v if str(x).strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
