"""Application settings and configuration.

This module defines all configuration options for the SkillHub application.
Settings are loaded from environment variables with sensible defaults.
"""

from pathlib import Path

from nacl import pwhash
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    This class defines all configuration options for the SkillHub application.
    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="SkillHub", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Routes are served at the root by default to match existing clients
    api_prefix: str = Field(default="", alias="API_PREFIX")

    # JSON document store
    data_file: Path = Field(default=Path("./data/db.json"), alias="DATA_FILE")

    # Media uploads
    uploads_dir: Path = Field(default=Path("./uploads"), alias="UPLOADS_DIR")
    media_url_prefix: str = Field(default="/uploads", alias="MEDIA_URL_PREFIX")
    max_upload_files: int = Field(default=5, alias="MAX_UPLOAD_FILES")
    max_upload_bytes: int = Field(default=50 * 1024 * 1024, alias="MAX_UPLOAD_BYTES")
    allowed_media_types: list[str] = Field(
        default=["image/jpeg", "image/png", "image/jpg", "video/mp4"],
        alias="ALLOWED_MEDIA_TYPES",
    )

    # Argon2id cost parameters for password hashing
    password_hash_opslimit: int = Field(
        default=pwhash.argon2id.OPSLIMIT_INTERACTIVE,
        alias="PASSWORD_HASH_OPSLIMIT",
    )
    password_hash_memlimit: int = Field(
        default=pwhash.argon2id.MEMLIMIT_INTERACTIVE,
        alias="PASSWORD_HASH_MEMLIMIT",
    )

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def media_url_root(self) -> str:
        """Return the media URL prefix without a trailing slash.

        Returns:
            Prefix used when building relative media paths
        """
        return "/" + self.media_url_prefix.strip("/")


settings = Settings()
