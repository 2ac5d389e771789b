# src/hotel_admin/settings.py
import json
import logging
from functools import lru_cache
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_UPLOAD_TYPES = ["jpg", "jpeg", "png", "gif", "webp", "svg"]


class Settings(BaseSettings):
    """
    Single source of truth for all application settings.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Usage:
        from hotel_admin.settings import get_settings
        settings = get_settings()
        bucket_name = settings.storage_bucket
    """

    # Application Settings
    app_name: str = Field(
        default="hotel-admin",
        description="Application name"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    # Object storage credentials (S3-compatible, Tebi by default)
    storage_access_key: Optional[str] = Field(
        default=None,
        alias="TEBI_API_KEY",
        description="Bucket access key"
    )

    storage_secret_key: Optional[str] = Field(
        default=None,
        alias="TEBI_MASTER_KEY",
        description="Bucket secret key"
    )

    storage_bucket: Optional[str] = Field(
        default=None,
        alias="TEBI_BUCKET",
        description="Bucket holding uploaded media"
    )

    storage_endpoint_url: Optional[str] = Field(
        default="https://s3.tebi.io",
        alias="STORAGE_ENDPOINT_URL",
        description="S3 API endpoint; None falls back to the AWS default"
    )

    storage_public_host: str = Field(
        default="s3.tebi.io",
        alias="STORAGE_PUBLIC_HOST",
        description="Host used to build public object URLs"
    )

    storage_region: str = Field(
        default="auto",
        alias="STORAGE_REGION"
    )

    storage_max_attempts: int = Field(
        default=3,
        alias="STORAGE_MAX_ATTEMPTS",
        description="Automatic attempts on transient store failures"
    )

    # Upload limits
    max_upload_size_bytes: int = Field(
        default=10 * 1024 * 1024,
        alias="MAX_UPLOAD_SIZE_BYTES"
    )

    check_upload_types: bool = Field(
        default=True,
        alias="CHECK_UPLOAD_TYPES"
    )

    allowed_upload_types: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_UPLOAD_TYPES),
        alias="ALLOWED_UPLOAD_TYPES"
    )

    # Backend API base URL resolution
    deployment_url: Optional[str] = Field(
        default=None,
        alias="VERCEL_URL",
        description="Host of the current deployment, without scheme"
    )

    is_production: bool = Field(
        default=False,
        alias="VERCEL",
        description="Set by the hosting platform in deployed environments"
    )

    production_url: str = Field(
        default="https://dogahoteloludeniznew.vercel.app",
        alias="PRODUCTION_URL"
    )

    local_base_url: str = Field(
        default="http://localhost:3000",
        alias="LOCAL_BASE_URL"
    )

    api_timeout: float = Field(
        default=30.0,
        alias="API_TIMEOUT",
        description="Seconds to wait for the admin REST API"
    )

    # Admin forms
    redirect_delay_seconds: float = Field(
        default=2.0,
        alias="REDIRECT_DELAY_SECONDS",
        description="Pause between a success message and navigation"
    )

    @field_validator(
        "storage_access_key",
        "storage_secret_key",
        "storage_bucket",
        "storage_endpoint_url",
        "deployment_url",
        mode="before",
    )
    @classmethod
    def strip_and_blank_to_none(cls, v):
        """Trim copy-paste whitespace; an empty value counts as unset."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("is_production", mode="before")
    @classmethod
    def blank_flag_is_false(cls, v):
        if isinstance(v, str) and not v.strip():
            return False
        return v

    @field_validator("allowed_upload_types", mode="before")
    @classmethod
    def split_upload_types(cls, v):
        """Accept `jpg,png` as well as a JSON list from the environment."""
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return v.split(",")
        return v

    @field_validator("allowed_upload_types")
    @classmethod
    def normalize_upload_types(cls, v: List[str]) -> List[str]:
        return [ext.strip().lstrip(".").lower() for ext in v if ext.strip()]

    @property
    def storage_configured(self) -> bool:
        """True when key, secret and bucket are all present."""
        return bool(self.storage_access_key and self.storage_secret_key and self.storage_bucket)

    def describe(self) -> dict:
        """Settings summary that is safe to print or log."""
        return {
            "app_name": self.app_name,
            "storage_endpoint_url": self.storage_endpoint_url,
            "storage_bucket": self.storage_bucket,
            "storage_region": self.storage_region,
            "access_key_provided": bool(self.storage_access_key),
            "secret_key_provided": bool(self.storage_secret_key),
            "access_key_length": len(self.storage_access_key or ""),
            "max_upload_size_bytes": self.max_upload_size_bytes,
            "allowed_upload_types": self.allowed_upload_types,
            "base_url": resolve_base_url(self),
        }

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


def resolve_base_url(settings: Settings, origin: Optional[str] = None) -> str:
    """
    Pick the host the admin REST API lives on.

    Checked in order: the deployment URL, the production URL when the production
    flag is set, the origin of the request being served (if any), and finally the
    local development default.
    """
    if settings.deployment_url:
        base_url = f"https://{settings.deployment_url}"
        logger.info(f"Using deployment URL: {base_url}")
        return base_url

    if settings.is_production:
        logger.info(f"Using production URL: {settings.production_url}")
        return settings.production_url

    if origin:
        base_url = origin.rstrip("/")
        logger.info(f"Using request origin: {base_url}")
        return base_url

    logger.info(f"Using local default URL: {settings.local_base_url}")
    return settings.local_base_url


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()
