"""Scanner configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScannerSettings(BaseSettings):
    """Settings for scanner construction.

    Loads from environment variables automatically:
        ARTIFIND_DETECT_FROZEN_BUNDLE, ARTIFIND_ENCODING
    """

    detect_frozen_bundle: bool = Field(
        default=True, description="Probe for a frozen application bundle and scan it when present"
    )
    encoding: str = Field(default="utf-8", description="Encoding used when printing resource content")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="ARTIFIND_",
    )
