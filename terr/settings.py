"""Configuration settings for terr.

@public

Settings are loaded from environment variables with .env file support via
pydantic-settings. Every variable carries the ``TERR_`` prefix.

Environment variables:
    TERR_TRIM_PATH_PREFIX: Prefix removed from the front of captured file
        names, e.g. ``/home/ci/build/`` to get repository-relative paths.

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from terr.settings import settings
    >>> print(settings.trim_path_prefix)

Note:
    Settings are loaded once at module import and frozen. The process must
    be restarted to pick up changes to environment variables or .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for location capture.

    @public

    Attributes:
        trim_path_prefix: Stripped from captured file names when they start
                          with it. Empty (the default) keeps the full path
                          reported by the interpreter. Locations supplied
                          explicitly by callers are never trimmed.
    """

    model_config = SettingsConfigDict(
        env_prefix="TERR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    trim_path_prefix: str = ""


settings = Settings()
"""Global settings instance, read by location capture on every call."""
