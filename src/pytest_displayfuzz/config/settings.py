from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Configuration settings for pytest-displayfuzz.
    
    Values can be overridden by environment variables with PYTEST_DISPLAYFUZZ__ prefix.
    e.g. PYTEST_DISPLAYFUZZ__SEED=42
    """
    model_config = SettingsConfigDict(
        env_prefix="PYTEST_DISPLAYFUZZ__",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = Field(default="pytest-displayfuzz", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    # Default fuzzing parameters (if not specified via CLI or Marker)
    seed: int = Field(
        default=0,
        ge=0,
        description="Base seed from which every fuzzed computer is derived. Can be overridden by CLI or marker."
    )
    runs: int = Field(
        default=1,
        ge=1,
        description="Number of seeds each fuzzed test is run with. Can be overridden by CLI or marker."
    )


def get_settings() -> Settings:
    """Retrieve application settings."""
    return Settings()
