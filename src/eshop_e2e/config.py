"""Configuration management for the eShop end-to-end suite."""

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file at import time
load_dotenv()

CONFIG_FILE_NAMES = ["eshop_e2e.yaml", "eshop_e2e.yml", ".eshop_e2e.yaml"]
CONFIG_FILE_ENV = "ESHOP_E2E_CONFIG_FILE"


class StorefrontConfig(BaseModel):
    """Storefront under test and the demo account used to sign in."""

    base_url: str = "http://localhost:5100"
    username: str = "demouser@microsoft.com"
    password: str = "Pass@word1"


class BrowserConfig(BaseModel):
    """WebDriver startup options."""

    name: Literal["chrome", "firefox", "edge"] = "chrome"
    headless: bool = True
    remote_url: str | None = None
    window_width: int = 1920
    window_height: int = 1080


class WaitConfig(BaseModel):
    """Explicit wait and click retry settings."""

    timeout: float = 10.0
    poll_frequency: float = 0.5
    click_attempts: int = Field(default=3, ge=1)


class CatalogConfig(BaseModel):
    """Catalog traversal limits."""

    max_pages: int = Field(default=5, ge=1)


class LoggingConfig(BaseModel):
    """Console logging configuration."""

    level: str = "INFO"
    rich_tracebacks: bool = True


class ArtifactsConfig(BaseModel):
    """Where and what to capture when a browser test fails."""

    directory: Path = Path("failures")
    screenshots: bool = True
    page_source: bool = True


class Config(BaseSettings):
    """Main configuration for the suite."""

    model_config = SettingsConfigDict(
        env_prefix="ESHOP_E2E_",
        env_nested_delimiter="__",
    )

    storefront: StorefrontConfig = Field(default_factory=StorefrontConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    waits: WaitConfig = Field(default_factory=WaitConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    artifacts: ArtifactsConfig = Field(default_factory=ArtifactsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment variables override values loaded from YAML
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def find_config_file() -> Path | None:
    """Return the config file named by ESHOP_E2E_CONFIG_FILE, or the first default one present."""
    if explicit := os.environ.get(CONFIG_FILE_ENV):
        return Path(explicit)
    for name in CONFIG_FILE_NAMES:
        if Path(name).exists():
            return Path(name)
    return None


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from a YAML file and environment variables.

    ``ESHOP_E2E_*`` variables take precedence over the YAML file, which takes
    precedence over defaults. Nested keys use ``__``, for example
    ``ESHOP_E2E_STOREFRONT__BASE_URL``.
    """
    config_data: dict = {}

    if config_path is None:
        config_path = find_config_file()

    if config_path and config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if raw and "eshop_e2e" in raw:
                config_data = raw["eshop_e2e"]
            elif raw:
                config_data = raw

    return Config(**config_data)
