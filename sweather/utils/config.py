"""Configuration management system using Pydantic v2 and YAML.

This module provides type-safe configuration loading with validation
for the Sweather application.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from sweather.utils.exceptions import ConfigFileNotFoundError


class GeminiConfig(BaseModel):
    """Configuration for the hosted Gemini model."""

    model: str = Field(default="gemini-2.5-flash", description="Gemini model used for all three calls")
    api_key_env: str = Field(default="GEMINI_API_KEY", description="Environment variable holding the API key")

    @field_validator('model')
    @classmethod
    def validate_model(cls, v: str) -> str:
        """Validate Gemini model name."""
        if not v.startswith("gemini-"):
            raise ValueError("Invalid model name. Expected a 'gemini-*' model")
        return v

    @field_validator('api_key_env')
    @classmethod
    def validate_api_key_env(cls, v: str) -> str:
        """Ensure the env var name is not blank."""
        if not v.strip():
            raise ValueError("api_key_env cannot be empty")
        return v.strip()


class StorageConfig(BaseModel):
    """Configuration for the key-value wardrobe store."""

    path: str = Field(default="./data/wardrobe_store.json", description="JSON file backing the key-value store")
    key: str = Field(default="sweather_wardrobe_v1", description="Key holding the wardrobe list")
    quota_bytes: int = Field(default=5 * 1024 * 1024, ge=1024, description="Maximum serialized store size")


class ImageConfig(BaseModel):
    """Configuration for uploaded image downsampling."""

    max_width: int = Field(default=400, description="Images wider than this are scaled down")
    jpeg_quality: int = Field(default=70, description="JPEG quality used when re-encoding")

    @field_validator('max_width')
    @classmethod
    def validate_max_width(cls, v: int) -> int:
        """Ensure max width is positive."""
        if v <= 0:
            raise ValueError("max_width must be positive")
        return v

    @field_validator('jpeg_quality')
    @classmethod
    def validate_jpeg_quality(cls, v: int) -> int:
        """Ensure quality is within Pillow's recommended JPEG range."""
        if not 1 <= v <= 95:
            raise ValueError("jpeg_quality must be between 1 and 95")
        return v


class AppConfig(BaseModel):
    """Root configuration model containing all sub-configurations."""

    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    images: ImageConfig = Field(default_factory=ImageConfig)
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Choose from: {valid_levels}")
        return v_upper

    @classmethod
    def from_yaml(cls, path: Path | str) -> "AppConfig":
        """Build a configuration directly from a YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Validated AppConfig instance
        """
        path = Path(path)
        if not path.exists():
            raise ConfigFileNotFoundError(f"Configuration file not found: {path}", path=str(path))

        with open(path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f) or {}

        return cls.model_validate(config_dict)


# Singleton pattern for configuration
_config: Optional[AppConfig] = None


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """Load and validate configuration from YAML file.

    The path is resolved from the argument, then the SWEATHER_CONFIG
    environment variable, then config/config.yaml in the project root.

    Args:
        config_path: Path to configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigFileNotFoundError: If config file doesn't exist
        pydantic.ValidationError: If configuration is invalid
    """
    if config_path is None:
        env_config_path = os.environ.get('SWEATHER_CONFIG')
        if env_config_path:
            config_path = Path(env_config_path)
        else:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        example_path = config_path.parent / "config.example.yaml"
        raise ConfigFileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please copy {example_path} to {config_path} and customize it.\n"
            f"Alternatively, set the SWEATHER_CONFIG environment variable to the config file path.",
            path=str(config_path),
        )

    return AppConfig.from_yaml(config_path)


def get_config(config_path: Optional[Path | str] = None, reload: bool = False) -> AppConfig:
    """Get configuration instance (singleton pattern).

    Args:
        config_path: Path to configuration file (only used on first call or if reload=True)
        reload: Force reload of configuration

    Returns:
        Cached or newly loaded AppConfig instance
    """
    global _config

    if _config is None or reload:
        _config = load_config(config_path)

    return _config


def reset_config() -> None:
    """Reset cached configuration (useful for testing)."""
    global _config
    _config = None
