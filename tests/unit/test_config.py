"""Unit tests for configuration loading and validation."""

import pytest
import yaml
from pydantic import ValidationError

from sweather.utils.config import (
    AppConfig,
    GeminiConfig,
    ImageConfig,
    StorageConfig,
    get_config,
    load_config,
)
from sweather.utils.exceptions import ConfigFileNotFoundError


class TestGeminiConfig:
    """Test Gemini model configuration."""

    def test_defaults(self):
        """Test default model and key variable."""
        config = GeminiConfig()
        assert config.model.startswith("gemini-")
        assert config.api_key_env == "GEMINI_API_KEY"

    def test_rejects_non_gemini_model(self):
        """Test model names must be Gemini models."""
        with pytest.raises(ValidationError, match="gemini"):
            GeminiConfig(model="gpt-4o")

    def test_rejects_blank_key_env(self):
        """Test API key variable name cannot be blank."""
        with pytest.raises(ValidationError):
            GeminiConfig(api_key_env="   ")


class TestStorageConfig:
    """Test key-value store configuration."""

    def test_defaults(self):
        """Test default path, key and 5 MiB quota."""
        config = StorageConfig()
        assert config.path.endswith("wardrobe_store.json")
        assert config.key == "sweather_wardrobe_v1"
        assert config.quota_bytes == 5 * 1024 * 1024

    def test_quota_lower_bound(self):
        """Test tiny quotas are rejected."""
        with pytest.raises(ValidationError):
            StorageConfig(quota_bytes=10)


class TestImageConfig:
    """Test upload downsampling configuration."""

    def test_defaults(self):
        config = ImageConfig()
        assert config.max_width == 400
        assert config.jpeg_quality == 70

    @pytest.mark.parametrize("quality", [0, 96, 150])
    def test_quality_range(self, quality):
        """Test JPEG quality must be within 1-95."""
        with pytest.raises(ValidationError, match="jpeg_quality"):
            ImageConfig(jpeg_quality=quality)

    def test_width_must_be_positive(self):
        with pytest.raises(ValidationError, match="max_width"):
            ImageConfig(max_width=0)


class TestAppConfig:
    """Test application configuration."""

    def test_load_from_yaml(self, tmp_path):
        """Test loading configuration from YAML file."""
        config_data = {
            "gemini": {"model": "gemini-2.0-flash", "api_key_env": "MY_KEY"},
            "storage": {"path": str(tmp_path / "store.json"), "key": "k", "quota_bytes": 4096},
            "images": {"max_width": 320, "jpeg_quality": 80},
            "log_level": "debug",
        }
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.dump(config_data), encoding="utf-8")

        config = AppConfig.from_yaml(config_path)

        assert config.gemini.model == "gemini-2.0-flash"
        assert config.gemini.api_key_env == "MY_KEY"
        assert config.storage.quota_bytes == 4096
        assert config.images.max_width == 320
        assert config.log_level == "DEBUG"

    def test_empty_yaml_uses_defaults(self, tmp_path):
        """Test an empty file yields the default configuration."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")

        config = AppConfig.from_yaml(config_path)

        assert config == AppConfig()

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError, match="Invalid log level"):
            AppConfig(log_level="VERBOSE")

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigFileNotFoundError."""
        with pytest.raises(ConfigFileNotFoundError) as exc_info:
            AppConfig.from_yaml(tmp_path / "nope.yaml")

        assert exc_info.value.code == "CONFIG_FILE_NOT_FOUND"
        assert exc_info.value.context["path"].endswith("nope.yaml")


class TestConfigLoading:
    """Test path resolution and caching."""

    def test_env_var_path(self, tmp_path, monkeypatch):
        """Test SWEATHER_CONFIG points at the config file."""
        config_path = tmp_path / "custom.yaml"
        config_path.write_text(yaml.dump({"log_level": "WARNING"}), encoding="utf-8")
        monkeypatch.setenv("SWEATHER_CONFIG", str(config_path))

        config = load_config()

        assert config.log_level == "WARNING"

    def test_missing_file_mentions_example(self, tmp_path):
        """Test the error explains how to create the file."""
        with pytest.raises(ConfigFileNotFoundError, match="config.example.yaml"):
            load_config(tmp_path / "config.yaml")

    def test_get_config_is_cached(self, tmp_path):
        """Test get_config returns the same instance until reload."""
        first_path = tmp_path / "a.yaml"
        first_path.write_text(yaml.dump({"log_level": "ERROR"}), encoding="utf-8")
        second_path = tmp_path / "b.yaml"
        second_path.write_text(yaml.dump({"log_level": "DEBUG"}), encoding="utf-8")

        first = get_config(first_path)
        assert get_config(second_path) is first

        reloaded = get_config(second_path, reload=True)
        assert reloaded.log_level == "DEBUG"
