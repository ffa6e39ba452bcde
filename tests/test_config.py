"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
import yaml

from prism_migrate.config import (
    DEFAULT_CONFIG,
    MigrationConfig,
    PlaceholderValues,
    config_from_dict,
    load_config,
    write_default_config,
)
from prism_migrate.exceptions import (
    ConfigAlreadyExistsError,
    ConfigNotFoundError,
    InvalidConfigError,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self):
        """Test built-in defaults when no file is given."""
        config = load_config(None)

        assert config.accounts_to_migrate == frozenset({"deploy-tools"})
        assert config.placeholders == PlaceholderValues()
        assert config.inventory.provider == "prism"
        assert config.inventory.base_url == "https://prism.gutools.co.uk"

    def test_load_full_file(self, tmp_path):
        """Test loading every section."""
        config_file = tmp_path / "prism-migrate.yaml"
        config_file.write_text(
            "accounts_to_migrate: [deploy-tools, security]\n"
            "placeholders:\n"
            "  artifact_bucket: my-artifacts\n"
            "  log_stream: central\n"
            "inventory:\n"
            "  provider: file\n"
            "  base_url: https://prism.example.com/\n"
            "  timeout: 5\n"
            "  snapshot: snapshot.yaml\n"
            "templates_dir: templates\n"
        )

        config = load_config(config_file)

        assert config.accounts_to_migrate == frozenset({"deploy-tools", "security"})
        assert config.placeholders.artifact_bucket == "my-artifacts"
        assert config.placeholders.private_config_bucket == "TODO"
        assert config.placeholders.log_stream == "central"
        assert config.inventory.provider == "file"
        assert config.inventory.base_url == "https://prism.example.com"
        assert config.inventory.timeout == 5.0
        assert config.inventory.snapshot == tmp_path / "snapshot.yaml"
        assert config.templates_dir == tmp_path / "templates"

    def test_partial_file_uses_defaults(self, tmp_path):
        """Test missing sections fall back to defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("accounts_to_migrate: [security]\n")

        config = load_config(config_file)

        assert config.accounts_to_migrate == frozenset({"security"})
        assert config.inventory.timeout == 30.0
        assert config.templates_dir is None

    def test_absolute_snapshot_path(self, tmp_path):
        """Test absolute paths are kept as-is."""
        config = config_from_dict(
            {"inventory": {"provider": "file", "snapshot": "/data/snapshot.yaml"}},
            base_dir=tmp_path,
        )
        assert config.inventory.snapshot == Path("/data/snapshot.yaml")

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        """Test an empty file is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(InvalidConfigError, match="empty"):
            load_config(config_file)

    def test_not_a_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- deploy-tools\n")

        with pytest.raises(InvalidConfigError, match="expected a mapping"):
            load_config(config_file)

    def test_invalid_yaml(self, tmp_path):
        """Test unparseable YAML is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("accounts_to_migrate: [unclosed\n")

        with pytest.raises(InvalidConfigError, match="not valid YAML"):
            load_config(config_file)

    def test_schema_unknown_key(self, tmp_path):
        """Test unknown top-level keys fail schema validation."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("acounts_to_migrate: [deploy-tools]\n")

        with pytest.raises(InvalidConfigError):
            load_config(config_file)

    def test_schema_bad_provider(self, tmp_path):
        """Test unsupported providers fail schema validation."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("inventory:\n  provider: ldap\n")

        with pytest.raises(InvalidConfigError, match="inventory.provider"):
            load_config(config_file)

    def test_schema_bad_timeout(self, tmp_path):
        """Test a non-positive timeout is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("inventory:\n  timeout: 0\n")

        with pytest.raises(InvalidConfigError):
            load_config(config_file)


class TestMigrationConfig:
    """Tests for MigrationConfig helpers."""

    def test_with_accounts(self):
        """Test replacing the allow-list keeps other settings."""
        config = MigrationConfig(placeholders=PlaceholderValues(log_stream="logs"))

        updated = config.with_accounts(["a", "b"])

        assert updated.accounts_to_migrate == frozenset({"a", "b"})
        assert updated.placeholders.log_stream == "logs"
        assert config.accounts_to_migrate == frozenset({"deploy-tools"})

    def test_accounts_coerced_to_frozenset(self):
        """Test an allow-list passed as a list is stored as a frozenset."""
        config = MigrationConfig(accounts_to_migrate=["a", "b", "a"])
        assert config.accounts_to_migrate == frozenset({"a", "b"})


class TestWriteDefaultConfig:
    """Tests for writing the default configuration."""

    def test_round_trips_through_load(self, tmp_path):
        """Test the written file loads back to the defaults."""
        config_file = tmp_path / "prism-migrate.yaml"

        write_default_config(config_file)

        assert yaml.safe_load(config_file.read_text()) == DEFAULT_CONFIG
        assert load_config(config_file) == MigrationConfig()

    def test_with_templates_dir(self, tmp_path):
        """Test the templates directory is recorded."""
        config_file = tmp_path / "prism-migrate.yaml"

        write_default_config(config_file, templates_dir="templates")

        assert load_config(config_file).templates_dir == tmp_path / "templates"

    def test_refuses_overwrite(self, tmp_path):
        """Test an existing file is not overwritten."""
        config_file = tmp_path / "prism-migrate.yaml"
        config_file.write_text("accounts_to_migrate: []\n")

        with pytest.raises(ConfigAlreadyExistsError):
            write_default_config(config_file)

        assert config_file.read_text() == "accounts_to_migrate: []\n"
