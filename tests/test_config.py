"""
Unit tests for config.py
"""

import os
import tempfile
from unittest import mock

import pytest
import yaml

from sql_dump_importer.config import ConfigLoader
from sql_dump_importer.exceptions import ConfigurationError


def write_config(config):
    """Write ``config`` to a temporary YAML file and return its path."""
    with tempfile.NamedTemporaryFile(
        mode='w', suffix='.yaml', delete=False
    ) as f:
        yaml.dump(config, f)
        return f.name


class TestConfigLoader:
    """Tests for ConfigLoader class."""

    @pytest.fixture
    def sample_config(self):
        """Sample configuration dictionary."""
        return {
            "instances": {
                "primary": {
                    "host": "localhost",
                    "port": 3306,
                    "user": "root",
                    "password": "secret"
                },
                "staging": {
                    "host": "192.168.1.100",
                    "port": 3307,
                    "user": "admin",
                    "password": "admin_pass",
                    "database": "staging_shop"
                }
            },
            "import": {
                "instance": "primary",
                "database": "shop",
                "client": "mariadb",
                "pipe_viewer": True
            },
            "logging": {
                "level": "INFO",
                "file": "./logs/import.log"
            }
        }

    @pytest.fixture
    def config_file(self, sample_config):
        """Create a temporary config file."""
        path = write_config(sample_config)
        yield path
        os.unlink(path)

    def test_load_config(self, config_file):
        """Test loading a valid config file."""
        loader = ConfigLoader(config_file)
        assert loader.config is not None

    def test_file_not_found(self):
        """Test that FileNotFoundError is raised for missing file."""
        with pytest.raises(FileNotFoundError):
            ConfigLoader("/nonexistent/path/config.yaml")

    def test_get_instance(self, config_file):
        """Test getting a specific instance configuration."""
        loader = ConfigLoader(config_file)
        instance = loader.get_instance("primary")
        assert instance["host"] == "localhost"
        assert instance["port"] == 3306
        assert instance["user"] == "root"

    def test_get_instance_not_found(self, config_file):
        """Test getting a non-existent instance raises error."""
        loader = ConfigLoader(config_file)
        with pytest.raises(ValueError) as exc_info:
            loader.get_instance("nonexistent")
        assert "not found in configuration" in str(exc_info.value)

    def test_get_import_settings(self, config_file):
        """Test getting import settings."""
        loader = ConfigLoader(config_file)
        settings = loader.get_import_settings()
        assert settings["database"] == "shop"
        assert settings["client"] == "mariadb"
        assert settings["pipe_viewer"] is True

    def test_get_logging_settings(self, config_file):
        """Test getting logging settings."""
        loader = ConfigLoader(config_file)
        logging = loader.get_logging_settings()
        assert logging["level"] == "INFO"
        assert logging["file"] == "./logs/import.log"

    def test_empty_sections(self):
        """Test handling of missing config sections."""
        path = write_config({"instances": {"primary": {"host": "localhost"}}})
        loader = ConfigLoader(path)
        os.unlink(path)

        assert loader.get_import_settings() == {}
        assert loader.get_logging_settings() == {}

    def test_empty_file(self):
        """Test an empty config file behaves like an empty mapping."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            path = f.name
        loader = ConfigLoader(path)
        os.unlink(path)

        assert loader.config == {}


class TestResolveTarget:
    """Tests for resolve_target method."""

    @pytest.fixture
    def loader(self):
        path = write_config({
            "instances": {
                "primary": {"host": "localhost", "user": "root"},
                "staging": {"host": "staging", "user": "admin", "database": "staging_shop"},
            },
            "import": {"database": "shop"}
        })
        yield ConfigLoader(path)
        os.unlink(path)

    def test_configured_target(self, loader):
        instance, database = loader.resolve_target()
        assert instance["host"] == "localhost"
        assert database == "shop"

    def test_overrides(self, loader):
        instance, database = loader.resolve_target("staging", "other")
        assert instance["host"] == "staging"
        assert database == "other"

    def test_instance_database_fallback(self):
        path = write_config({
            "instances": {"primary": {"host": "db", "database": "fallback"}}
        })
        loader = ConfigLoader(path)
        os.unlink(path)

        _, database = loader.resolve_target()
        assert database == "fallback"

    def test_unknown_instance(self, loader):
        with pytest.raises(ConfigurationError) as exc_info:
            loader.resolve_target("missing")
        assert "missing" in str(exc_info.value)

    def test_no_database(self):
        path = write_config({"instances": {"primary": {"host": "db"}}})
        loader = ConfigLoader(path)
        os.unlink(path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.resolve_target()
        assert "No target database" in str(exc_info.value)


class TestEnvironmentVariables:
    """Tests for environment variable resolution."""

    @pytest.fixture
    def env_config_file(self):
        """Create a temporary config file with env vars."""
        path = write_config({
            "instances": {
                "primary": {
                    "host": "${DB_HOST}",
                    "port": 3306,
                    "user": "${DB_USER}",
                    "password": "${DB_PASSWORD}"
                }
            },
            "logging": {
                "file": "${LOG_DIR}/import.log"
            }
        })
        yield path
        os.unlink(path)

    def test_resolve_env_vars(self, env_config_file):
        """Test environment variables are resolved."""
        with mock.patch.dict(os.environ, {
            "DB_HOST": "db.example.com",
            "DB_USER": "myuser",
            "DB_PASSWORD": "mypassword",
            "LOG_DIR": "/var/log"
        }):
            loader = ConfigLoader(env_config_file)
            instance = loader.get_instance("primary")
            assert instance["host"] == "db.example.com"
            assert instance["user"] == "myuser"
            assert instance["password"] == "mypassword"
            assert loader.get_logging_settings()["file"] == "/var/log/import.log"

    def test_missing_env_var_becomes_empty(self, env_config_file):
        """Test missing environment variables become empty strings."""
        with mock.patch.dict(os.environ, {}, clear=True):
            loader = ConfigLoader(env_config_file)
            instance = loader.get_instance("primary")
            assert instance["host"] == ""
            assert instance["password"] == ""

    def test_non_string_values_unchanged(self):
        """Test that non-string values are not modified."""
        path = write_config({
            "instances": {
                "primary": {
                    "host": "localhost",
                    "port": 3306,
                    "ssl": True,
                    "timeout": None
                }
            }
        })
        loader = ConfigLoader(path)
        os.unlink(path)

        instance = loader.get_instance("primary")
        assert instance["port"] == 3306
        assert instance["ssl"] is True
        assert instance["timeout"] is None
