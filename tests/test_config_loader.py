"""Tests for keytrace.yaml loading."""

import logging

import pytest
import yaml

from keytrace.core.config_loader import ConfigLoader
from keytrace.core.matchers import ContainsMatcher, NullMatcher
from keytrace.core.obfuscators import AsteriskObfuscator, PlainTextObfuscator


class TestConfigLoader:
    """Test ConfigLoader functionality."""

    def test_init_with_explicit_path(self, tmp_path):
        """Test initialization with explicit config path."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("diagnostics: {}")

        loader = ConfigLoader(config_file)
        assert loader.config_path == config_file

    def test_init_with_nonexistent_explicit_path(self, tmp_path):
        """Test initialization with nonexistent explicit path."""
        loader = ConfigLoader(tmp_path / "nonexistent.yaml")
        assert loader.config_path is None
        assert loader.load() == {}

    def test_find_config_in_current_dir(self, tmp_path, monkeypatch):
        """Test finding keytrace.yaml in current directory."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("diagnostics: {}")
        monkeypatch.chdir(tmp_path)

        loader = ConfigLoader()
        assert loader.config_path == config_file

    def test_find_config_in_parent_dir(self, tmp_path, monkeypatch):
        """Test finding keytrace.yaml in a parent directory."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("diagnostics: {}")
        subdir = tmp_path / "a" / "b"
        subdir.mkdir(parents=True)
        monkeypatch.chdir(subdir)

        loader = ConfigLoader()
        assert loader.config_path == config_file

    def test_load_valid_config(self, tmp_path):
        """Test loading a valid configuration file."""
        config_data = {
            "diagnostics": {
                "sensitive_keys": ["Password", "Secret"],
                "obfuscator": "asterisk",
            }
        }
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text(yaml.dump(config_data))

        loader = ConfigLoader(config_file)
        assert loader.load() == config_data
        # cached after first read
        config_file.write_text("diagnostics: {obfuscator: fixed}")
        assert loader.load() == config_data

    def test_load_empty_file(self, tmp_path):
        """Test an empty file loads as an empty mapping."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("")
        assert ConfigLoader(config_file).load() == {}

    def test_load_invalid_yaml(self, tmp_path):
        """Test loading an invalid YAML file."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("invalid: yaml: content: [")

        loader = ConfigLoader(config_file)
        with pytest.raises(ValueError, match="Invalid keytrace.yaml"):
            loader.load()

    def test_load_non_mapping(self, tmp_path):
        """Test a top-level list is rejected."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="expected a mapping"):
            ConfigLoader(config_file).load()

    def test_load_with_read_error(self, tmp_path, caplog):
        """Test read errors are logged and yield an empty config."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("diagnostics: {}")
        loader = ConfigLoader(config_file)
        config_file.unlink()

        with caplog.at_level(logging.WARNING, logger="keytrace.core.config_loader"):
            assert loader.load() == {}
        assert "Could not read keytrace.yaml" in caplog.text

    def test_options_from_file(self, tmp_path):
        """Test building diagnostics options from the file."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text(
            "diagnostics:\n"
            "  sensitive_keys: [Password]\n"
            "  obfuscator: asterisk\n"
            "  obfuscator_options: {visible: 2}\n"
        )

        options = ConfigLoader(config_file).options()
        assert isinstance(options.key_matcher, ContainsMatcher)
        assert isinstance(options.obfuscator, AsteriskObfuscator)
        assert options.obfuscator.visible == 2

    def test_options_without_section(self, tmp_path):
        """Test missing diagnostics section gives defaults."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("other: 1\n")

        options = ConfigLoader(config_file).options()
        assert isinstance(options.key_matcher, NullMatcher)
        assert isinstance(options.obfuscator, PlainTextObfuscator)

    def test_diagnostics_section_must_be_mapping(self, tmp_path):
        """Test a scalar diagnostics section is rejected."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("diagnostics: yes\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            ConfigLoader(config_file).options()

    def test_unknown_obfuscator(self, tmp_path):
        """Test an unknown obfuscator name is reported."""
        config_file = tmp_path / "keytrace.yaml"
        config_file.write_text("diagnostics:\n  obfuscator: rot13\n")

        with pytest.raises(ValueError, match="Unknown obfuscator"):
            ConfigLoader(config_file).options()
