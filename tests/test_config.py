"""Tests for configuration loading."""

import pytest

from size_impact.config import GroupConfig, SizeImpactConfig, load_config
from size_impact.exceptions import ConfigurationError, InvalidConfigError


class TestDefaults:
    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.transformations == ["raw", "gzip"]
        assert config.units == "decimal"
        assert config.snapshot_file == "size-snapshot.json"
        assert config.groups == {"dist": GroupConfig()}

    def test_validation(self):
        with pytest.raises(ValueError):
            SizeImpactConfig(transformations=[])
        with pytest.raises(ValueError):
            SizeImpactConfig(transformations=["brotli"])
        with pytest.raises(ValueError):
            SizeImpactConfig(units="metric")

    def test_tracking_config_by_group(self):
        config = SizeImpactConfig(
            groups={"b": GroupConfig({"*.js": True}), "a": GroupConfig()},
        )
        assert list(config.tracking_config_by_group()) == ["b", "a"]


class TestFileLayers:
    def test_project_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "size-impact.toml").write_text(
            'transformations = ["raw"]\n'
            "\n"
            "[groups.build]\n"
            'manifest = "manifest.json"\n'
            "\n"
            "[groups.build.tracking]\n"
            '"**/*" = true\n'
            '"**/*.map" = false\n'
            '"legacy.js" = false\n'
        )
        config = load_config()
        assert config.transformations == ["raw"]
        assert list(config.groups) == ["build"]
        group = config.groups["build"]
        assert group.manifest == "manifest.json"
        assert list(group.tracking_config) == ["**/*", "**/*.map", "legacy.js"]

    def test_explicit_file_overrides_global(self, tmp_path, monkeypatch, isolated_config):
        monkeypatch.chdir(tmp_path)
        (isolated_config / ".size-impact.toml").write_text('units = "binary"\nsnapshot_file = "g.json"\n')
        explicit = tmp_path / "custom.toml"
        explicit.write_text('snapshot_file = "custom.json"\n')
        config = load_config(config_file=explicit)
        assert config.units == "binary"
        assert config.snapshot_file == "custom.json"

    def test_missing_explicit_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ConfigurationError):
            load_config(config_file=tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "size-impact.toml").write_text("units = \n")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_bad_group_table(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "size-impact.toml").write_text('[groups.dist]\ntracking = "**/*"\n')
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_non_bool_tracking_value(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "size-impact.toml").write_text('[groups.dist.tracking]\n"**/*" = "yes"\n')
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_unknown_field(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "size-impact.toml").write_text("colour = true\n")
        with pytest.raises(ConfigurationError):
            load_config()


class TestEnvAndOverrides:
    def test_env_vars(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SIZE_IMPACT_UNITS", "binary")
        monkeypatch.setenv("SIZE_IMPACT_TRANSFORMATIONS", "gzip, raw")
        config = load_config()
        assert config.units == "binary"
        assert config.transformations == ["gzip", "raw"]

    def test_overrides_win(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SIZE_IMPACT_UNITS", "binary")
        config = load_config(units="decimal", verbose=True)
        assert config.units == "decimal"
        assert config.verbosity == "verbose"

    def test_invalid_override(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ConfigurationError):
            load_config(transformations=["brotli"])
