# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Tests for assembling a configuration from files, environment and overrides."""

import json
import logging

import pydantic
import pytest
import yaml

from flyway_config import (
    Configuration,
    ConfigurationError,
    ConfigurationLoader,
    Edition,
    SourceSettings,
    UnrecognizedPropertyError,
)
from flyway_config.config import parse_properties


@pytest.fixture()
def conf_file(tmp_path):
    """Provide a flyway.conf with a connection and a couple of settings."""
    path = tmp_path / "flyway.conf"
    path.write_text(
        "\n".join(
            [
                "flyway.url=jdbc:postgresql://localhost/app",
                "flyway.user=app",
                "flyway.table=from_file",
                "flyway.schemas=app",
                "flyway.placeholders.env=dev",
            ],
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def isolated_settings():
    """Settings that never touch the default file locations."""
    return SourceSettings(use_default_locations=False)


class TestSourceSettings:
    """Test the pydantic settings model."""

    def test_defaults(self):
        settings = SourceSettings()

        assert settings.config_files == []
        assert settings.config_file_encoding == "utf-8"
        assert settings.use_default_locations is True
        assert settings.read_environment is True

    def test_encoding_normalized(self):
        assert SourceSettings(config_file_encoding="UTF8").config_file_encoding == "utf-8"

    def test_unknown_encoding_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            SourceSettings(config_file_encoding="no-such-charset")


class TestCollectProperties:
    """Test source precedence."""

    def test_file_then_env_then_overrides(self, conf_file):
        loader = ConfigurationLoader(SourceSettings(config_files=[conf_file]))

        properties = loader.collect_properties(
            overrides={"flyway.schemas": "override"},
            environ={"FLYWAY_TABLE": "from_env", "FLYWAY_SCHEMAS": "env_schema"},
        )

        assert properties["flyway.url"] == "jdbc:postgresql://localhost/app"
        assert properties["flyway.table"] == "from_env"
        assert properties["flyway.schemas"] == "override"

    def test_config_files_from_environment(self, conf_file, isolated_settings):
        loader = ConfigurationLoader(isolated_settings)

        properties = loader.collect_properties(environ={"FLYWAY_CONFIG_FILES": str(conf_file)})

        assert properties["flyway.table"] == "from_file"
        assert "flyway.configFiles" not in properties

    def test_config_files_from_overrides(self, conf_file, tmp_path, isolated_settings):
        other = tmp_path / "other.conf"
        other.write_text("flyway.table=other\n", encoding="utf-8")
        loader = ConfigurationLoader(isolated_settings)

        properties = loader.collect_properties(
            overrides={"flyway.configFiles": f"{conf_file}, {other}"},
            environ={},
        )

        assert properties["flyway.table"] == "other"
        assert properties["flyway.schemas"] == "app"

    def test_config_file_encoding_override(self, tmp_path, isolated_settings):
        path = tmp_path / "latin.conf"
        path.write_bytes("flyway.placeholders.name=café\n".encode("latin-1"))
        loader = ConfigurationLoader(isolated_settings)

        properties = loader.collect_properties(
            overrides={"flyway.configFiles": str(path), "flyway.configFileEncoding": "latin-1"},
            environ={},
        )

        assert properties == {"flyway.placeholders.name": "café"}

    def test_missing_explicit_file(self, tmp_path, isolated_settings):
        loader = ConfigurationLoader(isolated_settings)

        with pytest.raises(ConfigurationError, match="Unable to find config file"):
            loader.collect_properties(overrides={"flyway.configFiles": str(tmp_path / "nope.conf")})

    def test_default_locations_are_optional(self, tmp_path, monkeypatch):
        present = tmp_path / "flyway.conf"
        present.write_text("flyway.table=default_location\n", encoding="utf-8")
        monkeypatch.setattr(
            "flyway_config.config.manager.DEFAULT_CONFIG_FILES",
            [tmp_path / "missing" / "flyway.conf", present],
        )

        properties = ConfigurationLoader().collect_properties(environ={})

        assert properties == {"flyway.table": "default_location"}

    def test_environment_can_be_disabled(self, isolated_settings):
        settings = isolated_settings.model_copy(update={"read_environment": False})

        properties = ConfigurationLoader(settings).collect_properties(environ={"FLYWAY_TABLE": "x"})

        assert properties == {}


class TestLoad:
    """Test building configurations."""

    def test_load(self, conf_file):
        loader = ConfigurationLoader(SourceSettings(config_files=[conf_file]))

        configuration = loader.load(environ={"FLYWAY_PLACEHOLDERS_REGION": "eu"})

        assert isinstance(configuration, Configuration)
        assert configuration.table == "from_file"
        assert configuration.placeholders == {"env": "dev", "region": "eu"}
        assert configuration.connection.url == "jdbc:postgresql://localhost/app"

    def test_load_passes_edition_and_class_loader(self, isolated_settings):
        from flyway_config import ClassLoadingContext

        class_loader = ClassLoadingContext()
        loader = ConfigurationLoader(isolated_settings, class_loader=class_loader, edition=Edition.TEAMS)

        configuration = loader.load(overrides={"flyway.stream": "true"}, environ={})

        assert configuration.edition is Edition.TEAMS
        assert configuration.class_loader is class_loader
        assert configuration.stream is True

    def test_unknown_property_in_file(self, tmp_path):
        path = tmp_path / "typo.conf"
        path.write_text("flyway.tabel=x\n", encoding="utf-8")
        loader = ConfigurationLoader(SourceSettings(config_files=[path]))

        with pytest.raises(UnrecognizedPropertyError):
            loader.load(environ={})

    def test_advisor_findings_logged(self, isolated_settings, caplog):
        loader = ConfigurationLoader(isolated_settings)

        with caplog.at_level(logging.INFO, logger="flyway_config"):
            loader.load(overrides={"flyway.baselineOnMigrate": "true"}, environ={})

        assert "Configuration warnings" in caplog.text
        summary = loader.get_config_summary()
        assert summary["validation"]["warning_count"] == 1
        assert summary["edition"] == "community"
        assert summary["loaded_from_env"] is False


class TestExportConfig:
    """Test textual export of a configuration."""

    @pytest.fixture()
    def configuration(self):
        configuration = Configuration()
        configuration.configure(
            {
                "flyway.url": "jdbc:h2:mem:test",
                "flyway.baselineDescription": " leading space",
                "flyway.placeholders.path": "C:\\temp",
            },
        )
        return configuration

    def test_json(self, configuration):
        exported = json.loads(ConfigurationLoader().export_config(configuration, "json"))

        assert exported["flyway.url"] == "jdbc:h2:mem:test"

    def test_yaml(self, configuration):
        exported = yaml.safe_load(ConfigurationLoader().export_config(configuration, "yaml"))

        assert exported["flyway.placeholders.path"] == "C:\\temp"

    def test_properties_round_trip(self, configuration):
        text = ConfigurationLoader().export_config(configuration, "properties")
        parsed = parse_properties(text)

        assert parsed["flyway.url"] == "jdbc:h2:mem:test"
        assert parsed["flyway.baselineDescription"] == " leading space"
        assert parsed["flyway.placeholders.path"] == "C:\\temp"

    def test_exported_file_loads_back(self, configuration, tmp_path):
        path = tmp_path / "exported.yaml"
        path.write_text(ConfigurationLoader().export_config(configuration, "yaml"), encoding="utf-8")

        restored = ConfigurationLoader(SourceSettings(config_files=[path])).load(environ={})

        assert restored.url == "jdbc:h2:mem:test"
        assert restored.placeholders == {"path": "C:\\temp"}

    def test_unknown_format(self, configuration):
        with pytest.raises(ValueError, match="Unsupported export format"):
            ConfigurationLoader().export_config(configuration, "xml")
