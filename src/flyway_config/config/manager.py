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

"""Configuration loader for Flyway configurations.

This module provides the ConfigurationLoader class that handles:
- Config file loading (properties, YAML or JSON)
- ``FLYWAY_*`` environment variable translation
- Merging of all sources with explicit overrides on top
- Advisory review of the assembled configuration
- Export of a configuration to JSON, YAML or properties text
"""

from collections.abc import Mapping
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .. import constants
from ..coercion import tokenize
from ..configuration import Configuration
from ..configurator import export_properties
from ..edition import Edition
from ..loading import ClassLoadingContext
from .defaults import DEFAULT_CONFIG_FILES
from .environment import environment_to_properties
from .files import load_config_files
from .schema import SourceSettings
from .validation import ConfigurationAdvisor

logger = logging.getLogger(__name__)

_KEY_ESCAPES = {"\\": "\\\\", "=": "\\=", ":": "\\:", " ": "\\ "}
_VALUE_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\f": "\\f"}


def _escape_key(key: str) -> str:
    return "".join(_KEY_ESCAPES.get(char, char) for char in key)


def _escape_value(value: str) -> str:
    escaped = "".join(_VALUE_ESCAPES.get(char, char) for char in value)
    if escaped.startswith(" "):
        escaped = "\\" + escaped
    return escaped


class ConfigurationLoader:
    """Builds a :class:`Configuration` from files, environment and overrides.

    Sources are merged in increasing precedence:

    1. Config files (``flyway.configFiles``, or the settings, or ``flyway.conf``
       in the default locations)
    2. ``FLYWAY_*`` environment variables
    3. Explicit overrides passed to :meth:`load`
    """

    def __init__(
        self,
        settings: SourceSettings | None = None,
        class_loader: ClassLoadingContext | None = None,
        edition: Edition = Edition.COMMUNITY,
    ) -> None:
        """Initialize the loader."""
        self.settings = settings or SourceSettings()
        self.class_loader = class_loader
        self.edition = edition
        self._advisor = ConfigurationAdvisor()
        self._config_files: list[Path] = []
        self._loaded_from_env = False

    def _resolve_config_files(
        self,
        overrides: Mapping[str, str],
        env_properties: Mapping[str, str],
    ) -> tuple[list[Path], bool]:
        """Return the config files to read and whether they must exist."""
        explicit = overrides.get(constants.CONFIG_FILES) or env_properties.get(constants.CONFIG_FILES)
        if explicit:
            return [Path(token) for token in tokenize(explicit)], True
        if self.settings.config_files:
            return list(self.settings.config_files), True
        if self.settings.use_default_locations:
            return list(DEFAULT_CONFIG_FILES), False
        return [], False

    def collect_properties(
        self,
        overrides: Mapping[str, str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Merge every source into one flat property mapping.

        Args:
            overrides: Properties that win over every other source
            environ: Environment to read instead of ``os.environ``

        Returns:
            Merged properties without the loader-only keys

        Raises:
            ConfigurationError: If a required config file is missing or invalid
        """
        overrides = dict(overrides or {})
        env_properties: dict[str, str] = {}
        if self.settings.read_environment:
            env_properties = environment_to_properties(environ, include_loader_keys=True)
        self._loaded_from_env = bool(env_properties)

        encoding = (
            overrides.get(constants.CONFIG_FILE_ENCODING)
            or env_properties.get(constants.CONFIG_FILE_ENCODING)
            or self.settings.config_file_encoding
        )
        paths, required = self._resolve_config_files(overrides, env_properties)
        self._config_files = paths
        file_properties = load_config_files(paths, encoding, required=required)

        merged = {**file_properties, **env_properties, **overrides}
        for key in constants.LOADER_KEYS:
            merged.pop(key, None)
        return merged

    def load(
        self,
        overrides: Mapping[str, str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Configuration:
        """Load a new configuration from all sources.

        Raises:
            ConfigurationError: If any source holds an invalid or unknown property
            UpgradeRequiredError: If a property needs a higher edition
        """
        properties = self.collect_properties(overrides, environ)

        configuration = Configuration(class_loader=self.class_loader, edition=self.edition)
        configuration.configure(properties)

        self._advisor.review(configuration)
        logger.info("Configuration loaded successfully")
        if self._advisor.warnings:
            logger.warning("Configuration warnings: %s", self._advisor.warnings)
        if self._advisor.recommendations:
            logger.info("Configuration recommendations: %s", self._advisor.recommendations)

        return configuration

    def get_config_summary(self) -> dict[str, Any]:
        """Get a summary of the last load."""
        return {
            "edition": self.edition.value,
            "settings": self.settings.model_dump(mode="json"),
            "config_files": [str(path) for path in self._config_files],
            "loaded_from_env": self._loaded_from_env,
            "validation": self._advisor.get_validation_summary(),
        }

    def export_config(self, configuration: Configuration, format: str = "json") -> str:
        """Export a configuration as JSON, YAML or properties text.

        The output can be fed back through a config file.
        """
        properties = export_properties(configuration)
        fmt = format.lower()

        if fmt == "json":
            return json.dumps(properties, indent=2)
        if fmt in ("yaml", "yml"):
            return str(yaml.safe_dump(properties, default_flow_style=False, sort_keys=False))
        if fmt in ("properties", "conf"):
            lines = [f"{_escape_key(key)}={_escape_value(value)}" for key, value in properties.items()]
            return "\n".join(lines) + "\n"
        raise ValueError(f"Unsupported export format: {format}")
