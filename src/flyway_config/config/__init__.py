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

"""Configuration sources for Flyway.

This package assembles a :class:`~flyway_config.configuration.Configuration`
from the places a deployment keeps its settings:
- ``flyway.conf`` style properties files, YAML and JSON files
- ``FLYWAY_*`` environment variables
- Explicit overrides supplied by the caller
"""

from .defaults import DEFAULT_CONFIG_FILES, ENV_VAR_MAPPING, property_key_to_env_var
from .environment import convert_env_var, environment_to_properties
from .files import flatten_mapping, load_config_file, load_config_files, parse_properties
from .manager import ConfigurationLoader
from .schema import SourceSettings
from .validation import ConfigurationAdvisor

__all__ = [
    "DEFAULT_CONFIG_FILES",
    "ENV_VAR_MAPPING",
    "ConfigurationAdvisor",
    "ConfigurationLoader",
    "SourceSettings",
    "convert_env_var",
    "environment_to_properties",
    "flatten_mapping",
    "load_config_file",
    "load_config_files",
    "parse_properties",
    "property_key_to_env_var",
]
