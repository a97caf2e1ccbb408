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

"""Flyway configuration.

Strongly-typed, validated configuration for a database migration engine,
assembled from flat ``flyway.*`` properties, config files, environment
variables or another configuration.
"""

from .config import ConfigurationAdvisor, ConfigurationLoader, SourceSettings
from .configuration import Configuration
from .configurator import ConfigurationCopier, PropertyConfigurator, export_properties
from .connection import ConnectionDescriptor
from .edition import Edition, EditionGate
from .exceptions import (
    ConfigurationError,
    FlywayConfigError,
    UnrecognizedPropertyError,
    UpgradeRequiredError,
)
from .interfaces import Callback, CodeMigration, MigrationResolver
from .loading import ClassLoadingContext
from .models import ErrorBehavior, ErrorOverride, MigrationPattern, MigrationVersion

__version__ = "0.1.0"

__all__ = [
    "Callback",
    "ClassLoadingContext",
    "CodeMigration",
    "Configuration",
    "ConfigurationAdvisor",
    "ConfigurationCopier",
    "ConfigurationError",
    "ConfigurationLoader",
    "ConnectionDescriptor",
    "Edition",
    "EditionGate",
    "ErrorBehavior",
    "ErrorOverride",
    "FlywayConfigError",
    "MigrationPattern",
    "MigrationResolver",
    "MigrationVersion",
    "PropertyConfigurator",
    "SourceSettings",
    "UnrecognizedPropertyError",
    "UpgradeRequiredError",
    "export_properties",
]
