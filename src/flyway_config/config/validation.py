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

"""Advisory checks on an assembled configuration.

These checks never fail: they collect warnings about risky combinations and
recommendations, in the spirit of a linter. Hard validation happens in the
setters.
"""

from typing import Any

from .. import constants
from ..configuration import Configuration
from ..connection import has_text


class ConfigurationAdvisor:
    """Reviews a configuration and records warnings and recommendations."""

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.recommendations: list[str] = []

    def review(self, configuration: Configuration) -> None:
        """Review ``configuration``, replacing the previous findings."""
        self.warnings.clear()
        self.recommendations.clear()

        self._review_safety(configuration)
        self._review_connection(configuration)
        self._review_consistency(configuration)

    def _review_safety(self, configuration: Configuration) -> None:
        if configuration.clean_on_validation_error and not configuration.clean_disabled:
            self.warnings.append(
                "cleanOnValidationError is enabled: a validation error will wipe the schema. "
                "Do not enable this in production.",
            )

        if configuration.baseline_on_migrate:
            self.warnings.append(
                f"baselineOnMigrate is enabled: a non-empty schema without history table will be "
                f"baselined at version {configuration.baseline_version}. Make sure the "
                f"connection points at the intended database.",
            )

        if not configuration.validate_on_migrate:
            self.recommendations.append(
                "validateOnMigrate is disabled. Changed migrations will go unnoticed during migrate.",
            )

    def _review_connection(self, configuration: Configuration) -> None:
        if not has_text(configuration.url) and (
            has_text(configuration.driver)
            or has_text(configuration.user)
            or has_text(configuration.password)
        ):
            self.warnings.append(
                f"Connection settings are incomplete: {constants.URL} must be set.",
            )

        if configuration.lock_retry_count == 0:
            self.recommendations.append(
                "lockRetryCount is 0. Concurrent migrations will fail immediately instead of waiting.",
            )

    def _review_consistency(self, configuration: Configuration) -> None:
        if not configuration.placeholder_replacement and configuration.placeholders:
            self.warnings.append(
                f"{len(configuration.placeholders)} placeholder(s) are defined but "
                f"placeholderReplacement is disabled; they will not be applied.",
            )

        if configuration.out_of_order and configuration.ignore_pending_migrations:
            self.recommendations.append(
                "outOfOrder is combined with ignorePendingMigrations. Out-of-order migrations "
                "will not be reported by validate.",
            )

        schemas = configuration.schemas
        if configuration.default_schema and schemas and configuration.default_schema not in schemas:
            self.recommendations.append(
                f"defaultSchema '{configuration.default_schema}' is not listed in schemas {schemas}.",
            )

    def get_validation_summary(self) -> dict[str, Any]:
        """Get summary of review results including warnings and recommendations."""
        return {
            "status": "valid",
            "warnings": self.warnings,
            "recommendations": self.recommendations,
            "warning_count": len(self.warnings),
            "recommendation_count": len(self.recommendations),
        }
