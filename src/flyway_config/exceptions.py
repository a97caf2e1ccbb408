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

"""Custom exceptions for the Flyway configuration layer."""

from datetime import datetime, timezone
from typing import Any


class FlywayConfigError(Exception):
    """Base exception for all configuration assembly errors."""

    ERROR_CATEGORY = "GENERAL"
    ERROR_CODE = "FLY_0000"

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        recovery_suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.user_message = user_message or message
        self.error_code = error_code or self.ERROR_CODE
        self.error_category = self.ERROR_CATEGORY
        self.context = context or {}
        self.recovery_suggestion = recovery_suggestion
        self.timestamp = datetime.now(timezone.utc)


class ConfigurationError(FlywayConfigError):
    """A configuration value was malformed or violated a field constraint."""

    ERROR_CATEGORY = "CLIENT_ERROR"
    ERROR_CODE = "FLY_1000"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        recovery_suggestion: str | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = value
        super().__init__(
            message,
            user_message=message,
            error_code=self.ERROR_CODE,
            context=context,
            recovery_suggestion=recovery_suggestion,
        )
        self.field = field
        self.value = value


class UnrecognizedPropertyError(ConfigurationError):
    """One or more properties under the root prefix were not recognized."""

    ERROR_CODE = "FLY_1001"

    def __init__(self, properties: list[str]) -> None:
        self.properties = sorted(properties)
        if len(self.properties) == 1:
            message = f"Unknown configuration property: {self.properties[0]}"
        else:
            message = "Unknown configuration properties: " + ", ".join(self.properties)
        super().__init__(
            message,
            recovery_suggestion="Check the property names for typos",
        )
        self.context["properties"] = self.properties


class UpgradeRequiredError(FlywayConfigError):
    """A setter was invoked for a feature the running edition does not include."""

    ERROR_CATEGORY = "EDITION_ERROR"
    ERROR_CODE = "FLY_2000"

    def __init__(
        self,
        feature: str,
        required_edition: str = "Flyway Teams Edition",
        current_edition: str = "Flyway Community Edition",
    ) -> None:
        message = (
            f"{required_edition} upgrade required: {feature} is not supported by "
            f"{current_edition}."
        )
        super().__init__(
            message,
            user_message=f"{feature} requires {required_edition}",
            error_code=self.ERROR_CODE,
            context={"feature": feature, "edition": current_edition},
            recovery_suggestion=f"Upgrade to {required_edition} to use {feature}",
        )
        self.feature = feature
        self.required_edition = required_edition
        self.current_edition = current_edition
