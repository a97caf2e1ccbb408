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

"""Edition gating for configuration setters.

Some configuration fields belong to higher product editions. Their setters
are wrapped with :func:`requires_edition`, which consults the owning
configuration's :class:`EditionGate` before the setter body runs. The gate
holds no state beyond the running edition: in the Community edition every
gated setter fails with :class:`UpgradeRequiredError` and leaves the
configuration untouched; in a higher edition the real setter runs.
"""

from collections.abc import Callable
from enum import Enum
from functools import wraps
from typing import Any, TypeVar

from .exceptions import UpgradeRequiredError

F = TypeVar("F", bound=Callable[..., Any])


class Edition(str, Enum):
    """Product editions, from least to most capable."""

    COMMUNITY = "community"
    TEAMS = "teams"
    ENTERPRISE = "enterprise"

    @property
    def tier(self) -> int:
        return list(Edition).index(self)

    @property
    def description(self) -> str:
        return f"Flyway {self.value.capitalize()} Edition"


# Feature name -> minimum edition whose setter is enabled
FEATURE_EDITIONS: dict[str, Edition] = {
    "cherryPick": Edition.TEAMS,
    "dryRunOutput": Edition.TEAMS,
    "stream": Edition.TEAMS,
    "batch": Edition.TEAMS,
    "undoSqlMigrationPrefix": Edition.TEAMS,
    "oracle.sqlplus": Edition.TEAMS,
    "oracle.sqlplusWarn": Edition.TEAMS,
    "oracle.kerberosConfigFile": Edition.TEAMS,
    "oracle.kerberosCacheFile": Edition.TEAMS,
    "outputQueryResults": Edition.TEAMS,
    "jdbcProperties": Edition.TEAMS,
    "licenseKey": Edition.TEAMS,
    "vaultUrl": Edition.TEAMS,
    "vaultToken": Edition.TEAMS,
    "vaultSecrets": Edition.TEAMS,
    "skipExecutingMigrations": Edition.TEAMS,
    "errorOverrides": Edition.TEAMS,
}


class EditionGate:
    """Capability check for edition-gated features."""

    def __init__(
        self,
        edition: Edition = Edition.COMMUNITY,
        feature_editions: dict[str, Edition] | None = None,
    ) -> None:
        self.edition = edition
        self._feature_editions = feature_editions if feature_editions is not None else FEATURE_EDITIONS

    def required_edition(self, feature: str) -> Edition:
        """Get the minimum edition for ``feature`` (Community when ungated)."""
        return self._feature_editions.get(feature, Edition.COMMUNITY)

    def allows(self, feature: str) -> bool:
        """Check whether the running edition enables ``feature``."""
        return self.edition.tier >= self.required_edition(feature).tier

    def require(self, feature: str) -> None:
        """Ensure ``feature`` is enabled.

        Raises:
            UpgradeRequiredError: If the running edition is below the feature's tier
        """
        if not self.allows(feature):
            raise UpgradeRequiredError(
                feature,
                required_edition=self.required_edition(feature).description,
                current_edition=self.edition.description,
            )


def requires_edition(feature: str) -> Callable[[F], F]:
    """Decorator gating a configuration setter behind ``feature``'s edition.

    The decorated method's owner must expose an ``edition_gate`` attribute.

    Example:
        @requires_edition("stream")
        def set_stream(self, stream: bool) -> None:
            self._stream = stream
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            self.edition_gate.require(feature)
            return func(self, *args, **kwargs)

        wrapper.gated_feature = feature  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator
