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

"""Typed values parsed out of configuration text.

Key Classes:
    - MigrationVersion: Version token used for target and baseline versions
    - MigrationPattern: Cherry-pick selector for versioned or repeatable migrations
    - ErrorOverride: Rule re-mapping SQL states and error codes to log levels

Example:
    >>> MigrationVersion.from_version("1.2") == MigrationVersion.from_version("1_2_0")
    True
    >>> MigrationVersion.from_version("latest") is MigrationVersion.LATEST
    True
"""

from dataclasses import dataclass, field
from enum import Enum
import functools
import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError


_VERSION_PART = re.compile(r"[0-9]+")


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class MigrationVersion:
    """A migration version such as ``1.2.3``, or one of the special tokens.

    Numeric versions are dot or underscore separated non-negative integers.
    Trailing zero parts do not take part in equality or ordering, so ``1`` and
    ``1.0`` denote the same version. ``LATEST`` sorts after every numeric
    version and ``EMPTY`` before all of them.
    """

    display_text: str
    parts: tuple[int, ...] = field(default=())
    special: str | None = None

    LATEST: ClassVar["MigrationVersion"]
    CURRENT: ClassVar["MigrationVersion"]
    EMPTY: ClassVar["MigrationVersion"]

    _SPECIAL_RANK: ClassVar[dict[str, int]] = {"empty": 0, "current": 2, "latest": 3}

    @classmethod
    def from_version(cls, version: str | None) -> "MigrationVersion":
        """Parse ``version`` into a MigrationVersion.

        Raises:
            ConfigurationError: If the text is not a valid version
        """
        if version is None:
            return cls.EMPTY

        token = version.strip()
        if token.lower() == "latest":
            return cls.LATEST
        if token.lower() == "current":
            return cls.CURRENT

        normalized = token.replace("_", ".")
        raw_parts = normalized.split(".")
        if any(not part for part in raw_parts):
            raise ConfigurationError(
                f"Version may only contain 0..9 and . (dot). Invalid version: {version}",
                field="version",
                value=version,
            )
        if not all(_VERSION_PART.fullmatch(part) for part in raw_parts):
            raise ConfigurationError(
                "Invalid version containing non-numeric characters. "
                f"Only 0..9 and . are allowed. Invalid version: {version}",
                field="version",
                value=version,
            )

        parts = [int(part) for part in raw_parts]
        while len(parts) > 1 and parts[-1] == 0:
            parts.pop()
        return cls(display_text=normalized, parts=tuple(parts))

    @property
    def version(self) -> str | None:
        """The numeric version text, or None for special tokens."""
        return None if self.special else self.display_text

    def _sort_key(self) -> tuple[int, tuple[int, ...]]:
        if self.special:
            return (self._SPECIAL_RANK[self.special], ())
        return (1, self.parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MigrationVersion):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: "MigrationVersion") -> bool:
        if not isinstance(other, MigrationVersion):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        return self.display_text


MigrationVersion.LATEST = MigrationVersion(display_text="latest", special="latest")
MigrationVersion.CURRENT = MigrationVersion(display_text="current", special="current")
MigrationVersion.EMPTY = MigrationVersion(display_text="<< Empty Schema >>", special="empty")


@dataclass(frozen=True)
class MigrationPattern:
    """Selects migrations for cherry-picking.

    A pattern that parses as a version matches versioned migrations with that
    version. Any other pattern matches repeatable migrations by description,
    treating spaces and underscores as equivalent.
    """

    pattern: str

    def __post_init__(self) -> None:
        if not self.pattern or not self.pattern.strip():
            raise ConfigurationError("cherryPick patterns cannot be empty", field="cherryPick")

    def matches(self, version: MigrationVersion | None, description: str) -> bool:
        """Check whether a migration with ``version`` and ``description`` is selected."""
        if version is not None:
            try:
                return MigrationVersion.from_version(self.pattern) == version
            except ConfigurationError:
                return False
        return self.pattern.replace(" ", "_") == description.replace(" ", "_")

    def __str__(self) -> str:
        return self.pattern


class ErrorBehavior(str, Enum):
    """How a matched SQL error or warning is reported."""

    DEBUG = "D"
    INFO = "I"
    WARNING = "W"
    ERROR = "E"


_ERROR_OVERRIDE_PATTERN = re.compile(r"^(\*|[A-Za-z0-9]{5}):(\*|-?\d+):([DIWE])(-?)$")


class ErrorOverride(BaseModel):
    """Rule overriding how a SQL state/error code combination is reported.

    Written as ``STATE:CODE:BEHAVIOR``, e.g. ``99999:17110:E`` or ``*:123:W``.
    A trailing ``-`` on the behavior hides the original state and code.
    """

    model_config = ConfigDict(frozen=True)

    sql_state: str = Field(description="Five character SQL state, or * for any state")
    error_code: int | None = Field(default=None, description="Vendor error code, None for any code")
    behavior: ErrorBehavior
    hide_details: bool = False

    @classmethod
    def parse(cls, text: str) -> "ErrorOverride":
        """Parse ``STATE:CODE:BEHAVIOR`` text.

        Raises:
            ConfigurationError: If the text is malformed
        """
        match = _ERROR_OVERRIDE_PATTERN.match(text.strip())
        if match is None:
            raise ConfigurationError(
                f"Invalid error override: {text} (expected STATE:CODE:BEHAVIOR, e.g. 99999:17110:E)",
                field="errorOverrides",
                value=text,
            )
        state, code, behavior, hide = match.groups()
        return cls(
            sql_state=state,
            error_code=None if code == "*" else int(code),
            behavior=ErrorBehavior(behavior),
            hide_details=hide == "-",
        )

    def matches(self, sql_state: str, error_code: int) -> bool:
        """Check whether this rule applies to ``sql_state`` and ``error_code``."""
        state_matches = self.sql_state == "*" or self.sql_state == sql_state
        code_matches = self.error_code is None or self.error_code == error_code
        return state_matches and code_matches

    def __str__(self) -> str:
        code = "*" if self.error_code is None else str(self.error_code)
        suffix = "-" if self.hide_details else ""
        return f"{self.sql_state}:{code}:{self.behavior.value}{suffix}"
