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

"""Interfaces for the collaborators a configuration carries.

The configuration layer only stores instances of these types; invoking them
is the job of the migration engine.
"""

from abc import ABC, abstractmethod
from typing import Any


class Callback(ABC):
    """Receives notifications before and after migration lifecycle events."""

    @property
    def callback_name(self) -> str:
        """Name used when reporting this callback."""
        return type(self).__name__

    @abstractmethod
    def supports(self, event: str, context: Any) -> bool:
        """Check whether this callback handles ``event``.

        Args:
            event: Lifecycle event name (e.g., "beforeMigrate")
            context: Engine-provided context for the event

        Returns:
            True if :meth:`handle` should be invoked for this event
        """

    @abstractmethod
    def handle(self, event: str, context: Any) -> None:
        """Handle ``event``."""

    def can_handle_in_transaction(self, event: str, context: Any) -> bool:
        return True


class MigrationResolver(ABC):
    """Resolves available migrations in addition to the built-in resolvers."""

    @abstractmethod
    def resolve_migrations(self, context: Any) -> list[Any]:
        """Return the migrations this resolver knows about."""


class CodeMigration(ABC):
    """A migration written in code and registered manually on the configuration."""

    @property
    @abstractmethod
    def version(self) -> str | None:
        """Version of this migration, None for repeatable migrations."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable description of this migration."""

    @abstractmethod
    def migrate(self, context: Any) -> None:
        """Apply the migration."""
