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

"""Class-loading context used to turn dotted class names into instances."""

import importlib
import logging
from typing import Any, TypeVar

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ClassLoadingContext:
    """Resolves ``package.module.ClassName`` strings to classes and instances.

    Each configuration owns one context, resolved when the configuration is
    created and reused for every callback and resolver it instantiates.
    """

    def __init__(self, default_package: str | None = None) -> None:
        self.default_package = default_package

    def load_class(self, qualified_name: str) -> type:
        """Import and return the class named by ``qualified_name``.

        Raises:
            ConfigurationError: If the name does not resolve to a class
        """
        module_name, _, class_name = qualified_name.strip().rpartition(".")
        if not module_name:
            if self.default_package is None:
                raise ConfigurationError(
                    f"Unable to load class {qualified_name}: name must be fully qualified",
                    field="className",
                    value=qualified_name,
                )
            module_name = self.default_package

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise ConfigurationError(
                f"Unable to load class {qualified_name}: {e}",
                field="className",
                value=qualified_name,
            ) from e

        loaded = getattr(module, class_name, None)
        if not isinstance(loaded, type):
            raise ConfigurationError(
                f"Unable to load class {qualified_name}: {module_name} has no class {class_name}",
                field="className",
                value=qualified_name,
            )
        return loaded

    def instantiate(self, qualified_name: str, expected_type: type[T] | None = None) -> T:
        """Instantiate ``qualified_name`` with its no-argument constructor.

        Raises:
            ConfigurationError: If loading fails, construction fails, or the
                instance is not an ``expected_type``
        """
        cls = self.load_class(qualified_name)
        if expected_type is not None and not issubclass(cls, expected_type):
            raise ConfigurationError(
                f"Invalid class: {qualified_name} (must implement {expected_type.__name__})",
                field="className",
                value=qualified_name,
            )
        try:
            instance: Any = cls()
        except Exception as e:
            raise ConfigurationError(
                f"Unable to instantiate class {qualified_name}: {e}",
                field="className",
                value=qualified_name,
            ) from e
        logger.debug("Instantiated %s", qualified_name)
        return instance  # type: ignore[no-any-return]

    def instantiate_all(self, qualified_names: list[str], expected_type: type[T] | None = None) -> list[T]:
        """Instantiate every name in order."""
        return [self.instantiate(name, expected_type) for name in qualified_names]
