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

"""Scalar coercion of raw property values.

Property values always arrive as strings. ``None`` means the key was absent
and is passed through unchanged so callers can treat absence as a no-op.
"""

from collections.abc import MutableMapping
import re

from .exceptions import ConfigurationError

_TRUE_LITERALS = frozenset({"true"})
_FALSE_LITERALS = frozenset({"false"})
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def coerce_boolean(raw: str | None, key: str = "value") -> bool | None:
    """Convert ``raw`` to a bool, accepting ``true``/``false`` in any case."""
    if raw is None:
        return None
    normalized = raw.strip().lower()
    if normalized in _TRUE_LITERALS:
        return True
    if normalized in _FALSE_LITERALS:
        return False
    raise ConfigurationError(
        f"Invalid value for {key} (should be either true or false): {raw}",
        field=key,
        value=raw,
    )


def coerce_int(raw: str | None, key: str = "value") -> int | None:
    """Convert ``raw`` to an int."""
    if raw is None:
        return None
    normalized = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(normalized):
        raise ConfigurationError(
            f"Invalid value for {key} (should be an integer): {raw}",
            field=key,
            value=raw,
        )
    return int(normalized)


def tokenize(raw: str | None, separator: str = ",") -> list[str]:
    """Split ``raw`` on ``separator``, trimming tokens and dropping empty ones."""
    if not raw:
        return []
    return [token.strip() for token in raw.split(separator) if token.strip()]


def remove_boolean(properties: MutableMapping[str, str], key: str) -> bool | None:
    """Remove ``key`` from ``properties`` and coerce it to a bool."""
    return coerce_boolean(properties.pop(key, None), key)


def remove_integer(properties: MutableMapping[str, str], key: str) -> int | None:
    """Remove ``key`` from ``properties`` and coerce it to an int."""
    return coerce_int(properties.pop(key, None), key)
