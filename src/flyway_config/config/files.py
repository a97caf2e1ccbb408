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

"""Loading of configuration files into flat property mappings.

Supported formats:
- ``.conf`` / ``.properties``: ``key=value`` lines (``:`` also separates),
  ``#`` and ``!`` comments, trailing backslash continues a line
- ``.yaml`` / ``.yml``: nested mappings, flattened into dotted keys
- ``.json``: same as YAML
"""

from collections.abc import Mapping
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _unescape(text: str) -> str:
    result: list[str] = []
    chars = iter(text)
    for char in chars:
        if char != "\\":
            result.append(char)
            continue
        escaped = next(chars, "")
        result.append(_ESCAPES.get(escaped, escaped))
    return "".join(result)


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_property(line: str) -> tuple[str, str]:
    escaped = False
    for index, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in "=:":
            return line[:index].strip(), line[index + 1 :].strip()
        elif char.isspace():
            rest = line[index:].lstrip()
            if rest[:1] in ("=", ":"):
                rest = rest[1:]
            return line[:index].strip(), rest.strip()
    return line.strip(), ""


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java properties text into a dict."""
    properties: dict[str, str] = {}
    logical = ""

    for raw_line in text.splitlines():
        line = raw_line.lstrip() if not logical else raw_line.strip()
        if not logical and (not line or line[0] in "#!"):
            continue
        if _ends_with_continuation(line):
            logical += line[:-1]
            continue
        logical += line
        key, value = _split_property(logical)
        logical = ""
        if key:
            properties[_unescape(key)] = _unescape(value)

    if logical:
        key, value = _split_property(logical)
        if key:
            properties[_unescape(key)] = _unescape(value)
    return properties


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_to_text(item) for item in value)
    return str(value)


def flatten_mapping(data: Mapping[str, Any], parent: str = "") -> dict[str, str]:
    """Flatten nested mappings into dotted keys with string values.

    Example:
        >>> flatten_mapping({"flyway": {"placeholders": {"env": "prod"}, "group": True}})
        {'flyway.placeholders.env': 'prod', 'flyway.group': 'true'}
    """
    flat: dict[str, str] = {}
    for key, value in data.items():
        dotted = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_mapping(value, dotted))
        elif value is not None:
            flat[dotted] = _to_text(value)
    return flat


def load_config_file(path: Path, encoding: str = "utf-8") -> dict[str, str]:
    """Load one configuration file as a flat property mapping.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ConfigurationError(
            f"Unable to load config file: {path} ({e})",
            field="configFiles",
            value=str(path),
        ) from e

    suffix = path.suffix.lower()
    try:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        elif suffix == ".json":
            data = json.loads(text) if text.strip() else {}
        else:
            return parse_properties(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Unable to parse config file: {path} ({e})",
            field="configFiles",
            value=str(path),
        ) from e

    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping at the top level",
            field="configFiles",
            value=str(path),
        )
    return flatten_mapping(data)


def load_config_files(
    paths: list[Path],
    encoding: str = "utf-8",
    required: bool = True,
) -> dict[str, str]:
    """Load and merge several config files; later files override earlier ones.

    Args:
        paths: Files to load, in precedence order
        encoding: Text encoding of the files
        required: Fail on a missing file instead of skipping it

    Raises:
        ConfigurationError: If a required file is missing or any file is invalid
    """
    merged: dict[str, str] = {}
    for path in paths:
        if not path.is_file():
            if required:
                raise ConfigurationError(
                    f"Unable to find config file: {path}",
                    field="configFiles",
                    value=str(path),
                )
            continue
        try:
            merged.update(load_config_file(path, encoding))
        except ConfigurationError as e:
            if required:
                raise
            logger.warning("Failed to load config from %s: %s", path, e)
            continue
        logger.info("Loaded configuration from %s", path)
    return merged
