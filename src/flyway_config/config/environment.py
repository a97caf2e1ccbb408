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

"""Translation of ``FLYWAY_*`` environment variables into property keys."""

from collections.abc import Mapping
import logging
import os

from .. import constants
from .defaults import ENV_JDBC_PROPERTIES_PREFIX, ENV_PLACEHOLDERS_PREFIX, ENV_PREFIX, ENV_VAR_MAPPING

logger = logging.getLogger(__name__)


def convert_env_var(name: str) -> str | None:
    """Map one environment variable name to its property key, or None if unknown."""
    if name in ENV_VAR_MAPPING:
        return ENV_VAR_MAPPING[name]
    if name.startswith(ENV_PLACEHOLDERS_PREFIX) and len(name) > len(ENV_PLACEHOLDERS_PREFIX):
        return constants.PLACEHOLDERS_PROPERTY_PREFIX + name[len(ENV_PLACEHOLDERS_PREFIX) :].lower()
    if name.startswith(ENV_JDBC_PROPERTIES_PREFIX) and len(name) > len(ENV_JDBC_PROPERTIES_PREFIX):
        return constants.JDBC_PROPERTIES_PREFIX + name[len(ENV_JDBC_PROPERTIES_PREFIX) :]
    return None


def environment_to_properties(
    environ: Mapping[str, str] | None = None,
    include_loader_keys: bool = False,
) -> dict[str, str]:
    """Collect ``FLYWAY_*`` variables as a flat property mapping.

    Args:
        environ: Variables to read, defaults to ``os.environ``
        include_loader_keys: Keep ``flyway.configFiles``/``flyway.configFileEncoding``

    Returns:
        Mapping of property keys to values
    """
    environ = os.environ if environ is None else environ
    properties: dict[str, str] = {}

    for name, value in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        key = convert_env_var(name)
        if key is None:
            logger.debug("Ignoring unknown environment variable %s", name)
            continue
        if key in constants.LOADER_KEYS and not include_loader_keys:
            continue
        properties[key] = value

    if properties:
        logger.info("Loaded %d configuration values from environment variables", len(properties))
    return properties
